"""Shared fixtures for mdit-shortcode tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from markdown_it import MarkdownIt

FIXTURES = Path(__file__).resolve().parent / "fixtures"


def read_fixture(name: str) -> str:
    """Read a Markdown fixture from tests/fixtures."""
    return (FIXTURES / name).read_text(encoding="utf-8")


def standard_render(params, env) -> str:
    """Dump parameters and environment with their Python types."""
    lines = ["<pre>", "Params:"]
    for key, value in params.items():
        lines.append(f"{key}: {value} ({type(value).__name__})")
    lines.append("Env:")
    for key, value in env.items():
        lines.append(f"{key}: {value} ({type(value).__name__})")
    lines.append("</pre>")
    return "\n".join(lines)


@pytest.fixture
def standard() -> dict:
    """Definition of the ``standard`` shortcode used by the fixtures."""
    return {"render": standard_render}


@pytest.fixture
def md() -> MarkdownIt:
    """MarkdownIt instance with raw HTML enabled and no plugins."""
    return MarkdownIt("commonmark", {"html": True})


@pytest.fixture
def block_source() -> str:
    return read_fixture("block.md")


@pytest.fixture
def inline_source() -> str:
    return read_fixture("inline.md")


@pytest.fixture
def unknown_source() -> str:
    return read_fixture("unknown.md")
