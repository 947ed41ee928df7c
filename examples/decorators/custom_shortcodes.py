"""Declare shortcodes with @shortcode and install them on MarkdownIt."""

from markdown_it import MarkdownIt

from mdit_shortcode import collect_shortcodes, shortcode, shortcode_plugin


@shortcode("youtube")
def render_youtube(params, env) -> str:
    """Embed a video by id."""
    return f'<iframe src="https://www.youtube.com/embed/{params["id"]}"></iframe>'


@shortcode("badge", inline=True)
class Badge:
    """Small label that stays inside the paragraph flow."""

    def render(self, params, env) -> str:
        text = params.get("text", "")
        return f'<span class="badge">{text}</span>'


md = MarkdownIt("commonmark", {"html": True})
md.use(shortcode_plugin, collect_shortcodes(render_youtube, Badge))

source = """
# Release notes

<badge text="v#{version}">

<youtube id=#{video}>
"""

print(md.render(source, {"version": "1.2", "video": "dQw4w9WgXcQ"}))
