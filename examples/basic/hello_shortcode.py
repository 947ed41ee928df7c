"""Replace a custom tag with Python output in a few lines."""

from mdit_shortcode import create_markdown


def render_greeting(params, env) -> str:
    return f"<strong>Hello, {params.get('name', 'stranger')}!</strong>"


md = create_markdown({"greeting": {"render": render_greeting}})

html = md.render('Welcome. <greeting name="#{user}">', {"user": "Ada"})
print(html)
