"""Renderers turning a Document into output.

- html: chat panel markup
- text: canonical chat text (re-parses to the same block types)
"""

from chatmark.renderers.html import HtmlRenderer, html_escape, render_html
from chatmark.renderers.protocol import ASTRenderer
from chatmark.renderers.text import TextRenderer, render_text

__all__ = [
    "ASTRenderer",
    "HtmlRenderer",
    "TextRenderer",
    "html_escape",
    "render_html",
    "render_text",
]
