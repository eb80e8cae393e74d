"""HTML renderer for the chat panel.

Reproduces the dashboard's message markup: a spaced wrapper around one
``<div>`` per block, bordered zebra tables, labelled code panels, glyph
bullets and renumbered ordered lists. Class names are Tailwind utilities
expected by the dashboard stylesheet.

Thread Safety:
Per-render state is a local list of parts. A single HtmlRenderer can be
shared between threads and called concurrently.
"""

from __future__ import annotations

import html
from collections.abc import Callable
from dataclasses import dataclass

from chatmark.config import get_render_config
from chatmark.errors import RenderError
from chatmark.nodes import (
    Block,
    Bold,
    BulletList,
    Code,
    Document,
    InlineCode,
    Italic,
    NumberedList,
    Paragraph,
    PlainText,
    Span,
    Table,
)
from chatmark.utils.logger import get_logger

logger = get_logger(__name__)

WRAPPER_CLASS = "space-y-2"
TABLE_CONTAINER_CLASS = "overflow-x-auto my-3 rounded-lg border border-border"
TABLE_CLASS = "w-full text-sm"
THEAD_CLASS = "bg-muted border-b border-border"
TH_CLASS = "px-4 py-2 text-left font-semibold text-foreground"
TD_CLASS = "px-4 py-2 text-foreground"
ROW_CLASSES = ("bg-background", "bg-muted/50")
CODE_CONTAINER_CLASS = "my-3 rounded-lg bg-muted border border-border overflow-hidden"
CODE_LABEL_CLASS = "bg-muted-foreground/10 px-4 py-2 text-xs font-semibold text-muted-foreground"
PRE_CLASS = "px-4 py-3 overflow-x-auto"
CODE_CLASS = "text-sm text-foreground font-mono"
LIST_CLASS = "my-3 space-y-2 ml-4"
LIST_ITEM_CLASS = "flex gap-3 text-foreground"
BULLET_CLASS = "text-blue-500 font-bold flex-shrink-0"
NUMBER_CLASS = "text-blue-500 font-bold flex-shrink-0 min-w-fit"
PARAGRAPH_CLASS = "text-foreground leading-relaxed my-2"
STRONG_CLASS = "font-bold text-foreground"
EM_CLASS = "italic text-foreground"
INLINE_CODE_CLASS = "bg-muted px-2 py-1 rounded text-sm font-mono text-foreground"

BULLET_GLYPH = "•"


def html_escape(s: str) -> str:
    """Escape ``<``, ``>``, ``&`` and ``"`` for element content and attributes."""
    return html.escape(s, quote=False).replace('"', "&quot;")


class HtmlRenderer:
    """Render a Document to chat panel HTML.

    Options left as None are read from the active RenderConfig when
    ``render`` is called.

    Usage:
        >>> from chatmark import parse
        >>> html = HtmlRenderer(code_label="Snippet").render(parse("```py\\nx = 1\\n```"))
        >>> "Snippet" in html
        True

    """

    __slots__ = ("_code_label", "_highlight", "_pad_table_rows", "_text_transformer")

    def __init__(
        self,
        *,
        highlight: bool | None = None,
        code_label: str | None = None,
        pad_table_rows: bool | None = None,
        text_transformer: Callable[[str], str] | None = None,
    ) -> None:
        self._highlight = highlight
        self._code_label = code_label
        self._pad_table_rows = pad_table_rows
        self._text_transformer = text_transformer

    def render(self, node: Document) -> str:
        """Render document to an HTML string.

        Raises:
            RenderError: If the document contains an unknown block type
        """
        config = get_render_config()
        options = _Options(
            highlight=config.highlight if self._highlight is None else self._highlight,
            code_label=config.code_label if self._code_label is None else self._code_label,
            pad_table_rows=(
                config.pad_table_rows if self._pad_table_rows is None else self._pad_table_rows
            ),
            text_transformer=self._text_transformer or config.text_transformer,
        )

        parts: list[str] = [f'<div class="{WRAPPER_CLASS}">\n']
        for block in node.children:
            parts.append("<div>")
            self._render_block(block, parts, options)
            parts.append("</div>\n")
        parts.append("</div>\n")
        return "".join(parts)

    # =========================================================================
    # Blocks
    # =========================================================================

    def _render_block(self, block: Block, parts: list[str], options: _Options) -> None:
        match block:
            case Table():
                self._render_table(block.normalized() if options.pad_table_rows else block, parts)
            case Code():
                self._render_code(block, parts, options)
            case BulletList():
                self._render_bullet_list(block, parts)
            case NumberedList():
                self._render_numbered_list(block, parts)
            case Paragraph():
                parts.append(f'<p class="{PARAGRAPH_CLASS}">')
                self._render_spans(block.children, parts, options)
                parts.append("</p>")
            case _:
                raise RenderError(block, renderer="HtmlRenderer")

    def _render_table(self, table: Table, parts: list[str]) -> None:
        parts.append(f'<div class="{TABLE_CONTAINER_CLASS}"><table class="{TABLE_CLASS}">')
        parts.append(f'<thead class="{THEAD_CLASS}"><tr>')
        for cell in table.header:
            parts.append(f'<th class="{TH_CLASS}">{html_escape(cell)}</th>')
        parts.append("</tr></thead><tbody>")
        for index, row in enumerate(table.rows):
            parts.append(f'<tr class="{ROW_CLASSES[index % 2]}">')
            for cell in row:
                parts.append(f'<td class="{TD_CLASS}">{html_escape(cell)}</td>')
            parts.append("</tr>")
        parts.append("</tbody></table></div>")

    def _render_code(self, code: Code, parts: list[str], options: _Options) -> None:
        parts.append(f'<div class="{CODE_CONTAINER_CLASS}">')
        parts.append(f'<div class="{CODE_LABEL_CLASS}">{html_escape(options.code_label)}</div>')

        if options.highlight and code.info:
            highlighted = self._highlight_code(code.content, code.info)
            if highlighted is not None:
                parts.append(highlighted)
                parts.append("</div>")
                return

        lang = f' data-language="{html_escape(code.info)}"' if code.info else ""
        parts.append(f'<pre class="{PRE_CLASS}"><code class="{CODE_CLASS}"{lang}>')
        parts.append(html_escape(code.content))
        parts.append("</code></pre></div>")

    def _highlight_code(self, content: str, language: str) -> str | None:
        from chatmark.highlighting import highlight

        try:
            return highlight(content, language)
        except Exception:
            logger.debug("Syntax highlighting failed for language %r", language, exc_info=True)
            return None

    def _render_bullet_list(self, block: BulletList, parts: list[str]) -> None:
        parts.append(f'<ul class="{LIST_CLASS}">')
        for item in block.items:
            parts.append(
                f'<li class="{LIST_ITEM_CLASS}"><span class="{BULLET_CLASS}">{BULLET_GLYPH}</span>'
                f"<span>{html_escape(item)}</span></li>"
            )
        parts.append("</ul>")

    def _render_numbered_list(self, block: NumberedList, parts: list[str]) -> None:
        parts.append(f'<ol class="{LIST_CLASS}">')
        for number, item in enumerate(block.items, start=1):
            parts.append(
                f'<li class="{LIST_ITEM_CLASS}"><span class="{NUMBER_CLASS}">{number}.</span>'
                f"<span>{html_escape(item)}</span></li>"
            )
        parts.append("</ol>")

    # =========================================================================
    # Spans
    # =========================================================================

    def _render_spans(
        self, spans: tuple[Span, ...], parts: list[str], options: _Options
    ) -> None:
        for span in spans:
            match span:
                case PlainText():
                    text = span.content
                    if options.text_transformer is not None:
                        text = options.text_transformer(text)
                    parts.append(html_escape(text))
                case Bold():
                    parts.append(f'<strong class="{STRONG_CLASS}">{html_escape(span.content)}</strong>')
                case Italic():
                    parts.append(f'<em class="{EM_CLASS}">{html_escape(span.content)}</em>')
                case InlineCode():
                    parts.append(
                        f'<code class="{INLINE_CODE_CLASS}">{html_escape(span.content)}</code>'
                    )
                case _:
                    raise RenderError(span, renderer="HtmlRenderer")


@dataclass(frozen=True, slots=True)
class _Options:
    """Options resolved for one render call."""

    highlight: bool
    code_label: str
    pad_table_rows: bool
    text_transformer: Callable[[str], str] | None


def render_html(doc: Document, *, highlight: bool | None = None) -> str:
    """Render a Document to chat panel HTML.

    Args:
        doc: Parsed reply
        highlight: Override the configured highlighting setting

    Returns:
        HTML string
    """
    return HtmlRenderer(highlight=highlight).render(doc)
