"""Canonical text renderer.

Writes a Document back out as chat text: pipe tables with a ``---``
separator row, fenced code, ``- `` and ``N. `` list items, and paragraphs
with their original emphasis delimiters. Blocks are separated by one blank
line, so parsing the output again yields the same sequence of block types.

With ``inline_markers=False`` paragraph spans are written without their
delimiters, which suits notification previews and search indexing. Preview
paragraphs get the same list marker line breaks as delimited ones, so a
code span holding ``- a`` does not come back as a list item.

Example:
    >>> from chatmark import parse
    >>> render_text(parse("1) no\\n7. yes\\n8. also"))
    '1) no\\n\\n1. yes\\n2. also\\n'
"""

from __future__ import annotations

from chatmark.errors import RenderError
from chatmark.nodes import (
    Block,
    BulletList,
    Code,
    Document,
    NumberedList,
    Paragraph,
    Table,
)
from chatmark.parsing.classifiers import FENCE_MARKER, list_marker_length


class TextRenderer:
    """Render a Document to canonical chat text."""

    __slots__ = ("_inline_markers",)

    def __init__(self, *, inline_markers: bool = True) -> None:
        self._inline_markers = inline_markers

    def render(self, node: Document) -> str:
        chunks = [self._render_block(block) for block in node.children]
        if not chunks:
            return ""
        return "\n\n".join(chunks) + "\n"

    def _render_block(self, block: Block) -> str:
        match block:
            case Table():
                lines = [_table_line(block.header)]
                lines.append(_table_line(("---",) * max(len(block.header), 1)))
                lines.extend(_table_line(row) for row in block.rows)
                return "\n".join(lines)
            case Code():
                opening = FENCE_MARKER + (block.info or "")
                return f"{opening}\n{block.content}\n{FENCE_MARKER}"
            case BulletList():
                return "\n".join(f"- {item}" for item in block.items)
            case NumberedList():
                return "\n".join(
                    f"{number}. {item}" for number, item in enumerate(block.items, start=1)
                )
            case Paragraph():
                text = block.text
                if not self._inline_markers:
                    # A paragraph of empty spans would otherwise vanish
                    text = block.plain_text.strip() or text
                return _paragraph_lines(text)
            case _:
                raise RenderError(block, renderer="TextRenderer")


def _paragraph_lines(text: str) -> str:
    # A paragraph that began with a bare "-" or "1." line was joined to the
    # line below it; break there again so it does not read as a list item.
    lines: list[str] = []
    while width := list_marker_length(text):
        lines.append(text[:width])
        text = text[width + 1 :].lstrip()
    lines.append(text)
    return "\n".join(lines)


def _table_line(cells: tuple[str, ...]) -> str:
    # Outer pipes keep even a zero-cell row recognizable as a table line
    if not cells:
        return "|  |"
    return "| " + " | ".join(cells) + " |"


def render_text(doc: Document, *, inline_markers: bool = True) -> str:
    """Render a Document to canonical chat text.

    Args:
        doc: Parsed reply
        inline_markers: Keep emphasis delimiters in paragraph text

    Returns:
        Text ending in a newline, or "" for an empty document
    """
    return TextRenderer(inline_markers=inline_markers).render(doc)


__all__ = ["TextRenderer", "render_text"]
