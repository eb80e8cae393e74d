"""Typed document nodes for chatmark.

All nodes are frozen dataclasses with slots:
- Immutability: a parsed reply can be cached and shared across threads
- Pattern matching: renderers dispatch with ``match`` over the closed unions
- Value equality: two parses of the same text compare equal

Node Hierarchy:
Span (inline, inside a Paragraph)
├── PlainText
├── Bold
├── Italic
└── InlineCode
Node (block-level, carries a SourceLocation)
├── Document
├── Table
├── Code
├── BulletList
├── NumberedList
└── Paragraph

Locations and span delimiters are metadata: they are kept for rendering
and debugging but excluded from equality.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, TypeAlias

from chatmark.location import SourceLocation

_UNKNOWN_LOCATION = SourceLocation.unknown()


# =============================================================================
# Inline spans
# =============================================================================


@dataclass(frozen=True, slots=True)
class PlainText:
    """Literal paragraph text, including any unmatched marker characters."""

    content: str


@dataclass(frozen=True, slots=True)
class Bold:
    """Bold text.

    Source: **text** or __text__

    """

    content: str
    marker: Literal["**", "__"] = field(default="**", compare=False)


@dataclass(frozen=True, slots=True)
class Italic:
    """Italic text.

    Source: *text* or _text_

    """

    content: str
    marker: Literal["*", "_"] = field(default="*", compare=False)


@dataclass(frozen=True, slots=True)
class InlineCode:
    """Inline code.

    Source: `code`

    """

    content: str
    marker: Literal["`"] = field(default="`", compare=False)


Span: TypeAlias = PlainText | Bold | Italic | InlineCode


# =============================================================================
# Blocks
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for block nodes.

    ``location`` is keyword-only so subclasses keep their payload as the
    positional fields.

    """

    location: SourceLocation = field(
        default=_UNKNOWN_LOCATION, compare=False, repr=False, kw_only=True
    )


@dataclass(frozen=True, slots=True)
class Table(Node):
    """Pipe-delimited table.

    Source:
        Name | Count
        -----|------
        a    | 1

    ``header`` holds the first line's cells; the separator line is not kept.
    Rows keep the cells they were written with, so a ragged table stays
    ragged until a renderer asks for ``normalized()``.

    """

    header: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...] = ()

    @property
    def column_count(self) -> int:
        return len(self.header)

    @property
    def all_rows(self) -> tuple[tuple[str, ...], ...]:
        """Header followed by the data rows."""
        return (self.header, *self.rows)

    def normalized(self) -> Table:
        """Return a copy whose data rows match the header width.

        Short rows are padded with empty cells, long rows are truncated.
        """
        width = len(self.header)
        rows = tuple((row + ("",) * (width - len(row)))[:width] for row in self.rows)
        return Table(self.header, rows, location=self.location)


@dataclass(frozen=True, slots=True)
class Code(Node):
    """Fenced code block.

    Source:
        ```python
        x = 1
        ```

    ``content`` is the text between the fences, joined with newlines.
    ``info`` is the first word after the opening fence, if any.
    ``closed`` is False when the input ended before a closing fence.

    """

    content: str
    info: str | None = None
    closed: bool = True


@dataclass(frozen=True, slots=True)
class BulletList(Node):
    """Bulleted list; items have their ``-``/``*``/``•`` marker removed."""

    items: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class NumberedList(Node):
    """Numbered list; the source numbers are discarded."""

    items: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class Paragraph(Node):
    """Run of text lines joined by single spaces, split into spans."""

    children: tuple[Span, ...]

    @property
    def text(self) -> str:
        """Paragraph text as written, delimiters included."""
        return "".join(_span_source(span) for span in self.children)

    @property
    def plain_text(self) -> str:
        """Paragraph text with emphasis delimiters removed."""
        return "".join(span.content for span in self.children)


Block: TypeAlias = Table | Code | BulletList | NumberedList | Paragraph


@dataclass(frozen=True, slots=True)
class Document(Node):
    """Root node: the blocks of one message, in source order."""

    children: tuple[Block, ...] = ()


def _span_source(span: Span) -> str:
    if isinstance(span, PlainText):
        return span.content
    return f"{span.marker}{span.content}{span.marker}"
