"""Block segmenter producing a typed Document.

Splits a reply into lines and walks them with one forward cursor. At each
position the block rules are tried in order and the first one that accepts
emits a block:

1. table        (this line and the next contain a pipe)
2. code fence   (stripped line starts with ```)
3. bullet list  (``-``, ``*`` or ``•`` plus whitespace)
4. numbered list (digits, ``.``, whitespace)
5. paragraph    (any other non-blank line)

A line no rule accepts is blank and is skipped. There is no backtracking:
every accepting rule moves the cursor past what it consumed.

Architecture:
The rules live in mixins under ``chatmark.parsing.blocks``; the Parser
supplies the cursor, location bookkeeping and inline tokenization.

Thread Safety:
Parser instances are single-use and not thread-safe. Create one per parse.
The resulting Document is immutable and safe to share.

"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from chatmark.location import SourceLocation
from chatmark.nodes import Document
from chatmark.parsing.blocks import BlockParsingMixin
from chatmark.parsing.inline import tokenize
from chatmark.utils.logger import get_logger

if TYPE_CHECKING:
    from chatmark.nodes import Block, Span

logger = get_logger(__name__)


class Parser(BlockParsingMixin):
    """Line cursor segmenter for chat replies.

    Usage:
        >>> parser = Parser("- first\\n- second\\n\\nThen text")
        >>> [type(block).__name__ for block in parser.parse()]
        ['BulletList', 'Paragraph']

    """

    __slots__ = ("_lines", "_pos", "_source", "_source_file")

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize parser with source text.

        Args:
            source: Reply text
            source_file: Optional label carried into block locations
        """
        self._source = source
        self._source_file = source_file
        self._lines: list[str] = source.split("\n")
        self._pos = 0

    def parse(self) -> list[Block]:
        """Segment the source into blocks.

        Returns:
            Blocks in source order (empty for blank input)
        """
        rules = self._block_rules()
        lines = self._lines
        blocks: list[Block] = []

        while self._pos < len(lines):
            for rule in rules:
                block = rule()
                if block is not None:
                    blocks.append(block)
                    break
            else:
                # Blank line
                self._pos += 1

        logger.debug("Segmented %d lines into %d blocks", len(lines), len(blocks))
        return blocks

    def document(self) -> Document:
        """Parse and wrap the blocks in a Document spanning the whole source."""
        blocks = self.parse()
        location = SourceLocation(
            lineno=1,
            end_lineno=len(self._lines),
            source_file=self._source_file,
        )
        return Document(tuple(blocks), location=location)

    def _block_rules(self) -> tuple[Callable[[], Block | None], ...]:
        """Block rules in priority order."""
        return (
            self._try_table,
            self._try_code_fence,
            self._try_bullet_list,
            self._try_numbered_list,
            self._try_paragraph,
        )

    def _location(self, start: int, end: int) -> SourceLocation:
        """Location for lines ``start`` (inclusive) to ``end`` (exclusive), 0-indexed."""
        return SourceLocation(lineno=start + 1, end_lineno=end, source_file=self._source_file)

    def _parse_inline(self, text: str) -> tuple[Span, ...]:
        return tokenize(text)


def segment(source: str, *, source_file: str | None = None) -> Document:
    """Segment a reply into a Document.

    Total: any string, including the empty string, yields a Document.

    Args:
        source: Reply text
        source_file: Optional label carried into block locations

    Returns:
        Document whose paragraphs are already split into spans

    Example:
        >>> segment("```\\nx = 1\\n```").children
        (Code(content='x = 1', info=None, closed=True),)
    """
    return Parser(source, source_file=source_file).document()
