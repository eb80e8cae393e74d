"""Paragraph rule for the block segmenter."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chatmark.nodes import Paragraph
from chatmark.parsing.classifiers import continues_paragraph

if TYPE_CHECKING:
    from chatmark.location import SourceLocation
    from chatmark.nodes import Span


class ParagraphMixin:
    """Mixin for paragraph accumulation.

    This is the catch-all rule: any non-blank line that reaches it starts a
    paragraph. The line that stops accumulation is left under the cursor so
    the cascade classifies it afresh.

    Required Host Attributes:
        - _lines: list[str]
        - _pos: int

    Required Host Methods:
        - _location(start, end) -> SourceLocation
        - _parse_inline(text) -> tuple[Span, ...]

    """

    _lines: list[str]
    _pos: int

    def _location(self, start: int, end: int) -> SourceLocation:
        raise NotImplementedError

    def _parse_inline(self, text: str) -> tuple[Span, ...]:
        raise NotImplementedError

    def _try_paragraph(self) -> Paragraph | None:
        lines = self._lines
        start = self._pos
        first = lines[start].strip()
        if not first:
            return None

        parts = [first]
        pos = start + 1
        while pos < len(lines) and continues_paragraph(lines[pos]):
            parts.append(lines[pos].strip())
            pos += 1

        self._pos = pos
        return Paragraph(self._parse_inline(" ".join(parts)), location=self._location(start, pos))
