"""Inline span tokenizer.

Splits paragraph text into PlainText, Bold, Italic and InlineCode spans.

Matching rules:
- Leftmost first: the scan stops at the first position where any marker
  has a closing delimiter somewhere after it.
- Priority: at that position markers are tried in INLINE_MARKERS order.
- Shortest: the nearest closing delimiter ends the span.
- No nesting: span content is never re-scanned.

Unclosed delimiters stay in the surrounding PlainText. Empty interiors
(``****``, ``` `` ```) still produce a span.

Complexity:
O(n). The nearest closer for each delimiter is cached; the cached index
stays valid until the scan passes it, and a miss means no closer exists
anywhere to the right, so each delimiter scans the text at most once.

Thread Safety:
Tokenizer instances are single-use. ``tokenize`` creates one per call.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chatmark.nodes import PlainText
from chatmark.parsing.inline.markers import INLINE_MARKERS, MARKER_CHARS, InlineMarker

if TYPE_CHECKING:
    from chatmark.nodes import Span

_NOT_FOUND = -1


class InlineTokenizer:
    """Single-pass scanner over one paragraph's text."""

    __slots__ = ("_closers", "_text")

    def __init__(self, text: str) -> None:
        self._text = text
        # delimiter -> nearest closer index found so far (or _NOT_FOUND)
        self._closers: dict[str, int] = {}

    def tokenize(self) -> tuple[Span, ...]:
        text = self._text
        length = len(text)
        spans: list[Span] = []
        plain_start = 0
        pos = 0

        while pos < length:
            if text[pos] not in MARKER_CHARS:
                pos += 1
                continue

            found = self._match_at(pos)
            if found is None:
                pos += 1
                continue

            marker, close = found
            if pos > plain_start:
                spans.append(PlainText(text[plain_start:pos]))
            width = len(marker.delimiter)
            spans.append(marker.build(text[pos + width : close]))
            pos = plain_start = close + width

        if plain_start < length:
            spans.append(PlainText(text[plain_start:]))
        return tuple(spans)

    def _match_at(self, pos: int) -> tuple[InlineMarker, int] | None:
        """Return the winning marker at ``pos`` and its closer index."""
        text = self._text
        for marker in INLINE_MARKERS:
            delimiter = marker.delimiter
            if not text.startswith(delimiter, pos):
                continue
            close = self._find_closer(delimiter, pos + len(delimiter))
            if close != _NOT_FOUND:
                return marker, close
        return None

    def _find_closer(self, delimiter: str, start: int) -> int:
        """Index of the first ``delimiter`` at or after ``start``.

        Callers pass non-decreasing ``start`` values per delimiter.
        """
        cached = self._closers.get(delimiter)
        if cached is not None and (cached == _NOT_FOUND or cached >= start):
            return cached
        found = self._text.find(delimiter, start)
        self._closers[delimiter] = found
        return found


def tokenize(text: str) -> tuple[Span, ...]:
    """Split paragraph text into inline spans.

    Args:
        text: Paragraph text (any string is accepted)

    Returns:
        Tuple of spans; empty for empty text

    Example:
        >>> tokenize("**bold** and `code`")
        (Bold(content='bold', marker='**'), PlainText(content=' and '), InlineCode(content='code', marker='`'))
    """
    return InlineTokenizer(text).tokenize()
