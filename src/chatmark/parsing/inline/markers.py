"""Inline marker table.

Order is priority: when several markers could start a span at the same
position, the earlier entry wins. ``**`` is tried before ``*`` and ``__``
before ``_`` so doubled delimiters become bold rather than an empty italic.
"""

from dataclasses import dataclass

from chatmark.nodes import Bold, InlineCode, Italic


@dataclass(frozen=True, slots=True)
class InlineMarker:
    """A symmetric delimiter pair and the span type it produces."""

    delimiter: str
    span_type: type[Bold] | type[Italic] | type[InlineCode]

    def build(self, content: str) -> Bold | Italic | InlineCode:
        return self.span_type(content, marker=self.delimiter)  # type: ignore[arg-type]


INLINE_MARKERS: tuple[InlineMarker, ...] = (
    InlineMarker("**", Bold),
    InlineMarker("__", Bold),
    InlineMarker("_", Italic),
    InlineMarker("*", Italic),
    InlineMarker("`", InlineCode),
)

# First characters of every delimiter; other characters can be skipped
MARKER_CHARS = frozenset(marker.delimiter[0] for marker in INLINE_MARKERS)
