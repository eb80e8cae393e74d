"""Inline span tokenization for paragraph text."""

from chatmark.parsing.inline.core import InlineTokenizer, tokenize
from chatmark.parsing.inline.markers import INLINE_MARKERS, InlineMarker

__all__ = [
    "INLINE_MARKERS",
    "InlineMarker",
    "InlineTokenizer",
    "tokenize",
]
