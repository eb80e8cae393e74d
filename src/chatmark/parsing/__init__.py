"""Parsing internals for chatmark.

Split by concern:
- classifiers: stateless single-line predicates
- blocks: ``_try_*`` rule mixins composed by the Parser
- inline: the span tokenizer applied to paragraph text
"""

from chatmark.parsing.blocks import BlockParsingMixin
from chatmark.parsing.inline import InlineTokenizer, tokenize

__all__ = [
    "BlockParsingMixin",
    "InlineTokenizer",
    "tokenize",
]
