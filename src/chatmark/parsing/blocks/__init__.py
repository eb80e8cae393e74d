"""Block rules for the segmenter.

Each mixin contributes one ``_try_*`` rule. A rule either consumes lines at
the cursor and returns a block, or leaves the cursor alone and returns None.
The Parser tries them in a fixed order; the first to accept wins.
"""

from chatmark.parsing.blocks.code import CodeFenceMixin
from chatmark.parsing.blocks.lists import ListParsingMixin
from chatmark.parsing.blocks.paragraph import ParagraphMixin
from chatmark.parsing.blocks.table import TableParsingMixin


class BlockParsingMixin(
    TableParsingMixin,
    CodeFenceMixin,
    ListParsingMixin,
    ParagraphMixin,
):
    """Combined block rules, for hosts that want all of them."""

    pass


__all__ = [
    "BlockParsingMixin",
    "CodeFenceMixin",
    "ListParsingMixin",
    "ParagraphMixin",
    "TableParsingMixin",
]
