"""List rules for the block segmenter.

Bulleted and numbered lists share one consumption loop and differ only in
the line classifier. Lists are flat: indentation carries no nesting.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from chatmark.nodes import BulletList, NumberedList
from chatmark.parsing.classifiers import match_bullet_item, match_numbered_item

if TYPE_CHECKING:
    from chatmark.location import SourceLocation


class ListParsingMixin:
    """Mixin for bulleted and numbered list segmentation.

    Required Host Attributes:
        - _lines: list[str]
        - _pos: int

    Required Host Methods:
        - _location(start, end) -> SourceLocation

    """

    _lines: list[str]
    _pos: int

    def _location(self, start: int, end: int) -> SourceLocation:
        raise NotImplementedError

    def _try_bullet_list(self) -> BulletList | None:
        items, start = self._consume_items(match_bullet_item)
        if not items:
            return None
        return BulletList(items, location=self._location(start, self._pos))

    def _try_numbered_list(self) -> NumberedList | None:
        items, start = self._consume_items(match_numbered_item)
        if not items:
            return None
        return NumberedList(items, location=self._location(start, self._pos))

    def _consume_items(self, match: Callable[[str], str | None]) -> tuple[tuple[str, ...], int]:
        """Collect contiguous item lines from the cursor.

        Returns the item texts and the starting cursor position. The cursor
        only moves when at least one item matched.
        """
        lines = self._lines
        start = self._pos
        items: list[str] = []
        pos = start
        while pos < len(lines):
            item = match(lines[pos])
            if item is None:
                break
            items.append(item)
            pos += 1
        self._pos = pos
        return tuple(items), start
