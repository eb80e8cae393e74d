"""Table rule for the block segmenter.

A table needs two adjacent pipe-bearing lines: the header and a separator.
The separator's content is not inspected; any line with a pipe confirms
the table shape. Alignment colons and dash counts are ignored.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chatmark.nodes import Table
from chatmark.parsing.classifiers import has_pipe, split_table_row

if TYPE_CHECKING:
    from chatmark.location import SourceLocation


class TableParsingMixin:
    """Mixin for pipe table segmentation.

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

    def _try_table(self) -> Table | None:
        """Consume a table at the cursor, or return None.

        Header row, separator row (discarded), then every following
        contiguous line that contains a pipe.
        """
        lines = self._lines
        start = self._pos
        if not has_pipe(lines[start]):
            return None
        if start + 1 >= len(lines) or not has_pipe(lines[start + 1]):
            return None

        header = split_table_row(lines[start])
        pos = start + 2
        rows: list[tuple[str, ...]] = []
        while pos < len(lines) and has_pipe(lines[pos]):
            rows.append(split_table_row(lines[pos]))
            pos += 1

        self._pos = pos
        return Table(header, tuple(rows), location=self._location(start, pos))
