"""Code fence rule for the block segmenter."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chatmark.nodes import Code
from chatmark.parsing.classifiers import fence_info, is_closing_fence, is_fence
from chatmark.utils.logger import get_logger

if TYPE_CHECKING:
    from chatmark.location import SourceLocation

logger = get_logger(__name__)


class CodeFenceMixin:
    """Mixin for fenced code segmentation.

    Lines inside the fence are taken verbatim, even when they look like
    tables, lists or blank lines.

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

    def _try_code_fence(self) -> Code | None:
        """Consume a fenced code block at the cursor, or return None.

        An unterminated fence runs to the end of input and yields a block
        with ``closed=False``.
        """
        lines = self._lines
        start = self._pos
        if not is_fence(lines[start]):
            return None

        pos = start + 1
        while pos < len(lines) and not is_closing_fence(lines[pos]):
            pos += 1
        content = "\n".join(lines[start + 1 : pos])

        closed = pos < len(lines)
        if closed:
            pos += 1  # closing fence
        else:
            logger.debug("Unterminated code fence at line %d runs to end of input", start + 1)

        self._pos = pos
        return Code(
            content,
            info=fence_info(lines[start]),
            closed=closed,
            location=self._location(start, pos),
        )
