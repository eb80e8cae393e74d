"""Source line tracking for parsed blocks.

Every block records the span of source lines it consumed. Lines are
1-indexed and the end line is inclusive, so a single-line paragraph has
``lineno == end_lineno``.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Range of source lines consumed by a block.

    Attributes:
        lineno: First consumed line (1-indexed)
        end_lineno: Last consumed line (inclusive, optional)
        source_file: Label of the message source (optional, e.g. a chat id)

    Examples:
        >>> loc = SourceLocation(lineno=3, end_lineno=5)
        >>> loc.line_count
        3
        >>> str(SourceLocation(2, 2, "reply-17"))
        'reply-17:2'

    """

    lineno: int
    end_lineno: int | None = None
    source_file: str | None = None

    def __str__(self) -> str:
        if self.source_file:
            return f"{self.source_file}:{self.lineno}"
        return str(self.lineno)

    @property
    def line_count(self) -> int:
        """Number of source lines in the range (0 for unknown locations)."""
        if self.lineno <= 0:
            return 0
        end = self.end_lineno if self.end_lineno is not None else self.lineno
        return end - self.lineno + 1

    def contains(self, lineno: int) -> bool:
        """Check whether a 1-indexed line falls inside this range."""
        end = self.end_lineno if self.end_lineno is not None else self.lineno
        return self.lineno <= lineno <= end

    @classmethod
    def unknown(cls) -> SourceLocation:
        """Create a placeholder location.

        Use for nodes built by hand or when the source is unavailable.
        """
        return cls(lineno=0)
