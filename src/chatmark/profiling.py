"""Opt-in parse profiling.

Zero overhead when disabled: ``get_parse_accumulator()`` returns None and
``parse()`` skips recording.

Example:
    from chatmark import parse
    from chatmark.profiling import profiled_parse

    with profiled_parse() as metrics:
        for reply in transcript:
            parse(reply)

    print(metrics.summary())
    # {"total_ms": 3.1, "parse_calls": 12, "source_length": 5120, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any

from chatmark.nodes import Document, Paragraph


@dataclass
class ParseAccumulator:
    """Metrics accumulated across parse calls.

    Attributes:
        start_time: Profiling start timestamp.
        parse_calls: Number of parse() calls recorded.
        cache_hits: Calls answered from a parse cache.
        source_length: Total characters parsed.
        block_count: Total blocks produced.
        span_count: Total paragraph spans produced.

    """

    start_time: float = field(default_factory=perf_counter)
    parse_calls: int = 0
    cache_hits: int = 0
    source_length: int = 0
    block_count: int = 0
    span_count: int = 0

    def record_parse(self, source_length: int, doc: Document, *, cached: bool = False) -> None:
        self.parse_calls += 1
        if cached:
            self.cache_hits += 1
        self.source_length += source_length
        self.block_count += len(doc.children)
        self.span_count += sum(
            len(block.children) for block in doc.children if isinstance(block, Paragraph)
        )

    @property
    def total_duration_ms(self) -> float:
        """Elapsed time since profiling started, in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "parse_calls": self.parse_calls,
            "cache_hits": self.cache_hits,
            "source_length": self.source_length,
            "block_count": self.block_count,
            "span_count": self.span_count,
        }


_accumulator: ContextVar[ParseAccumulator | None] = ContextVar(
    "parse_accumulator",
    default=None,
)


def get_parse_accumulator() -> ParseAccumulator | None:
    """Get the active accumulator (None if profiling is disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_parse() -> Iterator[ParseAccumulator]:
    """Collect parse metrics for the duration of the with block.

    Yields:
        ParseAccumulator populated by parse() calls in this context.

    """
    acc = ParseAccumulator()
    token: Token[ParseAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
