"""Tests for chatmark.profiling: parse profiling API."""

from chatmark import DictParseCache, parse
from chatmark.profiling import (
    ParseAccumulator,
    get_parse_accumulator,
    profiled_parse,
)


class TestGetParseAccumulator:
    def test_returns_none_when_disabled(self) -> None:
        assert get_parse_accumulator() is None

    def test_returns_none_outside_context(self) -> None:
        with profiled_parse():
            pass
        assert get_parse_accumulator() is None


class TestProfiledParse:
    def test_yields_accumulator(self) -> None:
        with profiled_parse() as acc:
            assert isinstance(acc, ParseAccumulator)
            assert get_parse_accumulator() is acc

    def test_records_parse_call(self) -> None:
        source = "Hello **World**\n\n- a\n- b"
        with profiled_parse() as acc:
            parse(source)
        assert acc.parse_calls == 1
        assert acc.source_length == len(source)
        assert acc.block_count == 2
        assert acc.span_count == 2

    def test_records_multiple_parse_calls(self) -> None:
        with profiled_parse() as acc:
            parse("one")
            parse("two")
            parse("three")
        assert acc.parse_calls == 3
        assert acc.cache_hits == 0

    def test_records_cache_hits(self) -> None:
        cache = DictParseCache()
        with profiled_parse() as acc:
            parse("same", cache=cache)
            parse("same", cache=cache)
        assert acc.parse_calls == 2
        assert acc.cache_hits == 1

    def test_total_duration_non_negative(self) -> None:
        with profiled_parse() as acc:
            parse("x")
        assert acc.total_duration_ms >= 0


class TestSummary:
    def test_summary_keys(self) -> None:
        with profiled_parse() as acc:
            parse("`x`")
        summary = acc.summary()
        assert set(summary) == {
            "total_ms",
            "parse_calls",
            "cache_hits",
            "source_length",
            "block_count",
            "span_count",
        }
        assert summary["parse_calls"] == 1
        assert summary["span_count"] == 1
