"""Tests for chatmark utility modules."""

import logging

import pytest

from chatmark import parse
from chatmark.utils import get_logger, hash_str


class TestHashStr:
    def test_full_digest(self) -> None:
        assert len(hash_str("hello")) == 64

    def test_truncate(self) -> None:
        assert hash_str("hello", truncate=16) == "2cf24dba5fb0a30e"

    def test_unicode(self) -> None:
        assert hash_str("café") != hash_str("cafe")


class TestGetLogger:
    def test_prefixes_name(self) -> None:
        assert get_logger("renderers").name == "chatmark.renderers"

    def test_keeps_package_names(self) -> None:
        assert get_logger("chatmark.parser").name == "chatmark.parser"
        assert get_logger("chatmark").name == "chatmark"

    def test_returns_stdlib_logger(self) -> None:
        assert isinstance(get_logger("x"), logging.Logger)


class TestParseLogging:
    def test_segment_logs_block_count(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="chatmark"):
            parse("a\n\n- b")
        assert any("into 2 blocks" in r.getMessage() for r in caplog.records)

    def test_unterminated_fence_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="chatmark"):
            parse("```\nno end")
        assert any("Unterminated code fence at line 1" in r.getMessage() for r in caplog.records)
