"""Tests for inline span tokenization."""

import pytest

from chatmark import tokenize
from chatmark.nodes import Bold, InlineCode, Italic, PlainText
from chatmark.parsing.inline import INLINE_MARKERS, InlineTokenizer


class TestBasicSpans:
    """Each delimiter on its own."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("**b**", Bold("b")),
            ("__b__", Bold("b")),
            ("*i*", Italic("i")),
            ("_i_", Italic("i")),
            ("`c`", InlineCode("c")),
        ],
    )
    def test_single_span(self, text: str, expected: object) -> None:
        assert tokenize(text) == (expected,)

    def test_mixed_sentence(self) -> None:
        assert tokenize("**bold** and _ital_ and `code`") == (
            Bold("bold"),
            PlainText(" and "),
            Italic("ital"),
            PlainText(" and "),
            InlineCode("code"),
        )

    def test_plain_text_only(self) -> None:
        assert tokenize("nothing special here.") == (PlainText("nothing special here."),)

    def test_empty_text(self) -> None:
        assert tokenize("") == ()

    def test_marker_metadata_recorded(self) -> None:
        spans = tokenize("__a__ *b*")
        assert spans[0].marker == "__"
        assert spans[2].marker == "*"

    def test_marker_ignored_by_equality(self) -> None:
        assert tokenize("__a__") == tokenize("**a**")


class TestNoNesting:
    """Span content is never re-scanned."""

    def test_italic_inside_bold_stays_literal(self) -> None:
        assert tokenize("**bold _x_**") == (Bold("bold _x_"),)

    def test_emphasis_inside_code_stays_literal(self) -> None:
        assert tokenize("`**not bold**`") == (InlineCode("**not bold**"),)


class TestLeftmostAndShortest:
    def test_leftmost_opener_wins(self) -> None:
        # The backtick run starts first and swallows the underscores
        assert tokenize("`a _b` c_") == (InlineCode("a _b"), PlainText(" c_"))

    def test_nearest_closer_ends_span(self) -> None:
        assert tokenize("*a* b *c*") == (Italic("a"), PlainText(" b "), Italic("c"))

    def test_underscore_before_star_priority(self) -> None:
        assert tokenize("_a*b_*") == (Italic("a*b"), PlainText("*"))

    def test_snake_case_identifier(self) -> None:
        assert tokenize("call my_func_name now") == (
            PlainText("call my"),
            Italic("func"),
            PlainText("name now"),
        )


class TestPriority:
    def test_double_before_single(self) -> None:
        assert tokenize("**x** *y*") == (Bold("x"), PlainText(" "), Italic("y"))

    def test_triple_star(self) -> None:
        # "**" has no closer, so "*" pairs with the next star: empty italic
        assert tokenize("***") == (Italic(""), PlainText("*"))

    def test_double_without_closer_falls_back_to_single(self) -> None:
        assert tokenize("**a") == (Italic(""), PlainText("a"))

    def test_marker_order(self) -> None:
        assert [m.delimiter for m in INLINE_MARKERS] == ["**", "__", "_", "*", "`"]


class TestUnterminated:
    @pytest.mark.parametrize("text", ["*open", "_open", "`open", "a * b", "1 _ 2"])
    def test_unclosed_stays_plain(self, text: str) -> None:
        assert tokenize(text) == (PlainText(text),)

    def test_unclosed_then_closed(self) -> None:
        assert tokenize("`x and **y**") == (PlainText("`x and "), Bold("y"))


class TestEmptyInteriors:
    def test_empty_bold(self) -> None:
        assert tokenize("****") == (Bold(""),)

    def test_empty_code(self) -> None:
        assert tokenize("a `` b") == (PlainText("a "), InlineCode(""), PlainText(" b"))


class TestCoverage:
    @pytest.mark.parametrize(
        "text",
        [
            "plain",
            "**a** _b_ `c` *d* __e__",
            "**unclosed and *closed*",
            "x * y * z",
            "`` ` `` __",
        ],
    )
    def test_reassembly_reproduces_input(self, text: str) -> None:
        spans = InlineTokenizer(text).tokenize()
        rebuilt = "".join(
            s.content if isinstance(s, PlainText) else f"{s.marker}{s.content}{s.marker}"
            for s in spans
        )
        assert rebuilt == text

    def test_no_adjacent_plain_text(self) -> None:
        spans = tokenize("a * b _ c ` d")
        assert spans == (PlainText("a * b _ c ` d"),)
