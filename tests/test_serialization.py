"""Tests for Document JSON serialization."""

import json

import pytest

from chatmark import parse
from chatmark.errors import SerializationError
from chatmark.nodes import Bold, Code, Document, Paragraph
from chatmark.serialization import from_dict, from_json, to_dict, to_json

REPLY = (
    "Summary of **Q3**:\n"
    "\n"
    "| Region | Total |\n"
    "|---|---|\n"
    "| North | 120 |\n"
    "| West |\n"
    "\n"
    "```sql\n"
    "SELECT region FROM sales\n"
    "```\n"
    "- first\n"
    "1. one\n"
    "Done with __care__ and `code`."
)


class TestRoundTrip:
    def test_document_round_trip(self) -> None:
        doc = parse(REPLY)
        assert from_json(to_json(doc)) == doc

    def test_locations_preserved(self) -> None:
        doc = parse(REPLY, source_file="msg-1")
        restored = from_json(to_json(doc))
        assert [b.location for b in restored.children] == [b.location for b in doc.children]
        assert restored.location == doc.location

    def test_span_markers_preserved(self) -> None:
        restored = from_json(to_json(parse("__a__")))
        span = restored.children[0].children[0]
        assert isinstance(span, Bold)
        assert span.marker == "__"

    def test_unclosed_code_flag_preserved(self) -> None:
        restored = from_json(to_json(parse("```\nx")))
        code = restored.children[0]
        assert isinstance(code, Code)
        assert code.closed is False

    def test_empty_document(self) -> None:
        assert from_json(to_json(parse(""))) == Document()


class TestShape:
    def test_type_discriminator(self) -> None:
        data = to_dict(parse("**x**"))
        assert data["_type"] == "Document"
        paragraph = data["children"][0]
        assert paragraph["_type"] == "Paragraph"
        assert paragraph["children"][0] == {"_type": "Bold", "content": "x", "marker": "**"}

    def test_tuples_become_lists(self) -> None:
        data = to_dict(parse("A|B\n-|-\n1|2"))
        assert data["children"][0]["rows"] == [["1", "2"]]

    def test_output_is_deterministic(self) -> None:
        assert to_json(parse(REPLY)) == to_json(parse(REPLY))

    def test_non_ascii_kept(self) -> None:
        assert "•" not in to_json(parse("• café"))
        assert "café" in to_json(parse("• café"))

    def test_indent(self) -> None:
        assert "\n" in to_json(parse("x"), indent=2)


class TestErrors:
    def test_missing_type(self) -> None:
        with pytest.raises(SerializationError, match="Missing '_type'"):
            from_dict({"content": "x"})

    def test_unknown_type(self) -> None:
        with pytest.raises(SerializationError, match="Unknown node type: 'Heading'"):
            from_dict({"_type": "Heading"})

    def test_missing_required_field(self) -> None:
        with pytest.raises(SerializationError, match="Invalid fields for Paragraph"):
            from_dict({"_type": "Paragraph"})

    def test_invalid_json(self) -> None:
        with pytest.raises(SerializationError, match="Invalid JSON"):
            from_json("{not json")

    def test_not_an_object(self) -> None:
        with pytest.raises(SerializationError, match="Expected a JSON object"):
            from_json("[1, 2]")

    def test_not_a_document(self) -> None:
        payload = json.dumps(to_dict(Paragraph(())))
        with pytest.raises(SerializationError, match="Expected Document, got Paragraph"):
            from_json(payload)

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            from_json("null")
