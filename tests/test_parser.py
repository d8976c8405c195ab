"""Tests for path parsing and formatting."""

import pytest

from dyndecode.parser import as_path, format_path, parse_path


class TestParsePath:
    def test_dotted_keys(self):
        assert parse_path("data.patient.id") == ("data", "patient", "id")

    def test_bracket_and_dotted_indices(self):
        assert parse_path("items[0].name") == ("items", 0, "name")
        assert parse_path("a.1.b") == ("a", 1, "b")
        assert parse_path("matrix[2][0]") == ("matrix", 2, 0)
        assert parse_path("[0].name") == (0, "name")

    def test_quoted_keys(self):
        assert parse_path('meta["content-type"]') == ("meta", "content-type")
        assert parse_path("codes['1']") == ("codes", "1")
        assert parse_path('a["x.y"].z') == ("a", "x.y", "z")
        assert parse_path(r'a["say \"hi\""]') == ("a", 'say "hi"')
        assert parse_path('[""]') == ("",)

    def test_loose_keys(self):
        assert parse_path("$ref.@id") == ("$ref", "@id")
        assert parse_path("first name") == ("first name",)
        assert parse_path(".data.items") == ("data", "items")

    def test_empty(self):
        assert parse_path("") == ()

    @pytest.mark.parametrize(
        "path",
        ["a..b", "a.", ".", "a]", "a[", "a[x]", "a[*]", "a[1:2]", "a['x]"],
    )
    def test_invalid_syntax(self, path):
        with pytest.raises(ValueError):
            parse_path(path)

    def test_negative_index(self):
        with pytest.raises(ValueError, match="Negative index"):
            parse_path("items[-1]")
        with pytest.raises(ValueError, match="quote it"):
            parse_path("items.-1")
        assert parse_path('items["-1"]') == ("items", "-1")


class TestAsPath:
    def test_string(self):
        assert as_path("a[0]") == ("a", 0)

    def test_sequence(self):
        assert as_path(["a", 0, "b"]) == ("a", 0, "b")
        assert as_path(iter(["a"])) == ("a",)
        assert as_path(()) == ()

    def test_rejects_other_segment_types(self):
        with pytest.raises(TypeError):
            as_path(["a", 1.0])
        with pytest.raises(TypeError):
            as_path([False])
        with pytest.raises(TypeError):
            as_path([None])


class TestFormatPath:
    def test_keys_and_indices(self):
        assert format_path(("a", 1, "b")) == "a[1].b"
        assert format_path((0, "x")) == "[0].x"
        assert format_path(()) == ""

    def test_quotes_keys_that_need_it(self):
        assert format_path(("codes", "1")) == 'codes["1"]'
        assert format_path(("a.b",)) == '["a.b"]'
        assert format_path(("x", "first name")) == 'x["first name"]'

    def test_output_parses_back(self):
        for path in [
            ("a", 1, "b"),
            ("codes", "1", 0),
            ("weird]key", 'quote"d', "dot.ted"),
            (3, 2, "content-type"),
        ]:
            assert parse_path(format_path(path)) == path
