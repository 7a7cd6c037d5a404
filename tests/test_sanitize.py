"""Tests for JSON repair of malformed data dumps."""

from __future__ import annotations

import json

import pytest

from strongsreader.ingest.sanitize import JSONRepairError, loads_lenient, sanitize_json


class TestSanitizeJSON:
    """Tests for sanitize_json()."""

    def test_strips_bom(self):
        assert json.loads(sanitize_json('\ufeff{"a": 1}')) == {"a": 1}

    def test_removes_trailing_commas(self):
        raw = '{"a": [1, 2,], "b": {"c": 3,},}'
        assert json.loads(sanitize_json(raw)) == {"a": [1, 2], "b": {"c": 3}}

    def test_trailing_comma_before_newline_and_indent(self):
        raw = "{\n  \"a\": [\n    1,\n  ],\n}"
        assert json.loads(sanitize_json(raw)) == {"a": [1]}

    def test_commas_inside_strings_kept(self):
        raw = '{"kjv_def": "love, ]x", "note": "a,}", "tail": "x,"},'
        assert json.loads(sanitize_json(raw)) == {
            "kjv_def": "love, ]x",
            "note": "a,}",
            "tail": "x,",
        }

    def test_newlines_inside_strings_become_spaces(self):
        raw = '{"en": "In the\nbeginning\twas"}'
        assert json.loads(sanitize_json(raw)) == {"en": "In the beginning was"}

    def test_other_control_characters_dropped(self):
        raw = '{"en": "Word\x01s"}\x02'
        assert json.loads(sanitize_json(raw)) == {"en": "Words"}

    def test_escaped_quotes_do_not_end_string(self):
        raw = '{"en": "say \\"hi\\"\nnow"}'
        assert json.loads(sanitize_json(raw)) == {"en": 'say "hi" now'}

    def test_newlines_between_tokens_kept(self):
        raw = '{\n  "a": 1\n}'
        assert sanitize_json(raw) == raw

    def test_surrounding_garbage_sliced_off(self):
        raw = 'var data = {"a": 1};\n'
        assert json.loads(sanitize_json(raw)) == {"a": 1}

    @pytest.mark.parametrize("raw", ["", "[1, 2]", "} {", "no json here"])
    def test_no_object_raises(self, raw):
        with pytest.raises(JSONRepairError):
            sanitize_json(raw)


class TestLoadsLenient:
    """Tests for loads_lenient()."""

    def test_valid_json_not_repaired(self):
        assert loads_lenient('{"a": 1}') == ({"a": 1}, False)

    def test_valid_list_not_repaired(self):
        assert loads_lenient("[1, 2]") == ([1, 2], False)

    def test_repaired(self):
        assert loads_lenient('{"a": 1,}') == ({"a": 1}, True)

    def test_repair_keeps_string_punctuation(self):
        raw = '{"G25": {"kjv_def": "love, ]x"},}'
        assert loads_lenient(raw) == ({"G25": {"kjv_def": "love, ]x"}}, True)

    def test_still_invalid_raises(self):
        with pytest.raises(json.JSONDecodeError):
            loads_lenient('{"a": }')
