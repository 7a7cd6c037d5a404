"""Tests for Strong's number resolution.

Covers:
- Field mapping and alias handling
- Code normalization (case, whitespace)
- Prefix routing to exactly one dictionary
- NotFound outcomes that never raise
- Sibling fallback selection
"""

from __future__ import annotations

import pytest

from strongsreader.config import GREEK_PREFIX, HEBREW_PREFIX
from strongsreader.lexicon import (
    LexiconResolver,
    LexiconStore,
    NormalizedDefinition,
    SelectionOutcome,
    code_prefix,
    map_raw_entry,
    normalize_code,
)


class TestNormalizeCode:
    """Tests for normalize_code() and code_prefix()."""

    def test_trims_and_uppercases(self):
        assert normalize_code(" g1615 ") == "G1615"

    def test_prefix(self):
        assert code_prefix("G25") == "G"
        assert code_prefix("H430") == "H"
        assert code_prefix("X1") is None
        assert code_prefix("") is None


class TestMapRawEntry:
    """Tests for raw -> normalized field mapping."""

    def test_hebrew_scenario(self):
        definition = map_raw_entry("H430", {"strongs_def": "God", "pos": "noun"})
        assert definition == NormalizedDefinition(
            number="H430", definition="God", part_of_speech="noun"
        )
        assert definition.lemma is None
        assert definition.transliteration is None

    def test_all_fields(self):
        raw = {
            "lemma": "λόγος",
            "translit": "lógos",
            "pronunciation": "log'-os",
            "pos": "noun",
            "strongs_def": "something said",
            "kjv_def": "word",
            "derivation": "from G3004;",
        }
        definition = map_raw_entry("G3056", raw)
        assert definition.lemma == "λόγος"
        assert definition.transliteration == "lógos"
        assert definition.pronunciation == "log'-os"
        assert definition.part_of_speech == "noun"
        assert definition.definition == "something said"
        assert definition.usage == "word"
        assert definition.derivation == "from G3004;"

    def test_aliases(self):
        raw = {
            "xlit": "ʼĕlôhîym",
            "pron": "el-o-heem'",
            "strongs_derivation": "plural of H433",
        }
        definition = map_raw_entry("H430", raw)
        assert definition.transliteration == "ʼĕlôhîym"
        assert definition.pronunciation == "el-o-heem'"
        assert definition.derivation == "plural of H433"

    def test_first_alias_wins(self):
        definition = map_raw_entry("G1", {"translit": "a", "transliteration": "b"})
        assert definition.transliteration == "a"

    def test_no_substitution_between_fields(self):
        definition = map_raw_entry("G1", {"lemma": "Α"})
        assert definition.transliteration is None

    def test_to_dict_omits_absent_fields(self):
        definition = map_raw_entry("H430", {"strongs_def": "God", "pos": "noun"})
        assert definition.to_dict() == {
            "number": "H430",
            "definition": "God",
            "partOfSpeech": "noun",
        }


class TestResolve:
    """Tests for LexiconResolver.resolve()."""

    def test_hit(self, resolver):
        definition = resolver.resolve("G1615")
        assert definition.number == "G1615"
        assert definition.definition == "to complete fully"
        assert definition.usage == "finish"

    def test_case_and_whitespace_insensitive(self, resolver):
        results = {resolver.resolve(c) for c in ["g1615", " G1615 ", "G1615"]}
        assert len(results) == 1
        assert results.pop().number == "G1615"

    def test_hebrew(self, resolver):
        definition = resolver.resolve("H430")
        assert definition == NormalizedDefinition(
            number="H430", definition="God", part_of_speech="noun"
        )

    def test_miss_returns_none(self, resolver):
        assert resolver.resolve("G9999") is None

    def test_unknown_prefix_returns_none(self, resolver):
        assert resolver.resolve("X25") is None

    def test_raw_key_casing_ignored(self):
        store = LexiconStore.from_mappings(greek={"g1615": {"strongs_def": "x"}})
        definition = LexiconResolver(store).resolve("G1615")
        assert definition is not None
        assert definition.number == "G1615"


class TestPrefixRouting:
    """Only the dictionary named by the prefix is loaded or consulted."""

    @pytest.fixture
    def tracked(self, greek_entries, hebrew_entries):
        calls = []

        def greek():
            calls.append("greek")
            return greek_entries

        def hebrew():
            calls.append("hebrew")
            return hebrew_entries

        store = LexiconStore(greek=greek, hebrew=hebrew)
        return LexiconResolver(store), store, calls

    def test_greek_code_never_touches_hebrew(self, tracked):
        resolver, store, calls = tracked
        resolver.resolve("G25")
        resolver.resolve("G9999")
        assert calls == ["greek"]
        assert not store.is_loaded(HEBREW_PREFIX)

    def test_hebrew_code_never_touches_greek(self, tracked):
        resolver, store, calls = tracked
        resolver.resolve("h430")
        assert calls == ["hebrew"]
        assert not store.is_loaded(GREEK_PREFIX)

    @pytest.mark.parametrize("code", ["", "   ", "X1", "1234", "[G25]"])
    def test_unroutable_codes_access_nothing(self, tracked, code):
        resolver, store, calls = tracked
        assert resolver.resolve(code) is None
        assert calls == []


class TestFilterResolvable:
    """Tests for filter_resolvable()."""

    def test_keeps_resolvable_in_order(self, resolver):
        codes = ["G9999", "H430", "X1", "G25", ""]
        assert resolver.filter_resolvable(codes) == ["H430", "G25"]

    def test_empty(self, resolver):
        assert resolver.filter_resolvable([]) == []


class TestSelect:
    """Tests for sibling fallback selection."""

    def test_exact(self, resolver):
        selection = resolver.select(["G25", "G1615"], "G1615")
        assert selection.outcome is SelectionOutcome.EXACT
        assert selection.shown_code == "G1615"
        assert not selection.substituted

    def test_substitutes_first_resolvable_sibling(self, resolver):
        selection = resolver.select(["G9999", "G1615"], "G9999")
        assert selection.outcome is SelectionOutcome.SUBSTITUTED
        assert selection.substituted
        assert selection.requested == "G9999"
        assert selection.shown_code == "G1615"
        assert selection.definition == resolver.resolve("G1615")

    def test_substitution_respects_attachment_order(self, resolver):
        selection = resolver.select(["G9999", "G3056", "G25"], "G9999")
        assert selection.shown_code == "G3056"

    def test_unavailable(self, resolver):
        selection = resolver.select(["G9999", "G8888"], "G9999")
        assert selection.outcome is SelectionOutcome.UNAVAILABLE
        assert not selection.available
        assert selection.shown_code is None
        assert selection.definition is None

    def test_requested_normalized(self, resolver):
        selection = resolver.select(["g1615"], " g1615")
        assert selection.outcome is SelectionOutcome.EXACT
        assert selection.requested == "G1615"

    def test_to_dict(self, resolver):
        data = resolver.select(["G9999", "H430"], "G9999").to_dict()
        assert data["outcome"] == "substituted"
        assert data["shownCode"] == "H430"
        assert data["definition"]["definition"] == "God"
