"""Tests for Strong's number occurrence search."""

from __future__ import annotations

import pytest

from strongsreader.engine.occurrences import (
    find_occurrences,
    token_has_code,
)
from strongsreader.ingest.verses import VerseRecord, build_verse_record
from strongsreader.parsing import Token


@pytest.fixture
def verses():
    return [
        build_verse_record(
            "John", 1, 1, "In[G1722] the beginning[G746] was[G2258] the Word[G3056],"
        ),
        build_verse_record("John", 1, 3, "All things were made by him;"),
        build_verse_record(
            "John", 1, 14, "And[G2532] the Word[G3056] was made[G1096] flesh[G4561]"
        ),
        build_verse_record("1 John", 4, 8, "God[G2316] is love[G25][G26]."),
    ]


class TestTokenHasCode:
    """Tests for token_has_code()."""

    def test_normalized_match(self):
        token = Token("Word", ("g3056 ",))
        assert token_has_code(token, "G3056")
        assert token_has_code(token, " g3056")

    def test_no_codes(self):
        assert not token_has_code(Token(","), "G3056")


class TestFindOccurrences:
    """Tests for find_occurrences()."""

    def test_finds_every_tagged_token(self, verses):
        found = find_occurrences(verses, "G3056")

        assert [o.reference for o in found] == ["John 1:1", "John 1:14"]
        assert all(o.match_text == "Word" for o in found)
        assert found[0].verse_id == "john-1-1-kjv"
        assert found[1].verse_text == "And the Word was made flesh"

    def test_multi_code_token_matches_either_code(self, verses):
        assert [o.match_text for o in find_occurrences(verses, "G26")] == ["love"]
        assert [o.match_text for o in find_occurrences(verses, "G25")] == ["love"]

    def test_case_insensitive_search(self, verses):
        assert len(find_occurrences(verses, "g3056")) == 2

    def test_no_occurrences(self, verses):
        assert find_occurrences(verses, "H430") == []

    def test_to_dict(self, verses):
        data = find_occurrences(verses, "G2316")[0].to_dict()
        assert data["verseId"] == "1-john-4-8-kjv"
        assert data["matchText"] == "God"
        assert data["reference"] == "1 John 4:8"

    def test_repeated_word_in_one_verse(self):
        record = VerseRecord(
            id="x-1-1-kjv",
            book="X",
            chapter=1,
            verse=1,
            text="verily verily",
            tokens=[Token("Verily", ("G281",)), Token("verily", ("G281",))],
        )
        assert [o.match_text for o in find_occurrences([record], "G281")] == [
            "Verily",
            "verily",
        ]
