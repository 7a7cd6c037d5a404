"""Shared fixtures."""

import pytest

from strongsreader.lexicon import LexiconResolver, LexiconStore


@pytest.fixture
def greek_entries():
    return {
        "G25": {"lemma": "ἀγαπάω", "translit": "agapáō", "strongs_def": "to love"},
        "G1615": {
            "lemma": "ἐκτελέω",
            "translit": "ektteléō",
            "strongs_def": "to complete fully",
            "kjv_def": "finish",
        },
        "G3056": {"lemma": "λόγος", "pos": "noun", "strongs_def": "word"},
    }


@pytest.fixture
def hebrew_entries():
    return {"H430": {"strongs_def": "God", "pos": "noun"}}


@pytest.fixture
def store(greek_entries, hebrew_entries):
    return LexiconStore.from_mappings(greek=greek_entries, hebrew=hebrew_entries)


@pytest.fixture
def resolver(store):
    return LexiconResolver(store)
