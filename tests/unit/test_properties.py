"""
Behaviour both converters share: determinism, pass-through and round trips.
"""

import re

import pytest

from bijoy_transliterator.classifier import is_likely_bijoy
from bijoy_transliterator.converters.bijoy_to_unicode import convert_bijoy_to_unicode
from bijoy_transliterator.converters.unicode_to_bijoy import convert_unicode_to_bijoy

BIJOY_SAMPLES = ["Avwg evsjv‡`k‡K fvjevwm", "wK¬K", "K‡g©", "Zvi 123 UvKv"]
UNICODE_SAMPLES = ["আমি ভালো আছি।", "কার্যালয়", "কৌশল", "হ্রদ"]


class TestDeterminism:

    @pytest.mark.parametrize("text", BIJOY_SAMPLES)
    def test_bijoy_to_unicode(self, text):
        assert convert_bijoy_to_unicode(text) == convert_bijoy_to_unicode(text)

    @pytest.mark.parametrize("text", UNICODE_SAMPLES)
    def test_unicode_to_bijoy(self, text):
        assert convert_unicode_to_bijoy(text) == convert_unicode_to_bijoy(text)


class TestPassThrough:
    """Characters neither table knows survive both converters."""

    @pytest.mark.parametrize("char", ["@", "€", "‍", "😀"])
    def test_unknown_characters(self, char):
        assert char in convert_bijoy_to_unicode(f"K{char}K")
        assert char in convert_unicode_to_bijoy(f"ক{char}ক")


class TestScenarios:

    def test_legacy_sentence_fully_converted(self):
        converted = convert_bijoy_to_unicode("Avwg evsjv‡`k‡K fvjevwm")
        assert re.fullmatch(r"[ঀ-৿ ]+", converted)

    def test_danda_becomes_bare_pipe(self):
        assert convert_unicode_to_bijoy("আমি ভালো আছি।").endswith("Q|")
        assert convert_unicode_to_bijoy("আমি ভালো আছি। তুমি?") == "Avwg fv‡jv AvwQ| Zzwg?"

    @pytest.mark.parametrize("word", ["Avwg", "gvbyl", "‡Kvb", "evsjv"])
    def test_round_trip_stays_legacy(self, word):
        assert is_likely_bijoy(convert_unicode_to_bijoy(convert_bijoy_to_unicode(word)))
