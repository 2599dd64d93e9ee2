"""
Unit tests for the Unicode -> Bijoy converter.
"""

import pytest

from bijoy_transliterator.config import LEGACY_FONT
from bijoy_transliterator.converters.bijoy_to_unicode import convert_bijoy_to_unicode
from bijoy_transliterator.converters.unicode_to_bijoy import (
    REORDER_RULES,
    convert_segments,
    convert_unicode_to_bijoy,
    map_glyphs,
)
from bijoy_transliterator.rules import apply_rules


class TestConvertUnicodeToBijoy:
    """Tests for convert_unicode_to_bijoy()."""

    def test_empty(self):
        assert convert_unicode_to_bijoy("") == ""

    @pytest.mark.parametrize("unicode,bijoy", [
        ("আমি ভালো আছি।", "Avwg fv‡jv AvwQ|"),
        ("আমি ভালো আছি। তুমি?", "Avwg fv‡jv AvwQ| Zzwg?"),
        ("বাংলাদেশ", "evsjv‡`k"),
        ("দেশের", "‡`‡ki"),
        ("১২৩ টাকা", "123 UvKv"),
        ("কী", "Kx"),
    ])
    def test_sentences(self, unicode, bijoy):
        assert convert_unicode_to_bijoy(unicode) == bijoy

    def test_o_kar_split(self):
        assert convert_unicode_to_bijoy("কোন") == "‡Kvb"

    def test_ou_kar_split(self):
        assert convert_unicode_to_bijoy("কৌশল") == "‡KŠkj"

    def test_oi_kar_before_consonant(self):
        assert convert_unicode_to_bijoy("তৈরি") == "ˆZwi"

    def test_reph_after_cluster(self):
        assert convert_unicode_to_bijoy("কর্ম") == "Kg©"
        assert convert_unicode_to_bijoy("কার্যালয়") == "Kvh©vjq"

    def test_e_kar_before_reph(self):
        assert convert_unicode_to_bijoy("কর্মে") == "K‡g©"

    def test_i_kar_before_conjunct(self):
        assert convert_unicode_to_bijoy("ক্লিক") == "wK¬K"
        assert convert_unicode_to_bijoy("ক্রিকেট") == "wµ‡KU"
        assert convert_unicode_to_bijoy("প্রিয়") == "wcÖq"

    def test_ra_phala_without_conjunct_entry(self):
        assert convert_unicode_to_bijoy("হ্রদ") == "nÖ`"

    def test_double_danda(self):
        assert convert_unicode_to_bijoy("বই॥ শেষ") == "eB|| ‡kl"

    def test_danda_spacing(self):
        assert convert_unicode_to_bijoy("বাংলা ।  ভালো") == "evsjv| fv‡jv"

    @pytest.mark.parametrize("bijoy", ["Avwg", "fvjevwm", "evsjv‡`k", "‡Kvb", "gvbyl"])
    def test_round_trip(self, bijoy):
        assert convert_unicode_to_bijoy(convert_bijoy_to_unicode(bijoy)) == bijoy


class TestReorderRules:
    """Tests for the reorder pass on its own."""

    def test_o_kar_becomes_visual_pair(self):
        assert apply_rules("কো", REORDER_RULES) == "েকা"

    def test_vowel_moves_in_front_of_reph(self):
        assert apply_rules("র্মে", REORDER_RULES) == "ের্ম"

    def test_map_glyphs_copies_unknown(self):
        assert map_glyphs("ক~") == "K~"


class TestConvertSegments:
    """Tests for mixed-script conversion."""

    def test_english_kept(self):
        segments = convert_segments("এটি একটি Test case।")
        assert "".join(s.output for s in segments) == "GwU GKwU Test case|"

    def test_fonts(self):
        segments = convert_segments("আমার নাম Rahim।")
        assert [(s.text, s.font) for s in segments] == [
            ("আমার নাম ", LEGACY_FONT),
            ("Rahim", None),
            ("।", LEGACY_FONT),
        ]
        assert "".join(s.output for s in segments) == "Avgvi bvg Rahim|"

    def test_custom_font(self):
        segments = convert_segments("বাংলা", font="SutonnyOMJ")
        assert segments[0].font == "SutonnyOMJ"
        assert segments[0].converted == "evsjv"

    def test_latin_only(self):
        segments = convert_segments("Hello, world.")
        assert len(segments) == 1
        assert segments[0].converted is None
        assert segments[0].output == "Hello, world."

    def test_empty(self):
        assert convert_segments("") == []
