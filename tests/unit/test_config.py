"""
Unit tests for conversion settings and font matching.
"""

import pytest

from bijoy_transliterator.config import (
    LEGACY_DIRECTION_IGNORED_FONTS,
    LEGACY_FONT,
    UNICODE_DIRECTION_IGNORED_FONTS,
    UNICODE_FONT,
    ConversionOptions,
    Direction,
    is_legacy_font,
    matches_font_list,
)


class TestFontMatching:
    """Tests for the font name helpers."""

    @pytest.mark.parametrize("name", ["SutonnyMJ", "SutonnyOMJ", "sutonny mj", "SuttonyMJ", "BijoyBaijayanti"])
    def test_legacy_fonts(self, name):
        assert is_legacy_font(name)

    @pytest.mark.parametrize("name", [None, "", "Calibri", "Vrinda", "Nikosh"])
    def test_not_legacy(self, name):
        assert not is_legacy_font(name)

    def test_deny_list_case_insensitive(self):
        assert matches_font_list("Times New Roman", UNICODE_DIRECTION_IGNORED_FONTS)
        assert matches_font_list("CALIBRI LIGHT", LEGACY_DIRECTION_IGNORED_FONTS)

    def test_deny_list_misses(self):
        assert not matches_font_list("SutonnyMJ", LEGACY_DIRECTION_IGNORED_FONTS)
        assert not matches_font_list(None, LEGACY_DIRECTION_IGNORED_FONTS)

    def test_bengali_unicode_fonts_only_block_unicode_direction(self):
        assert matches_font_list("Nikosh", UNICODE_DIRECTION_IGNORED_FONTS)
        assert not matches_font_list("Nikosh", LEGACY_DIRECTION_IGNORED_FONTS)


class TestConversionOptions:
    """Tests for ConversionOptions validation."""

    def test_defaults(self):
        options = ConversionOptions()
        assert options.direction is Direction.BIJOY_TO_UNICODE
        assert options.force_convert is False
        assert options.legacy_font == LEGACY_FONT
        assert options.unicode_font == UNICODE_FONT
        assert options.to_unicode

    def test_direction_from_string(self):
        options = ConversionOptions(direction="unicode_to_bijoy")
        assert options.direction is Direction.UNICODE_TO_BIJOY
        assert not options.to_unicode

    def test_invalid_direction(self):
        with pytest.raises(ValueError, match="Direction must be one of"):
            ConversionOptions(direction="sideways")

    @pytest.mark.parametrize("field", ["legacy_font", "unicode_font"])
    def test_empty_font_rejected(self, field):
        with pytest.raises(ValueError, match="cannot be empty"):
            ConversionOptions(**{field: "  "})
