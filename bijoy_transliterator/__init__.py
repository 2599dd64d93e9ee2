"""
Bijoy Transliterator - SutonnyMJ/Bijoy <-> Unicode Bengali converter

Converts Bengali text between the legacy Bijoy glyph encoding used by
SutonnyMJ-family fonts and Unicode, either as plain strings or run by run
inside Word documents, leaving English text and formatting untouched.
"""

from .classifier import ScriptVerdict, classify_script, is_likely_bijoy
from .config import ConversionOptions, Direction
from .converters.bijoy_to_unicode import convert_bijoy_to_unicode
from .converters.unicode_to_bijoy import convert_segments, convert_unicode_to_bijoy
from .segmenter import Segment, segment_text
from .typography import normalize_typography

__version__ = "1.0.0"

__all__ = [
    "ConversionOptions",
    "Direction",
    "ScriptVerdict",
    "Segment",
    "classify_script",
    "convert_bijoy_to_unicode",
    "convert_segments",
    "convert_unicode_to_bijoy",
    "is_likely_bijoy",
    "normalize_typography",
    "segment_text",
]
