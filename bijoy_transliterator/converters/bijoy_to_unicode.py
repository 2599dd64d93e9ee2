"""
SutonnyMJ/Bijoy -> Unicode Bengali converter.

Bijoy text is first repaired with a few literal fixups, then mapped glyph by
glyph with a greedy longest-match scan, and finally reordered: glyphs that
Bijoy draws before their consonant (i-kar, e-kar, oi-kar) and the reph it
draws after the cluster are moved into Unicode's logical order.
"""

import re

from ..config import Direction
from ..mappings import (
    AKAR,
    BIJOY_TO_UNICODE,
    DANDA,
    E_KAR,
    HASANTA,
    MANUAL_ANSI_FIXES,
    OU_LENGTH_MARK,
    O_KAR,
    OU_KAR,
    REPH,
    YA_PHALA,
    longest_match,
)
from ..rules import RewriteRule, apply_rules
from ..typography import normalize_typography

# Consonants as the reorder rules see them, including the precomposed nukta forms
_CONSONANT = "[\u0995-\u09B9\u09DC-\u09DF]"
_VOWEL_SIGN = "[\u09BE-\u09C4\u09C7-\u09C8\u09CB-\u09CC\u09D7]"
_ANY_VOWEL_SIGN = "[\u09BE-\u09C4\u09C7-\u09C8\u09CB-\u09CC\u09D7\u09BF]"
_PRE_BASE_VOWEL = "[\u09BF\u09C7\u09C8]"
_CLUSTER = f"{_CONSONANT}(?:{HASANTA}{_CONSONANT})*"

REORDER_RULES = (
    # Bijoy writes reph after the cluster (and its vowel sign)
    RewriteRule(
        "reph-before-cluster",
        re.compile(f"({_CLUSTER}(?:{_VOWEL_SIGN})?)({REPH})"),
        r"\2\1",
    ),
    # i-kar, e-kar and oi-kar are drawn before the cluster
    RewriteRule(
        "pre-base-vowel-after-cluster",
        re.compile(f"({_PRE_BASE_VOWEL})((?:{REPH})?{_CLUSTER})"),
        r"\2\1",
    ),
    RewriteRule(
        "vowel-after-ya-phala",
        re.compile(f"({_ANY_VOWEL_SIGN})({YA_PHALA})"),
        r"\2\1",
    ),
    RewriteRule("compose-o-kar", re.compile(E_KAR + AKAR), O_KAR),
    RewriteRule("compose-ou-kar", re.compile(E_KAR + OU_LENGTH_MARK), OU_KAR),
    RewriteRule("pipe-to-danda", re.compile(r"\|"), DANDA),
)


def fix_ansi_text(text: str) -> str:
    """Repair glyph sequences that older Bijoy files commonly get wrong."""
    for wrong, correct in MANUAL_ANSI_FIXES:
        text = text.replace(wrong, correct)
    return text


def map_glyphs(text: str) -> str:
    """
    Map Bijoy glyphs to Unicode without reordering.

    Unmapped characters are copied through unchanged.
    """
    output = []
    i = 0
    while i < len(text):
        key = longest_match(text, i, Direction.BIJOY_TO_UNICODE)
        if key is None:
            output.append(text[i])
            i += 1
        else:
            output.append(BIJOY_TO_UNICODE[key])
            i += len(key)
    return "".join(output)


def convert_bijoy_to_unicode(text: str) -> str:
    """
    Convert SutonnyMJ/Bijoy encoded text to Unicode Bengali.

    Args:
        text: Text typed in a Bijoy font.

    Returns:
        Unicode Bengali text. Characters the tables do not know are kept.
    """
    if not text:
        return ""

    unicode_text = map_glyphs(fix_ansi_text(text))
    unicode_text = apply_rules(unicode_text, REORDER_RULES)
    return normalize_typography(unicode_text)
