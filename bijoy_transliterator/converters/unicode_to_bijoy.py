"""
Unicode Bengali -> SutonnyMJ/Bijoy converter.

Unicode stores text in phonetic order while Bijoy stores glyphs in the order
they are drawn. Before mapping, o-kar and ou-kar are split into their two
visual halves, and every sign drawn left of its cluster (i-kar, e-kar, oi-kar)
is moved in front of the cluster and of any reph above it. The scan then maps
reph to the © glyph written after its cluster.
"""

import logging
import re

from ..config import LEGACY_FONT, Direction
from ..mappings import (
    AKAR,
    CONSONANTS,
    E_KAR,
    I_KAR,
    OI_KAR,
    O_KAR,
    OU_KAR,
    OU_LENGTH_MARK,
    RA_PHALA,
    RA_PHALA_GLYPH,
    REPH,
    REPH_GLYPH,
    UNICODE_TO_BIJOY,
    longest_match,
)
from ..rules import CLUSTER, RewriteRule, apply_rules
from ..segmenter import Segment, segment_text
from ..typography import normalize_typography

logger = logging.getLogger(__name__)


def _split_two_part_vowel(match: re.Match) -> str:
    cluster, vowel = match.group(1), match.group(2)
    tail = AKAR if vowel == O_KAR else OU_LENGTH_MARK
    return cluster + E_KAR + tail


def _move_pre_base_vowel(match: re.Match) -> str:
    reph, cluster, vowel = match.group(1), match.group(2), match.group(3)
    return vowel + (reph or "") + cluster


REORDER_RULES = (
    # ো = ে + া and ৌ = ে + ৗ; the e-kar half is moved by the next rule
    RewriteRule(
        "split-two-part-vowel",
        re.compile(f"({CLUSTER})({O_KAR}|{OU_KAR})"),
        _split_two_part_vowel,
    ),
    RewriteRule(
        "pre-base-vowel-before-cluster",
        re.compile(f"({REPH})?({CLUSTER})({I_KAR}|{E_KAR}|{OI_KAR})"),
        _move_pre_base_vowel,
    ),
)


def map_glyphs(text: str) -> str:
    """
    Map reordered Unicode text to Bijoy glyphs.

    Reph followed by a mapped sequence is written as that sequence's glyphs
    plus ©. A lone consonant with a ra-phala that has no conjunct entry is
    written as the consonant plus the ra-phala glyph. Anything else the
    table does not know is copied through.
    """
    output = []
    i = 0
    while i < len(text):
        if text.startswith(REPH, i):
            key = longest_match(text, i + len(REPH), Direction.UNICODE_TO_BIJOY)
            if key is not None:
                output.append(UNICODE_TO_BIJOY[key] + REPH_GLYPH)
                i += len(REPH) + len(key)
                continue

        key = longest_match(text, i, Direction.UNICODE_TO_BIJOY)
        if key is None:
            output.append(text[i])
            i += 1
        elif len(key) == 1 and key in CONSONANTS and text.startswith(RA_PHALA, i + 1):
            output.append(UNICODE_TO_BIJOY[key] + RA_PHALA_GLYPH)
            i += 1 + len(RA_PHALA)
        else:
            output.append(UNICODE_TO_BIJOY[key])
            i += len(key)
    return "".join(output)


def convert_unicode_to_bijoy(text: str) -> str:
    """
    Convert Unicode Bengali text to SutonnyMJ/Bijoy.

    Args:
        text: Unicode text. Latin text is not protected here; use
            convert_segments() for mixed-script input.

    Returns:
        Bijoy encoded text.
    """
    if not text:
        return ""

    reordered = apply_rules(text, REORDER_RULES)
    return normalize_typography(map_glyphs(reordered))


def convert_segments(text: str, font: str = LEGACY_FONT) -> list[Segment]:
    """
    Segment mixed Bengali/English text and convert only the Bengali parts.

    Returns:
        Segments in input order. Bengali segments carry their Bijoy text in
        ``converted`` and the font to force in ``font``; Latin segments are
        returned untouched.
    """
    segments = segment_text(text)
    for segment in segments:
        if segment.is_bengali:
            segment.converted = convert_unicode_to_bijoy(segment.text)
            segment.font = font
    logger.debug("Split %r into %d segments", text[:40], len(segments))
    return segments
