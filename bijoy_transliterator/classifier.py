"""
Heuristic that tells SutonnyMJ/Bijoy text apart from genuine English.

Bijoy text is stored in the ASCII range, so a run with no recognisable font
looks like Latin text to everything except its glyph statistics. The rules
are ordered and the first one that fires decides.
"""

import logging
import re
from enum import Enum

logger = logging.getLogger(__name__)


class ScriptVerdict(Enum):
    """Outcome of classify_script(), with the rule that produced it."""
    EMPTY = "empty"
    UNICODE_BENGALI = "unicode_bengali"
    LEGACY_MARKERS = "legacy_markers"
    LEGACY_PATTERN = "legacy_pattern"
    ENGLISH = "english"
    AMBIGUOUS = "ambiguous"

    @property
    def is_legacy(self) -> bool:
        return self in (
            ScriptVerdict.LEGACY_MARKERS,
            ScriptVerdict.LEGACY_PATTERN,
            ScriptVerdict.AMBIGUOUS,
        )


BENGALI_BLOCK = re.compile(r"[ঀ-৿]")

# Extended ASCII glyphs, plus † and ‡ which stand for e-kar in many files
LEGACY_MARKERS = re.compile(r"[\x80-\xFF†‡]")

LEGACY_PATTERNS = (
    re.compile(r"[A-Za-z]v[A-Za-z]"),  # aa-kar inside a word
    re.compile(r"^G[A-Za-z]"),  # word starting with e
    re.compile(r"[†‡][A-Za-z]"),  # vowel lead before its consonant
    re.compile(r"\|$"),  # danda at the end
)

COMMON_ENGLISH_WORDS = re.compile(
    r"\b(the|and|this|that|with|from|your|have|will|shall|been|should|would|could"
    r"|about|which|there|their|after|before|between|under|over|through|during"
    r"|including|against|without|because|although|though|since|until|while)\b",
    re.IGNORECASE,
)

SIMPLE_ENGLISH = re.compile(r"^[a-zA-Z0-9\s.,;:!?'\"()\-/\\@#$%&*+=\[\]{}<>|_]+$")


def classify_script(text: str) -> ScriptVerdict:
    """
    Classify an ASCII-range text span.

    Args:
        text: Text of a single run.

    Returns:
        The verdict of the first rule that applies. AMBIGUOUS means no rule
        recognised the text and the default bias towards Bijoy was used.
    """
    if not text or not text.strip():
        return ScriptVerdict.EMPTY

    if BENGALI_BLOCK.search(text):
        return ScriptVerdict.UNICODE_BENGALI

    if LEGACY_MARKERS.search(text):
        return ScriptVerdict.LEGACY_MARKERS

    if any(pattern.search(text) for pattern in LEGACY_PATTERNS):
        return ScriptVerdict.LEGACY_PATTERN

    if SIMPLE_ENGLISH.match(text) and COMMON_ENGLISH_WORDS.search(text):
        return ScriptVerdict.ENGLISH

    logger.debug("No script signal in %r, assuming Bijoy", text[:40])
    return ScriptVerdict.AMBIGUOUS


def is_likely_bijoy(text: str) -> bool:
    """Return True if the text should be converted from Bijoy to Unicode."""
    return classify_script(text).is_legacy
