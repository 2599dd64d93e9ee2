"""
Split mixed Bengali/English text into single-script segments.

Every character is classified as strong Bengali, strong Latin or neutral.
Neutral characters (spaces, punctuation, symbols) join the nearest strong
character on their left, or failing that the one on their right, so that
"Code." keeps its full stop and "বাংলা।" keeps its danda.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class CharClass(Enum):
    NEUTRAL = 0
    BENGALI = 1
    LATIN = 2


@dataclass
class Segment:
    """A contiguous piece of text written in one script."""
    text: str
    is_bengali: bool
    converted: Optional[str] = None  # Bijoy text, for Bengali segments once converted
    font: Optional[str] = None  # Font forced onto the run holding this segment

    @property
    def output(self) -> str:
        return self.converted if self.converted is not None else self.text


def classify_char(char: str) -> CharClass:
    """Classify one character for segmentation."""
    code = ord(char)
    if 0x0980 <= code <= 0x09FF or code in (0x0964, 0x0965):
        return CharClass.BENGALI
    if char.isascii() and char.isalnum():
        return CharClass.LATIN
    return CharClass.NEUTRAL


def _nearest_strong(classes: list[CharClass]) -> list[Optional[CharClass]]:
    """For each position, the closest strong class strictly before it."""
    nearest = []
    last = None
    for char_class in classes:
        nearest.append(last)
        if char_class is not CharClass.NEUTRAL:
            last = char_class
    return nearest


def _resolve(classes: list[CharClass]) -> list[CharClass]:
    left = _nearest_strong(classes)
    right = _nearest_strong(classes[::-1])[::-1]

    resolved = []
    for char_class, before, after in zip(classes, left, right):
        if char_class is not CharClass.NEUTRAL:
            resolved.append(char_class)
        elif before is not None:
            resolved.append(before)
        elif after is CharClass.LATIN:
            resolved.append(CharClass.LATIN)
        else:
            # Nothing strong around it: Bijoy is the target, so Bengali
            resolved.append(CharClass.BENGALI)
    return resolved


def segment_text(text: str) -> list[Segment]:
    """
    Partition text into alternating Bengali and Latin segments.

    The segments cover the input exactly: joining their text gives back the
    original string.
    """
    if not text:
        return []

    resolved = _resolve([classify_char(char) for char in text])

    segments = []
    start = 0
    for i in range(1, len(text) + 1):
        if i == len(text) or resolved[i] is not resolved[start]:
            segments.append(
                Segment(text=text[start:i], is_bengali=resolved[start] is CharClass.BENGALI)
            )
            start = i
    return segments
