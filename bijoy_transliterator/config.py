"""
Conversion settings shared by the converters, the engine and the CLI.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Direction(Enum):
    """Which way text is transliterated."""
    BIJOY_TO_UNICODE = "bijoy_to_unicode"
    UNICODE_TO_BIJOY = "unicode_to_bijoy"


# Case-insensitive substrings identifying the legacy SutonnyMJ/Bijoy family
LEGACY_FONT_MARKERS = ("sutonny", "suttony", "bijoy")

# Font written onto runs converted to the legacy encoding
LEGACY_FONT = "SutonnyMJ"

# Unicode-capable Bengali font written onto runs converted from the legacy encoding
UNICODE_FONT = "Bornomala"

# Latin and Unicode Bengali families that block heuristic conversion to Unicode
UNICODE_DIRECTION_IGNORED_FONTS = (
    "calibri", "arial", "times new roman", "cambria", "verdana", "tahoma",
    "segoe ui", "trebuchet ms", "courier new", "georgia", "garamond", "helvetica",
    # Bengali Unicode fonts
    "vrinda", "nikosh", "solaimanlipi", "kalpurush", "siyam rupali", "adelon",
    "akashee", "ani", "asomiya", "benesen", "beneseniap", "bengali", "mukti",
    "sagormy", "shonar",
)

# Latin families whose runs are never converted to the legacy encoding
LEGACY_DIRECTION_IGNORED_FONTS = (
    "calibri", "arial", "times new roman", "cambria", "verdana", "tahoma",
    "segoe ui", "trebuchet ms", "courier new", "georgia", "garamond", "helvetica",
    "consolas", "courier", "monaco", "menlo", "lucida", "fira", "roboto",
    "open sans", "lato",
)

# Archive entries eligible for conversion live under this prefix
PART_PREFIX = "word/"
PART_SUFFIX = ".xml"


def is_legacy_font(name: Optional[str]) -> bool:
    """True if a font family name belongs to the SutonnyMJ/Bijoy family."""
    if not name:
        return False
    lowered = name.lower()
    return any(marker in lowered for marker in LEGACY_FONT_MARKERS)


def matches_font_list(name: Optional[str], fonts: tuple[str, ...]) -> bool:
    """True if a font family name contains any entry of a deny-list."""
    if not name:
        return False
    lowered = name.lower()
    return any(font in lowered for font in fonts)


@dataclass
class ConversionOptions:
    """
    Mode flags for a conversion.

    force_convert only matters for Bijoy -> Unicode, where it lets runs
    without a recognised font go through the script classifier.
    """
    direction: Direction = Direction.BIJOY_TO_UNICODE
    force_convert: bool = False
    legacy_font: str = LEGACY_FONT
    unicode_font: str = UNICODE_FONT

    def __post_init__(self):
        if isinstance(self.direction, str):
            try:
                self.direction = Direction(self.direction)
            except ValueError:
                valid = ", ".join(d.value for d in Direction)
                raise ValueError(f"Direction must be one of {valid}, got {self.direction}")
        if not self.legacy_font.strip():
            raise ValueError("Legacy font name cannot be empty")
        if not self.unicode_font.strip():
            raise ValueError("Unicode font name cannot be empty")

    @property
    def to_unicode(self) -> bool:
        return self.direction is Direction.BIJOY_TO_UNICODE
