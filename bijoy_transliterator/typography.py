"""
Spacing rules around Bengali sentence marks.

Both converters finish with normalize_typography(). The marks are the danda
(।), the double danda (॥) and the legacy pipe that SutonnyMJ draws as a
danda, so the same pass works on Unicode and on Bijoy text.
"""

import re

SENTENCE_MARKS = "।॥|"

_SPACE_BEFORE_MARK = re.compile(r"[ \t]+(?=[।॥|])")
_AFTER_MARK = re.compile(r"([।॥|])([ \t]*)")


def _space_after_mark(match: re.Match) -> str:
    mark, spaces = match.group(1), match.group(2)
    following = match.string[match.end():match.end() + 1]

    if not following:
        # Keep the word break when the text continues in the next run
        return mark + " " if spaces else mark
    if following in SENTENCE_MARKS or following in "\r\n":
        return mark
    return mark + " "


def normalize_typography(text: str) -> str:
    """
    Tidy spaces around sentence marks.

    Removes spaces and tabs in front of a mark and leaves exactly one space
    after it, except between two marks, before a line break, and at the end
    of the text where a mark gets no space added. Idempotent.
    """
    if not text:
        return ""

    result = _SPACE_BEFORE_MARK.sub("", text)
    return _AFTER_MARK.sub(_space_after_mark, result)
