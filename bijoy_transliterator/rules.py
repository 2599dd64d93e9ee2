"""
Named rewrite rules used to move vowel signs and reph between logical
(Unicode) and visual (Bijoy) order.
"""

import re
from dataclasses import dataclass
from typing import Callable, Union

from .mappings import CONSONANTS, HASANTA, NUKTA

# A consonant (nukta spelled out or not), or several joined by hasanta
CONSONANT = f"(?:[{CONSONANTS}]{NUKTA}?)"
CLUSTER = f"(?:(?:{CONSONANT}{HASANTA})+{CONSONANT}|{CONSONANT})"


@dataclass(frozen=True)
class RewriteRule:
    """A regex substitution with a name, applied to the whole string."""
    name: str
    pattern: re.Pattern
    replacement: Union[str, Callable[[re.Match], str]]

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


def apply_rules(text: str, rules: tuple[RewriteRule, ...]) -> str:
    """Apply rules in order, each over the output of the previous one."""
    for rule in rules:
        text = rule.apply(text)
    return text
