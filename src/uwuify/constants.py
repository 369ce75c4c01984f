from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates the character classes and decoration tables so the
predicates and the punctuation pass share one definition.
"""

from types import MappingProxyType
from typing import Mapping

# Lowercase vowels; callers lower the probed character first.
VOWELS: str = 'euioay'

# One decoration is drawn on average for every PUNCTUATION_ODDS marks.
PUNCTUATION_ODDS: int = 15

PUNCTUATION_DECORATIONS: Mapping[str, str] = MappingProxyType({
    '.': ' <3333 ^.^ ',
    '!': '!! Thadws impowtant! <3 ',
    ',': ' <3 aaaaaand ',
    '?': '?? now tell me! >:( ',
})
