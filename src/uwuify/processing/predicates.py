from __future__ import annotations

"""Match predicates for the softening and phrase rules.

Every predicate is a pure function of a `MatchContext`. Missing neighbours
(match at the start or end of the text) are represented as ``None``.
"""

from typing import Optional

from uwuify.constants import VOWELS
from uwuify.core.models import MatchContext, always
from uwuify.processing.casing import ascii_lower, is_letter


def is_vowel(ch: Optional[str]) -> bool:
    return ch is not None and ascii_lower(ch) in VOWELS


def breaks_word(ch: Optional[str]) -> bool:
    """True for a missing character or any non-letter."""
    return not is_letter(ch)


def is_complete_word(ctx: MatchContext) -> bool:
    """Accept only matches that are not part of a longer word."""
    if len(ctx.found) == len(ctx.text):
        return True
    return breaks_word(ctx.previous) and breaks_word(ctx.following)


def _is_one_ending(ctx: MatchContext) -> bool:
    # "one" at a word end keeps its "n": o, n, e, then a word break.
    return (
        ascii_lower(ctx.previous or '') == 'o'
        and ascii_lower(ctx.following or '') == 'e'
        and breaks_word(ctx.after_following)
    )


def n_before_vowel(ctx: MatchContext) -> bool:
    """n -> ny: only before a vowel, never in a word-final "one"."""
    if ctx.at_end:
        return False
    if _is_one_ending(ctx):
        return False
    return is_vowel(ctx.following)


def r_inside_word(ctx: MatchContext) -> bool:
    """r -> w: not first, preceded by a letter and followed by a vowel."""
    if ctx.at_end or ctx.at_start:
        return False
    return is_vowel(ctx.following) and is_letter(ctx.previous)


def single_l_inside_word(ctx: MatchContext) -> bool:
    """l -> w: a lone l that follows a letter."""
    if len(ctx.text) < len(ctx.found) + 2:
        return False
    if ctx.at_start or not is_letter(ctx.previous):
        return False
    return ascii_lower(ctx.previous) != 'l' and ascii_lower(ctx.following or '') != 'l'


def ll_before_vowel(ctx: MatchContext) -> bool:
    if ctx.at_end:
        return False
    return is_vowel(ctx.following)


def er_at_word_end(ctx: MatchContext) -> bool:
    if ctx.at_end:
        return True
    return not is_letter(ctx.following)


__all__ = [
    'always',
    'breaks_word',
    'er_at_word_end',
    'is_complete_word',
    'is_vowel',
    'll_before_vowel',
    'n_before_vowel',
    'r_inside_word',
    'single_l_inside_word',
]
