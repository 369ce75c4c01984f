from __future__ import annotations

"""ASCII casing helpers used by the substitution engine.

Only ``A-Z`` and ``a-z`` count as letters. Forcing the case of any other
character returns it untouched, so symbols and digits in a replacement
survive case synthesis as-is.
"""

from typing import Optional

_UPPER = frozenset('ABCDEFGHIJKLMNOPQRSTUVWXYZ')
_LOWER = frozenset('abcdefghijklmnopqrstuvwxyz')

_TO_LOWER = {ord(c): ord(c) + 32 for c in _UPPER}
_TO_UPPER = {ord(c): ord(c) - 32 for c in _LOWER}


def is_letter(ch: Optional[str]) -> bool:
    return ch is not None and (ch in _UPPER or ch in _LOWER)


def is_upper(ch: Optional[str]) -> bool:
    return ch is not None and ch in _UPPER


def ascii_lower(text: str) -> str:
    return text.translate(_TO_LOWER)


def ascii_upper(text: str) -> str:
    return text.translate(_TO_UPPER)


def copy_case(source: str, ch: str) -> str:
    """Return `ch` forced to the case of `source`.

    An uppercase `source` forces `ch` upper; anything else forces it lower.
    """
    return ascii_upper(ch) if is_upper(source) else ascii_lower(ch)


def overflow_reference(text: str, found: str, index: int) -> str:
    """Pick the character whose case drives replacement overflow.

    The character right after the match wins when it is a letter;
    otherwise the last matched character is used. It is chosen once per
    match and reused for every overflow position.
    """
    end = index + len(found)
    if end < len(text) and is_letter(text[end]):
        return text[end]
    return found[-1]


def synthesize_case(found: str, replacement: str, reference: str) -> str:
    """Apply the capitalization of `found` onto `replacement`.

    Positions covered by `found` copy its case one to one. Positions past
    the end of `found` all copy the case of `reference`. Extra matched
    characters beyond the replacement length are dropped.
    """
    out = []
    for j, ch in enumerate(replacement):
        source = found[j] if j < len(found) else reference
        out.append(copy_case(source, ch))
    return ''.join(out)
