from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Mapping, Optional, Tuple, Union

from uwuify.constants import PUNCTUATION_DECORATIONS, PUNCTUATION_ODDS


@dataclass(frozen=True)
class MatchContext:
    """Everything a predicate may inspect about one candidate match.

    `text` is the full input of the stage being scanned, never the partially
    rewritten output, so neighbour lookups see the original characters.
    """
    text: str
    found: str
    index: int

    @property
    def end(self) -> int:
        return self.index + len(self.found)

    @property
    def at_start(self) -> bool:
        return self.index == 0

    @property
    def at_end(self) -> bool:
        return self.end >= len(self.text)

    @property
    def previous(self) -> Optional[str]:
        return self.text[self.index - 1] if self.index > 0 else None

    @property
    def following(self) -> Optional[str]:
        return self.text[self.end] if self.end < len(self.text) else None

    @property
    def after_following(self) -> Optional[str]:
        pos = self.end + 1
        return self.text[pos] if pos < len(self.text) else None


Predicate = Callable[[MatchContext], bool]


def always(ctx: MatchContext) -> bool:
    """Accept every candidate match."""
    return True


@dataclass(frozen=True)
class ConditionalRule:
    """Case-insensitive, case-preserving replacement gated by a predicate."""
    pattern: str
    replacement: str
    predicate: Predicate = always
    name: str = ''

    @property
    def label(self) -> str:
        return self.name or f'{self.pattern}->{self.replacement}'


@dataclass(frozen=True)
class LiteralRule:
    """Exact, case-sensitive substring replacement."""
    pattern: str
    replacement: str

    @property
    def label(self) -> str:
        return f'{self.pattern}->{self.replacement}'


@dataclass(frozen=True)
class PunctuationPass:
    """Content-seeded decoration of punctuation marks."""
    decorations: Mapping[str, str] = field(default_factory=lambda: PUNCTUATION_DECORATIONS)
    odds: int = PUNCTUATION_ODDS

    @property
    def label(self) -> str:
        return 'punctuation'


Rule = Union[ConditionalRule, LiteralRule, PunctuationPass]


@dataclass(frozen=True)
class Stage:
    name: str
    rules: Tuple[Rule, ...]
