from __future__ import annotations
"""
Canonical rule table.

The pipeline walks these stages top to bottom and every rule inside a
stage in order, each one consuming the previous rule's output. Rules are
plain frozen records so a stage can be run, inspected or tested alone.

Ordering constraints worth knowing before editing the table:
    * `phrases` patterns are written against `phonemes` output
      ("twank you", "suwper", "twanks").
    * `hello` becomes "hiiiiiii" in `phrases` and is lengthened again by
      the `hi` rule in `lengthening`.
    * `commentary` runs after `emoticons` so its "^^" survives.
"""
from typing import Dict, Iterable, Tuple

from uwuify.core.models import ConditionalRule, LiteralRule, PunctuationPass, Stage
from uwuify.processing import predicates as p


def _always(pairs: Iterable[Tuple[str, str]]) -> Tuple[ConditionalRule, ...]:
    return tuple(ConditionalRule(pattern, repl) for pattern, repl in pairs)


def _whole_word(pairs: Iterable[Tuple[str, str]]) -> Tuple[ConditionalRule, ...]:
    return tuple(ConditionalRule(pattern, repl, p.is_complete_word) for pattern, repl in pairs)


PHONEMES = _always([
    ('th', 'tw'),
    ('ove', 'uv'),
    ('have', 'haf'),
    ('tr', 'tw'),
    ('up', 'uwp'),
])

PHRASES = _whole_word([
    ('twank you', "you're twe best <3333 xoxo"),
    ('good', 'sooper dooper'),
    ('suwper', 'sooper dooper'),
    ('well', 'sooper dooper'),
    ('emacs', 'vim'),
    ('twanks', "you're twe best :33 xoxo"),
    ('hello', 'hiiiiiii'),
    ('dear', 'hiiiiiii'),
])

LENGTHENING = _always([
    ('hi', 'hiiiiiii'),
    ('ay', 'aaay'),
    ('ey', 'eeey'),
])

SOFTENING = (
    ConditionalRule('n', 'ny', p.n_before_vowel, name='n->ny'),
    ConditionalRule('r', 'w', p.r_inside_word, name='r->w'),
    ConditionalRule('l', 'w', p.single_l_inside_word, name='l->w'),
    ConditionalRule('ll', 'ww', p.ll_before_vowel, name='ll->ww'),
    ConditionalRule('er', 'a', p.er_at_word_end, name='er->a'),
)

EMOTICONS = (
    LiteralRule(':)', 'UwU :D'),
    LiteralRule(':D', ':3'),
    LiteralRule(':-)', 'UwwwU :3'),
    LiteralRule('^^', '^.^ UwU'),
)

COMMENTARY = (
    LiteralRule('c++', 'c++ (rust is hella cutewr btw ^^)'),
    LiteralRule('C++', 'C++ (rust is hella cutewr btw ^^)'),
)

DEFAULT_STAGES: Tuple[Stage, ...] = (
    Stage('phonemes', PHONEMES),
    Stage('phrases', PHRASES),
    Stage('lengthening', LENGTHENING),
    Stage('softening', SOFTENING),
    Stage('punctuation', (PunctuationPass(),)),
    Stage('emoticons', EMOTICONS),
    Stage('commentary', COMMENTARY),
)


def stage_names(stages: Iterable[Stage] = DEFAULT_STAGES) -> Tuple[str, ...]:
    return tuple(stage.name for stage in stages)


def stages_by_name(stages: Iterable[Stage] = DEFAULT_STAGES) -> Dict[str, Stage]:
    table: Dict[str, Stage] = {}
    for stage in stages:
        if stage.name in table:
            raise ValueError(f'duplicate stage name {stage.name!r}')
        table[stage.name] = stage
    return table
