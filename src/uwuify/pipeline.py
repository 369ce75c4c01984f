"""Table-driven uwuify pipeline.

Runs the stages from `uwuify.rules` once each, in order. The pipeline holds
no per-call state: the punctuation generator is rebuilt from every call's
own input.
"""

from __future__ import annotations

from typing import Iterator, Optional, Sequence, Tuple

from uwuify.core.interfaces.logging import LoggerLikeProtocol
from uwuify.core.interfaces.text import ReplacerProtocol
from uwuify.core.models import ConditionalRule, LiteralRule, PunctuationPass, Rule, Stage
from uwuify.logging.helpers import get_logger, trace_stage
from uwuify.processing.punctuation import PunctuationEmbellisher
from uwuify.processing.replace import CaseKeepingReplacer
from uwuify.rules import DEFAULT_STAGES, stages_by_name


class RulePipeline:
    """Apply an ordered sequence of rule stages to a string."""

    def __init__(
        self,
        stages: Optional[Sequence[Stage]] = None,
        *,
        replacer: Optional[ReplacerProtocol] = None,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._stages: Tuple[Stage, ...] = tuple(DEFAULT_STAGES if stages is None else stages)
        self._by_name = stages_by_name(self._stages)
        self._log: LoggerLikeProtocol = logger or get_logger('pipeline')
        self._replacer: ReplacerProtocol = replacer or CaseKeepingReplacer(logger=get_logger('processing.replace'))

    @property
    def stages(self) -> Tuple[Stage, ...]:
        return self._stages

    def apply_rule(self, rule: Rule, text: str) -> str:
        if isinstance(rule, ConditionalRule):
            return self._replacer.replace(text, rule.pattern, rule.replacement, rule.predicate)
        if isinstance(rule, LiteralRule):
            return text.replace(rule.pattern, rule.replacement) if rule.pattern else text
        if isinstance(rule, PunctuationPass):
            return PunctuationEmbellisher(decorations=rule.decorations, odds=rule.odds).embellish(text)
        raise TypeError(f'unsupported rule type: {type(rule).__name__}')

    def apply_stage(self, stage: Stage, text: str) -> str:
        for rule in stage.rules:
            text = self.apply_rule(rule, text)
        return text

    def run_stage(self, name: str, text: str) -> str:
        """Run a single named stage in isolation.

        Raises:
            KeyError: If no stage is registered under `name`.
        """
        try:
            stage = self._by_name[name]
        except KeyError:
            raise KeyError(f'unknown stage {name!r}; known: {", ".join(self._by_name)}') from None
        return self.apply_stage(stage, text)

    def iter_stages(self, text: str) -> Iterator[Tuple[str, str]]:
        """Yield ``(stage_name, text_after_stage)`` for every stage in order."""
        for stage in self._stages:
            trace_stage(self._log, 'stage start', stage=stage.name, length=len(text))
            text = self.apply_stage(stage, text)
            trace_stage(self._log, 'stage done', stage=stage.name, length=len(text))
            yield stage.name, text

    def transform(self, text: str) -> str:
        for _, text in self.iter_stages(text):
            pass
        return text


_DEFAULT_PIPELINE = RulePipeline()


def transform(text: str) -> str:
    """Uwuify `text` with the canonical rule table."""
    return _DEFAULT_PIPELINE.transform(text)
