from __future__ import annotations

from uwuify.core.models import ConditionalRule, LiteralRule, MatchContext, PunctuationPass, Stage
from uwuify.pipeline import RulePipeline, transform
from uwuify.processing.replace import CaseKeepingReplacer, replace_keep_case
from uwuify.rules import DEFAULT_STAGES
from uwuify.logging.helpers import get_logger

__version__ = '1.0.0'

__all__ = [
    'transform',
    'RulePipeline',
    'CaseKeepingReplacer',
    'replace_keep_case',
    'ConditionalRule',
    'LiteralRule',
    'MatchContext',
    'PunctuationPass',
    'Stage',
    'DEFAULT_STAGES',
    'get_logger',
]
