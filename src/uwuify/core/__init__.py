"""Core data model and protocols for uwuify."""
from .models import (
    ConditionalRule,
    LiteralRule,
    MatchContext,
    Predicate,
    PunctuationPass,
    Rule,
    Stage,
    always,
)

__all__ = [
    "ConditionalRule",
    "LiteralRule",
    "MatchContext",
    "Predicate",
    "PunctuationPass",
    "Rule",
    "Stage",
    "always",
]
