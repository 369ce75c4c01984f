"""Public API surface for uwuify.processing."""
__all__ = [
    "casing",
    "predicates",
    "punctuation",
    "replace",
]
