from __future__ import annotations
"""Text transformation protocol definitions."""

from typing import Iterator, Optional, Protocol, Tuple

from uwuify.core.models import Predicate


class ReplacerProtocol(Protocol):
    """Protocol for the case-preserving substitution engine.

    Implementations are expected to:
      * Match `pattern` case-insensitively while scanning left to right.
      * Ask `predicate` about every candidate before replacing it.
      * Carry the capitalization of the matched text onto the replacement.
    """

    def replace(
        self,
        text: str,
        pattern: str,
        replacement: str,
        predicate: Optional[Predicate] = None,
    ) -> str:
        ...


class StageRunnerProtocol(Protocol):
    """Protocol for table-driven pipelines that run named stages in order."""

    def transform(self, text: str) -> str:
        ...

    def run_stage(self, name: str, text: str) -> str:
        ...

    def iter_stages(self, text: str) -> Iterator[Tuple[str, str]]:
        ...
