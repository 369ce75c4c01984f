from typing import List, Optional

from uwuify.core.interfaces.logging import LoggerLikeProtocol
from uwuify.core.models import MatchContext, Predicate, always
from uwuify.logging.helpers import get_logger
from uwuify.processing.casing import ascii_lower, overflow_reference, synthesize_case


class CaseKeepingReplacer:
    def __init__(self, *, logger: Optional[LoggerLikeProtocol] = None) -> None:
        """Literal, case-insensitive replacement that keeps the matched capitalization."""
        self._log = logger or get_logger('processing.replace')

    def replace(
        self,
        text: str,
        pattern: str,
        replacement: str,
        predicate: Optional[Predicate] = None,
    ) -> str:
        """Replace every accepted occurrence of `pattern` in a single pass.

        Examples (pay attention to the capitalization):
            ("Hello World", "hello", "hi") -> "Hi World"
            ("hello World", "hello", "hi") -> "hi World"
            ("HELLO World", "hello", "hi") -> "HI World"

        Args:
            text: Input text. Predicates see this exact string.
            pattern: Literal to look for; compared case-insensitively.
            replacement: Literal to emit in place of an accepted match.
            predicate: Decides per candidate; accepts everything when omitted.

        Returns:
            The rewritten text. Empty text or an empty pattern are no-ops.
        """
        if not text:
            return ''
        if not pattern:
            return text

        accept = predicate or always
        needle = ascii_lower(pattern)
        width = len(pattern)
        out: List[str] = []
        hits = 0
        i = 0
        while i < len(text):
            found = text[i:i + width]
            if ascii_lower(found) == needle and accept(MatchContext(text=text, found=found, index=i)):
                reference = overflow_reference(text, found, i)
                out.append(synthesize_case(found, replacement, reference))
                i += len(found)
                hits += 1
                continue
            out.append(text[i])
            i += 1

        if hits:
            self._log.debug('replaced %d× %r -> %r', hits, pattern, replacement)
        return ''.join(out)


_DEFAULT_REPLACER = CaseKeepingReplacer()


def replace_keep_case(
    text: str,
    pattern: str,
    replacement: str,
    predicate: Optional[Predicate] = None,
) -> str:
    """Module-level shortcut for `CaseKeepingReplacer().replace`."""
    return _DEFAULT_REPLACER.replace(text, pattern, replacement, predicate)
