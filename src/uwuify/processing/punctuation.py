import hashlib
import random
from typing import List, Mapping, Optional

from uwuify.constants import PUNCTUATION_DECORATIONS, PUNCTUATION_ODDS
from uwuify.core.interfaces.logging import LoggerLikeProtocol
from uwuify.logging.helpers import get_logger


def seed_for(text: str) -> int:
    """Derive a stable 64-bit seed from the text content.

    The builtin ``hash`` is salted per process, so a digest is used to
    keep output identical across runs.
    """
    digest = hashlib.sha256(text.encode('utf-8', 'surrogatepass')).digest()
    return int.from_bytes(digest[:8], 'big')


class PunctuationEmbellisher:
    """Swap roughly one in `odds` punctuation marks for a decoration.

    One generator value is drawn per decoratable mark and none for any
    other character, so the decorated subset depends only on the text.
    """

    def __init__(
        self,
        *,
        decorations: Optional[Mapping[str, str]] = None,
        odds: int = PUNCTUATION_ODDS,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        if odds < 1:
            raise ValueError('odds must be a positive integer')
        self._decorations = dict(PUNCTUATION_DECORATIONS if decorations is None else decorations)
        self._odds = odds
        self._log = logger or get_logger('processing.punctuation')

    def embellish(self, text: str) -> str:
        if not text:
            return text
        rng = random.Random(seed_for(text))
        out: List[str] = []
        decorated = 0
        for ch in text:
            deco = self._decorations.get(ch)
            if deco is not None and rng.getrandbits(32) % self._odds == 0:
                out.append(deco)
                decorated += 1
            else:
                out.append(ch)
        if decorated:
            self._log.debug('decorated %d punctuation mark(s)', decorated)
        return ''.join(out)
