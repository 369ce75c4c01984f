from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from uwuify.logging.helpers import get_logger

logger = get_logger('runtime.settings')

DEFAULT_LOG_LEVEL = logging.WARNING


def _flag(env: Mapping[str, str], key: str) -> bool:
    return (env.get(key) or '').strip() == '1'


def _parse_level(raw: Optional[str]) -> int:
    name = (raw or '').strip().upper()
    if not name:
        return DEFAULT_LOG_LEVEL
    level = logging.getLevelName(name)
    if isinstance(level, int):
        return level
    logger.warning('⚠  unknown UWUIFY_LOG_LEVEL %r – falling back to WARNING', raw)
    return DEFAULT_LOG_LEVEL


@dataclass(frozen=True)
class RuntimeSettings:
    """Process-level knobs read from the environment.

    None of these change the rule table; they only steer logging and how
    the CLI reports unexpected failures.
    """
    json_logs: bool = False
    log_level: int = DEFAULT_LOG_LEVEL
    trace: bool = False
    debug: bool = False

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> 'RuntimeSettings':
        src = os.environ if env is None else env
        return cls(
            json_logs=_flag(src, 'UWUIFY_JSON_LOGS'),
            log_level=_parse_level(src.get('UWUIFY_LOG_LEVEL')),
            trace=_flag(src, 'UWUIFY_TRACE'),
            debug=_flag(src, 'DEBUG'),
        )
