from __future__ import annotations

"""Logger plumbing for the uwuify pipeline.

Everything logs under the 'uwuify' namespace. Nothing is configured on
import: the CLI calls `setup_base_logger` once, and library callers keep
whatever handlers they already have. Per-stage traces from `RulePipeline`
are emitted only when UWUIFY_TRACE=1, and `JsonLogFormatter` lifts their
stage context into a `ctx` field when UWUIFY_JSON_LOGS=1.
"""

import logging
import os
from typing import Optional, TextIO

from uwuify.core.interfaces.logging import LoggerLikeProtocol

BASE_LOGGER_NAME = 'uwuify'


class JsonLogFormatter(logging.Formatter):
    """Emit logs as compact JSON with a fixed schema.

    Fields:
        - ts: ISO-8601 timestamp in UTC with millisecond precision.
        - level: Log level name.
        - module: Logger name (e.g., 'uwuify.pipeline').
        - msg: Formatted message string.
        - version: uwuify.__version__ (fixed per formatter instance).
        - ctx: Optional dictionary attached to the record as 'context'.
    """

    def __init__(self) -> None:
        super().__init__()
        self._version = self._resolve_version()

    @staticmethod
    def _resolve_version() -> str:
        """Resolve the uwuify version without creating an import cycle.

        Returns:
            str: Version string or 'unknown' if it cannot be determined.
        """
        try:
            from uwuify import __version__ as _v
            return str(_v)
        except ImportError:
            return os.getenv('UWUIFY_VERSION', 'unknown')

    def format(self, record: logging.LogRecord) -> str:
        from datetime import datetime, timezone
        import json

        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        ts_str = ts.isoformat(timespec='milliseconds').replace('+00:00', 'Z')

        payload = {
            'ts': ts_str,
            'level': record.levelname,
            'module': record.name,
            'msg': record.getMessage(),
            'version': self._version,
        }

        ctx = getattr(record, 'context', None)
        if isinstance(ctx, dict) and ctx:
            payload['ctx'] = ctx

        return json.dumps(payload, ensure_ascii=False)


def setup_base_logger(
    *, json_logs: bool = False, level: int = logging.WARNING, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Configure the base 'uwuify' logger once and return it.

    Args:
        json_logs: If True, configure a JSON formatter, else plain text.
        level: Logging level for the base logger.
        stream: Optional stream (stderr by default).

    Returns:
        The configured base logger.
    """
    base = logging.getLogger(BASE_LOGGER_NAME)
    if base.handlers:
        base.setLevel(level)
        return base

    import sys as _sys

    base.setLevel(level)
    base.propagate = False

    handler = logging.StreamHandler(stream or _sys.stderr)
    if json_logs:
        handler.setFormatter(JsonLogFormatter())
    else:
        handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    base.addHandler(handler)

    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a namespaced logger under 'uwuify'."""
    if not name or name == BASE_LOGGER_NAME:
        return logging.getLogger(BASE_LOGGER_NAME)
    if name.startswith(BASE_LOGGER_NAME + '.'):
        return logging.getLogger(name)
    return logging.getLogger(f'{BASE_LOGGER_NAME}.{name}')


def is_trace_enabled() -> bool:
    """Check if stage tracing is enabled via env flag."""
    return os.getenv('UWUIFY_TRACE') == '1'


def trace_stage(logger: LoggerLikeProtocol, message: str, **ctx) -> None:
    """Emit debug-verbosity stage traces only when enabled.

    Args:
        logger: Target logger.
        message: Human-readable description.
        **ctx: Optional structured context attached to the record.
    """
    if not is_trace_enabled():
        return
    if ctx:
        logger.debug('%s | ctx=%r', message, ctx, extra={'context': ctx})
    else:
        logger.debug('%s', message)
