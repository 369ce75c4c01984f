from __future__ import annotations

import logging
import sys
from typing import Iterable, List, NoReturn, Optional, Sequence, TextIO

from uwuify.core.interfaces.logging import LoggerFactoryProtocol
from uwuify.core.interfaces.text import StageRunnerProtocol
from uwuify.logging.factory import DefaultLoggerFactory
from uwuify.logging.helpers import get_logger
from uwuify.pipeline import RulePipeline
from uwuify.runtime.settings import RuntimeSettings

logger = get_logger('cli')


def _configure_logging(settings: RuntimeSettings) -> None:
    """Configure process-wide logging once, either JSON or plain text."""
    level = logging.DEBUG if settings.trace else settings.log_level
    factory: LoggerFactoryProtocol = DefaultLoggerFactory(json_logs=settings.json_logs, level=level)
    global logger
    logger = factory.get_logger('cli')


def _emit(out: TextIO, text: str) -> None:
    out.write(text + '\n')
    out.flush()


def _iter_lines(stream: TextIO) -> Iterable[str]:
    for raw in stream:
        yield raw[:-1] if raw.endswith('\n') else raw


def run(
    argv: Sequence[str],
    *,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    pipeline: Optional[StageRunnerProtocol] = None,
) -> int:
    """Run the driver and return the process exit code.

    Arguments, when present, are joined and transformed as one unit because
    some rules cross word borders. Otherwise every stdin line is one unit.
    """
    src = sys.stdin if stdin is None else stdin
    out = sys.stdout if stdout is None else stdout
    pipe: StageRunnerProtocol = pipeline or RulePipeline()

    words: List[str] = list(argv)
    if words:
        _emit(out, pipe.transform(' '.join(words)))
        return 0

    count = 0
    for line in _iter_lines(src):
        _emit(out, pipe.transform(line))
        count += 1
    logger.debug('processed %d line(s) from stdin', count)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> NoReturn:
    """Entry point for the `uwuify` console script and `python -m uwuify`."""
    settings = RuntimeSettings.from_env()
    _configure_logging(settings)
    try:
        raise SystemExit(run(sys.argv[1:] if argv is None else argv))
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)
    except OSError as exc:
        logger.error('I/O error: %s', exc)
        raise SystemExit(1)
    except Exception as exc:
        if settings.debug:
            raise
        logger.error('Unexpected error: %s', exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
