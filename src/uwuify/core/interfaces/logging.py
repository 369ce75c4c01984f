from __future__ import annotations
"""Logger seams accepted by the replacer, the embellisher and the pipeline."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class LoggerLikeProtocol(Protocol):
    """What the engine components log through.

    Only `debug` is called per transform (hit counts, stage tracing); the
    driver also reports through `error` and `warning`.
    """

    def debug(self, msg: str, *args, **kwargs) -> None: ...

    def warning(self, msg: str, *args, **kwargs) -> None: ...

    def error(self, msg: str, *args, **kwargs) -> None: ...


@runtime_checkable
class LoggerFactoryProtocol(Protocol):
    """Hands out loggers under the 'uwuify' namespace, configuring it on first use."""

    def get_logger(self, name: str) -> LoggerLikeProtocol:
        ...
