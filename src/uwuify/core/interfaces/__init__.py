from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .text import ReplacerProtocol, StageRunnerProtocol

__all__ = [
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'ReplacerProtocol',
    'StageRunnerProtocol',
]
