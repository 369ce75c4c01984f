"""Logging helpers scoped to the 'uwuify' logger namespace."""
from .factory import DefaultLoggerFactory
from .helpers import JsonLogFormatter, get_logger, setup_base_logger, trace_stage

__all__ = ["DefaultLoggerFactory", "JsonLogFormatter", "get_logger", "setup_base_logger", "trace_stage"]
