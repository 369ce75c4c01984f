"""Runtime settings resolved from the process environment."""
from .settings import RuntimeSettings

__all__ = ["RuntimeSettings"]
