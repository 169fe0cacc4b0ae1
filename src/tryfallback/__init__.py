"""tryfallback - ordered fallback over named async implementations."""

from tryfallback.config import FallbackConfig
from tryfallback.errors import FallbackError, FallbackExhaustedError, ObserverError
from tryfallback.fallback import Fallback, try_fallback
from tryfallback.trace import Evidence, Trace
from tryfallback.types import ErrorHandler, Implementation, Operation, Tagged

__all__ = [
    # Combinator
    "try_fallback",
    "Fallback",
    "FallbackConfig",
    # Entries & results
    "Implementation",
    "Tagged",
    "Operation",
    "ErrorHandler",
    # Errors
    "FallbackError",
    "FallbackExhaustedError",
    "ObserverError",
    # Tracing
    "Trace",
    "Evidence",
]
