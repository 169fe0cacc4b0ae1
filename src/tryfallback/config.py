"""Captured fallback configuration."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from .trace import Trace
from .types import ErrorHandler, Implementation


@dataclass(frozen=True)
class FallbackConfig:
    """Immutable configuration read by every invocation of a Fallback.

    Attributes:
        implementations: Entries in priority order.
        on_error: Optional observer called with (name, error) per failure.
        trace: Optional recorder for attempt events.
    """

    implementations: tuple[Implementation, ...] = ()
    on_error: ErrorHandler | None = None
    trace: Trace | None = None

    @classmethod
    def build(
        cls,
        implementations: Iterable[Implementation | tuple[Any, Any]] | Mapping[Any, Any],
        on_error: ErrorHandler | None = None,
        trace: Trace | None = None,
    ) -> FallbackConfig:
        """Normalise caller input into a config.

        A Mapping is read as name -> fn in insertion order.
        """
        entries = implementations.items() if isinstance(implementations, Mapping) else implementations
        return cls(
            implementations=tuple(Implementation.coerce(entry) for entry in entries),
            on_error=on_error,
            trace=trace,
        )

    @property
    def names(self) -> tuple[Any, ...]:
        return tuple(impl.name for impl in self.implementations)
