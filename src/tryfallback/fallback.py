"""Fallback combinator: try named implementations in order, first success wins."""

from __future__ import annotations

import inspect
import logging
import time
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Generic

from .config import FallbackConfig
from .errors import FallbackExhaustedError, ObserverError
from .trace import Trace
from .types import ErrorHandler, I, Implementation, N, O, Tagged

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Fallback(Generic[N, I, O]):
    """Composed operation returned by try_fallback.

    Calling it with an argument tries each implementation in order and
    returns Tagged(name, value) for the first one that does not raise.
    Holds no per-invocation state, so concurrent calls are independent.
    """

    config: FallbackConfig

    async def __call__(self, arg: I) -> Tagged[N, O]:
        """Run the fallback chain for one input.

        Args:
            arg: Input passed unchanged to every attempted implementation.

        Returns:
            Tagged result of the first successful implementation.

        Raises:
            FallbackExhaustedError: If every implementation failed or there are none.
            ObserverError: If the error observer raised.
        """
        trace = self.config.trace
        fallback_id: int | None = None
        if trace is not None:
            fallback_id = trace.record(
                "fallback_begin",
                info={"candidates": len(self.config.implementations)},
            )

        attempted: list[Any] = []
        for index, impl in enumerate(self.config.implementations):
            attempted.append(impl.name)
            start_time = time.perf_counter()
            try:
                value = impl.fn(arg)
                if inspect.isawaitable(value):
                    value = await value
            except Exception as exc:
                duration_ms = (time.perf_counter() - start_time) * 1000
                logger.debug("Implementation %r failed (attempt %d): %r", impl.name, index + 1, exc)
                if trace is not None:
                    trace.record(
                        "attempt_failed",
                        info={
                            "name": impl.name,
                            "index": index,
                            "error": type(exc).__name__,
                            "exception": exc,
                        },
                        parent_id=fallback_id,
                        duration_ms=duration_ms,
                    )
                await self._observe(impl.name, exc)
                continue

            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.debug("Implementation %r succeeded (attempt %d)", impl.name, index + 1)
            if trace is not None:
                trace.record(
                    "attempt_succeeded",
                    info={"name": impl.name, "index": index},
                    parent_id=fallback_id,
                    duration_ms=duration_ms,
                )
            return Tagged(impl.name, value)

        logger.warning("All %d fallback implementations failed: %r", len(attempted), attempted)
        if trace is not None:
            trace.record("fallback_exhausted", info={"attempted": list(attempted)}, parent_id=fallback_id)
        raise FallbackExhaustedError(tuple(attempted))

    async def _observe(self, name: N, error: Exception) -> None:
        on_error = self.config.on_error
        if on_error is None:
            return
        try:
            outcome = on_error(name, error)
            if inspect.isawaitable(outcome):
                await outcome
        except Exception as exc:
            raise ObserverError(name, error) from exc

    @property
    def names(self) -> tuple[Any, ...]:
        """Implementation names in priority order."""
        return self.config.names


def try_fallback(
    implementations: Iterable[Implementation | tuple[N, Any]] | Mapping[N, Any],
    on_error: ErrorHandler | None = None,
    *,
    trace: Trace | None = None,
) -> Fallback[N, I, O]:
    """Compose named implementations into one operation with ordered fallback.

    Semantics:
        - Implementations are attempted one at a time, in list order
        - The first one to return without raising wins; later ones are not called
        - Each failure is reported to on_error(name, error) before the next attempt
        - If none succeed, FallbackExhaustedError is raised

    No implementation is called at construction time.

    Args:
        implementations: (name, fn) pairs or Implementation entries in priority
            order, or a Mapping of name to fn. May be empty.
        on_error: Optional observer, sync or async. Its return value is ignored.
        trace: Optional Trace to record attempt events on.

    Returns:
        Fallback: an awaitable callable from input to Tagged(name, value).
    """
    return Fallback(FallbackConfig.build(implementations, on_error=on_error, trace=trace))
