"""Error types raised by fallback composition."""

from __future__ import annotations

from typing import Any


class FallbackError(Exception):
    """Base class for errors raised by the fallback combinator itself."""


class FallbackExhaustedError(FallbackError):
    """Error raised when every implementation failed.

    Individual failures are not chained here; they are delivered to the
    error observer as they happen. ``attempted`` lists the implementation
    names in the order they were tried (empty for an empty list).
    """

    def __init__(self, attempted: tuple[Any, ...] = ()) -> None:
        self.attempted = attempted
        super().__init__("Fallback functions exhausted")

    def __repr__(self) -> str:
        return f"FallbackExhaustedError(attempted={self.attempted!r})"


class ObserverError(FallbackError):
    """Error raised when the error observer itself fails.

    Aborts the fallback loop. The observer's own exception is chained as
    ``__cause__``.
    """

    def __init__(self, name: Any, error: BaseException) -> None:
        self.name = name
        self.error = error
        super().__init__(f"Error observer failed while handling failure of {name!r}")

    def __repr__(self) -> str:
        return f"ObserverError(name={self.name!r}, error={self.error!r})"
