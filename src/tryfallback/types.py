"""Implementation entries and tagged results."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, Generic, NamedTuple, TypeVar

from pydantic import BaseModel, ConfigDict

N = TypeVar("N")
I = TypeVar("I")  # noqa: E741
O = TypeVar("O")  # noqa: E741

Operation = Callable[[I], Awaitable[O]]
ErrorHandler = Callable[[N, Exception], Awaitable[None] | None]


class Tagged(NamedTuple, Generic[N, O]):
    """Successful outcome: the name of the implementation that answered and its value."""

    name: N
    value: O


class Implementation(BaseModel):
    """One named candidate in a fallback list.

    Attributes:
        name: Opaque identifier reported on success and failure.
        fn: Callable taking the input; an awaitable result is awaited, anything else is used as-is.
    """

    model_config = ConfigDict(frozen=True)

    name: Any
    fn: Callable[[Any], Any]

    @classmethod
    def coerce(cls, entry: Implementation | tuple[Any, Any]) -> Implementation:
        """Normalise a ``(name, fn)`` pair into an Implementation.

        Raises:
            TypeError: If the entry is not a pair.
            pydantic.ValidationError: If ``fn`` is not callable.
        """
        if isinstance(entry, Implementation):
            return entry
        try:
            name, fn = entry
        except (TypeError, ValueError) as exc:
            raise TypeError(f"Implementation entries must be (name, fn) pairs, got {entry!r}") from exc
        return cls(name=name, fn=fn)
