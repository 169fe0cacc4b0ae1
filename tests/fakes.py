from __future__ import annotations

import asyncio
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any


@dataclass
class FakeImplementation:
    """Async implementation that records every argument it is called with."""

    transform: Callable[[Any], Any] | None = None
    error: Exception | None = None
    calls: list[Any] = field(default_factory=list)
    log: list[str] | None = None
    label: str = ""

    async def __call__(self, arg: Any) -> Any:
        self.calls.append(arg)
        if self.log is not None:
            self.log.append(f"call:{self.label}")
        await asyncio.sleep(0)
        if self.error is not None:
            raise self.error
        if self.transform is not None:
            return self.transform(arg)
        return arg


def succeed(transform: Callable[[Any], Any] | None = None, **kwargs: Any) -> FakeImplementation:
    return FakeImplementation(transform=transform, **kwargs)


def fail(error: Exception | None = None, **kwargs: Any) -> FakeImplementation:
    return FakeImplementation(error=error or RuntimeError("whoops!"), **kwargs)


@dataclass
class RecordingObserver:
    calls: list[tuple[Any, Exception]] = field(default_factory=list)
    log: list[str] | None = None

    def __call__(self, name: Any, error: Exception) -> None:
        self.calls.append((name, error))
        if self.log is not None:
            self.log.append(f"observe:{name}")


@dataclass
class AsyncRecordingObserver(RecordingObserver):
    async def __call__(self, name: Any, error: Exception) -> None:  # type: ignore[override]
        await asyncio.sleep(0)
        super().__call__(name, error)
