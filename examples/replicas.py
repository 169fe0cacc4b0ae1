from __future__ import annotations

import asyncio
import logging

from tryfallback import Trace, try_fallback

logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


async def primary(user_id: int) -> str:
    await asyncio.sleep(0.01)
    raise ConnectionError("primary unavailable")


async def replica(user_id: int) -> str:
    await asyncio.sleep(0.02)
    return f"user:{user_id}@replica"


async def cache(user_id: int) -> str:
    return f"user:{user_id}@cache"


def report(name: str, error: Exception) -> None:
    print(f"{name} failed: {error}")


async def main() -> None:
    trace = Trace()
    fetch_user = try_fallback(
        [("primary", primary), ("replica", replica), ("cache", cache)],
        on_error=report,
        trace=trace,
    )

    name, user = await fetch_user(42)
    print(f"{name} answered: {user}")

    for event in trace.get_events():
        print(event.action, event.info)


if __name__ == "__main__":
    asyncio.run(main())
