from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

DEFAULT_RESOLVE_CONCURRENCY = 10


def _collect(
    data: Mapping[str, Any],
    limiter: asyncio.Semaphore,
    pending: list[Awaitable[None]],
) -> dict[str, Any]:
    result: dict[str, Any] = {}

    for key, value in data.items():
        if callable(value):

            async def run(
                key: str = key, fn: Callable[[], Awaitable[Any]] = value
            ) -> None:
                async with limiter:
                    result[key] = await fn()

            pending.append(run())
        elif isinstance(value, Mapping):
            result[key] = _collect(value, limiter, pending)
        else:
            result[key] = value

    return result


async def auto_resolve(
    data: Mapping[str, Any],
    limit: int = DEFAULT_RESOLVE_CONCURRENCY,
) -> dict[str, Any]:
    """Resolve every zero-argument async callable in a nested mapping.

    ``{"foo": 1, "bar": fetch_bar, "biz": {"baz": fetch_baz}}`` becomes
    ``{"foo": 1, "bar": <fetch_bar()>, "biz": {"baz": <fetch_baz()>}}``, with at
    most ``limit`` callables running at once. Lists are returned untouched.
    """
    if limit < 1:
        raise ValueError("limit must be positive")

    limiter = asyncio.Semaphore(limit)
    pending: list[Awaitable[None]] = []

    result = _collect(data, limiter, pending)
    await asyncio.gather(*pending)
    return result
