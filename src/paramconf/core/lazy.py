"""Async once-cell used to share a single in-flight computation."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Generic, TypeVar

T = TypeVar("T")


class Lazy(Generic[T]):
    """Run ``factory`` at most once and hand every caller the same result.

    The first call schedules the computation as a task. Callers arriving while
    it is in flight await that same task. A caller being cancelled does not
    cancel the shared task. If the computation raises, the cell is cleared so
    the next call starts a fresh attempt.
    """

    def __init__(self, factory: Callable[[], Awaitable[T]]) -> None:
        self._factory = factory
        self._task: asyncio.Task[T] | None = None
        self.invocations = 0

    async def __call__(self) -> T:
        if self._task is None:
            self.invocations += 1
            self._task = asyncio.ensure_future(self._factory())
            self._task.add_done_callback(self._clear_on_failure)
        return await asyncio.shield(self._task)

    def _clear_on_failure(self, task: asyncio.Task[T]) -> None:
        if task.cancelled() or task.exception() is not None:
            if self._task is task:
                self._task = None

    @property
    def started(self) -> bool:
        return self._task is not None

    @property
    def done(self) -> bool:
        return self._task is not None and self._task.done()

    @property
    def value(self) -> T:
        """The memoized result. Raises if the computation has not completed."""
        if self._task is None or not self._task.done():
            raise RuntimeError("Lazy value has not been computed")
        return self._task.result()
