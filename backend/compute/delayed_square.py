"""
Delayed square computation on the asyncio event loop.

A non-negative n resolves to n*n after a fixed delay. A negative n resolves
at once to an InvalidInput failure; the delay is never waited for it.
Nothing is shared between invocations and nothing here logs.
"""
from __future__ import annotations
import asyncio
from typing import Any, Callable, Optional

from .config import get_settings
from .outcome import (
    NEGATIVE_NUMBER_MESSAGE,
    ComputationFailure,
    ComputationResult,
    Outcome,
)

SuccessHandler = Callable[[int], Any]
FailureHandler = Callable[[str], Any]


class DelayedSquare:
    """
    Squares an integer after `delay_ms` milliseconds.

    Use `run()` to await the tagged outcome, or `submit()` to schedule the
    computation and get notified through a success or failure handler.
    """

    def __init__(self, delay_ms: Optional[int] = None):
        if delay_ms is None:
            delay_ms = get_settings().delay_ms
        if delay_ms < 0:
            raise ValueError(f"delay_ms must be >= 0, got {delay_ms}")
        self.delay_ms = delay_ms

    @property
    def delay_seconds(self) -> float:
        return self.delay_ms / 1000.0

    async def run(self, n: int) -> Outcome:
        if n < 0:
            return ComputationFailure(NEGATIVE_NUMBER_MESSAGE)
        await asyncio.sleep(self.delay_seconds)
        return ComputationResult(n * n)

    def submit(
        self,
        n: int,
        on_success: SuccessHandler,
        on_failure: FailureHandler,
    ) -> asyncio.Task:
        """
        Schedule square(n) on the running loop and return the task immediately.

        Exactly one handler fires, once: on_success(value) or on_failure(message).
        The task resolves to the Outcome after the handler has run.

        Raises:
            RuntimeError: if there is no running event loop.
        """
        loop = asyncio.get_running_loop()
        return loop.create_task(self._notify(n, on_success, on_failure))

    async def _notify(
        self,
        n: int,
        on_success: SuccessHandler,
        on_failure: FailureHandler,
    ) -> Outcome:
        outcome = await self.run(n)
        if isinstance(outcome, ComputationResult):
            on_success(outcome.value)
        else:
            on_failure(outcome.message)
        return outcome

    def __repr__(self) -> str:
        return f"DelayedSquare(delay_ms={self.delay_ms})"


async def square_async(n: int, delay_ms: Optional[int] = None) -> Outcome:
    """Await the outcome of squaring n with the configured (or given) delay."""
    return await DelayedSquare(delay_ms).run(n)
