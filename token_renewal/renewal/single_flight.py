import asyncio
from typing import Any, Callable, Coroutine, Generic, TypeVar

from loguru import logger

T = TypeVar("T")


class SingleFlight(Generic[T]):
    """
    Runs at most one execution of an operation at a time.
    Callers arriving while an execution is in flight await that execution instead of starting their own,
    and all of them observe the same result or the same exception.
    The execution runs in its own task and waiters are shielded, so cancelling one waiter never cancels
    the shared execution for the others.
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._task: asyncio.Task[T] | None = None

    @property
    def in_flight(self) -> bool:
        return self._task is not None and not self._task.done()

    async def run(self, operation: Callable[[], Coroutine[Any, Any, T]]) -> T:
        if self._task is None or self._task.done():
            logger.debug(f"Starting {self._name}")
            self._task = asyncio.create_task(operation())
            self._task.add_done_callback(self._on_done)
        else:
            logger.debug(f"Joining {self._name} already in flight")
        return await asyncio.shield(self._task)

    async def wait(self) -> None:
        """Wait for the in-flight execution, if any, to finish.

        The outcome is not raised here; it is delivered to the callers of ``run``.
        """
        if self._task is not None and not self._task.done():
            await asyncio.wait({self._task})

    def _on_done(self, task: "asyncio.Task[T]") -> None:
        if self._task is task:
            self._task = None
        # Mark the outcome as retrieved; every waiter of run() receives it.
        if not task.cancelled():
            task.exception()
