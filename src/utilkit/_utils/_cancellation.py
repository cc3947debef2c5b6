import asyncio
from logging import getLogger
from typing import Awaitable, Optional, TypeVar

T = TypeVar("T")

logger = getLogger("utilkit")


class CancellationToken:
    """Shared abort signal for one or more requests.

    The token moves from pending to cancelled exactly once and never goes
    back. Every holder (the dispatch loop, its timeout timer, the transport
    call and the returned handle) sees the same state. Passing one token to
    several requests cancels all of them together.
    """

    def __init__(self) -> None:
        self._cancelled = False
        self._event: Optional[asyncio.Event] = None

    def cancel(self) -> None:
        if self._cancelled:
            return
        self._cancelled = True
        logger.debug("Cancellation token cancelled")
        if self._event is not None:
            self._event.set()

    def is_cancelled(self) -> bool:
        return self._cancelled

    async def wait(self) -> None:
        if self._event is None:
            self._event = asyncio.Event()
            if self._cancelled:
                self._event.set()
        await self._event.wait()

    async def guard(self, awaitable: Awaitable[T]) -> T:
        """Await ``awaitable`` unless the token is cancelled first.

        On cancellation the inner task is cancelled and awaited so that its
        resources are released, then :class:`AbortError` is raised.
        """
        from ..models.errors import AbortError

        if self._cancelled:
            if asyncio.iscoroutine(awaitable):
                awaitable.close()
            raise AbortError()

        task = asyncio.ensure_future(awaitable)
        waiter = asyncio.ensure_future(self.wait())
        try:
            done, _ = await asyncio.wait(
                {task, waiter}, return_when=asyncio.FIRST_COMPLETED
            )
        except asyncio.CancelledError:
            task.cancel()
            raise
        finally:
            waiter.cancel()

        if task in done:
            return task.result()

        task.cancel()
        await asyncio.gather(task, return_exceptions=True)
        raise AbortError()
