import asyncio
import inspect
from typing import Any, Awaitable, Callable, TypeVar

T = TypeVar("T")


def is_awaitable(value: Any) -> bool:
    """Return True for coroutines, futures and objects defining ``__await__``."""
    return inspect.isawaitable(value)


def is_async(fn: Any) -> bool:
    """Return True when ``fn`` is a coroutine function (``async def``)."""
    return inspect.iscoroutinefunction(fn)


async def sleep(milliseconds: float) -> None:
    await asyncio.sleep(milliseconds / 1000)


def set_immediate(callback: Callable[[], T]) -> "asyncio.Future[T]":
    """Schedule ``callback`` on the next loop iteration.

    Returns a future resolved with the callback result, or rejected with
    whatever the callback raised.
    """
    loop = asyncio.get_running_loop()
    future: "asyncio.Future[T]" = loop.create_future()

    def _run() -> None:
        if future.cancelled():
            return
        try:
            future.set_result(callback())
        except Exception as e:
            future.set_exception(e)

    loop.call_soon(_run)
    return future


async def resolve(value: Any) -> Any:
    """Turn any value into the result of awaiting it.

    Awaitables are awaited. Plain callables are called with
    ``(resolve, reject)`` callbacks and the first one invoked settles the
    result. Anything else is returned unchanged.
    """
    if is_awaitable(value):
        return await value
    if callable(value):
        loop = asyncio.get_running_loop()
        future = loop.create_future()

        def _resolve(result: Any = None) -> None:
            if not future.done():
                future.set_result(result)

        def _reject(error: Any = None) -> None:
            if future.done():
                return
            if not isinstance(error, BaseException):
                error = Exception(error)
            future.set_exception(error)

        outcome = value(_resolve, _reject)
        if is_awaitable(outcome):
            await outcome
        return await future
    return value


async def maybe_await(value: "T | Awaitable[T]") -> T:
    if is_awaitable(value):
        return await value  # type: ignore[misc]
    return value  # type: ignore[return-value]
