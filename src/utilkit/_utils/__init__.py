from ._async import is_async, is_awaitable, maybe_await, resolve, set_immediate, sleep
from ._logs import LOGGER_NAME, setup_logging
from ._ssl_context import get_httpx_client_kwargs

__all__ = [
    "is_async",
    "is_awaitable",
    "maybe_await",
    "resolve",
    "set_immediate",
    "sleep",
    "LOGGER_NAME",
    "setup_logging",
    "get_httpx_client_kwargs",
]
