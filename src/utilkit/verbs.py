"""Module level request helpers.

Each verb function sends a request through a shared default
:class:`RequestDispatcher` and returns its :class:`Handle`::

    response = await utilkit.get("https://example.com/api", params={"q": "x"})
    handle = utilkit.post(url, body={"name": "x"}, timeout=5000, retries=2)
    handle.cancel()
"""

from typing import Any, Optional

from ._config import Config
from ._services._dispatcher import Handle, RequestDispatcher
from .models.request import HttpMethod

_default_dispatcher: Optional[RequestDispatcher] = None


def get_dispatcher() -> RequestDispatcher:
    global _default_dispatcher
    if _default_dispatcher is None:
        _default_dispatcher = RequestDispatcher(config=Config.from_env())
    return _default_dispatcher


def set_dispatcher(dispatcher: Optional[RequestDispatcher]) -> None:
    """Replace the default dispatcher, or reset it when given ``None``."""
    global _default_dispatcher
    _default_dispatcher = dispatcher


def request(url: str, **options: Any) -> Handle:
    return get_dispatcher().dispatch(url, **options)


def _verb(url: str, method: HttpMethod, options: dict) -> Handle:
    return request(url, **{**options, "method": method})


def get(url: str, **options: Any) -> Handle:
    return _verb(url, HttpMethod.GET, options)


def post(url: str, **options: Any) -> Handle:
    return _verb(url, HttpMethod.POST, options)


def head(url: str, **options: Any) -> Handle:
    return _verb(url, HttpMethod.HEAD, options)


def put(url: str, **options: Any) -> Handle:
    return _verb(url, HttpMethod.PUT, options)


def delete(url: str, **options: Any) -> Handle:
    return _verb(url, HttpMethod.DELETE, options)


def connect(url: str, **options: Any) -> Handle:
    return _verb(url, HttpMethod.CONNECT, options)


def options(url: str, **kwargs: Any) -> Handle:
    return _verb(url, HttpMethod.OPTIONS, kwargs)


def trace(url: str, **options: Any) -> Handle:
    return _verb(url, HttpMethod.TRACE, options)


def patch(url: str, **options: Any) -> Handle:
    return _verb(url, HttpMethod.PATCH, options)
