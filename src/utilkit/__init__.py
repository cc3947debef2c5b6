"""utilkit - general purpose helpers built around a resilient HTTP client."""

from ._config import Config
from ._services import (
    HttpxTransport,
    RequestDispatcher,
    ResponseStream,
    Transport,
)
from ._services._dispatcher import Handle
from ._utils import is_async, is_awaitable, resolve, set_immediate, sleep
from ._utils._cancellation import CancellationToken
from .models import (
    AbortError,
    Blob,
    EncodingError,
    FormData,
    FormFile,
    HttpError,
    HttpMethod,
    RequestError,
    RequestOptions,
    Response,
    ResponseContent,
    TransportError,
)
from .verbs import (
    connect,
    delete,
    get,
    get_dispatcher,
    head,
    options,
    patch,
    post,
    put,
    request,
    set_dispatcher,
    trace,
)

__version__ = "0.1.0"

__all__ = [
    "Config",
    "HttpxTransport",
    "RequestDispatcher",
    "ResponseStream",
    "Transport",
    "Handle",
    "CancellationToken",
    "AbortError",
    "Blob",
    "EncodingError",
    "FormData",
    "FormFile",
    "HttpError",
    "HttpMethod",
    "RequestError",
    "RequestOptions",
    "Response",
    "ResponseContent",
    "TransportError",
    "is_async",
    "is_awaitable",
    "resolve",
    "set_immediate",
    "sleep",
    "connect",
    "delete",
    "get",
    "get_dispatcher",
    "head",
    "options",
    "patch",
    "post",
    "put",
    "request",
    "set_dispatcher",
    "trace",
]
