from .errors import (
    AbortError,
    EncodingError,
    HttpError,
    RequestError,
    TransportError,
)
from .request import (
    Blob,
    FormData,
    FormFile,
    HttpMethod,
    RequestOptions,
    Response,
    ResponseContent,
)

__all__ = [
    "AbortError",
    "EncodingError",
    "HttpError",
    "RequestError",
    "TransportError",
    "Blob",
    "FormData",
    "FormFile",
    "HttpMethod",
    "RequestOptions",
    "Response",
    "ResponseContent",
]
