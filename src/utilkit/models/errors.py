from typing import Optional

from .._utils.constants import ABORTED_MESSAGE


class RequestError(Exception):
    """Base class for every error a request handle can be rejected with."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class TransportError(RequestError):
    """Raised when the network call itself failed on the last attempt.

    The underlying exception is kept on ``cause`` and chained as
    ``__cause__``.
    """

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(str(cause) or type(cause).__name__)


class HttpError(RequestError):
    """Raised when the last attempt completed with a non-2xx status."""

    def __init__(
        self, message: str, status_code: int, body: Optional[str] = None
    ) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class AbortError(RequestError):
    """Raised when the request was cancelled explicitly or by its timeout."""

    def __init__(self, message: str = ABORTED_MESSAGE):
        super().__init__(message)


class EncodingError(RequestError):
    """Raised when the request body cannot be serialized."""
