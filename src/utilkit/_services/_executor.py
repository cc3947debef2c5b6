from dataclasses import dataclass
from logging import getLogger
from typing import AsyncIterator, Optional, Union

import httpx

from .._utils._cancellation import CancellationToken
from ..models.errors import AbortError
from ..models.request import Response, ResponseContent
from ._body import OutgoingBody
from ._decoder import ResponseDecoder
from ._transport import Transport


@dataclass(frozen=True)
class Success:
    response: Response


@dataclass(frozen=True)
class HttpFailure:
    status: int
    message: str
    body: str = ""


@dataclass(frozen=True)
class TransportFailure:
    cause: BaseException


@dataclass(frozen=True)
class Aborted:
    pass


AttemptOutcome = Union[Success, HttpFailure, TransportFailure, Aborted]


@dataclass(frozen=True)
class Attempt:
    url: str
    method: str
    headers: httpx.Headers
    body: OutgoingBody
    token: CancellationToken
    stream: bool = False
    content: Optional[ResponseContent] = None


class AttemptExecutor:
    """Runs a single network attempt and classifies how it ended."""

    def __init__(
        self, transport: Transport, decoder: Optional[ResponseDecoder] = None
    ) -> None:
        self._logger = getLogger("utilkit")
        self._transport = transport
        self._decoder = decoder or ResponseDecoder()

    async def execute(self, attempt: Attempt) -> AttemptOutcome:
        token = attempt.token
        if token.is_cancelled():
            return Aborted()

        try:
            return await token.guard(self._perform(attempt))
        except AbortError:
            return Aborted()
        except Exception as e:
            if token.is_cancelled():
                return Aborted()
            self._logger.debug(f"Attempt failed: {type(e).__name__}: {e}")
            return TransportFailure(e)

    async def _perform(self, attempt: Attempt) -> AttemptOutcome:
        response = await self._transport.send(
            attempt.url,
            attempt.method,
            attempt.headers,
            attempt.body,
            attempt.token,
        )

        if not response.is_success:
            body = await _read_error_text(response)
            message = body or f"{response.status_code}{response.reason_phrase}"
            return HttpFailure(response.status_code, message, body)

        if attempt.stream:
            data = ResponseStream(response, attempt.token)
        else:
            try:
                data = await self._decoder.decode(response, attempt.content)
            finally:
                await response.aclose()

        return Success(
            Response(
                data=data,
                status=response.status_code,
                status_text=response.reason_phrase,
                headers=response.headers,
            )
        )


async def _read_error_text(response: httpx.Response) -> str:
    try:
        await response.aread()
        return response.text
    except Exception:
        return ""
    finally:
        await response.aclose()


class ResponseStream:
    """Streamed response body.

    Iterate it to the end, or call :meth:`aclose` (directly or through
    ``async with``) to release the connection when the body is not consumed.
    Raises :class:`AbortError` between chunks once the token is cancelled.
    """

    def __init__(self, response: httpx.Response, token: CancellationToken) -> None:
        self._response = response
        self._token = token

    @property
    def closed(self) -> bool:
        return self._response.is_closed

    def __aiter__(self) -> AsyncIterator[bytes]:
        return self._chunks()

    async def _chunks(self) -> AsyncIterator[bytes]:
        try:
            async for chunk in self._response.aiter_bytes():
                if self._token.is_cancelled():
                    raise AbortError()
                yield chunk
        finally:
            await self.aclose()

    async def aclose(self) -> None:
        await self._response.aclose()

    async def __aenter__(self) -> "ResponseStream":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
