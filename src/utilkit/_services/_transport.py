from logging import getLogger
from typing import AsyncIterator, Optional, Protocol, runtime_checkable

import httpx

from .._utils._cancellation import CancellationToken
from .._utils._ssl_context import get_httpx_client_kwargs
from ._body import EncodedBody, OutgoingBody, PassThroughBody


@runtime_checkable
class Transport(Protocol):
    """Network boundary used by the request executor.

    ``send`` must return a response whose body has not been read yet, so
    that streaming callers can consume it lazily. The executor binds the
    call to ``token`` itself; implementations may also consult it.
    """

    async def send(
        self,
        url: str,
        method: str,
        headers: httpx.Headers,
        body: OutgoingBody,
        token: CancellationToken,
    ) -> httpx.Response: ...


class _ClientClosingStream(httpx.AsyncByteStream):
    """Wraps a response stream so closing the response closes its client."""

    def __init__(self, stream: httpx.AsyncByteStream, client: httpx.AsyncClient):
        self._stream = stream
        self._client = client

    async def __aiter__(self) -> AsyncIterator[bytes]:
        async for chunk in self._stream:
            yield chunk

    async def aclose(self) -> None:
        try:
            await self._stream.aclose()
        finally:
            await self._client.aclose()


class HttpxTransport:
    """Transport backed by ``httpx.AsyncClient``.

    When no client is injected a new one is created for every call and
    closed together with the response it produced.
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        *,
        follow_redirects: bool = True,
    ) -> None:
        self._logger = getLogger("utilkit")
        self._client = client
        self._follow_redirects = follow_redirects

    async def send(
        self,
        url: str,
        method: str,
        headers: httpx.Headers,
        body: OutgoingBody,
        token: CancellationToken,
    ) -> httpx.Response:
        owned = self._client is None
        client = self._client or httpx.AsyncClient(
            **get_httpx_client_kwargs(self._follow_redirects)
        )

        try:
            request = client.build_request(
                method, url, headers=headers, **self._body_kwargs(body)
            )
            self._logger.debug(f"Request: {method} {url}")
            response = await client.send(request, stream=True)
        except BaseException:
            if owned:
                await client.aclose()
            raise

        if owned:
            response.stream = _ClientClosingStream(response.stream, client)  # type: ignore[arg-type]
        return response

    @staticmethod
    def _body_kwargs(body: OutgoingBody) -> dict:
        if isinstance(body, PassThroughBody):
            files = [
                (name, (f.filename, f.content, f.content_type))
                if f.content_type
                else (name, (f.filename, f.content))
                for name, f in body.form.files()
            ]
            data: dict = {}
            for name, value in body.form.fields():
                data.setdefault(name, []).append(value)
            return {"data": data, "files": files or None}
        if isinstance(body, EncodedBody) and body.content is not None:
            return {"content": body.content}
        return {}
