import asyncio
from logging import getLogger
from typing import Any, Generator, Optional
from urllib.parse import urlencode

from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception,
    stop_after_attempt,
)

from .._config import Config
from .._utils._cancellation import CancellationToken
from .._utils._logs import LOGGER_NAME, setup_logging
from ..models.errors import AbortError, HttpError, TransportError
from ..models.request import HttpMethod, RequestOptions, Response
from ._body import BodyCodec, OutgoingBody
from ._executor import (
    Aborted,
    Attempt,
    AttemptExecutor,
    AttemptOutcome,
    HttpFailure,
    Success,
    TransportFailure,
)
from ._headers import HeaderBuilder
from ._transport import HttpxTransport, Transport


def is_retryable_exception(exception: BaseException) -> bool:
    return isinstance(exception, (HttpError, TransportError))


class Handle:
    """Cancellable handle on a dispatched request.

    Awaiting the handle yields the :class:`Response` or raises the terminal
    request error. ``cancel()`` aborts the request through its token.
    """

    def __init__(
        self, future: "asyncio.Future[Response]", token: CancellationToken
    ) -> None:
        self.future = future
        self.token = token

    def cancel(self) -> None:
        self.token.cancel()

    def cancelled(self) -> bool:
        return self.token.is_cancelled()

    def done(self) -> bool:
        return self.future.done()

    def __await__(self) -> Generator[Any, None, Response]:
        return self.future.__await__()


def append_params(url: str, params: Optional[dict]) -> str:
    if not params:
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{urlencode(params)}"


class RequestDispatcher:
    """Sends one request per ``dispatch`` call, retrying failed attempts.

    Each attempt gets a fresh timeout timer; the budget restarts per attempt
    rather than bounding the whole call. Aborts are never retried.
    """

    def __init__(
        self,
        transport: Optional[Transport] = None,
        config: Optional[Config] = None,
    ) -> None:
        self._config = config or Config()
        setup_logging(self._config.debug)
        self._logger = getLogger(LOGGER_NAME)

        self._transport = transport or HttpxTransport(
            follow_redirects=self._config.follow_redirects
        )
        self._codec = BodyCodec()
        self._header_builder = HeaderBuilder()
        self._executor = AttemptExecutor(self._transport)

    def dispatch(self, url: str, **options: Any) -> Handle:
        if not url:
            raise ValueError("url must be a non-empty string")

        request_options = RequestOptions(**options)
        token = request_options.token or CancellationToken()

        loop = asyncio.get_running_loop()
        future = loop.create_task(self._run(url, request_options, token))
        future.add_done_callback(self._retrieve_exception)
        return Handle(future, token)

    def _retrieve_exception(self, future: "asyncio.Future[Response]") -> None:
        # Marks the error as retrieved so an unawaited handle stays quiet.
        if future.cancelled():
            return
        error = future.exception()
        if error is not None:
            self._logger.debug(f"Request settled with {type(error).__name__}: {error}")

    async def _run(
        self, url: str, options: RequestOptions, token: CancellationToken
    ) -> Response:
        body = self._codec.encode(options.body)

        retries = (
            options.retries
            if options.retries is not None
            else self._config.default_retries
        )
        timeout = (
            options.timeout
            if options.timeout is not None
            else self._config.default_timeout
        )
        method = HttpMethod(options.method).value

        self._logger.debug(
            f"Dispatching {method.upper()} {url} (retries={retries}, timeout={timeout})"
        )

        retrying = AsyncRetrying(
            stop=stop_after_attempt(retries + 1),
            retry=retry_if_exception(is_retryable_exception),
            before_sleep=lambda state: self._log_retry(state, retries + 1),
            reraise=True,
        )
        async for attempt in retrying:
            with attempt:
                response = await self._attempt(
                    url, method, options, body, token, timeout
                )
        return response

    async def _attempt(
        self,
        url: str,
        method: str,
        options: RequestOptions,
        body: OutgoingBody,
        token: CancellationToken,
        timeout: Optional[float],
    ) -> Response:
        target = append_params(url, options.params)

        # The timer also covers header construction.
        timer = None
        if timeout:
            loop = asyncio.get_running_loop()
            timer = loop.call_later(timeout / 1000, token.cancel)

        try:
            outcome: AttemptOutcome
            try:
                headers = await token.guard(
                    self._header_builder.build(
                        url, options.headers, body.content_type, method
                    )
                )
            except AbortError:
                outcome = Aborted()
            except Exception as e:
                self._logger.debug(f"Header provider failed: {e}")
                outcome = Aborted() if token.is_cancelled() else TransportFailure(e)
            else:
                outcome = await self._executor.execute(
                    Attempt(
                        url=target,
                        method=method.upper(),
                        headers=headers,
                        body=body,
                        token=token,
                        stream=options.stream,
                        content=options.content,
                    )
                )
        finally:
            if timer is not None:
                timer.cancel()

        if isinstance(outcome, Success):
            return outcome.response
        if isinstance(outcome, Aborted):
            self._logger.debug(f"Request aborted: {method.upper()} {url}")
            raise AbortError()
        if isinstance(outcome, HttpFailure):
            raise HttpError(outcome.message, outcome.status, outcome.body)
        if isinstance(outcome, TransportFailure):
            raise TransportError(outcome.cause) from outcome.cause
        raise RuntimeError(f"Unexpected attempt outcome: {outcome!r}")

    def _log_retry(self, retry_state: RetryCallState, max_attempts: int) -> None:
        error = retry_state.outcome.exception() if retry_state.outcome else None
        self._logger.warning(
            f"Request failed ({error}). Retrying "
            f"(attempt {retry_state.attempt_number + 1}/{max_attempts})"
        )

    def get(self, url: str, **options: Any) -> Handle:
        return self.dispatch(url, **{**options, "method": HttpMethod.GET})

    def post(self, url: str, **options: Any) -> Handle:
        return self.dispatch(url, **{**options, "method": HttpMethod.POST})

    def head(self, url: str, **options: Any) -> Handle:
        return self.dispatch(url, **{**options, "method": HttpMethod.HEAD})

    def put(self, url: str, **options: Any) -> Handle:
        return self.dispatch(url, **{**options, "method": HttpMethod.PUT})

    def delete(self, url: str, **options: Any) -> Handle:
        return self.dispatch(url, **{**options, "method": HttpMethod.DELETE})

    def connect(self, url: str, **options: Any) -> Handle:
        return self.dispatch(url, **{**options, "method": HttpMethod.CONNECT})

    def options(self, url: str, **options: Any) -> Handle:
        return self.dispatch(url, **{**options, "method": HttpMethod.OPTIONS})

    def trace(self, url: str, **options: Any) -> Handle:
        return self.dispatch(url, **{**options, "method": HttpMethod.TRACE})

    def patch(self, url: str, **options: Any) -> Handle:
        return self.dispatch(url, **{**options, "method": HttpMethod.PATCH})
