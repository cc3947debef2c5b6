from typing import Mapping, Optional, Union

from httpx import Headers

from .._utils._async import maybe_await
from .._utils.constants import (
    CONTENT_TYPE_AUTO,
    CONTENT_TYPE_DEFAULT,
    DEFAULT_ACCEPT,
    HEADER_ACCEPT,
    HEADER_CONTENT_TYPE,
    HEADER_METHOD,
    HEADER_PATH,
    HEADER_SEC_FETCH_MODE,
    HEADER_SEC_FETCH_SITE,
    MEDIA_TYPE_JSON,
    SEC_FETCH_MODE_CORS,
    SEC_FETCH_SITE_SAME_ORIGIN,
)
from ..models.request import HeadersProvider


class HeaderBuilder:
    """Builds the outgoing header set for one attempt.

    Caller headers always win; defaults are only filled in for names the
    caller did not set (compared case-insensitively).
    """

    async def build(
        self,
        url: str,
        headers: Optional[Union[Mapping[str, str], HeadersProvider]],
        content_type: str,
        method: Optional[str] = None,
    ) -> Headers:
        if callable(headers):
            headers = await maybe_await(headers())

        result = Headers(headers or {})

        defaults = {
            HEADER_ACCEPT: DEFAULT_ACCEPT,
            HEADER_PATH: url,
            HEADER_METHOD: method.upper() if method else "GET",
            HEADER_SEC_FETCH_MODE: SEC_FETCH_MODE_CORS,
            HEADER_SEC_FETCH_SITE: SEC_FETCH_SITE_SAME_ORIGIN,
        }
        for name, value in defaults.items():
            if name not in result:
                result[name] = value

        if content_type != CONTENT_TYPE_AUTO and HEADER_CONTENT_TYPE not in result:
            result[HEADER_CONTENT_TYPE] = (
                MEDIA_TYPE_JSON if content_type == CONTENT_TYPE_DEFAULT else content_type
            )

        return result
