import json
from email import policy
from email.parser import BytesParser
from typing import Any, Optional
from urllib.parse import parse_qsl

from httpx import Response as HttpxResponse

from .._utils.constants import (
    HEADER_CONTENT_TYPE,
    MEDIA_TYPE_JSON,
    MEDIA_TYPE_MULTIPART_FORM,
    MEDIA_TYPE_OCTET_STREAM,
    MEDIA_TYPE_TEXT_PREFIX,
    MEDIA_TYPE_URLENCODED_FORM,
)
from ..models.request import Blob, FormData, FormFile, ResponseContent

# Order matters: the first substring found in the content type wins.
_NEGOTIATION_TABLE = (
    (MEDIA_TYPE_JSON, ResponseContent.JSON),
    (MEDIA_TYPE_OCTET_STREAM, ResponseContent.ARRAY_BUFFER),
    (MEDIA_TYPE_MULTIPART_FORM, ResponseContent.FORM_DATA),
    (MEDIA_TYPE_TEXT_PREFIX, ResponseContent.TEXT),
)


class ResponseDecoder:
    """Maps a declared content type to a decode strategy and applies it."""

    def negotiate(self, content_type: Optional[str]) -> ResponseContent:
        if not isinstance(content_type, str):
            return ResponseContent.BLOB
        lowered = content_type.lower()
        for marker, strategy in _NEGOTIATION_TABLE:
            if marker in lowered:
                return strategy
        return ResponseContent.BLOB

    async def decode(
        self, response: HttpxResponse, strategy: Optional[ResponseContent] = None
    ) -> Any:
        content_type = response.headers.get(HEADER_CONTENT_TYPE)
        if strategy is None:
            strategy = self.negotiate(content_type)

        raw = await response.aread()

        if strategy == ResponseContent.JSON:
            return json.loads(raw)
        if strategy == ResponseContent.TEXT:
            return response.text
        if strategy == ResponseContent.ARRAY_BUFFER:
            return raw
        if strategy == ResponseContent.FORM_DATA:
            return parse_form_data(raw, content_type or "")
        return Blob(data=raw, type=content_type or "")


def parse_form_data(raw: bytes, content_type: str) -> FormData:
    """Parse a multipart or urlencoded form body."""
    if MEDIA_TYPE_URLENCODED_FORM in content_type.lower():
        return FormData(parse_qsl(raw.decode("utf-8"), keep_blank_values=True))

    if MEDIA_TYPE_MULTIPART_FORM not in content_type.lower():
        raise ValueError(f"Cannot decode '{content_type}' as form data")

    header = f"{HEADER_CONTENT_TYPE}: {content_type}\r\n\r\n".encode("latin-1")
    message = BytesParser(policy=policy.HTTP).parsebytes(header + raw)
    if not message.is_multipart():
        raise ValueError("Malformed multipart body")

    form = FormData()
    for part in message.iter_parts():
        name = part.get_param("name", header="content-disposition")
        if name is None:
            continue
        payload = part.get_payload(decode=True) or b""
        filename = part.get_filename()
        if filename is not None:
            form.append(
                str(name),
                FormFile(
                    filename=filename,
                    content=payload,
                    content_type=part.get_content_type(),
                ),
            )
        else:
            charset = part.get_content_charset() or "utf-8"
            form.append(str(name), payload.decode(charset, errors="replace"))
    return form
