import json
from dataclasses import dataclass
from typing import Any, Optional, Union

from .._utils.constants import CONTENT_TYPE_AUTO, CONTENT_TYPE_DEFAULT
from ..models.errors import EncodingError
from ..models.request import FormData


@dataclass(frozen=True)
class EncodedBody:
    content: Optional[bytes]
    content_type: str = CONTENT_TYPE_DEFAULT


@dataclass(frozen=True)
class PassThroughBody:
    form: FormData
    content_type: str = CONTENT_TYPE_AUTO


OutgoingBody = Union[EncodedBody, PassThroughBody]


class BodyCodec:
    """Turns the caller supplied body into what goes on the wire."""

    def encode(self, body: Any) -> OutgoingBody:
        if isinstance(body, FormData):
            return PassThroughBody(form=body)
        if body is None:
            return EncodedBody(content=None)

        try:
            encoded = json.dumps(body, allow_nan=False, separators=(",", ":"))
        except (TypeError, ValueError, RecursionError) as e:
            raise EncodingError(f"Request body is not JSON serializable: {e}") from e
        return EncodedBody(content=encoded.encode("utf-8"))
