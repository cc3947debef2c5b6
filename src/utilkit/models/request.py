from dataclasses import dataclass, field
from enum import Enum
from typing import (
    Any,
    Awaitable,
    Callable,
    Dict,
    Iterator,
    List,
    Mapping,
    Optional,
    Tuple,
    Union,
)

import httpx
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from .._utils._cancellation import CancellationToken


class HttpMethod(str, Enum):
    GET = "get"
    POST = "post"
    PUT = "put"
    DELETE = "delete"
    HEAD = "head"
    CONNECT = "connect"
    OPTIONS = "options"
    TRACE = "trace"
    PATCH = "patch"

    @classmethod
    def _missing_(cls, value: object) -> Optional["HttpMethod"]:
        if isinstance(value, str):
            return cls.__members__.get(value.upper())
        return None


class ResponseContent(str, Enum):
    """Representation a response body is decoded into."""

    BLOB = "blob"
    JSON = "json"
    ARRAY_BUFFER = "arrayBuffer"
    FORM_DATA = "formData"
    TEXT = "text"


@dataclass(frozen=True)
class FormFile:
    filename: str
    content: bytes
    content_type: Optional[str] = None


FormValue = Union[str, FormFile]


class FormData:
    """Ordered, multi-valued form payload.

    Sent untouched as a request body (the transport picks the multipart
    boundary) and produced when a response is decoded as ``formData``.
    """

    def __init__(
        self, fields: Optional[Union[Mapping[str, FormValue], List[Tuple[str, FormValue]]]] = None
    ) -> None:
        self._entries: List[Tuple[str, FormValue]] = []
        if fields is None:
            return
        items = fields.items() if isinstance(fields, Mapping) else fields
        for name, value in items:
            self.append(name, value)

    def append(
        self,
        name: str,
        value: Union[str, bytes, FormFile],
        filename: Optional[str] = None,
        content_type: Optional[str] = None,
    ) -> None:
        if isinstance(value, bytes):
            value = FormFile(
                filename=filename or name, content=value, content_type=content_type
            )
        elif not isinstance(value, FormFile):
            value = str(value)
        self._entries.append((name, value))

    def get(self, name: str, default: Optional[FormValue] = None) -> Optional[FormValue]:
        for key, value in self._entries:
            if key == name:
                return value
        return default

    def getall(self, name: str) -> List[FormValue]:
        return [value for key, value in self._entries if key == name]

    def keys(self) -> List[str]:
        seen: Dict[str, None] = {}
        for key, _ in self._entries:
            seen.setdefault(key, None)
        return list(seen)

    def items(self) -> List[Tuple[str, FormValue]]:
        return list(self._entries)

    def fields(self) -> List[Tuple[str, str]]:
        return [(k, v) for k, v in self._entries if isinstance(v, str)]

    def files(self) -> List[Tuple[str, FormFile]]:
        return [(k, v) for k, v in self._entries if isinstance(v, FormFile)]

    def __contains__(self, name: object) -> bool:
        return any(key == name for key, _ in self._entries)

    def __iter__(self) -> Iterator[Tuple[str, FormValue]]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FormData):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return f"FormData({self._entries!r})"


@dataclass(frozen=True)
class Blob:
    data: bytes
    type: str = ""

    @property
    def size(self) -> int:
        return len(self.data)

    def text(self, encoding: str = "utf-8") -> str:
        return self.data.decode(encoding, errors="replace")


@dataclass(frozen=True)
class Response:
    """Result of a successful request."""

    data: Any
    status: int
    status_text: str
    headers: httpx.Headers = field(default_factory=httpx.Headers)


HeadersProvider = Callable[[], Union[Mapping[str, str], Awaitable[Mapping[str, str]]]]


class RequestOptions(BaseModel):
    """Per call options accepted by ``request`` and the verb shortcuts."""

    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        arbitrary_types_allowed=True,
        extra="forbid",
        frozen=True,
    )

    method: HttpMethod = HttpMethod.GET
    headers: Optional[Union[Dict[str, str], HeadersProvider]] = None
    params: Optional[Dict[str, str]] = None
    body: Any = None
    content: Optional[ResponseContent] = None
    timeout: Optional[float] = Field(default=None, ge=0)
    stream: bool = False
    retries: Optional[int] = Field(default=None, ge=0)
    token: Optional[CancellationToken] = Field(
        default=None, validation_alias=AliasChoices("token", "controller")
    )

    @field_validator("method", mode="before")
    @classmethod
    def _lower_method(cls, value: Any) -> Any:
        if isinstance(value, str) and not isinstance(value, HttpMethod):
            return value.lower()
        return value

    @field_validator("params", mode="before")
    @classmethod
    def _stringify_params(cls, value: Any) -> Any:
        if isinstance(value, Mapping):
            return {str(k): str(v) for k, v in value.items()}
        return value
