"""Request descriptors: a description of an HTTP call, never the call itself."""
import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Generic, Optional, Tuple, TypeVar, Union
from urllib.parse import quote

from openai_descriptors.errors import DecodeError

T = TypeVar("T")

DEFAULT_CONTENT_TYPE = "application/octet-stream"

Headers = Tuple[Tuple[str, str], ...]


# ==================== Bodies ====================

@dataclass(frozen=True)
class EmptyBody:
    """No request body."""


def freeze_json(value: Any) -> Any:
    """Return a read-only copy of a JSON value: objects become mapping proxies, arrays tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze_json(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze_json(item) for item in value)
    return value


def thaw_json(value: Any) -> Any:
    """Inverse of ``freeze_json``: plain dicts and lists, ready to serialize."""
    if isinstance(value, Mapping):
        return {key: thaw_json(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [thaw_json(item) for item in value]
    return value


@dataclass(frozen=True)
class JsonBody:
    """A JSON request body.

    The value is copied and frozen on construction, so neither the caller's
    dict nor ``value`` itself can change the descriptor afterwards.
    """
    value: Any = field(hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", freeze_json(self.value))

    def to_json(self) -> Any:
        """A mutable copy of the value as plain dicts and lists."""
        return thaw_json(self.value)


@dataclass(frozen=True)
class StringPart:
    """A plain text form field."""
    name: str
    value: str


@dataclass(frozen=True)
class BytesPart:
    """A file form field carrying raw content."""
    name: str
    filename: str
    content_type: str
    data: bytes


Part = Union[StringPart, BytesPart]


@dataclass(frozen=True)
class MultipartBody:
    """A multipart/form-data body; part order is sent as given."""
    parts: Tuple[Part, ...]


Body = Union[EmptyBody, JsonBody, MultipartBody]


# ==================== Responses ====================

@dataclass(frozen=True)
class RawResponse:
    """A response body as received, plus the response headers."""
    body: bytes
    headers: Headers = ()

    def header(self, name: str) -> Optional[str]:
        """Look up a header value, ignoring case."""
        wanted = name.lower()
        for key, value in self.headers:
            if key.lower() == wanted:
                return value
        return None

    @property
    def text(self) -> str:
        return self.body.decode("utf-8")


@dataclass(frozen=True)
class ExpectJson(Generic[T]):
    """Parse the body as JSON, then run a decoder over the value."""
    decoder: Callable[[Any], T]

    def parse(self, raw: RawResponse) -> T:
        try:
            value = json.loads(raw.body)
        except ValueError as exc:
            raise DecodeError("json", f"invalid JSON body: {exc}") from exc
        return self.decoder(value)


@dataclass(frozen=True)
class ExpectText(Generic[T]):
    """Hand the body to a decoder as text."""
    decoder: Callable[[str], T]

    def parse(self, raw: RawResponse) -> T:
        try:
            text = raw.text
        except UnicodeDecodeError as exc:
            raise DecodeError("text", f"body is not valid UTF-8: {exc}") from exc
        return self.decoder(text)


@dataclass(frozen=True)
class ExpectBytes(Generic[T]):
    """Hand the raw bytes and headers to a decoder."""
    decoder: Callable[[RawResponse], T]

    def parse(self, raw: RawResponse) -> T:
        return self.decoder(raw)


Expect = Union[ExpectJson, ExpectText, ExpectBytes]


# ==================== Descriptor ====================

@dataclass(frozen=True)
class Request(Generic[T]):
    """An HTTP request described as a value.

    ``url`` is relative to the API base until the request is passed through
    ``openai_descriptors.config.with_config``.
    """
    method: str
    url: str
    expect: Expect
    body: Body = EmptyBody()
    headers: Headers = ()
    timeout: Optional[float] = None

    def parse(self, raw: RawResponse) -> T:
        """Run the response parser over a raw response."""
        return self.expect.parse(raw)


def api_path(*segments: str) -> str:
    """Join path segments into ``/a/b/c``, percent-encoding each one."""
    return "".join("/" + quote(segment, safe="") for segment in segments)


def get(url: str, expect: Expect) -> Request:
    return Request(method="GET", url=url, expect=expect)


def delete(url: str, expect: Expect) -> Request:
    return Request(method="DELETE", url=url, expect=expect)


def post(url: str, expect: Expect) -> Request:
    return Request(method="POST", url=url, expect=expect)


def post_json(url: str, value: Any, expect: Expect) -> Request:
    return Request(method="POST", url=url, expect=expect, body=JsonBody(value))


def post_multipart(url: str, parts: Tuple[Part, ...], expect: Expect) -> Request:
    return Request(method="POST", url=url, expect=expect, body=MultipartBody(tuple(parts)))
