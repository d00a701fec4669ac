"""Request descriptors, shared codecs and the httpx bridge."""
from .request import (
    BytesPart,
    EmptyBody,
    ExpectBytes,
    ExpectJson,
    ExpectText,
    JsonBody,
    MultipartBody,
    RawResponse,
    Request,
    StringPart,
)
from .transport import read_httpx_response, to_httpx_request

__all__ = [
    "BytesPart",
    "EmptyBody",
    "ExpectBytes",
    "ExpectJson",
    "ExpectText",
    "JsonBody",
    "MultipartBody",
    "RawResponse",
    "Request",
    "StringPart",
    "read_httpx_response",
    "to_httpx_request",
]
