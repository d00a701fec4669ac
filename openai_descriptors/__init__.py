"""Typed request descriptors for the OpenAI HTTP API."""
from .config import DEFAULT_BASE_URL, Config, Settings, with_config
from .core import RawResponse, Request, read_httpx_response, to_httpx_request
from .errors import BadStatus, BadStatusBytes, DecodeError, OpenAIDescriptorError

__version__ = "1.0.0"

__all__ = [
    "DEFAULT_BASE_URL",
    "Config",
    "Settings",
    "with_config",
    "RawResponse",
    "Request",
    "read_httpx_response",
    "to_httpx_request",
    "BadStatus",
    "BadStatusBytes",
    "DecodeError",
    "OpenAIDescriptorError",
]
