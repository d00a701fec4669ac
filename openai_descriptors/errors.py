"""Exception taxonomy surfaced to callers."""
from typing import Optional


class OpenAIDescriptorError(Exception):
    """Base exception for this library."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DecodeError(OpenAIDescriptorError):
    """A response body did not match the shape a decoder expects.

    Raised for missing or mistyped fields, invalid JSON, invalid base64 and
    invalid URLs. ``decoder`` names the decoder that rejected the body.
    """

    def __init__(self, decoder: str, message: str):
        super().__init__(f"{decoder}: {message}")
        self.decoder = decoder
        self.detail = message


class BadStatus(OpenAIDescriptorError):
    """Non-2xx response from an endpoint whose error body is text."""

    def __init__(self, status_code: int, body: str, message: Optional[str] = None):
        super().__init__(message or f"HTTP {status_code}: {body[:200]}")
        self.status_code = status_code
        self.body = body

    def __str__(self):
        return f"[{self.status_code}] {self.message}"


class BadStatusBytes(OpenAIDescriptorError):
    """Non-2xx response from an endpoint whose error body is raw bytes."""

    def __init__(self, status_code: int, body: bytes):
        super().__init__(f"HTTP {status_code}: {len(body)} bytes")
        self.status_code = status_code
        self.body = body

    def __str__(self):
        return f"[{self.status_code}] {self.message}"
