"""Shared primitive codecs used by every resource module."""
import base64
import binascii
from datetime import datetime, timedelta, timezone
from typing import Annotated, Any, Callable, Dict, Generic, List, Optional, Tuple, Type, TypeVar

import httpx
from pydantic import BaseModel, PlainValidator, ValidationError

from openai_descriptors.errors import DecodeError
from openai_descriptors.utils.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")
U = TypeVar("U")
M = TypeVar("M", bound=BaseModel)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


# ==================== Encoding ====================

def object_without_absent(*fields: Tuple[str, Any]) -> Dict[str, Any]:
    """Build a JSON object from (key, value) pairs, dropping absent values.

    A value of ``None`` means the field was not set, so the key is left out
    of the object entirely instead of being sent as ``null``.
    """
    return {key: value for key, value in fields if value is not None}


def map_optional(fn: Callable[[T], U], value: Optional[T]) -> Optional[U]:
    """Apply ``fn`` to a present value and pass ``None`` through."""
    if value is None:
        return None
    return fn(value)


# ==================== Decoding ====================

def decode_or_fail(parse: Callable[[Any], Optional[T]], description: str) -> Callable[[Any], T]:
    """Lift a fallible parse into a decoder that raises on failure.

    ``parse`` may either return ``None`` or raise ``ValueError``/``TypeError``
    to signal a bad value; both become a ``ValueError`` naming ``description``.
    """
    def decoder(value: Any) -> T:
        try:
            result = parse(value)
        except (ValueError, TypeError) as exc:
            raise ValueError(f"{description}: {exc}") from exc
        if result is None:
            raise ValueError(f"{description}: {value!r}")
        return result

    return decoder


def from_millis(millis: int) -> datetime:
    """Convert milliseconds since the epoch to an aware UTC datetime."""
    return EPOCH + timedelta(milliseconds=millis)


def to_millis(moment: datetime) -> int:
    """Convert a datetime back to integer milliseconds since the epoch."""
    return (moment - EPOCH) // timedelta(milliseconds=1)


def _parse_unix_seconds(value: Any) -> Optional[datetime]:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    # upstream sends seconds, we keep milliseconds
    return from_millis(value * 1000)


def _parse_base64(value: Any) -> Optional[bytes]:
    if not isinstance(value, str):
        return None
    try:
        return base64.b64decode(value, validate=True)
    except binascii.Error as exc:
        raise ValueError(str(exc)) from exc


def _parse_url(value: Any) -> Optional[str]:
    if not isinstance(value, str):
        return None
    try:
        url = httpx.URL(value)
    except httpx.InvalidURL as exc:
        raise ValueError(str(exc)) from exc
    if url.scheme not in ("http", "https") or not url.host:
        return None
    return value


decode_unix_timestamp = decode_or_fail(_parse_unix_seconds, "expected a Unix timestamp in seconds")
decode_base64 = decode_or_fail(_parse_base64, "invalid base64 data")
decode_url = decode_or_fail(_parse_url, "invalid URL")

UnixTimestamp = Annotated[datetime, PlainValidator(decode_unix_timestamp)]
Base64Bytes = Annotated[bytes, PlainValidator(decode_base64)]
Url = Annotated[str, PlainValidator(decode_url)]


def describe_validation_error(exc: ValidationError) -> str:
    """Render a pydantic validation error as ``field.path: reason`` pairs."""
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "<root>"
        problems.append(f"{location}: {error['msg']}")
    return "; ".join(problems)


def decode_model(model: Type[M], data: Any, decoder: str) -> M:
    """Validate a decoded JSON value against ``model`` or raise DecodeError."""
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        logger.warning("decode_failed", decoder=decoder, errors=exc.error_count())
        raise DecodeError(decoder, describe_validation_error(exc)) from exc


class ListEnvelope(BaseModel, Generic[M]):
    """The ``{"object": "list", "data": [...]}`` wrapper of list endpoints."""
    data: List[M]


def decode_list(model: Type[M], data: Any, decoder: str) -> List[M]:
    """Decode a list envelope and return its items."""
    return decode_model(ListEnvelope[model], data, decoder).data
