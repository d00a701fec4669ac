"""Shapes shared across resource modules."""
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt

from openai_descriptors.core.codec import UnixTimestamp, decode_model
from openai_descriptors.core.request import DEFAULT_CONTENT_TYPE, RawResponse


class WireModel(BaseModel):
    """Base for immutable API records.

    Decoded scalars use the Strict* types so a value of the wrong JSON type
    is rejected instead of coerced (``"21"`` is not a token count).
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Usage(WireModel):
    """Token usage information."""
    prompt_tokens: StrictInt = Field(ge=0)
    completion_tokens: StrictInt = Field(ge=0)
    total_tokens: StrictInt = Field(ge=0)


class File(WireModel):
    """An uploaded file, referenced by id."""
    id: str
    object: str
    size: StrictInt = Field(alias="bytes", ge=0)
    created_at: UnixTimestamp
    filename: str
    purpose: str


class DeleteOutput(WireModel):
    """Acknowledgement of a deleted file or model."""
    id: str
    object: str
    deleted: StrictBool


class Blob(WireModel):
    """Opaque binary content and its media type."""
    content_type: str
    data: bytes


class Upload(WireModel):
    """A file to send as a multipart part."""
    filename: str
    data: bytes
    content_type: str = DEFAULT_CONTENT_TYPE


def decode_delete_output(data: Any) -> DeleteOutput:
    return decode_model(DeleteOutput, data, "delete_output")


def decode_blob(raw: RawResponse) -> Blob:
    """Wrap raw response bytes, taking the media type from Content-Type."""
    return Blob(
        content_type=raw.header("Content-Type") or DEFAULT_CONTENT_TYPE,
        data=raw.body,
    )
