"""Image generation, edits and variations."""
import json
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from pydantic import Field

from openai_descriptors.core.codec import (
    Base64Bytes,
    UnixTimestamp,
    Url,
    decode_model,
    map_optional,
    object_without_absent,
)
from openai_descriptors.core.request import (
    BytesPart,
    ExpectJson,
    Part,
    Request,
    StringPart,
    api_path,
    post_json,
    post_multipart,
)
from openai_descriptors.models.common import Blob, Upload, WireModel

IMAGE_CONTENT_TYPE = "image/png"


class ImageSize(Enum):
    """Square output dimensions."""
    SIZE_256 = "256x256"
    SIZE_512 = "512x512"
    SIZE_1024 = "1024x1024"


class ImageResponseFormat(Enum):
    """Whether images come back as links or inline base64."""
    URL = "url"
    B64_JSON = "b64_json"


class ImageInput(WireModel):
    """Request to generate images from a prompt."""
    prompt: str = Field(max_length=1000)
    n: Optional[int] = Field(default=None, ge=1, le=10)
    size: Optional[ImageSize] = None
    response_format: Optional[ImageResponseFormat] = None
    user: Optional[str] = None


class ImageEditInput(WireModel):
    """Request to edit a square PNG, optionally restricted by a mask."""
    image: Upload
    prompt: str = Field(max_length=1000)
    mask: Optional[Upload] = None
    n: Optional[int] = Field(default=None, ge=1, le=10)
    size: Optional[ImageSize] = None
    response_format: Optional[ImageResponseFormat] = None
    user: Optional[str] = None


class ImageVariationInput(WireModel):
    """Request for variations of a square PNG."""
    image: Upload
    n: Optional[int] = Field(default=None, ge=1, le=10)
    size: Optional[ImageSize] = None
    response_format: Optional[ImageResponseFormat] = None
    user: Optional[str] = None


class ImageUrls(WireModel):
    """Images returned as links, for ``response_format=url``."""
    created: datetime
    urls: List[str]


class ImageBlobs(WireModel):
    """Images returned inline, for ``response_format=b64_json``."""
    created: datetime
    images: List[Blob]


ImageOutput = Union[ImageUrls, ImageBlobs]


class _UrlItem(WireModel):
    url: Url


class _UrlResponse(WireModel):
    created: UnixTimestamp
    data: List[_UrlItem]


class _Base64Item(WireModel):
    b64_json: Base64Bytes


class _Base64Response(WireModel):
    created: UnixTimestamp
    data: List[_Base64Item]


def _enum_value(option: Optional[Enum]) -> Optional[str]:
    return map_optional(lambda member: member.value, option)


def encode_input(input: ImageInput) -> Dict[str, Any]:
    return object_without_absent(
        ("prompt", input.prompt),
        ("n", input.n),
        ("size", _enum_value(input.size)),
        ("response_format", _enum_value(input.response_format)),
        ("user", input.user),
    )


def _string_parts(*fields: Tuple[str, Any]) -> List[Part]:
    return [StringPart(name, value) for name, value in fields if value is not None]


def _upload_part(name: str, upload: Upload) -> BytesPart:
    return BytesPart(name, upload.filename, upload.content_type, upload.data)


def encode_edit_input(input: ImageEditInput) -> Tuple[Part, ...]:
    """Build the form parts: text fields first, then image and mask."""
    parts = _string_parts(
        ("prompt", input.prompt),
        ("n", map_optional(json.dumps, input.n)),
        ("size", _enum_value(input.size)),
        ("response_format", _enum_value(input.response_format)),
        ("user", input.user),
    )
    parts.append(_upload_part("image", input.image))
    if input.mask is not None:
        parts.append(_upload_part("mask", input.mask))
    return tuple(parts)


def encode_variation_input(input: ImageVariationInput) -> Tuple[Part, ...]:
    parts = _string_parts(
        ("n", map_optional(json.dumps, input.n)),
        ("size", _enum_value(input.size)),
        ("response_format", _enum_value(input.response_format)),
        ("user", input.user),
    )
    parts.append(_upload_part("image", input.image))
    return tuple(parts)


def decode_urls(data: Any) -> ImageUrls:
    response = decode_model(_UrlResponse, data, "image_urls")
    return ImageUrls(created=response.created, urls=[item.url for item in response.data])


def decode_blobs(data: Any) -> ImageBlobs:
    response = decode_model(_Base64Response, data, "image_b64_json")
    return ImageBlobs(
        created=response.created,
        images=[Blob(content_type=IMAGE_CONTENT_TYPE, data=item.b64_json) for item in response.data],
    )


def decoder_for(response_format: Optional[ImageResponseFormat]) -> Callable[[Any], ImageOutput]:
    """Pick the decoder matching the requested format; links are the default."""
    if response_format is ImageResponseFormat.B64_JSON:
        return decode_blobs
    return decode_urls


def create_image(input: ImageInput) -> Request[ImageOutput]:
    """Describe an image generation request."""
    return post_json(
        api_path("images", "generations"),
        encode_input(input),
        ExpectJson(decoder_for(input.response_format)),
    )


def create_image_edit(input: ImageEditInput) -> Request[ImageOutput]:
    """Describe an image edit request, sent as multipart form data."""
    return post_multipart(
        api_path("images", "edits"),
        encode_edit_input(input),
        ExpectJson(decoder_for(input.response_format)),
    )


def create_image_variation(input: ImageVariationInput) -> Request[ImageOutput]:
    """Describe an image variation request, sent as multipart form data."""
    return post_multipart(
        api_path("images", "variations"),
        encode_variation_input(input),
        ExpectJson(decoder_for(input.response_format)),
    )
