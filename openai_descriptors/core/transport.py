"""Bridge between request descriptors and httpx objects.

Nothing here sends a request: callers own the ``httpx.Client`` (or
``AsyncClient``), its retries and its timeouts. This module only renders a
descriptor into an ``httpx.Request`` and runs a received ``httpx.Response``
back through the descriptor's parser.
"""
from typing import Any, Dict, List, Tuple, TypeVar

import httpx

from openai_descriptors.core.request import (
    BytesPart,
    ExpectBytes,
    JsonBody,
    MultipartBody,
    RawResponse,
    Request,
    StringPart,
)
from openai_descriptors.errors import BadStatus, BadStatusBytes
from openai_descriptors.utils.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


def to_httpx_request(request: Request) -> httpx.Request:
    """Render a descriptor into an unsent ``httpx.Request``."""
    kwargs: Dict[str, Any] = {"headers": list(request.headers)}

    body = request.body
    if isinstance(body, JsonBody):
        kwargs["json"] = body.to_json()
    elif isinstance(body, MultipartBody):
        # every part goes through files= so httpx keeps the given order and
        # always encodes multipart, even when no part carries a file
        files: List[Tuple[str, Tuple[Any, ...]]] = []
        for part in body.parts:
            if isinstance(part, StringPart):
                files.append((part.name, (None, part.value)))
            elif isinstance(part, BytesPart):
                files.append((part.name, (part.filename, part.data, part.content_type)))
        kwargs["files"] = files

    if request.timeout is not None:
        kwargs["extensions"] = {"timeout": httpx.Timeout(request.timeout).as_dict()}

    return httpx.Request(request.method, request.url, **kwargs)


def raw_response(response: httpx.Response) -> RawResponse:
    """Capture the body and headers of a read ``httpx.Response``."""
    return RawResponse(
        body=response.content,
        headers=tuple(response.headers.items()),
    )


def read_httpx_response(request: Request[T], response: httpx.Response) -> T:
    """Decode a response with the descriptor's parser.

    Non-2xx responses raise ``BadStatusBytes`` for byte endpoints and
    ``BadStatus`` for everything else.
    """
    if not response.is_success:
        logger.warning(
            "bad_status",
            method=request.method,
            url=request.url,
            status=response.status_code,
        )
        if isinstance(request.expect, ExpectBytes):
            raise BadStatusBytes(response.status_code, response.content)
        raise BadStatus(response.status_code, response.text)

    return request.parse(raw_response(response))
