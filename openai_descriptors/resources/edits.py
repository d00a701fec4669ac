"""Edits: ``POST /edits``."""
from typing import Any, Dict, List, Optional

from pydantic import Field, StrictInt

from openai_descriptors.core.codec import UnixTimestamp, decode_model, object_without_absent
from openai_descriptors.core.request import ExpectJson, Request, api_path, post_json
from openai_descriptors.models.common import Usage, WireModel


class EditInput(WireModel):
    """Request to edit ``input`` following ``instruction``."""
    model: str
    instruction: str
    input: Optional[str] = None
    n: Optional[int] = Field(default=None, ge=1)
    temperature: Optional[float] = Field(default=None, ge=0, le=2)
    top_p: Optional[float] = Field(default=None, ge=0, le=1)


class EditChoice(WireModel):
    """One edited text."""
    text: str
    index: StrictInt


class EditOutput(WireModel):
    """Response for an edit request."""
    object: str
    created: UnixTimestamp
    choices: List[EditChoice]
    usage: Usage


def encode_input(input: EditInput) -> Dict[str, Any]:
    return object_without_absent(
        ("model", input.model),
        ("input", input.input),
        ("instruction", input.instruction),
        ("n", input.n),
        ("temperature", input.temperature),
        ("top_p", input.top_p),
    )


def decode_output(data: Any) -> EditOutput:
    return decode_model(EditOutput, data, "edit")


def create_edit(input: EditInput) -> Request[EditOutput]:
    """Describe an edit request."""
    return post_json(api_path("edits"), encode_input(input), ExpectJson(decode_output))
