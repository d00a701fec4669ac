"""Text completions: ``POST /completions``."""
from typing import Any, Dict, List, Optional, Union

from pydantic import Field, StrictFloat, StrictInt

from openai_descriptors.core.codec import UnixTimestamp, decode_model, object_without_absent
from openai_descriptors.core.request import ExpectJson, Request, api_path, post_json
from openai_descriptors.models.common import Usage, WireModel


class CompletionInput(WireModel):
    """Request for a text completion."""
    model: str
    prompt: Optional[Union[str, List[str]]] = None
    suffix: Optional[str] = None
    max_tokens: Optional[int] = Field(default=None, ge=0)
    temperature: Optional[float] = Field(default=None, ge=0, le=2)
    top_p: Optional[float] = Field(default=None, ge=0, le=1)
    n: Optional[int] = Field(default=None, ge=1)
    logprobs: Optional[int] = Field(default=None, ge=0, le=5)
    echo: Optional[bool] = None
    stop: Optional[List[str]] = None
    presence_penalty: Optional[float] = Field(default=None, ge=-2, le=2)
    frequency_penalty: Optional[float] = Field(default=None, ge=-2, le=2)
    best_of: Optional[int] = Field(default=None, ge=1)
    logit_bias: Optional[Dict[str, int]] = None
    user: Optional[str] = None


class Logprobs(WireModel):
    """Per-token log probabilities of a completion choice."""
    tokens: List[str]
    token_logprobs: List[Optional[StrictFloat]]
    top_logprobs: Optional[List[Optional[Dict[str, StrictFloat]]]]
    text_offset: List[StrictInt]


class CompletionChoice(WireModel):
    """One generated completion."""
    text: str
    index: StrictInt
    logprobs: Optional[Logprobs]
    finish_reason: Optional[str]


class CompletionOutput(WireModel):
    """Response for a text completion."""
    id: str
    object: str
    created: UnixTimestamp
    model: str
    choices: List[CompletionChoice]
    usage: Usage


def encode_input(input: CompletionInput) -> Dict[str, Any]:
    return object_without_absent(
        ("model", input.model),
        ("prompt", input.prompt),
        ("suffix", input.suffix),
        ("max_tokens", input.max_tokens),
        ("temperature", input.temperature),
        ("top_p", input.top_p),
        ("n", input.n),
        ("logprobs", input.logprobs),
        ("echo", input.echo),
        ("stop", input.stop),
        ("presence_penalty", input.presence_penalty),
        ("frequency_penalty", input.frequency_penalty),
        ("best_of", input.best_of),
        ("logit_bias", input.logit_bias),
        ("user", input.user),
    )


def decode_output(data: Any) -> CompletionOutput:
    return decode_model(CompletionOutput, data, "completion")


def create_completion(input: CompletionInput) -> Request[CompletionOutput]:
    """Describe a text completion request."""
    return post_json(api_path("completions"), encode_input(input), ExpectJson(decode_output))
