"""Embeddings: ``POST /embeddings``."""
from typing import Any, Dict, List, Optional, Union

from pydantic import Field, StrictFloat, StrictInt

from openai_descriptors.core.codec import decode_model, object_without_absent
from openai_descriptors.core.request import ExpectJson, Request, api_path, post_json
from openai_descriptors.models.common import WireModel


class EmbeddingsInput(WireModel):
    """Request for embeddings of one text or a batch of texts."""
    model: str
    input: Union[str, List[str]]
    user: Optional[str] = None


class Embedding(WireModel):
    """The vector for one input, at its position in the batch."""
    object: str
    embedding: List[StrictFloat]
    index: StrictInt


class EmbeddingsUsage(WireModel):
    """Token usage of an embeddings call; there are no completion tokens."""
    prompt_tokens: StrictInt = Field(ge=0)
    total_tokens: StrictInt = Field(ge=0)


class EmbeddingsOutput(WireModel):
    """Response for an embeddings request."""
    object: str
    data: List[Embedding]
    model: str
    usage: EmbeddingsUsage


def encode_input(input: EmbeddingsInput) -> Dict[str, Any]:
    return object_without_absent(
        ("model", input.model),
        ("input", input.input),
        ("user", input.user),
    )


def decode_output(data: Any) -> EmbeddingsOutput:
    return decode_model(EmbeddingsOutput, data, "embeddings")


def create_embeddings(input: EmbeddingsInput) -> Request[EmbeddingsOutput]:
    """Describe an embeddings request."""
    return post_json(api_path("embeddings"), encode_input(input), ExpectJson(decode_output))
