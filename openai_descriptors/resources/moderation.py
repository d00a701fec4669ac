"""Moderation: ``POST /moderations``."""
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import Field, StrictBool, StrictFloat

from openai_descriptors.core.codec import decode_model, map_optional, object_without_absent
from openai_descriptors.core.request import ExpectJson, Request, api_path, post_json
from openai_descriptors.models.common import WireModel


class ModerationModel(Enum):
    """Moderation classifier to use."""
    STABLE = "text-moderation-stable"
    LATEST = "text-moderation-latest"


class ModerationInput(WireModel):
    """Request to classify one text or a batch of texts."""
    input: Union[str, List[str]]
    model: Optional[ModerationModel] = None


# Wire keys are not identifiers, so each one is bound explicitly.
class Categories(WireModel):
    """Whether each category was flagged."""
    hate: StrictBool = Field(alias="hate")
    hate_threatening: StrictBool = Field(alias="hate/threatening")
    self_harm: StrictBool = Field(alias="self-harm")
    sexual: StrictBool = Field(alias="sexual")
    sexual_minors: StrictBool = Field(alias="sexual/minors")
    violence: StrictBool = Field(alias="violence")
    violence_graphic: StrictBool = Field(alias="violence/graphic")


class CategoryScores(WireModel):
    """Model confidence for each category."""
    hate: StrictFloat = Field(alias="hate")
    hate_threatening: StrictFloat = Field(alias="hate/threatening")
    self_harm: StrictFloat = Field(alias="self-harm")
    sexual: StrictFloat = Field(alias="sexual")
    sexual_minors: StrictFloat = Field(alias="sexual/minors")
    violence: StrictFloat = Field(alias="violence")
    violence_graphic: StrictFloat = Field(alias="violence/graphic")


class ModerationResult(WireModel):
    """Classification of one input text."""
    flagged: StrictBool
    categories: Categories
    category_scores: CategoryScores


class ModerationOutput(WireModel):
    """Response for a moderation request."""
    id: str
    model: str
    results: List[ModerationResult]


def encode_input(input: ModerationInput) -> Dict[str, Any]:
    return object_without_absent(
        ("input", input.input),
        ("model", map_optional(lambda model: model.value, input.model)),
    )


def decode_output(data: Any) -> ModerationOutput:
    return decode_model(ModerationOutput, data, "moderation")


def create_moderation(input: ModerationInput) -> Request[ModerationOutput]:
    """Describe a moderation request."""
    return post_json(api_path("moderations"), encode_input(input), ExpectJson(decode_output))
