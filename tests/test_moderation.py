"""Tests for moderation."""
import pytest

from openai_descriptors.errors import DecodeError
from openai_descriptors.resources.moderation import (
    ModerationInput,
    ModerationModel,
    create_moderation,
    decode_output,
    encode_input,
)

from .conftest import json_response

CATEGORIES = {
    "hate": False,
    "hate/threatening": True,
    "self-harm": False,
    "sexual": False,
    "sexual/minors": False,
    "violence": True,
    "violence/graphic": False,
}

SCORES = {
    "hate": 0.18805529177188873,
    "hate/threatening": 0.0001250059431185946,
    "self-harm": 0.0003706029092427343,
    "sexual": 0.0008735615410842001,
    "sexual/minors": 0.0007470346172340214,
    "violence": 0.9971599578857422,
    "violence/graphic": 0.000005808573169633746,
}

OUTPUT = {
    "id": "modr-5MWoLO",
    "model": "text-moderation-001",
    "results": [{"categories": CATEGORIES, "category_scores": SCORES, "flagged": True}],
}


def test_encode_omits_absent_model():
    assert encode_input(ModerationInput(input="I want to kill them.")) == {"input": "I want to kill them."}


@pytest.mark.parametrize(
    "model, wire",
    [(ModerationModel.STABLE, "text-moderation-stable"), (ModerationModel.LATEST, "text-moderation-latest")],
)
def test_encode_model_table(model, wire):
    assert encode_input(ModerationInput(input=["a", "b"], model=model)) == {"input": ["a", "b"], "model": wire}


def test_category_keys_are_renamed_explicitly():
    """Slashes and hyphens in wire keys map to underscored fields."""
    output = create_moderation(ModerationInput(input="x")).parse(json_response(OUTPUT))
    categories = output.results[0].categories
    assert categories.hate is False
    assert categories.hate_threatening is True
    assert categories.self_harm is False
    assert categories.sexual is False
    assert categories.sexual_minors is False
    assert categories.violence is True
    assert categories.violence_graphic is False

    scores = output.results[0].category_scores
    assert scores.violence == pytest.approx(0.9971599578857422)
    assert scores.self_harm == pytest.approx(0.0003706029092427343)


def test_request_descriptor():
    request = create_moderation(ModerationInput(input="x"))
    assert (request.method, request.url) == ("POST", "/moderations")


def test_missing_category_fails():
    categories = {key: value for key, value in CATEGORIES.items() if key != "sexual/minors"}
    broken = {**OUTPUT, "results": [{"categories": categories, "category_scores": SCORES, "flagged": True}]}
    with pytest.raises(DecodeError, match="sexual/minors"):
        decode_output(broken)


@pytest.mark.parametrize("flagged", ["off", 0, "yes"])
def test_flagged_is_not_coerced(flagged):
    broken = {**OUTPUT, "results": [{"categories": CATEGORIES, "category_scores": SCORES, "flagged": flagged}]}
    with pytest.raises(DecodeError, match="flagged"):
        decode_output(broken)


def test_category_values_are_not_coerced():
    categories = {**CATEGORIES, "violence": "yes"}
    scores = {**SCORES, "hate": "0.1"}
    broken = {**OUTPUT, "results": [{"categories": categories, "category_scores": scores, "flagged": True}]}
    with pytest.raises(DecodeError) as info:
        decode_output(broken)
    assert "violence" in str(info.value)
    assert "hate" in str(info.value)
