"""Tests for model listing."""
import pytest

from openai_descriptors.errors import DecodeError
from openai_descriptors.resources.model import decode_model_info, list_models, retrieve_model

from .conftest import json_response

MODEL = {
    "id": "text-davinci-003",
    "object": "model",
    "created": 1669599635,
    "owned_by": "openai-internal",
    "permission": [
        {
            "id": "modelperm-1",
            "object": "model_permission",
            "created": 1690864883,
            "allow_create_engine": False,
            "allow_sampling": True,
            "allow_logprobs": True,
            "allow_search_indices": False,
            "allow_view": True,
            "allow_fine_tuning": False,
            "organization": "*",
            "group": None,
            "is_blocking": False,
        }
    ],
    "root": "text-davinci-003",
    "parent": None,
}


def test_list_models():
    request = list_models()
    assert (request.method, request.url) == ("GET", "/models")
    models = request.parse(json_response({"object": "list", "data": [MODEL]}))
    assert models[0].id == "text-davinci-003"
    assert models[0].permission[0].allow_sampling is True


def test_retrieve_model():
    request = retrieve_model("text-davinci-003")
    assert request.url == "/models/text-davinci-003"
    assert request.parse(json_response(MODEL)).root == "text-davinci-003"


def test_model_without_permissions():
    minimal = {"id": "gpt-4", "object": "model", "created": 1687882411, "owned_by": "openai"}
    assert decode_model_info(minimal).permission == []


def test_missing_owner_fails():
    broken = {key: value for key, value in MODEL.items() if key != "owned_by"}
    with pytest.raises(DecodeError, match="owned_by"):
        decode_model_info(broken)
