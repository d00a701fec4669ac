"""Tests for edits."""
from openai_descriptors.resources.edits import EditInput, create_edit, decode_output, encode_input

from .conftest import json_response


def test_encode_omits_absent_input():
    edit_input = EditInput(model="text-davinci-edit-001", instruction="Fix the spelling mistakes")
    assert encode_input(edit_input) == {
        "model": "text-davinci-edit-001",
        "instruction": "Fix the spelling mistakes",
    }


def test_encode_full_input():
    edit_input = EditInput(
        model="code-davinci-edit-001",
        input="What day of the wek is it?",
        instruction="Fix the spelling mistakes",
        n=1,
        temperature=0.5,
        top_p=1,
    )
    assert encode_input(edit_input)["input"] == "What day of the wek is it?"
    assert encode_input(edit_input)["top_p"] == 1


def test_request_and_decode():
    payload = {
        "object": "edit",
        "created": 1589478378,
        "choices": [{"text": "What day of the week is it?", "index": 0}],
        "usage": {"prompt_tokens": 25, "completion_tokens": 32, "total_tokens": 57},
    }
    request = create_edit(EditInput(model="text-davinci-edit-001", instruction="x"))
    assert request.url == "/edits"
    output = request.parse(json_response(payload))
    assert output.choices[0].text == "What day of the week is it?"
    assert decode_output(payload) == output
