"""Tests for request descriptor values."""
import pytest

from openai_descriptors.core.request import (
    EmptyBody,
    ExpectBytes,
    ExpectJson,
    ExpectText,
    JsonBody,
    RawResponse,
    Request,
    api_path,
    get,
    post_json,
)
from openai_descriptors.errors import DecodeError


def test_api_path_joins_and_quotes_segments():
    assert api_path("fine-tunes", "ft-1", "cancel") == "/fine-tunes/ft-1/cancel"
    assert api_path("models", "curie:ft-acme/x") == "/models/curie%3Aft-acme%2Fx"


def test_get_has_no_body_or_headers():
    request = get("/models", ExpectJson(lambda value: value))
    assert request.method == "GET"
    assert request.body == EmptyBody()
    assert request.headers == ()
    assert request.timeout is None


def test_post_json_carries_value():
    request = post_json("/edits", {"model": "m"}, ExpectJson(lambda value: value))
    assert request.body == JsonBody({"model": "m"})


def test_parse_runs_json_decoder():
    request = Request(method="GET", url="/x", expect=ExpectJson(lambda value: value["n"]))
    assert request.parse(RawResponse(body=b'{"n": 3}')) == 3


def test_invalid_json_body_is_a_decode_error():
    expect = ExpectJson(lambda value: value)
    with pytest.raises(DecodeError) as info:
        expect.parse(RawResponse(body=b"<html>"))
    assert info.value.decoder == "json"


def test_expect_text_and_bytes():
    raw = RawResponse(body="1\n00:00:00,000 --> 00:00:01,000\nhi".encode("utf-8"))
    assert ExpectText(lambda text: text.splitlines()[0]).parse(raw) == "1"
    assert ExpectBytes(lambda response: len(response.body)).parse(raw) == len(raw.body)


def test_header_lookup_ignores_case():
    raw = RawResponse(body=b"", headers=(("Content-Type", "text/plain"),))
    assert raw.header("content-type") == "text/plain"
    assert raw.header("X-Missing") is None


def test_json_body_cannot_be_mutated():
    body = JsonBody({"model": "m", "stop": ["\n"], "logit_bias": {"50256": -100}})
    with pytest.raises(TypeError):
        body.value["model"] = "other"
    with pytest.raises(TypeError):
        body.value["logit_bias"]["50256"] = 0
    assert body.value["stop"] == ("\n",)


def test_json_body_is_detached_from_the_source_dict():
    source = {"model": "m", "stop": ["\n"]}
    request = post_json("/completions", source, ExpectJson(lambda value: value))
    source["model"] = "other"
    source["stop"].append("END")
    assert request.body.to_json() == {"model": "m", "stop": ["\n"]}


def test_json_body_to_json_returns_plain_containers():
    body = JsonBody({"messages": [{"role": "user", "content": "Hi"}]})
    value = body.to_json()
    assert type(value) is dict
    assert type(value["messages"]) is list
    assert type(value["messages"][0]) is dict
    value["messages"].clear()
    assert len(body.value["messages"]) == 1
