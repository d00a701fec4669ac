"""Tests for audio transcription and translation."""
from openai_descriptors.core.request import BytesPart, ExpectJson, ExpectText, RawResponse, StringPart
from openai_descriptors.models.common import Upload
from openai_descriptors.resources.audio import (
    AudioOutput,
    AudioResponseFormat,
    TranscriptionInput,
    TranslationInput,
    create_transcription,
    create_translation,
)

from .conftest import json_response

AUDIO = Upload(filename="german.m4a", data=b"\x00\x00\x00 ftypM4A", content_type="audio/m4a")


def test_transcription_parts():
    request = create_transcription(
        TranscriptionInput(
            file=AUDIO,
            prompt="Guten Tag",
            response_format=AudioResponseFormat.VERBOSE_JSON,
            temperature=0.2,
            language="de",
        )
    )
    assert (request.method, request.url) == ("POST", "/audio/transcriptions")
    assert request.body.parts == (
        StringPart("model", "whisper-1"),
        StringPart("prompt", "Guten Tag"),
        StringPart("response_format", "verbose_json"),
        StringPart("temperature", "0.2"),
        StringPart("language", "de"),
        BytesPart("file", "german.m4a", "audio/m4a", b"\x00\x00\x00 ftypM4A"),
    )


def test_translation_parts_omit_unset_fields():
    request = create_translation(TranslationInput(file=AUDIO))
    assert request.url == "/audio/translations"
    assert [part.name for part in request.body.parts] == ["model", "file"]
    assert isinstance(request.expect, ExpectJson)


def test_json_output():
    request = create_translation(TranslationInput(file=AUDIO))
    output = request.parse(json_response({"text": "Hello, my name is Wolfgang."}))
    assert output == AudioOutput(text="Hello, my name is Wolfgang.")


def test_verbose_json_output():
    payload = {
        "task": "transcribe",
        "language": "german",
        "duration": 2.95,
        "text": "Hallo",
        "segments": [
            {
                "id": 0,
                "seek": 0,
                "start": 0.0,
                "end": 2.0,
                "text": " Hallo",
                "tokens": [50364, 2425],
                "temperature": 0.0,
                "avg_logprob": -0.45,
                "compression_ratio": 0.6,
                "no_speech_prob": 0.1,
            }
        ],
    }
    request = create_transcription(TranscriptionInput(file=AUDIO, response_format=AudioResponseFormat.VERBOSE_JSON))
    output = request.parse(json_response(payload))
    assert output.language == "german"
    assert output.segments[0].tokens == [50364, 2425]


def test_plain_text_formats_read_the_body():
    for response_format in (AudioResponseFormat.TEXT, AudioResponseFormat.SRT, AudioResponseFormat.VTT):
        request = create_transcription(TranscriptionInput(file=AUDIO, response_format=response_format))
        assert isinstance(request.expect, ExpectText)
        output = request.parse(RawResponse(body=b"WEBVTT\n\n00:00.000 --> 00:02.000\nHallo"))
        assert output.text.startswith("WEBVTT")
        assert output.segments is None
