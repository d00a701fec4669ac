"""Audio transcription and translation."""
import json
from enum import Enum
from typing import Any, List, Optional, Tuple

from pydantic import Field, StrictFloat, StrictInt

from openai_descriptors.core.codec import decode_model, map_optional
from openai_descriptors.core.request import (
    BytesPart,
    ExpectJson,
    ExpectText,
    Part,
    Request,
    StringPart,
    api_path,
    post_multipart,
)
from openai_descriptors.models.common import Upload, WireModel

WHISPER_1 = "whisper-1"


class AudioResponseFormat(Enum):
    """Output format of a transcription or translation."""
    JSON = "json"
    TEXT = "text"
    SRT = "srt"
    VERBOSE_JSON = "verbose_json"
    VTT = "vtt"


JSON_FORMATS = (AudioResponseFormat.JSON, AudioResponseFormat.VERBOSE_JSON)


class TranscriptionInput(WireModel):
    """Request to transcribe audio in its spoken language."""
    file: Upload
    model: str = WHISPER_1
    prompt: Optional[str] = None
    response_format: Optional[AudioResponseFormat] = None
    temperature: Optional[float] = Field(default=None, ge=0, le=1)
    language: Optional[str] = None


class TranslationInput(WireModel):
    """Request to transcribe audio into English."""
    file: Upload
    model: str = WHISPER_1
    prompt: Optional[str] = None
    response_format: Optional[AudioResponseFormat] = None
    temperature: Optional[float] = Field(default=None, ge=0, le=1)


class Segment(WireModel):
    """A timed stretch of verbose JSON output."""
    id: StrictInt
    seek: StrictInt
    start: StrictFloat
    end: StrictFloat
    text: str
    tokens: List[StrictInt]
    temperature: StrictFloat
    avg_logprob: StrictFloat
    compression_ratio: StrictFloat
    no_speech_prob: StrictFloat


class AudioOutput(WireModel):
    """Transcribed text; verbose JSON adds language, duration and segments."""
    text: str
    language: Optional[str] = None
    duration: Optional[StrictFloat] = None
    segments: Optional[List[Segment]] = None


def _parts(
    input_file: Upload,
    *fields: Tuple[str, Optional[str]],
) -> Tuple[Part, ...]:
    parts: List[Part] = [StringPart(name, value) for name, value in fields if value is not None]
    parts.append(BytesPart("file", input_file.filename, input_file.content_type, input_file.data))
    return tuple(parts)


def _format_value(response_format: Optional[AudioResponseFormat]) -> Optional[str]:
    return map_optional(lambda member: member.value, response_format)


def encode_transcription(input: TranscriptionInput) -> Tuple[Part, ...]:
    """Build the form parts, with the audio file last."""
    return _parts(
        input.file,
        ("model", input.model),
        ("prompt", input.prompt),
        ("response_format", _format_value(input.response_format)),
        ("temperature", map_optional(json.dumps, input.temperature)),
        ("language", input.language),
    )


def encode_translation(input: TranslationInput) -> Tuple[Part, ...]:
    return _parts(
        input.file,
        ("model", input.model),
        ("prompt", input.prompt),
        ("response_format", _format_value(input.response_format)),
        ("temperature", map_optional(json.dumps, input.temperature)),
    )


def decode_output(data: Any) -> AudioOutput:
    return decode_model(AudioOutput, data, "audio")


def decode_text(text: str) -> AudioOutput:
    return AudioOutput(text=text)


def _expect(response_format: Optional[AudioResponseFormat]):
    # text, srt and vtt come back as a plain body rather than JSON
    if response_format is None or response_format in JSON_FORMATS:
        return ExpectJson(decode_output)
    return ExpectText(decode_text)


def create_transcription(input: TranscriptionInput) -> Request[AudioOutput]:
    """Describe a transcription request."""
    return post_multipart(
        api_path("audio", "transcriptions"),
        encode_transcription(input),
        _expect(input.response_format),
    )


def create_translation(input: TranslationInput) -> Request[AudioOutput]:
    """Describe a translation request."""
    return post_multipart(
        api_path("audio", "translations"),
        encode_translation(input),
        _expect(input.response_format),
    )
