"""Chat completions: ``POST /chat/completions``."""
from enum import Enum
from typing import Annotated, Any, Dict, List, Optional, Union

from pydantic import Field, PlainValidator, StrictInt

from openai_descriptors.core.codec import UnixTimestamp, decode_model, object_without_absent
from openai_descriptors.core.request import ExpectJson, Request, api_path, post_json
from openai_descriptors.models.common import Usage, WireModel


class ChatModel(Enum):
    """Chat models known by name."""
    GPT_3_5_TURBO = "gpt-3.5-turbo"
    GPT_3_5_TURBO_0301 = "gpt-3.5-turbo-0301"
    GPT_4 = "gpt-4"
    GPT_4_0314 = "gpt-4-0314"
    GPT_4_32K = "gpt-4-32k"
    GPT_4_32K_0314 = "gpt-4-32k-0314"


# A known model, or any other name (fine-tuned or newly released models).
ChatModelId = Union[ChatModel, str]


def encode_chat_model(model: ChatModelId) -> str:
    if isinstance(model, ChatModel):
        return model.value
    return model


def decode_chat_model(value: Any) -> ChatModelId:
    """Map a known model name to its enum member and keep anything else raw."""
    if not isinstance(value, str):
        raise ValueError("expected a model name string")
    try:
        return ChatModel(value)
    except ValueError:
        return value


class Role(Enum):
    """Author of a chat message."""
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class ChatMessage(WireModel):
    """A chat message."""
    role: Role
    content: str
    name: Optional[str] = None


class ChatInput(WireModel):
    """Request for a chat completion."""
    model: ChatModelId
    messages: List[ChatMessage]
    temperature: Optional[float] = Field(default=None, ge=0, le=2)
    top_p: Optional[float] = Field(default=None, ge=0, le=1)
    n: Optional[int] = Field(default=None, ge=1)
    stop: Optional[List[str]] = None
    max_tokens: Optional[int] = Field(default=None, ge=1)
    presence_penalty: Optional[float] = Field(default=None, ge=-2, le=2)
    frequency_penalty: Optional[float] = Field(default=None, ge=-2, le=2)
    logit_bias: Optional[Dict[str, int]] = None
    user: Optional[str] = None


class ChatChoice(WireModel):
    """A chat completion choice."""
    index: StrictInt
    message: ChatMessage
    finish_reason: Optional[str]


class ChatOutput(WireModel):
    """Response for a chat completion."""
    id: str
    object: str
    created: UnixTimestamp
    model: Annotated[ChatModelId, PlainValidator(decode_chat_model)]
    choices: List[ChatChoice]
    usage: Usage


def encode_message(message: ChatMessage) -> Dict[str, Any]:
    return object_without_absent(
        ("role", message.role.value),
        ("content", message.content),
        ("name", message.name),
    )


def encode_input(input: ChatInput) -> Dict[str, Any]:
    return object_without_absent(
        ("model", encode_chat_model(input.model)),
        ("messages", [encode_message(message) for message in input.messages]),
        ("temperature", input.temperature),
        ("top_p", input.top_p),
        ("n", input.n),
        ("stop", input.stop),
        ("max_tokens", input.max_tokens),
        ("presence_penalty", input.presence_penalty),
        ("frequency_penalty", input.frequency_penalty),
        ("logit_bias", input.logit_bias),
        ("user", input.user),
    )


def decode_output(data: Any) -> ChatOutput:
    return decode_model(ChatOutput, data, "chat")


def create_chat_completion(input: ChatInput) -> Request[ChatOutput]:
    """Describe a chat completion request."""
    return post_json(api_path("chat", "completions"), encode_input(input), ExpectJson(decode_output))
