"""Shared fixtures."""
import json
from typing import Any

import pytest

from openai_descriptors.config import Config
from openai_descriptors.core.request import RawResponse


@pytest.fixture
def config() -> Config:
    return Config(organization_id="org-1", api_key="sk-1")


def json_response(value: Any) -> RawResponse:
    """Wrap a JSON value the way a server would send it."""
    return RawResponse(
        body=json.dumps(value).encode("utf-8"),
        headers=(("Content-Type", "application/json"),),
    )


USAGE = {"prompt_tokens": 9, "completion_tokens": 12, "total_tokens": 21}

TRAINING_FILE = {
    "id": "file-XGinujblHPwGLSztz8cPS8XY",
    "object": "file",
    "bytes": 1547276,
    "created_at": 1610062281,
    "filename": "my-data-train.jsonl",
    "purpose": "fine-tune",
}
