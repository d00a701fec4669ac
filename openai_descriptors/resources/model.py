"""Models: ``GET /models`` and ``GET /models/{id}``."""
from typing import Any, List, Optional

from pydantic import StrictBool

from openai_descriptors.core.codec import UnixTimestamp, decode_list, decode_model
from openai_descriptors.core.request import ExpectJson, Request, api_path, get
from openai_descriptors.models.common import WireModel


class ModelPermission(WireModel):
    """What the organization may do with a model."""
    id: str
    object: str
    created: UnixTimestamp
    allow_create_engine: StrictBool
    allow_sampling: StrictBool
    allow_logprobs: StrictBool
    allow_search_indices: StrictBool
    allow_view: StrictBool
    allow_fine_tuning: StrictBool
    organization: str
    group: Optional[str]
    is_blocking: StrictBool


class Model(WireModel):
    """A model available to the organization."""
    id: str
    object: str
    created: UnixTimestamp
    owned_by: str
    permission: List[ModelPermission] = []
    root: Optional[str] = None
    parent: Optional[str] = None


def decode_model_info(data: Any) -> Model:
    return decode_model(Model, data, "model")


def decode_models(data: Any) -> List[Model]:
    return decode_list(Model, data, "model_list")


def list_models() -> Request[List[Model]]:
    """Describe a request listing every model."""
    return get(api_path("models"), ExpectJson(decode_models))


def retrieve_model(model_id: str) -> Request[Model]:
    """Describe a request for one model by id."""
    return get(api_path("models", model_id), ExpectJson(decode_model_info))
