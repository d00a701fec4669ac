"""Fine-tuning jobs: ``/fine-tunes`` and fine-tuned model deletion."""
from enum import Enum
from typing import Annotated, Any, Dict, List, Optional, Union

from pydantic import Field, PlainValidator, StrictFloat, StrictInt

from openai_descriptors.core.codec import (
    UnixTimestamp,
    decode_list,
    decode_model,
    object_without_absent,
)
from openai_descriptors.core.request import (
    ExpectJson,
    Request,
    api_path,
    delete,
    get,
    post,
    post_json,
)
from openai_descriptors.models.common import DeleteOutput, File, WireModel, decode_delete_output


class FineTuneStatus(Enum):
    """Known fine-tune job states."""
    PENDING = "pending"
    SUCCEEDED = "succeeded"
    CANCELLED = "cancelled"


# Statuses outside the known set are kept as the raw string.
FineTuneStatusValue = Union[FineTuneStatus, str]


def decode_status(value: Any) -> FineTuneStatusValue:
    if not isinstance(value, str):
        raise ValueError("expected a status string")
    try:
        return FineTuneStatus(value)
    except ValueError:
        return value


class FineTuneInput(WireModel):
    """Request to start a fine-tuning job."""
    training_file: str
    validation_file: Optional[str] = None
    model: Optional[str] = None
    n_epochs: Optional[int] = Field(default=None, ge=1)
    batch_size: Optional[int] = Field(default=None, ge=1)
    learning_rate_multiplier: Optional[float] = Field(default=None, gt=0)
    prompt_loss_weight: Optional[float] = Field(default=None, ge=0)
    compute_classification_metrics: Optional[bool] = None
    classification_n_classes: Optional[int] = Field(default=None, ge=1)
    classification_positive_class: Optional[str] = None
    classification_betas: Optional[List[float]] = None
    suffix: Optional[str] = Field(default=None, max_length=40)


class FineTuneEvent(WireModel):
    """A progress message from a fine-tune job."""
    object: str
    created_at: UnixTimestamp
    level: str
    message: str


class Hyperparams(WireModel):
    """Training hyperparameters; batch size and rate are unset until the job runs."""
    batch_size: Optional[StrictInt] = None
    learning_rate_multiplier: Optional[StrictFloat] = None
    n_epochs: StrictInt
    prompt_loss_weight: StrictFloat


class FineTune(WireModel):
    """A fine-tuning job."""
    id: str
    object: str
    model: str
    created_at: UnixTimestamp
    updated_at: UnixTimestamp
    # only present when a single job is retrieved
    events: List[FineTuneEvent] = []
    fine_tuned_model: Optional[str]
    hyperparams: Hyperparams
    organization_id: str
    result_files: List[File]
    status: Annotated[FineTuneStatusValue, PlainValidator(decode_status)]
    validation_files: List[File]
    training_files: List[File]


def encode_input(input: FineTuneInput) -> Dict[str, Any]:
    return object_without_absent(
        ("training_file", input.training_file),
        ("validation_file", input.validation_file),
        ("model", input.model),
        ("n_epochs", input.n_epochs),
        ("batch_size", input.batch_size),
        ("learning_rate_multiplier", input.learning_rate_multiplier),
        ("prompt_loss_weight", input.prompt_loss_weight),
        ("compute_classification_metrics", input.compute_classification_metrics),
        ("classification_n_classes", input.classification_n_classes),
        ("classification_positive_class", input.classification_positive_class),
        ("classification_betas", input.classification_betas),
        ("suffix", input.suffix),
    )


def decode_fine_tune(data: Any) -> FineTune:
    return decode_model(FineTune, data, "fine_tune")


def decode_fine_tunes(data: Any) -> List[FineTune]:
    return decode_list(FineTune, data, "fine_tune_list")


def decode_events(data: Any) -> List[FineTuneEvent]:
    return decode_list(FineTuneEvent, data, "fine_tune_events")


def create_fine_tune(input: FineTuneInput) -> Request[FineTune]:
    """Describe a request that starts a fine-tuning job."""
    return post_json(api_path("fine-tunes"), encode_input(input), ExpectJson(decode_fine_tune))


def list_fine_tunes() -> Request[List[FineTune]]:
    """Describe a request listing the organization's fine-tune jobs."""
    return get(api_path("fine-tunes"), ExpectJson(decode_fine_tunes))


def retrieve_fine_tune(fine_tune_id: str) -> Request[FineTune]:
    """Describe a request for one fine-tune job, events included."""
    return get(api_path("fine-tunes", fine_tune_id), ExpectJson(decode_fine_tune))


def cancel_fine_tune(fine_tune_id: str) -> Request[FineTune]:
    """Describe cancellation of a running fine-tune job."""
    return post(api_path("fine-tunes", fine_tune_id, "cancel"), ExpectJson(decode_fine_tune))


def list_fine_tune_events(fine_tune_id: str) -> Request[List[FineTuneEvent]]:
    """Describe a request for the events of a fine-tune job."""
    return get(api_path("fine-tunes", fine_tune_id, "events"), ExpectJson(decode_events))


def delete_fine_tune_model(model: str) -> Request[DeleteOutput]:
    """Describe deletion of a fine-tuned model owned by the organization."""
    return delete(api_path("models", model), ExpectJson(decode_delete_output))
