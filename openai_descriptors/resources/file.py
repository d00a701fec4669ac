"""Files: upload, list, retrieve, delete and download."""
import json
from enum import Enum
from typing import Any, List, Tuple, Union

from openai_descriptors.core.codec import decode_list, decode_model
from openai_descriptors.core.request import (
    BytesPart,
    ExpectBytes,
    ExpectJson,
    Part,
    Request,
    StringPart,
    api_path,
    delete,
    get,
    post_multipart,
)
from openai_descriptors.models.common import (
    Blob,
    DeleteOutput,
    File,
    Upload,
    WireModel,
    decode_blob,
    decode_delete_output,
)


class FilePurpose(Enum):
    """Why a file is uploaded."""
    FINE_TUNE = "fine-tune"


class PromptCompletion(WireModel):
    """One training example."""
    prompt: str
    completion: str


class FileUploadInput(WireModel):
    """Training examples or a prepared file to upload.

    A list of examples is sent as a ``prompt`` form field holding a JSON
    array; an ``Upload`` is sent as raw content in a ``file`` part.
    """
    file: Union[List[PromptCompletion], Upload]
    purpose: FilePurpose = FilePurpose.FINE_TUNE


def encode_examples(examples: List[PromptCompletion]) -> str:
    return json.dumps(
        [{"prompt": example.prompt, "completion": example.completion} for example in examples],
        separators=(",", ":"),
    )


def encode_input(input: FileUploadInput) -> Tuple[Part, ...]:
    """Build the form parts, with the file content last."""
    purpose = StringPart("purpose", input.purpose.value)
    if isinstance(input.file, Upload):
        content: Part = BytesPart(
            "file",
            input.file.filename,
            input.file.content_type,
            input.file.data,
        )
    else:
        content = StringPart("prompt", encode_examples(input.file))
    return (purpose, content)


def decode_file(data: Any) -> File:
    return decode_model(File, data, "file")


def decode_files(data: Any) -> List[File]:
    return decode_list(File, data, "file_list")


def list_files() -> Request[List[File]]:
    """Describe a request listing the organization's files."""
    return get(api_path("files"), ExpectJson(decode_files))


def upload_file(input: FileUploadInput) -> Request[File]:
    """Describe a multipart upload of training data."""
    return post_multipart(api_path("files"), encode_input(input), ExpectJson(decode_file))


def retrieve_file(file_id: str) -> Request[File]:
    """Describe a request for one file's metadata."""
    return get(api_path("files", file_id), ExpectJson(decode_file))


def delete_file(file_id: str) -> Request[DeleteOutput]:
    """Describe deletion of an uploaded file."""
    return delete(api_path("files", file_id), ExpectJson(decode_delete_output))


def retrieve_file_content(file_id: str) -> Request[Blob]:
    """Describe a download of a file's content as bytes."""
    return get(api_path("files", file_id, "content"), ExpectBytes(decode_blob))
