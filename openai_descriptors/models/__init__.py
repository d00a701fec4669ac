"""Data models shared by the resource modules."""
from .common import (
    Blob,
    DeleteOutput,
    File,
    Upload,
    Usage,
    WireModel,
    decode_blob,
    decode_delete_output,
)

__all__ = [
    "Blob",
    "DeleteOutput",
    "File",
    "Upload",
    "Usage",
    "WireModel",
    "decode_blob",
    "decode_delete_output",
]
