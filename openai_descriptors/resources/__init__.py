"""One module per API resource."""
from . import audio, chat, completion, edits, embeddings, file, fine_tune, image, model, moderation

__all__ = [
    "audio",
    "chat",
    "completion",
    "edits",
    "embeddings",
    "file",
    "fine_tune",
    "image",
    "model",
    "moderation",
]
