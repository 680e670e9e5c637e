"""Shared value models passed between the service and its infrastructure."""

from pydantic import BaseModel, Field


class TemporaryAudioHandle(BaseModel, frozen=True):
    """Opaque reference to an audio payload held in ephemeral storage."""

    location: str
    original_name: str
    size_bytes: int = Field(ge=0)
