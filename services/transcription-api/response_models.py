"""Response models for the transcription API."""

from datetime import datetime

from pydantic import BaseModel, Field
from transcription_common import TranscriptionRecord


class TranscriptionResponse(BaseModel):
    """Response returned after a successful transcription."""

    transcription: str


class ErrorResponse(BaseModel):
    """Error body returned for rejected or failed requests."""

    error: str
    details: str | None = None


class HistoryEntry(BaseModel):
    """A single persisted transcription attempt."""

    audio_name: str = Field(serialization_alias="audioName")
    transcription: str
    date: datetime

    @classmethod
    def from_record(cls, record: TranscriptionRecord) -> "HistoryEntry":
        return cls(
            audio_name=record.audio_name,
            transcription=record.transcription_text,
            date=record.created_at,
        )
