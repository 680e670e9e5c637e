"""Domain models for the transcription service."""

from pydantic import BaseModel, Field


class RecognitionConfig(BaseModel, frozen=True):
    """Encoding parameters sent to the speech service with the audio."""

    encoding: str = "LINEAR16"
    sample_rate_hertz: int = Field(default=16000, gt=0)
    language_code: str = "en-US"


class RecognitionSegment(BaseModel, frozen=True):
    """One recognized stretch of audio with its candidate transcripts, best first."""

    alternatives: list[str] = Field(min_length=1)


class RecognitionResult(BaseModel, frozen=True):
    """Ordered recognition output. No segments means no speech was detected."""

    segments: list[RecognitionSegment] = []
