"""Domain layer exports."""

from .models import RecognitionConfig, RecognitionResult, RecognitionSegment
from .transcript_builder import (
    FAILURE_MARKER,
    NO_SPEECH_TEXT,
    TranscriptBuilder,
)

__all__ = [
    "RecognitionConfig",
    "RecognitionResult",
    "RecognitionSegment",
    "TranscriptBuilder",
    "FAILURE_MARKER",
    "NO_SPEECH_TEXT",
]
