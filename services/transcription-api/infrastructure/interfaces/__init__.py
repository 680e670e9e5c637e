"""Infrastructure interface exports."""

from transcription_common.infrastructure.interfaces import (
    TemporaryAudioStore,
    TranscriptionRecordStore,
)

from .recognition_client import RecognitionClient

__all__ = ["RecognitionClient", "TemporaryAudioStore", "TranscriptionRecordStore"]
