from transcription_common.infrastructure.interfaces import (
    TemporaryAudioStore,
    TranscriptionRecordStore,
)

__all__ = ["TemporaryAudioStore", "TranscriptionRecordStore"]
