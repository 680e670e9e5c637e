from transcription_common.infrastructure.interfaces.record_store import (
    TranscriptionRecordStore,
)
from transcription_common.infrastructure.interfaces.storage import TemporaryAudioStore

__all__ = [
    "TemporaryAudioStore",
    "TranscriptionRecordStore",
]
