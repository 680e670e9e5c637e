from transcription_common.config import DatabaseConfig, MinioConfig
from transcription_common.db_models import TranscriptionRecord
from transcription_common.exceptions import (
    CapacityError,
    PersistenceError,
    StorageError,
)
from transcription_common.logging import setup_logging
from transcription_common.models import TemporaryAudioHandle

__all__ = [
    "setup_logging",
    "CapacityError",
    "PersistenceError",
    "StorageError",
    "DatabaseConfig",
    "MinioConfig",
    "TemporaryAudioHandle",
    "TranscriptionRecord",
]
