"""Abstract interface for transcription record persistence."""

from abc import ABC, abstractmethod

from transcription_common.db_models import TranscriptionRecord


class TranscriptionRecordStore(ABC):
    """Abstract base class for durable transcription record storage."""

    @abstractmethod
    def append(self, record: TranscriptionRecord) -> TranscriptionRecord:
        """
        Persists a record.

        Returns:
            The stored record with its id and timestamp assigned.

        Raises:
            PersistenceError: If the storage engine is unreachable.
        """

    @abstractmethod
    def recent(self, limit: int) -> list[TranscriptionRecord]:
        """
        Returns up to ``limit`` records, newest first.

        Records sharing a timestamp are ordered by insertion, newest first.

        Raises:
            PersistenceError: If the storage engine is unreachable.
        """
