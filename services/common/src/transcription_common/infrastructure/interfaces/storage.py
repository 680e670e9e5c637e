"""Abstract interface for ephemeral audio storage."""

from abc import ABC, abstractmethod

from transcription_common.models import TemporaryAudioHandle


class TemporaryAudioStore(ABC):
    """Abstract base class for ephemeral audio storage backends."""

    @abstractmethod
    def store(self, data: bytes, original_name: str) -> TemporaryAudioHandle:
        """
        Persists an audio payload to ephemeral storage.

        The size limit is checked before anything is written.

        Args:
            data: Raw audio bytes.
            original_name: Filename as submitted by the client.

        Returns:
            A handle referencing the stored payload.

        Raises:
            CapacityError: If the payload exceeds the configured maximum.
            StorageError: If the write fails.
        """

    @abstractmethod
    def read(self, handle: TemporaryAudioHandle) -> bytes:
        """
        Reads a stored payload back.

        Raises:
            StorageError: If the payload cannot be read.
        """

    @abstractmethod
    def delete(self, handle: TemporaryAudioHandle) -> None:
        """
        Removes a stored payload.

        Deleting a handle that is already gone is a no-op.

        Raises:
            StorageError: If the backend refuses the removal.
        """

    @abstractmethod
    def exists(self, handle: TemporaryAudioHandle) -> bool:
        """Returns whether the payload behind the handle is still stored."""
