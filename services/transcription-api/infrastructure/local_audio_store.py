"""Local filesystem implementation of the TemporaryAudioStore interface."""

from pathlib import Path

from transcription_common import (
    CapacityError,
    StorageError,
    TemporaryAudioHandle,
    setup_logging,
)
from transcription_common.infrastructure import TemporaryAudioStore

from utils import temporary_object_name

logger = setup_logging()


class LocalTemporaryAudioStore(TemporaryAudioStore):
    """Keeps uploaded audio in a scratch directory on local disk."""

    def __init__(self, directory: str | Path, max_bytes: int):
        self._directory = Path(directory)
        self._max_bytes = max_bytes

    def ensure_directory_exists(self) -> None:
        self._directory.mkdir(parents=True, exist_ok=True)
        logger.info("Upload directory ready", extra={"directory": str(self._directory)})

    def store(self, data: bytes, original_name: str) -> TemporaryAudioHandle:
        if len(data) > self._max_bytes:
            raise CapacityError(len(data), self._max_bytes)

        path = self._directory / temporary_object_name(original_name)
        try:
            with open(path, "xb") as audio_file:
                audio_file.write(data)
        except OSError as e:
            logger.exception(
                "Temporary audio write failed",
                extra={"path": str(path), "audio_name": original_name},
            )
            path.unlink(missing_ok=True)
            raise StorageError(str(path), "write", e) from e

        logger.info(
            "Temporary audio stored",
            extra={"path": str(path), "size": len(data), "audio_name": original_name},
        )
        return TemporaryAudioHandle(
            location=str(path), original_name=original_name, size_bytes=len(data)
        )

    def read(self, handle: TemporaryAudioHandle) -> bytes:
        try:
            return Path(handle.location).read_bytes()
        except OSError as e:
            logger.exception(
                "Temporary audio read failed", extra={"path": handle.location}
            )
            raise StorageError(handle.location, "read", e) from e

    def delete(self, handle: TemporaryAudioHandle) -> None:
        try:
            Path(handle.location).unlink(missing_ok=True)
        except OSError as e:
            raise StorageError(handle.location, "delete", e) from e

    def exists(self, handle: TemporaryAudioHandle) -> bool:
        return Path(handle.location).exists()
