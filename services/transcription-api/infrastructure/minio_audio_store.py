"""MinIO implementation of the TemporaryAudioStore interface."""

import io

from minio import Minio
from minio.error import S3Error
from transcription_common import (
    CapacityError,
    StorageError,
    TemporaryAudioHandle,
    setup_logging,
)
from transcription_common.infrastructure import TemporaryAudioStore

from utils import temporary_object_name

logger = setup_logging()

_MISSING_OBJECT_CODES = {"NoSuchKey", "NoSuchObject"}


class MinioTemporaryAudioStore(TemporaryAudioStore):
    """Keeps uploaded audio in a MinIO bucket until the request finishes."""

    def __init__(
        self,
        client: Minio,
        bucket_name: str,
        max_bytes: int,
        prefix: str = "uploads/",
    ):
        self._client = client
        self._bucket_name = bucket_name
        self._max_bytes = max_bytes
        self._prefix = prefix

    def store(self, data: bytes, original_name: str) -> TemporaryAudioHandle:
        if len(data) > self._max_bytes:
            raise CapacityError(len(data), self._max_bytes)

        object_name = temporary_object_name(original_name, self._prefix)
        try:
            self._client.put_object(
                bucket_name=self._bucket_name,
                object_name=object_name,
                data=io.BytesIO(data),
                length=len(data),
                content_type="application/octet-stream",
            )
        except Exception as e:
            logger.exception(
                "MinIO upload failed",
                extra={"bucket_name": self._bucket_name, "object_name": object_name},
            )
            raise StorageError(object_name, "write", e) from e

        logger.info(
            "Temporary audio uploaded to MinIO",
            extra={
                "bucket_name": self._bucket_name,
                "object_name": object_name,
                "size": len(data),
            },
        )
        return TemporaryAudioHandle(
            location=object_name, original_name=original_name, size_bytes=len(data)
        )

    def read(self, handle: TemporaryAudioHandle) -> bytes:
        try:
            response = self._client.get_object(self._bucket_name, handle.location)
            try:
                return response.read()
            finally:
                response.close()
                response.release_conn()
        except Exception as e:
            logger.exception(
                "MinIO download failed",
                extra={"bucket_name": self._bucket_name, "object_name": handle.location},
            )
            raise StorageError(handle.location, "read", e) from e

    def delete(self, handle: TemporaryAudioHandle) -> None:
        try:
            self._client.remove_object(self._bucket_name, handle.location)
        except S3Error as e:
            if e.code in _MISSING_OBJECT_CODES:
                return
            raise StorageError(handle.location, "delete", e) from e
        except Exception as e:
            raise StorageError(handle.location, "delete", e) from e

    def exists(self, handle: TemporaryAudioHandle) -> bool:
        try:
            self._client.stat_object(self._bucket_name, handle.location)
        except S3Error as e:
            if e.code in _MISSING_OBJECT_CODES:
                return False
            raise
        return True

    def ensure_bucket_exists(self) -> None:
        if not self._client.bucket_exists(self._bucket_name):
            self._client.make_bucket(self._bucket_name)
            logger.info("Bucket created", extra={"bucket_name": self._bucket_name})
        else:
            logger.info("Bucket already exists", extra={"bucket_name": self._bucket_name})
