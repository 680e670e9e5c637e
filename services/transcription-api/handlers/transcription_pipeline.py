"""Orchestrates one audio upload from arrival to a persisted outcome."""

from transcription_common import (
    CapacityError,
    TemporaryAudioHandle,
    TranscriptionRecord,
    setup_logging,
)
from transcription_common.infrastructure import (
    TemporaryAudioStore,
    TranscriptionRecordStore,
)

from domain import RecognitionConfig, TranscriptBuilder
from exceptions import PayloadTooLarge, TranscriptionFailed
from infrastructure.interfaces import RecognitionClient

logger = setup_logging()

DEFAULT_AUDIO_NAME = "untitled audio"


class _AudioLease:
    """Request-scoped ownership of a single temporary audio handle."""

    def __init__(self, store: TemporaryAudioStore, handle: TemporaryAudioHandle):
        self._store = store
        self.handle = handle
        self._released = False

    def release(self) -> None:
        """Deletes the temporary audio once; cleanup errors are logged, not raised."""
        if self._released:
            return
        self._released = True
        try:
            self._store.delete(self.handle)
            logger.info(
                "Temporary audio removed", extra={"location": self.handle.location}
            )
        except Exception:
            logger.warning(
                "Temporary audio cleanup failed",
                exc_info=True,
                extra={"location": self.handle.location},
            )

    def __enter__(self) -> "_AudioLease":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()


class TranscriptionPipeline:
    """Stores, recognizes and records one audio upload, cleaning up on every path."""

    def __init__(
        self,
        audio_store: TemporaryAudioStore,
        recognizer: RecognitionClient,
        record_store: TranscriptionRecordStore,
        transcript_builder: TranscriptBuilder,
        recognition_config: RecognitionConfig,
        max_bytes: int,
    ):
        self._audio_store = audio_store
        self._recognizer = recognizer
        self._record_store = record_store
        self._transcript_builder = transcript_builder
        self._recognition_config = recognition_config
        self._max_bytes = max_bytes

    def transcribe(
        self,
        audio_data: bytes,
        original_name: str,
        recognition_config: RecognitionConfig | None = None,
    ) -> str:
        """
        Transcribes an uploaded audio file and persists the outcome.

        Exactly one record is written per accepted upload: a success record
        holding the transcript, or a failure record whose name carries the
        failure marker. The temporary copy is deleted before returning on
        every path.

        Args:
            audio_data: Validated upload bytes.
            original_name: Filename as submitted by the client.
            recognition_config: Overrides the configured encoding parameters.

        Returns:
            The transcript text.

        Raises:
            PayloadTooLarge: If the upload exceeds the size limit. Nothing is stored.
            StorageError: If the temporary copy cannot be written.
            PersistenceError: If the success record cannot be written.
            TranscriptionFailed: If recognition fails for any reason.
        """
        audio_name = original_name if original_name.strip() else DEFAULT_AUDIO_NAME
        config = recognition_config or self._recognition_config

        if len(audio_data) > self._max_bytes:
            logger.warning(
                "Audio upload rejected",
                extra={
                    "audio_name": audio_name,
                    "size": len(audio_data),
                    "max_bytes": self._max_bytes,
                },
            )
            raise PayloadTooLarge(len(audio_data), self._max_bytes)

        logger.info(
            "Processing audio", extra={"audio_name": audio_name, "size": len(audio_data)}
        )

        try:
            handle = self._audio_store.store(audio_data, audio_name)
        except CapacityError as e:
            raise PayloadTooLarge(e.size_bytes, e.max_bytes) from e

        with _AudioLease(self._audio_store, handle) as lease:
            try:
                audio = self._audio_store.read(handle)
                result = self._recognizer.recognize(audio, config)
            except Exception as e:
                logger.exception(
                    "Transcription failed", extra={"audio_name": audio_name}
                )
                lease.release()
                self._record_failure(audio_name, e)
                raise TranscriptionFailed(audio_name, e) from e

            transcript = self._transcript_builder.build(result)
            self._record_store.append(
                TranscriptionRecord(audio_name=audio_name, transcription_text=transcript)
            )

        logger.info(
            "Audio transcribed",
            extra={"audio_name": audio_name, "segment_count": len(result.segments)},
        )
        return transcript

    def _record_failure(self, audio_name: str, error: Exception) -> None:
        """Writes the failure audit record; its own failure is logged and dropped."""
        record = TranscriptionRecord(
            audio_name=self._transcript_builder.failed_audio_name(audio_name),
            transcription_text=self._transcript_builder.error_summary(error),
        )
        try:
            self._record_store.append(record)
        except Exception:
            logger.exception(
                "Failure record could not be persisted",
                extra={"audio_name": audio_name},
            )
