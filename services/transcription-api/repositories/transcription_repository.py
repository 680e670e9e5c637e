"""Repository for transcription record persistence."""

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select
from transcription_common import PersistenceError, TranscriptionRecord
from transcription_common.infrastructure import TranscriptionRecordStore
from transcription_common.logging import setup_logging

logger = setup_logging()


class TranscriptionRepository(TranscriptionRecordStore):
    """
    Handles database operations for transcription records.

    Every call opens its own session, so history reads never share a
    transaction with concurrent appends.
    """

    def __init__(self, session_factory):
        """
        Initializes the repository.

        Args:
            session_factory: Callable that returns a SQLModel Session context manager.
        """
        self._session_factory = session_factory

    def append(self, record: TranscriptionRecord) -> TranscriptionRecord:
        try:
            with self._session_factory() as db_session:
                db_session.add(record)
                db_session.commit()
                db_session.refresh(record)
        except SQLAlchemyError as e:
            logger.exception(
                "Failed to persist transcription record",
                extra={"audio_name": record.audio_name},
            )
            raise PersistenceError("append", e) from e

        logger.info(
            "Transcription record persisted",
            extra={"record_id": record.id, "audio_name": record.audio_name},
        )
        return record

    def recent(self, limit: int) -> list[TranscriptionRecord]:
        if limit <= 0:
            return []

        statement = (
            select(TranscriptionRecord)
            .order_by(
                TranscriptionRecord.created_at.desc(),
                TranscriptionRecord.id.desc(),
            )
            .limit(limit)
        )
        try:
            with self._session_factory() as db_session:
                return list(db_session.exec(statement).all())
        except SQLAlchemyError as e:
            logger.exception("Failed to fetch transcription history")
            raise PersistenceError("query", e) from e
