"""Read path over persisted transcription records."""

from transcription_common import TranscriptionRecord
from transcription_common.infrastructure import TranscriptionRecordStore


class HistoryService:
    """Lists the most recent transcription records."""

    def __init__(
        self,
        record_store: TranscriptionRecordStore,
        default_limit: int = 10,
        max_limit: int = 100,
    ):
        self._record_store = record_store
        self._max_limit = max(1, max_limit)
        self._default_limit = self._bound(default_limit)

    def list_recent(self, limit: int | None = None) -> list[TranscriptionRecord]:
        """
        Returns up to ``limit`` records, newest first.

        The limit defaults to the configured history size and is clamped
        to the range 1..max_limit.
        """
        if limit is None:
            limit = self._default_limit
        return self._record_store.recent(self._bound(limit))

    def _bound(self, limit: int) -> int:
        return max(1, min(limit, self._max_limit))
