from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest
from transcription_common import TranscriptionRecord

from handlers import HistoryService


@pytest.fixture
def record_store():
    store = MagicMock()
    store.recent.return_value = []
    return store


def test_default_limit_is_ten(record_store):
    HistoryService(record_store).list_recent()

    record_store.recent.assert_called_once_with(10)


def test_limit_is_clamped_to_maximum(record_store):
    HistoryService(record_store, max_limit=50).list_recent(1000)

    record_store.recent.assert_called_once_with(50)


def test_limit_is_at_least_one(record_store):
    HistoryService(record_store).list_recent(0)

    record_store.recent.assert_called_once_with(1)


def test_configured_default_is_also_clamped(record_store):
    HistoryService(record_store, default_limit=500, max_limit=20).list_recent()

    record_store.recent.assert_called_once_with(20)


def test_lists_at_most_ten_newest_records(repository):
    base = datetime(2024, 1, 1, tzinfo=timezone.utc)
    for i in range(12):
        repository.append(
            TranscriptionRecord(
                audio_name=f"clip-{i}.wav",
                transcription_text="text",
                created_at=base + timedelta(minutes=i),
            )
        )

    records = HistoryService(repository).list_recent()

    assert [r.audio_name for r in records] == [f"clip-{i}.wav" for i in range(11, 1, -1)]
