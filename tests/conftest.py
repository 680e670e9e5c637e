import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine

from dependencies import session_factory_for
from domain import RecognitionConfig, RecognitionResult, TranscriptBuilder
from handlers import TranscriptionPipeline
from infrastructure import LocalTemporaryAudioStore
from infrastructure.interfaces import RecognitionClient
from repositories import TranscriptionRepository

MAX_BYTES = 10 * 1024 * 1024


class FakeRecognizer(RecognitionClient):
    """Returns a canned result, or raises a canned error, and records calls."""

    def __init__(self):
        self.result = RecognitionResult()
        self.error = None
        self.calls = []
        self.closed = False

    def recognize(self, audio_data, config):
        self.calls.append((audio_data, config))
        if self.error is not None:
            raise self.error
        return self.result

    def close(self):
        self.closed = True


class RecordingAudioStore(LocalTemporaryAudioStore):
    """Local store that remembers every handle it issued and every delete."""

    def __init__(self, directory, max_bytes):
        super().__init__(directory, max_bytes)
        self.handles = []
        self.deleted = []

    def store(self, data, original_name):
        handle = super().store(data, original_name)
        self.handles.append(handle)
        return handle

    def delete(self, handle):
        self.deleted.append(handle)
        super().delete(handle)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def repository(engine):
    return TranscriptionRepository(session_factory_for(engine))


@pytest.fixture
def upload_dir(tmp_path):
    directory = tmp_path / "uploads"
    directory.mkdir()
    return directory


@pytest.fixture
def audio_store(upload_dir):
    return RecordingAudioStore(upload_dir, MAX_BYTES)


@pytest.fixture
def recognizer():
    return FakeRecognizer()


@pytest.fixture
def recognition_config():
    return RecognitionConfig(encoding="LINEAR16", sample_rate_hertz=16000, language_code="en-US")


@pytest.fixture
def pipeline(audio_store, recognizer, repository, recognition_config):
    return TranscriptionPipeline(
        audio_store=audio_store,
        recognizer=recognizer,
        record_store=repository,
        transcript_builder=TranscriptBuilder(),
        recognition_config=recognition_config,
        max_bytes=MAX_BYTES,
    )
