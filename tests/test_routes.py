from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient
from transcription_common import DatabaseConfig, MinioConfig, PersistenceError

from application import create_app
from config import AppConfig, AudioStoreConfig, ServerConfig, SpeechConfig
from dependencies import ServiceResources
from domain import NO_SPEECH_TEXT, RecognitionResult, RecognitionSegment
from exceptions import RecognitionServiceError

MIB = 1024 * 1024


def _config(upload_dir, max_bytes=10 * MIB, expose_error_details=False):
    return AppConfig(
        database=DatabaseConfig(url_override="sqlite://"),
        audio_store=AudioStoreConfig(directory=str(upload_dir), max_bytes=max_bytes),
        minio=MinioConfig(endpoint="minio:9000", user="", password=""),
        speech=SpeechConfig(),
        server=ServerConfig(expose_error_details=expose_error_details),
    )


@pytest.fixture
def resources(engine, audio_store, recognizer, repository):
    return ServiceResources(
        engine=engine,
        audio_store=audio_store,
        recognizer=recognizer,
        record_store=repository,
    )


@pytest.fixture
def client(upload_dir, resources):
    with TestClient(create_app(_config(upload_dir), resources)) as test_client:
        yield test_client


def _upload(client, payload=b"RIFF-audio", name="clip.wav"):
    return client.post("/transcribe", files={"audioFile": (name, payload, "audio/wav")})


class TestTranscribe:
    def test_returns_transcript(self, client, recognizer):
        recognizer.result = RecognitionResult(
            segments=[
                RecognitionSegment(alternatives=["hello"]),
                RecognitionSegment(alternatives=["world"]),
            ]
        )

        response = _upload(client)

        assert response.status_code == 200
        assert response.json() == {"transcription": "hello\nworld"}

    def test_no_speech_returns_sentinel(self, client):
        response = _upload(client)

        assert response.status_code == 200
        assert response.json() == {"transcription": NO_SPEECH_TEXT}

    def test_missing_file_is_rejected(self, client, recognizer):
        response = client.post("/transcribe", data={"other": "field"})

        assert response.status_code == 400
        assert response.json() == {"error": "No audio file uploaded."}
        assert recognizer.calls == []

    def test_oversized_file_is_rejected_before_storage(self, upload_dir, resources, audio_store, repository):
        app = create_app(_config(upload_dir, max_bytes=1024), resources)
        with TestClient(app) as small_client:
            response = _upload(small_client, payload=b"\x00" * 2048)

        assert response.status_code == 400
        assert "error" in response.json()
        assert audio_store.handles == []
        assert repository.recent(10) == []

    def test_recognition_failure_returns_generic_error(self, client, recognizer, repository, audio_store):
        recognizer.error = RecognitionServiceError("quota exceeded")

        response = _upload(client, name="call.wav")

        assert response.status_code == 500
        body = response.json()
        assert "details" not in body
        assert "quota" not in response.text
        assert body["error"].startswith("Transcription failed")
        assert repository.recent(1)[0].audio_name == "call.wav (Failed)"
        assert not audio_store.exists(audio_store.handles[0])

    def test_failure_details_are_capped_excerpt_when_enabled(self, upload_dir, resources, recognizer):
        recognizer.error = RecognitionServiceError("quota exceeded " + "z" * 300)
        app = create_app(_config(upload_dir, expose_error_details=True), resources)

        with TestClient(app) as verbose_client:
            response = _upload(verbose_client)

        details = response.json()["details"]
        assert details.startswith("quota exceeded")
        assert len(details) == 103

    def test_persistence_failure_returns_generic_error(self, upload_dir, engine, audio_store, recognizer):
        record_store = MagicMock()
        record_store.append.side_effect = PersistenceError("append")
        resources = ServiceResources(engine, audio_store, recognizer, record_store)

        with TestClient(create_app(_config(upload_dir), resources)) as failing_client:
            response = _upload(failing_client)

        assert response.status_code == 500
        assert response.json()["error"].startswith("Transcription failed")
        assert not audio_store.exists(audio_store.handles[0])


class TestHistory:
    def test_empty_history(self, client):
        response = client.get("/history")

        assert response.status_code == 200
        assert response.json() == []

    def test_lists_newest_first_with_public_field_names(self, client, recognizer):
        recognizer.result = RecognitionResult(segments=[RecognitionSegment(alternatives=["first"])])
        _upload(client, name="one.wav")
        recognizer.result = RecognitionResult(segments=[RecognitionSegment(alternatives=["second"])])
        _upload(client, name="two.wav")

        entries = client.get("/history").json()

        assert [e["audioName"] for e in entries] == ["two.wav", "one.wav"]
        assert entries[0]["transcription"] == "second"
        assert set(entries[0]) == {"audioName", "transcription", "date"}

    def test_returns_at_most_ten_records(self, client):
        for i in range(12):
            _upload(client, name=f"clip-{i}.wav")

        entries = client.get("/history").json()

        assert len(entries) == 10
        assert entries[0]["audioName"] == "clip-11.wav"

    def test_rejected_upload_leaves_history_unchanged(self, upload_dir, resources):
        app = create_app(_config(upload_dir, max_bytes=1024), resources)
        with TestClient(app) as small_client:
            _upload(small_client, payload=b"\x00" * 4096)
            response = small_client.get("/history")

        assert response.json() == []

    def test_storage_failure_returns_error(self, upload_dir, engine, audio_store, recognizer):
        record_store = MagicMock()
        record_store.recent.side_effect = PersistenceError("query")
        resources = ServiceResources(engine, audio_store, recognizer, record_store)

        with TestClient(create_app(_config(upload_dir), resources)) as failing_client:
            response = failing_client.get("/history")

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch history"}


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_cors_allows_configured_origin(client):
    response = client.options(
        "/history",
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "GET",
        },
    )

    assert response.headers["access-control-allow-origin"] == "http://localhost:5173"


def test_lifespan_builds_and_releases_owned_resources(upload_dir):
    resources = MagicMock()

    with patch("application.build_resources", return_value=resources) as build:
        with TestClient(create_app(_config(upload_dir))):
            build.assert_called_once()

    resources.close.assert_called_once()


def test_lifespan_leaves_injected_resources_open(upload_dir):
    resources = MagicMock()

    with TestClient(create_app(_config(upload_dir), resources)):
        pass

    resources.close.assert_not_called()
