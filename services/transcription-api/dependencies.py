"""FastAPI dependency injection configuration."""

from contextlib import contextmanager
from pathlib import Path

import assemblyai as aai
from fastapi import Depends, Request
from google.cloud import speech
from minio import Minio
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine
from transcription_common.infrastructure import (
    TemporaryAudioStore,
    TranscriptionRecordStore,
)
from transcription_common.logging import setup_logging

from config import AppConfig
from domain import TranscriptBuilder
from handlers import HistoryService, TranscriptionPipeline
from infrastructure import (
    AssemblyAIRecognizer,
    GoogleSpeechRecognizer,
    LocalTemporaryAudioStore,
    MinioTemporaryAudioStore,
)
from infrastructure.interfaces import RecognitionClient
from repositories import TranscriptionRepository

logger = setup_logging()


class ServiceResources:
    """Process-wide clients, created before serving and closed on shutdown."""

    def __init__(
        self,
        engine: Engine,
        audio_store: TemporaryAudioStore,
        recognizer: RecognitionClient,
        record_store: TranscriptionRecordStore,
    ):
        self.engine = engine
        self.audio_store = audio_store
        self.recognizer = recognizer
        self.record_store = record_store

    def close(self) -> None:
        try:
            self.recognizer.close()
        finally:
            self.engine.dispose()
        logger.info("Service resources released")


def session_factory_for(engine: Engine):
    """Returns a callable producing database session context managers."""

    @contextmanager
    def _session_factory():
        with Session(engine) as session:
            yield session

    return _session_factory


def build_engine(config: AppConfig) -> Engine:
    """Creates the database engine and ensures the schema exists."""
    connect_args = {}
    if config.database.url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    engine = create_engine(config.database.url, connect_args=connect_args)
    SQLModel.metadata.create_all(engine)
    logger.info("Database initialized", extra={"host": config.database.host})
    return engine


def build_audio_store(config: AppConfig) -> TemporaryAudioStore:
    """Creates the configured ephemeral audio store."""
    if config.audio_store.backend == "minio":
        client = Minio(
            endpoint=config.minio.endpoint,
            access_key=config.minio.user,
            secret_key=config.minio.password,
            secure=config.minio.secure,
        )
        store = MinioTemporaryAudioStore(
            client, config.minio.bucket_name, config.audio_store.max_bytes
        )
        store.ensure_bucket_exists()
        return store

    store = LocalTemporaryAudioStore(
        Path(config.audio_store.directory), config.audio_store.max_bytes
    )
    store.ensure_directory_exists()
    return store


def build_recognizer(config: AppConfig) -> RecognitionClient:
    """Creates the configured speech recognition client."""
    if config.speech.provider == "assemblyai":
        aai.settings.api_key = config.speech.assemblyai_api_key
        if config.speech.timeout_seconds is not None:
            aai.settings.http_timeout = config.speech.timeout_seconds
        return AssemblyAIRecognizer(aai.Transcriber())

    if config.speech.credentials_path:
        client = speech.SpeechClient.from_service_account_file(
            config.speech.credentials_path
        )
    else:
        client = speech.SpeechClient()
    return GoogleSpeechRecognizer(client, config.speech.timeout_seconds)


def build_resources(config: AppConfig) -> ServiceResources:
    """Initializes every external client the service needs."""
    engine = build_engine(config)
    return ServiceResources(
        engine=engine,
        audio_store=build_audio_store(config),
        recognizer=build_recognizer(config),
        record_store=TranscriptionRepository(session_factory_for(engine)),
    )


def get_config(request: Request) -> AppConfig:
    """Returns the configuration the application was created with."""
    return request.app.state.config


def get_resources(request: Request) -> ServiceResources:
    """Returns the resources initialized by the application lifespan."""
    return request.app.state.resources


def get_pipeline(
    resources: ServiceResources = Depends(get_resources),
    config: AppConfig = Depends(get_config),
) -> TranscriptionPipeline:
    """Creates a TranscriptionPipeline wired to the shared resources."""
    return TranscriptionPipeline(
        audio_store=resources.audio_store,
        recognizer=resources.recognizer,
        record_store=resources.record_store,
        transcript_builder=TranscriptBuilder(),
        recognition_config=config.speech.recognition,
        max_bytes=config.audio_store.max_bytes,
    )


def get_history_service(
    resources: ServiceResources = Depends(get_resources),
    config: AppConfig = Depends(get_config),
) -> HistoryService:
    """Creates a HistoryService over the shared record store."""
    return HistoryService(
        resources.record_store,
        default_limit=config.history.default_limit,
        max_limit=config.history.max_limit,
    )
