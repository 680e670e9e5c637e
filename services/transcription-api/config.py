"""Application configuration loaded from environment variables."""

import os
import tempfile
from typing import Literal

from pydantic import BaseModel
from transcription_common import DatabaseConfig, MinioConfig

from domain import RecognitionConfig

DEFAULT_MAX_UPLOAD_BYTES = 10 * 1024 * 1024


class AudioStoreConfig(BaseModel, frozen=True):
    """Ephemeral audio storage configuration."""

    backend: Literal["local", "minio"] = "local"
    directory: str
    max_bytes: int = DEFAULT_MAX_UPLOAD_BYTES


class SpeechConfig(BaseModel, frozen=True):
    """Remote speech recognition configuration."""

    provider: Literal["google", "assemblyai"] = "google"
    credentials_path: str | None = None
    assemblyai_api_key: str = ""
    encoding: str = "LINEAR16"
    sample_rate_hertz: int = 16000
    language_code: str = "en-US"
    timeout_seconds: float | None = None

    @property
    def recognition(self) -> RecognitionConfig:
        """Returns the fixed recognition parameters sent with every request."""
        return RecognitionConfig(
            encoding=self.encoding,
            sample_rate_hertz=self.sample_rate_hertz,
            language_code=self.language_code,
        )


class ServerConfig(BaseModel, frozen=True):
    """HTTP server configuration."""

    port: int = 5000
    allowed_origin: str = "http://localhost:5173"
    expose_error_details: bool = False


class HistoryConfig(BaseModel, frozen=True):
    """Recent-history listing bounds."""

    default_limit: int = 10
    max_limit: int = 100


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    database: DatabaseConfig
    audio_store: AudioStoreConfig
    minio: MinioConfig
    speech: SpeechConfig
    server: ServerConfig = ServerConfig()
    history: HistoryConfig = HistoryConfig()
    log_level: str = "INFO"


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        database=DatabaseConfig(
            host=os.getenv("POSTGRES_HOST", "postgres"),
            port=os.getenv("POSTGRES_PORT", "5432"),
            user=os.getenv("POSTGRES_USER", ""),
            password=os.getenv("POSTGRES_PASSWORD", ""),
            database=os.getenv("POSTGRES_DB", "transcriptions"),
            url_override=os.getenv("DATABASE_URL") or None,
        ),
        audio_store=AudioStoreConfig(
            backend=os.getenv("AUDIO_STORE_BACKEND", "local"),
            directory=os.getenv(
                "AUDIO_UPLOAD_DIR",
                os.path.join(tempfile.gettempdir(), "transcription-uploads"),
            ),
            max_bytes=os.getenv("MAX_UPLOAD_BYTES", str(DEFAULT_MAX_UPLOAD_BYTES)),
        ),
        minio=MinioConfig(
            endpoint=os.getenv("MINIO_ENDPOINT", "minio:9000"),
            user=os.getenv("MINIO_USER", ""),
            password=os.getenv("MINIO_PASSWORD", ""),
            bucket_name=os.getenv("MINIO_BUCKET", "transcription-uploads"),
        ),
        speech=SpeechConfig(
            provider=os.getenv("SPEECH_PROVIDER", "google"),
            credentials_path=os.getenv("GOOGLE_APPLICATION_CREDENTIALS") or None,
            assemblyai_api_key=os.getenv("ASSEMBLYAI_API_KEY", ""),
            encoding=os.getenv("SPEECH_ENCODING", "LINEAR16"),
            sample_rate_hertz=os.getenv("SPEECH_SAMPLE_RATE_HERTZ", "16000"),
            language_code=os.getenv("SPEECH_LANGUAGE_CODE", "en-US"),
            timeout_seconds=os.getenv("SPEECH_TIMEOUT_SECONDS") or None,
        ),
        server=ServerConfig(
            port=os.getenv("PORT", "5000"),
            allowed_origin=os.getenv("ALLOWED_ORIGIN", "http://localhost:5173"),
            expose_error_details=os.getenv("EXPOSE_ERROR_DETAILS", "false"),
        ),
        history=HistoryConfig(
            default_limit=os.getenv("HISTORY_LIMIT", "10"),
            max_limit=os.getenv("HISTORY_MAX_LIMIT", "100"),
        ),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
