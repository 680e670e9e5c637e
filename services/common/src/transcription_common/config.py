"""Shared configuration models for infrastructure components."""

from pydantic import BaseModel, computed_field


class MinioConfig(BaseModel, frozen=True):
    """MinIO connection configuration."""

    endpoint: str
    user: str
    password: str
    bucket_name: str = "transcription-uploads"
    secure: bool = False


class DatabaseConfig(BaseModel, frozen=True):
    """Immutable database connection configuration."""

    host: str = "postgres"
    port: str = "5432"
    user: str = ""
    password: str = ""
    database: str = "transcriptions"
    url_override: str | None = None

    @computed_field
    @property
    def url(self) -> str:
        """Returns the full connection URL, preferring an explicit override."""
        if self.url_override:
            return self.url_override
        return (
            f"postgresql+psycopg://{self.user}:{self.password}"
            f"@{self.host}:{self.port}/{self.database}"
        )
