from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Column
from sqlalchemy.types import Text
from sqlmodel import Field, SQLModel


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TranscriptionRecord(SQLModel, table=True):
    __tablename__ = "transcriptions"

    # Autoincrement id doubles as the insertion-order tie breaker for history.
    id: Optional[int] = Field(default=None, primary_key=True)
    audio_name: str = Field(sa_column=Column(Text, nullable=False))
    transcription_text: str = Field(sa_column=Column(Text, nullable=False))
    created_at: datetime = Field(default_factory=_utcnow, index=True)
