from .history_service import HistoryService
from .transcription_pipeline import TranscriptionPipeline

__all__ = ["HistoryService", "TranscriptionPipeline"]
