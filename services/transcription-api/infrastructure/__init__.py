"""Infrastructure layer exports."""

from .assemblyai_recognizer import AssemblyAIRecognizer
from .google_speech_recognizer import GoogleSpeechRecognizer
from .local_audio_store import LocalTemporaryAudioStore
from .minio_audio_store import MinioTemporaryAudioStore

__all__ = [
    "AssemblyAIRecognizer",
    "GoogleSpeechRecognizer",
    "LocalTemporaryAudioStore",
    "MinioTemporaryAudioStore",
]
