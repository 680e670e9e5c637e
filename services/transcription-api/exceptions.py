"""Custom exceptions for the transcription-api service."""

from transcription_common import CapacityError


class PayloadTooLarge(CapacityError):
    """Raised when a submitted audio file exceeds the upload limit."""


class MissingAudioFileError(Exception):
    """Raised when a request carries no usable audio file."""

    def __init__(self):
        super().__init__("No audio file uploaded")


class RecognitionServiceError(Exception):
    """Raised when the remote speech service rejects or cannot serve a request."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)


class TranscriptionFailed(Exception):
    """Raised when a transcript could not be produced for an accepted upload."""

    def __init__(self, audio_name: str, cause: Exception | None = None):
        self.audio_name = audio_name
        self.cause = cause
        super().__init__(f"Failed to transcribe audio file '{audio_name}'")
