"""Core business logic for turning recognition outcomes into record text."""

from .models import RecognitionResult

NO_SPEECH_TEXT = "No clear speech detected."
FAILURE_MARKER = " (Failed)"
ERROR_EXCERPT_LENGTH = 100


class TranscriptBuilder:
    """Builds transcript and failure-summary text for transcription records."""

    def __init__(self, excerpt_length: int = ERROR_EXCERPT_LENGTH):
        self._excerpt_length = max(0, excerpt_length)

    def build(self, result: RecognitionResult) -> str:
        """
        Joins the first alternative of every segment with newlines.

        Args:
            result: Recognition output in the order returned by the service.

        Returns:
            The transcript, or the no-speech sentinel when nothing was recognized.
        """
        text = "\n".join(segment.alternatives[0] for segment in result.segments)
        if not text.strip():
            return NO_SPEECH_TEXT
        return text

    def failed_audio_name(self, audio_name: str) -> str:
        """Marks an audio name as belonging to a failed attempt."""
        return f"{audio_name}{FAILURE_MARKER}"

    def error_summary(self, error: Exception) -> str:
        """Formats a capped excerpt of an error for storage in a failure record."""
        return f"Error during transcription: {self.excerpt(error)}"

    def excerpt(self, error: Exception) -> str:
        """Returns the error message clamped to the excerpt length."""
        message = str(error) or type(error).__name__
        if len(message) <= self._excerpt_length:
            return message
        return message[: self._excerpt_length] + "..."
