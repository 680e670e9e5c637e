"""Abstract interface for remote speech recognition."""

from abc import ABC, abstractmethod

from domain.models import RecognitionConfig, RecognitionResult


class RecognitionClient(ABC):
    """Abstract base class for speech recognition backends."""

    @abstractmethod
    def recognize(
        self, audio_data: bytes, config: RecognitionConfig
    ) -> RecognitionResult:
        """
        Recognizes speech in the given audio.

        Performs a single remote call; no retries.

        Args:
            audio_data: Raw audio file bytes.
            config: Encoding parameters describing the audio.

        Returns:
            Recognized segments in service order; empty when no speech was found.

        Raises:
            RecognitionServiceError: If the service rejects the input, times out
                or is unreachable.
        """

    def close(self) -> None:
        """Releases transport resources held by the client."""
