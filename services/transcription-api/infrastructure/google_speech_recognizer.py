"""Google Cloud Speech-to-Text implementation of the RecognitionClient interface."""

from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import GoogleAuthError
from google.cloud import speech
from transcription_common.logging import setup_logging

from domain.models import RecognitionConfig, RecognitionResult, RecognitionSegment
from exceptions import RecognitionServiceError

from .interfaces import RecognitionClient

logger = setup_logging()


class GoogleSpeechRecognizer(RecognitionClient):
    """Handles synchronous speech recognition using Google Cloud Speech."""

    def __init__(self, client: speech.SpeechClient, timeout_seconds: float | None = None):
        self._client = client
        self._timeout_seconds = timeout_seconds

    def recognize(
        self, audio_data: bytes, config: RecognitionConfig
    ) -> RecognitionResult:
        """
        Sends the audio inline to the synchronous ``recognize`` endpoint.

        Client-side retries are disabled; a failed call surfaces immediately.
        """
        try:
            encoding = speech.RecognitionConfig.AudioEncoding[config.encoding]
        except KeyError as e:
            raise RecognitionServiceError(
                f"Unsupported audio encoding '{config.encoding}'", e
            ) from e

        request_config = speech.RecognitionConfig(
            encoding=encoding,
            sample_rate_hertz=config.sample_rate_hertz,
            language_code=config.language_code,
        )
        audio = speech.RecognitionAudio(content=audio_data)

        call_options = {"retry": None}
        if self._timeout_seconds is not None:
            call_options["timeout"] = self._timeout_seconds

        try:
            response = self._client.recognize(
                config=request_config, audio=audio, **call_options
            )
        except (GoogleAPIError, GoogleAuthError) as e:
            logger.exception(
                "Google speech recognition failed",
                extra={"language_code": config.language_code},
            )
            raise RecognitionServiceError(getattr(e, "message", None) or str(e), e) from e

        segments = [
            RecognitionSegment(
                alternatives=[alternative.transcript for alternative in result.alternatives]
            )
            for result in response.results
            if result.alternatives
        ]

        logger.info(
            "Speech recognition successful",
            extra={"segment_count": len(segments)},
        )
        return RecognitionResult(segments=segments)

    def close(self) -> None:
        self._client.transport.close()
