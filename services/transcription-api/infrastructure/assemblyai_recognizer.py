"""AssemblyAI implementation of the RecognitionClient interface."""

import io

import assemblyai as aai
from transcription_common.logging import setup_logging

from domain.models import RecognitionConfig, RecognitionResult, RecognitionSegment
from exceptions import RecognitionServiceError

from .interfaces import RecognitionClient

logger = setup_logging()


class AssemblyAIRecognizer(RecognitionClient):
    """Handles speech recognition using AssemblyAI."""

    def __init__(self, transcriber: aai.Transcriber, speaker_labels: bool = False):
        self._transcriber = transcriber
        self._speaker_labels = speaker_labels

    def recognize(
        self, audio_data: bytes, config: RecognitionConfig
    ) -> RecognitionResult:
        """
        Uploads the audio to AssemblyAI and waits for the transcript.

        AssemblyAI detects the encoding itself, so only the language code
        is taken from the config. Utterances become segments when speaker
        labels are enabled; otherwise the whole text is a single segment.
        """
        transcription_config = aai.TranscriptionConfig(
            language_code=config.language_code.replace("-", "_").lower(),
            speaker_labels=self._speaker_labels,
        )

        try:
            transcript = self._transcriber.transcribe(
                io.BytesIO(audio_data), config=transcription_config
            )
        except Exception as e:
            logger.exception("AssemblyAI transcription failed")
            raise RecognitionServiceError(str(e), e) from e

        if transcript.status == aai.TranscriptStatus.error:
            logger.error(
                "AssemblyAI rejected the audio", extra={"error": transcript.error}
            )
            raise RecognitionServiceError(
                transcript.error or "AssemblyAI transcription failed"
            )

        if transcript.utterances:
            segments = [
                RecognitionSegment(alternatives=[u.text])
                for u in transcript.utterances
                if u.text
            ]
        elif transcript.text:
            segments = [RecognitionSegment(alternatives=[transcript.text])]
        else:
            segments = []

        logger.info(
            "Audio transcription successful",
            extra={"segment_count": len(segments)},
        )
        return RecognitionResult(segments=segments)
