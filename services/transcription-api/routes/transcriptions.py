"""Audio transcription endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import JSONResponse
from transcription_common import PersistenceError, StorageError
from transcription_common.logging import setup_logging

from config import AppConfig
from dependencies import get_config, get_pipeline
from domain import TranscriptBuilder
from exceptions import MissingAudioFileError, PayloadTooLarge, TranscriptionFailed
from handlers import TranscriptionPipeline
from response_models import ErrorResponse, TranscriptionResponse

logger = setup_logging()

router = APIRouter(tags=["transcriptions"])

PipelineDep = Annotated[TranscriptionPipeline, Depends(get_pipeline)]
ConfigDep = Annotated[AppConfig, Depends(get_config)]

TRANSCRIPTION_FAILED_MESSAGE = (
    "Transcription failed. Check server console and API credentials."
)


def _error_response(
    status_code: int, message: str, details: str | None = None
) -> JSONResponse:
    body = ErrorResponse(error=message, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def _read_upload(audio_file: UploadFile | None, max_bytes: int) -> tuple[str, bytes]:
    """
    Reads the uploaded file into memory.

    At most one byte past the limit is read, which is enough for the
    pipeline to reject oversized uploads without buffering them whole.

    Raises:
        MissingAudioFileError: If no file part with a filename was sent.
    """
    if audio_file is None or not audio_file.filename:
        raise MissingAudioFileError()
    return audio_file.filename, audio_file.file.read(max_bytes + 1)


@router.post(
    "/transcribe",
    response_model=TranscriptionResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def transcribe_audio(
    pipeline: PipelineDep,
    config: ConfigDep,
    audio_file: Annotated[UploadFile | None, File(alias="audioFile")] = None,
):
    """
    Transcribes an uploaded audio file.

    The outcome is persisted either way; failures return a generic message.
    """
    try:
        filename, audio_data = _read_upload(audio_file, config.audio_store.max_bytes)
    except MissingAudioFileError:
        return _error_response(400, "No audio file uploaded.")

    try:
        transcription = pipeline.transcribe(audio_data, filename)
    except PayloadTooLarge as e:
        return _error_response(
            400, f"Audio file exceeds the {e.max_bytes} byte upload limit."
        )
    except (TranscriptionFailed, StorageError, PersistenceError) as e:
        logger.error(
            "Transcription request failed",
            extra={"audio_name": filename, "error": str(e)},
        )
        details = None
        if config.server.expose_error_details:
            details = TranscriptBuilder().excerpt(e.cause or e)
        return _error_response(500, TRANSCRIPTION_FAILED_MESSAGE, details)

    return TranscriptionResponse(transcription=transcription)
