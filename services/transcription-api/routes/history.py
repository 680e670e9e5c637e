"""Transcription history endpoint."""

from typing import Annotated, List

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from transcription_common import PersistenceError

from dependencies import get_history_service
from handlers import HistoryService
from response_models import ErrorResponse, HistoryEntry

router = APIRouter(tags=["history"])

HistoryDep = Annotated[HistoryService, Depends(get_history_service)]


@router.get(
    "/history",
    response_model=List[HistoryEntry],
    responses={500: {"model": ErrorResponse}},
)
def list_history(history: HistoryDep):
    """Returns the most recent transcriptions, newest first."""
    try:
        records = history.list_recent()
    except PersistenceError:
        body = ErrorResponse(error="Failed to fetch history")
        return JSONResponse(status_code=500, content=body.model_dump(exclude_none=True))
    return [HistoryEntry.from_record(record) for record in records]
