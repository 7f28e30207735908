"""
API routes for the YouTube Video Summarizer service.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from ytsummarizer.api.dependencies import get_context, get_pipeline
from ytsummarizer.api.schemas import (
    AskRequest,
    AskResponse,
    ErrorResponse,
    HealthResponse,
    SummarizeRequest,
    SummarizeResponse,
)
from ytsummarizer.core.pipeline import SummarizationPipeline
from ytsummarizer.dependencies import AppContext

router = APIRouter(prefix="/api", tags=["youtube"])
health_router = APIRouter(tags=["health"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
    502: {"model": ErrorResponse},
}


@router.post("/summarize", response_model=SummarizeResponse, responses=ERROR_RESPONSES)
async def summarize_video(
    request: SummarizeRequest,
    pipeline: SummarizationPipeline = Depends(get_pipeline),
):
    """
    Summarize a YouTube video by URL.

    Downloads the audio, transcribes it and summarizes the transcript. Nothing
    is kept after the response is sent.
    """
    summary = await pipeline.summarize(request.url)
    return SummarizeResponse(summary=summary)


@router.post("/ask", response_model=AskResponse, responses=ERROR_RESPONSES)
async def ask_question(
    request: AskRequest,
    pipeline: SummarizationPipeline = Depends(get_pipeline),
):
    """Answer a question using only the context supplied in the request."""
    answer = await pipeline.ask(request.question, request.context)
    return AskResponse(answer=answer)


@health_router.get("/health", response_model=HealthResponse)
async def health(context: AppContext = Depends(get_context)):
    """Report liveness and whether the temporary directory exists."""
    return HealthResponse(
        status="ok",
        timestamp=datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        tempDirectory=context.files.directory_exists(),
    )
