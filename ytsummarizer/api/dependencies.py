"""FastAPI dependency providers."""

from fastapi import Request

from ytsummarizer.core.pipeline import SummarizationPipeline
from ytsummarizer.dependencies import AppContext


def get_context(request: Request) -> AppContext:
    """Returns the application context built at startup."""
    return request.app.state.context


def get_pipeline(request: Request) -> SummarizationPipeline:
    """Returns the shared summarization pipeline."""
    return request.app.state.pipeline
