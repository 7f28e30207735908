"""
FastAPI application for the YouTube Video Summarizer.
"""

import time
import traceback
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ytsummarizer.api.routes import health_router, router
from ytsummarizer.config import APP_NAME, APP_VERSION, load_config
from ytsummarizer.core.pipeline import SummarizationPipeline
from ytsummarizer.dependencies import AppContext, build_context
from ytsummarizer.exceptions import ErrorKind, SummarizerError
from ytsummarizer.utils.logger import logging

STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.ACQUISITION: 502,
    ErrorKind.EMPTY_AUDIO: 502,
    ErrorKind.TRANSCRIPTION: 502,
    ErrorKind.GENERATION: 502,
}


def _error_body(request: Request, message: str, error_type: str, exc: Exception) -> dict:
    body = {"error": message, "type": error_type}
    if request.app.state.context.config.debug:
        body["details"] = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    return body


def create_app(context: Optional[AppContext] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        context: Pre-built application context; built from the environment if omitted

    Returns:
        Configured FastAPI application
    """
    if context is None:
        context = build_context(load_config())

    app = FastAPI(
        title=APP_NAME,
        version=APP_VERSION,
        description="An API for transcribing and summarizing YouTube videos",
    )
    logging.setLevel(context.config.log_level)
    app.state.context = context
    app.state.pipeline = SummarizationPipeline(context)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler for unhandled exceptions."""
        logging.error(f"Unhandled error on {request.url.path}: {str(exc)}")
        logging.error("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)))
        return JSONResponse(
            status_code=500,
            content=_error_body(request, f"An unexpected error occurred: {str(exc)}", "InternalError", exc),
        )

    # Registered first so it sits innermost: the 500 still passes back
    # through CORS and the process-time header.
    @app.middleware("http")
    async def catch_unhandled_errors(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            return await global_exception_handler(request, exc)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=context.config.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    @app.middleware("http")
    async def add_process_time_header(request: Request, call_next):
        """Middleware to add processing time header to responses."""
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time
        response.headers["X-Process-Time"] = str(process_time)
        return response

    @app.exception_handler(SummarizerError)
    async def summarizer_exception_handler(request: Request, exc: SummarizerError):
        """Map a tagged pipeline error to its HTTP status."""
        status_code = STATUS_BY_KIND.get(exc.kind, 500)
        logging.info(f"{request.method} {request.url.path} -> {status_code} {exc.to_payload()}")
        return JSONResponse(
            status_code=status_code,
            content=_error_body(request, exc.message, exc.kind.value, exc),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
        """Malformed request bodies are reported like any other validation failure."""
        errors = exc.errors()
        message = errors[0].get("msg", "Invalid request body") if errors else "Invalid request body"
        return JSONResponse(
            status_code=400,
            content=_error_body(request, message, ErrorKind.VALIDATION.value, exc),
        )

    app.include_router(router)
    app.include_router(health_router)

    @app.get("/")
    async def root():
        """Root endpoint returning basic API information."""
        return {
            "name": APP_NAME,
            "version": APP_VERSION,
            "description": "YouTube Video Summarizer API. POST a URL to /api/summarize to summarize a video.",
        }

    return app
