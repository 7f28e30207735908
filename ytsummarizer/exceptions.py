"""Error taxonomy for the summarization pipeline."""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    """Kinds of failure a request can end in."""
    VALIDATION = "ValidationError"
    ACQUISITION = "AcquisitionError"
    EMPTY_AUDIO = "EmptyAudioError"
    TRANSCRIPTION = "TranscriptionError"
    GENERATION = "GenerationError"


class SummarizerError(Exception):
    """Base class for every error the pipeline reports to a caller."""

    kind: ErrorKind

    def __init__(self, message: str, stage: Optional[str] = None, cause: Optional[Exception] = None):
        self.message = message
        self.stage = stage
        self.cause = cause
        super().__init__(message)

    def to_payload(self) -> Dict[str, Any]:
        """Structured form used for logging and HTTP error bodies."""
        payload: Dict[str, Any] = {"error": self.message, "type": self.kind.value}
        if self.stage:
            payload["stage"] = self.stage
        return payload


class ValidationError(SummarizerError):
    """Raised for a missing or malformed URL, question or context."""
    kind = ErrorKind.VALIDATION


class AcquisitionError(SummarizerError):
    """Raised when the downloader is unavailable, fails or times out."""
    kind = ErrorKind.ACQUISITION


class EmptyAudioError(SummarizerError):
    """Raised when the downloader reports success but leaves no usable audio."""
    kind = ErrorKind.EMPTY_AUDIO


class TranscriptionError(SummarizerError):
    """Raised on provider failure or an empty transcript."""
    kind = ErrorKind.TRANSCRIPTION


class GenerationError(SummarizerError):
    """Raised on provider failure or an empty summary/answer."""
    kind = ErrorKind.GENERATION
