from typing import Optional

from pydantic import BaseModel


class SummarizeRequest(BaseModel):
    """Model for requesting video summarization."""
    url: Optional[str] = None


class SummarizeResponse(BaseModel):
    """Model for summary responses."""
    summary: str


class AskRequest(BaseModel):
    """Model for follow-up questions."""
    question: Optional[str] = None
    context: Optional[str] = None


class AskResponse(BaseModel):
    """Model for answers to follow-up questions."""
    answer: str


class HealthResponse(BaseModel):
    """Model for health check responses."""
    status: str
    timestamp: str
    tempDirectory: bool


class ErrorResponse(BaseModel):
    """Model for error responses."""
    error: str
    type: Optional[str] = None
    details: Optional[str] = None
