"""
Data models for the YouTube summarizer service.
"""
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from ytsummarizer.config import DEFAULT_SUMMARY_MODEL, DEFAULT_TRANSCRIPTION_MODEL


class DownloaderBackend(str, Enum):
    """Audio acquisition backends."""
    YT_DLP = "yt-dlp"
    PYTUBEFIX = "pytubefix"


class TemporaryAudioFile(BaseModel):
    """A request-scoped audio file in the temporary directory."""
    path: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class DownloadConfig(BaseModel):
    """Configuration for audio acquisition."""
    backend: DownloaderBackend = DownloaderBackend.YT_DLP
    binary: str = "yt-dlp"
    cookies_file: Optional[str] = None
    audio_format: str = "mp3"
    audio_quality: int = 0
    timeout: float = 300.0
    headers: List[str] = Field(default_factory=lambda: [
        "referer:youtube.com",
        "user-agent:Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:109.0) Gecko/20100101 Firefox/115.0",
    ])


class TranscriptionConfig(BaseModel):
    """Configuration for transcription operations."""
    model: str = DEFAULT_TRANSCRIPTION_MODEL
    language: Optional[str] = None
    prompt: Optional[str] = None
    response_format: str = "json"
    temperature: float = 0.0
    timeout: float = 120.0


class SummaryConfig(BaseModel):
    """Configuration for summarization and question answering."""
    model: str = DEFAULT_SUMMARY_MODEL
    provider: str = "groq"
    temperature: float = 0.7
    max_tokens: int = 5000
    answer_max_tokens: int = 1000
    chunk_size: int = 24000
    chunk_overlap: int = 400
    timeout: float = 120.0
