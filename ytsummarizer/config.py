"""
Configuration settings for the YouTube summarizer service.
"""

import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

APP_NAME = "YouTube Video Summarizer"
APP_VERSION = "0.2.0"

BASE_DIR = Path(__file__).resolve().parent.parent.absolute()

DEFAULT_TRANSCRIPTION_MODEL = "whisper-large-v3-turbo"
DEFAULT_SUMMARY_MODEL = "llama-3.3-70b-versatile"


class Config(BaseModel, frozen=True):
    """Application configuration, built once at startup and passed around explicitly."""

    environment: str = "development"
    log_level: str = "DEBUG"

    # Provider credential and models
    groq_api_key: Optional[str] = None
    transcription_model: str = DEFAULT_TRANSCRIPTION_MODEL
    summary_model: str = DEFAULT_SUMMARY_MODEL

    # Temporary audio storage
    temp_dir: Path = BASE_DIR / "temp"

    # Audio acquisition
    downloader: str = "yt-dlp"
    ytdlp_path: str = "yt-dlp"
    ytdlp_cookies: Optional[str] = None

    # Timeouts in seconds
    download_timeout: float = 300.0
    api_timeout: float = 120.0

    # HTTP surface
    port: int = 8000
    allowed_origins: List[str] = Field(default_factory=lambda: ["http://localhost:8501"])
    public_url: str = "http://localhost:8000"

    @property
    def debug(self) -> bool:
        """Error responses carry tracebacks outside production."""
        return self.environment != "production"


def _split_origins(value: str) -> List[str]:
    return [origin.strip() for origin in value.split(",") if origin.strip()]


def load_config() -> Config:
    """Load configuration from the environment (and a .env file if present)."""
    load_dotenv()

    environment = os.getenv("ENVIRONMENT", "development").lower()
    default_level = "INFO" if environment == "production" else "DEBUG"

    return Config(
        environment=environment,
        log_level=os.getenv("LOG_LEVEL", default_level).upper(),
        groq_api_key=os.getenv("GROQ_API_KEY"),
        transcription_model=os.getenv("TRANSCRIPTION_MODEL", DEFAULT_TRANSCRIPTION_MODEL),
        summary_model=os.getenv("SUMMARY_MODEL", DEFAULT_SUMMARY_MODEL),
        temp_dir=Path(os.getenv("TEMP_DIR", str(BASE_DIR / "temp"))),
        downloader=os.getenv("DOWNLOADER", "yt-dlp").lower(),
        ytdlp_path=os.getenv("YTDLP_PATH", "yt-dlp"),
        ytdlp_cookies=os.getenv("YTDLP_COOKIES") or None,
        download_timeout=float(os.getenv("DOWNLOAD_TIMEOUT", "300")),
        api_timeout=float(os.getenv("API_TIMEOUT", "120")),
        port=int(os.getenv("PORT", "8000")),
        allowed_origins=_split_origins(os.getenv("ALLOWED_ORIGINS", "http://localhost:8501")),
        public_url=os.getenv("PUBLIC_URL", "http://localhost:8000"),
    )
