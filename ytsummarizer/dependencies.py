"""Application context: configuration plus the adapters built from it."""

from dataclasses import dataclass

from ytsummarizer.config import Config
from ytsummarizer.core.interfaces import AudioAcquirer, Generator, Transcriber
from ytsummarizer.core.summarizer import LangChainGenerator
from ytsummarizer.core.transcriber import GroqTranscriber
from ytsummarizer.core.youtube_downloader import build_acquirer
from ytsummarizer.models.schemas import (
    DownloadConfig,
    DownloaderBackend,
    SummaryConfig,
    TranscriptionConfig,
)
from ytsummarizer.utils.logger import logging
from ytsummarizer.utils.temp_files import TempFileManager


@dataclass(frozen=True)
class AppContext:
    """Everything a request needs, constructed once at startup."""

    config: Config
    files: TempFileManager
    acquirer: AudioAcquirer
    transcriber: Transcriber
    generator: Generator


def build_context(config: Config) -> AppContext:
    """Wire the production adapters for a configuration."""
    if not config.groq_api_key:
        logging.warning("GROQ_API_KEY environment variable not set.")

    download_config = DownloadConfig(
        backend=DownloaderBackend(config.downloader),
        binary=config.ytdlp_path,
        cookies_file=config.ytdlp_cookies,
        timeout=config.download_timeout,
    )
    transcription_config = TranscriptionConfig(
        model=config.transcription_model,
        timeout=config.api_timeout,
    )
    summary_config = SummaryConfig(
        model=config.summary_model,
        timeout=config.api_timeout,
    )

    files = TempFileManager(config.temp_dir)
    logging.info(f"Temporary directory: {files.directory}")

    return AppContext(
        config=config,
        files=files,
        acquirer=build_acquirer(download_config),
        transcriber=GroqTranscriber(transcription_config, api_key=config.groq_api_key),
        generator=LangChainGenerator(summary_config, api_key=config.groq_api_key),
    )
