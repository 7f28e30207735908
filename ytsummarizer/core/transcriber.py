"""
Module for transcribing audio files using Groq's API.
"""

import asyncio
from pathlib import Path
from typing import Optional

from groq import AsyncGroq, GroqError

from ytsummarizer.core.interfaces import Transcriber
from ytsummarizer.exceptions import TranscriptionError
from ytsummarizer.models.schemas import TranscriptionConfig
from ytsummarizer.utils.logger import logging


class GroqTranscriber(Transcriber):
    """Class to handle audio transcription operations."""

    def __init__(self, transcribe_config: TranscriptionConfig, api_key: Optional[str] = None):
        """
        Initialize the transcriber with API key.

        Args:
            transcribe_config: Configuration for transcription
            api_key: Groq API key
        """
        if not api_key:
            raise ValueError("Groq API key is required. Set GROQ_API_KEY in the .env file or environment.")

        self.transcribe_config = transcribe_config
        self.api_key = api_key
        self.client = AsyncGroq(
            api_key=self.api_key,
            timeout=transcribe_config.timeout,
            max_retries=0,
        )

    async def transcribe(self, audio_path: str) -> str:
        """
        Transcribe an audio file.

        Args:
            audio_path: Path to a non-empty audio file

        Returns:
            Transcript text
        """
        audio_file_path = Path(audio_path)
        try:
            audio_bytes = await asyncio.to_thread(audio_file_path.read_bytes)
        except OSError as e:
            raise TranscriptionError(f"Audio file could not be read: {audio_path}", cause=e) from e

        logging.info(f"Transcribing audio file: {audio_path} ({len(audio_bytes)} bytes)")

        kwargs = {
            "file": (audio_file_path.name, audio_bytes),
            "model": self.transcribe_config.model,
            "response_format": self.transcribe_config.response_format,
            "temperature": self.transcribe_config.temperature,
        }
        if self.transcribe_config.language:
            kwargs["language"] = self.transcribe_config.language
        if self.transcribe_config.prompt:
            kwargs["prompt"] = self.transcribe_config.prompt

        try:
            transcription = await self.client.audio.transcriptions.create(**kwargs)
        except GroqError as e:
            logging.error(f"Transcription request failed: {e}")
            raise TranscriptionError(f"Failed to transcribe audio: {e}", cause=e) from e

        text = transcription if isinstance(transcription, str) else getattr(transcription, "text", None)
        if not text or not text.strip():
            raise TranscriptionError("Failed to transcribe audio: provider returned no text")

        logging.info(f"Transcription complete ({len(text)} characters)")
        return text.strip()
