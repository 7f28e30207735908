"""Capability interfaces the pipeline depends on."""

from abc import ABC, abstractmethod


class AudioAcquirer(ABC):
    """Materializes the audio track of a video URL as a local file."""

    @abstractmethod
    async def acquire(self, url: str, dest_path: str) -> None:
        """
        Downloads the audio of `url` into `dest_path`.

        Raises:
            AcquisitionError: If the downloader is unavailable, fails or times out.
        """
        pass


class Transcriber(ABC):
    """Speech-to-text backend."""

    @abstractmethod
    async def transcribe(self, audio_path: str) -> str:
        """
        Converts an audio file into plain text.

        Raises:
            TranscriptionError: On provider failure or an empty transcript.
        """
        pass


class Generator(ABC):
    """Text-generation backend."""

    @abstractmethod
    async def summarize(self, transcript: str) -> str:
        """
        Produces a structured summary of a transcript.

        Raises:
            GenerationError: On provider failure or an empty summary.
        """
        pass

    @abstractmethod
    async def answer(self, question: str, context: str) -> str:
        """
        Answers a question using only the supplied context.

        Raises:
            GenerationError: On provider failure or an empty answer.
        """
        pass
