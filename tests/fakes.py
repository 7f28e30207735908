"""
Deterministic stand-ins for the external adapters.
"""

import asyncio
import os
from pathlib import Path
from typing import List, Optional

from ytsummarizer.core.interfaces import AudioAcquirer, Generator, Transcriber


class FakeAcquirer(AudioAcquirer):
    """Writes fixed bytes to the destination, or fails after an optional partial write."""

    def __init__(self, content: bytes = b"ID3 fake mp3 audio", error: Optional[Exception] = None,
                 partial: bool = False, write: bool = True):
        self.content = content
        self.error = error
        self.partial = partial
        self.write = write
        self.calls: List[tuple] = []

    async def acquire(self, url: str, dest_path: str) -> None:
        self.calls.append((url, dest_path))
        if self.partial:
            dest = Path(dest_path)
            dest.with_name(dest.stem + ".webm.part").write_bytes(b"partial")
        if self.error is not None:
            raise self.error
        if self.write:
            Path(dest_path).write_bytes(self.content)


class HangingAcquirer(AudioAcquirer):
    """Writes part of the file, then blocks until the request is cancelled."""

    def __init__(self):
        self.calls: List[tuple] = []

    async def acquire(self, url: str, dest_path: str) -> None:
        self.calls.append((url, dest_path))
        Path(dest_path).write_bytes(b"partial audio")
        await asyncio.Event().wait()


class FakeTranscriber(Transcriber):
    def __init__(self, text: str = "This video explains how nuclear fusion powers the sun.",
                 error: Optional[Exception] = None):
        self.text = text
        self.error = error
        self.calls: List[str] = []
        self.seen_sizes: List[int] = []

    async def transcribe(self, audio_path: str) -> str:
        self.calls.append(audio_path)
        self.seen_sizes.append(os.path.getsize(audio_path))
        if self.error is not None:
            raise self.error
        return self.text


class FakeGenerator(Generator):
    def __init__(self, summary: str = "Key takeaways: fusion powers the sun.",
                 error: Optional[Exception] = None):
        self.summary = summary
        self.error = error
        self.summarize_calls: List[str] = []
        self.answer_calls: List[tuple] = []

    async def summarize(self, transcript: str) -> str:
        self.summarize_calls.append(transcript)
        if self.error is not None:
            raise self.error
        return self.summary

    async def answer(self, question: str, context: str) -> str:
        self.answer_calls.append((question, context))
        if self.error is not None:
            raise self.error
        return f"Answer to '{question}' from {len(context)} characters of context."
