"""
Request orchestration: download, verify, transcribe, summarize, clean up.
"""

import asyncio
import os
from enum import Enum
from typing import Any, Optional

from ytsummarizer.dependencies import AppContext
from ytsummarizer.exceptions import EmptyAudioError, SummarizerError, ValidationError
from ytsummarizer.utils.logger import logging
from ytsummarizer.utils.validators import extract_video_id, is_valid_youtube_url


class PipelineState(str, Enum):
    """States of one summarize request."""
    VALIDATING = "validating"
    RESERVING = "reserving"
    DOWNLOADING = "downloading"
    VERIFYING = "verifying"
    TRANSCRIBING = "transcribing"
    SUMMARIZING = "summarizing"
    CLEANING_UP = "cleaning_up"
    DONE = "done"
    FAILED = "failed"


def _file_size(path: str) -> Optional[int]:
    try:
        return os.path.getsize(path)
    except OSError:
        return None


class SummarizationPipeline:
    """
    Sequences the adapters for one request at a time.

    The pipeline holds no per-request state, so a single instance serves all
    concurrent requests.
    """

    def __init__(self, context: AppContext):
        self.context = context

    async def summarize(self, url: Any) -> str:
        """
        Summarize the video at a URL.

        Args:
            url: Candidate YouTube URL from the request body

        Returns:
            Summary text

        Raises:
            SummarizerError: Tagged with the state the request failed in
        """
        state = PipelineState.VALIDATING
        audio_path = None

        def enter(next_state: PipelineState) -> PipelineState:
            logging.debug(f"Summarize {state.value} -> {next_state.value}")
            return next_state

        try:
            if not url or not isinstance(url, str) or not url.strip():
                raise ValidationError("URL is required")
            if not is_valid_youtube_url(url):
                raise ValidationError("Invalid YouTube URL")
            url = url.strip()
            logging.info(f"Summarize request for video {extract_video_id(url) or url}")

            state = enter(PipelineState.RESERVING)
            audio_path = self.context.files.reserve().path

            state = enter(PipelineState.DOWNLOADING)
            await self.context.acquirer.acquire(url, audio_path)

            state = enter(PipelineState.VERIFYING)
            size = await asyncio.to_thread(_file_size, audio_path)
            if size is None:
                raise EmptyAudioError("Downloaded audio file is missing")
            if size == 0:
                raise EmptyAudioError("Downloaded audio file is empty")

            state = enter(PipelineState.TRANSCRIBING)
            transcript = await self.context.transcriber.transcribe(audio_path)

            state = enter(PipelineState.SUMMARIZING)
            summary = await self.context.generator.summarize(transcript)

            state = enter(PipelineState.CLEANING_UP)
            await asyncio.to_thread(self.context.files.release, audio_path)
            audio_path = None

            state = enter(PipelineState.DONE)
            return summary

        except asyncio.CancelledError:
            logging.warning(f"Summarize cancelled while {state.value}")
            raise

        except Exception as e:
            failed_in = state
            state = enter(PipelineState.FAILED)

            if isinstance(e, SummarizerError):
                if e.stage is None:
                    e.stage = failed_in.value
                logging.error(f"Summarize failed while {failed_in.value}: {e.kind.value}: {e.message}")
            else:
                logging.error(f"Summarize failed while {failed_in.value}: {str(e)}")
            raise

        finally:
            # Runs on cancellation too, so no awaiting here.
            if audio_path is not None:
                self.context.files.release(audio_path)

    async def ask(self, question: Any, context: Any) -> str:
        """
        Answer a follow-up question using only the supplied context.

        Args:
            question: The user's question
            context: Text the answer must be grounded in, usually a summary

        Returns:
            Answer text
        """
        if not isinstance(question, str) or not question.strip():
            raise ValidationError("Question and context are required")
        if not isinstance(context, str) or not context.strip():
            raise ValidationError("Question and context are required")

        try:
            return await self.context.generator.answer(question.strip(), context.strip())
        except SummarizerError as e:
            logging.error(f"Ask failed: {e.kind.value}: {e.message}")
            raise
