"""
YouTube Video Summarizer service.

Downloads the audio of a YouTube video, transcribes it and summarizes the
transcript with hosted LLM APIs. Follow-up questions are answered against a
caller-supplied summary.
"""

from ytsummarizer.config import APP_VERSION

__version__ = APP_VERSION
