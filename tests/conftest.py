"""
Configuration for pytest tests.
"""

import os
import pytest
from pathlib import Path

os.environ.setdefault("LOG_DIR", str(Path(__file__).parent.parent / "logs"))

from ytsummarizer.config import Config
from ytsummarizer.dependencies import AppContext
from ytsummarizer.utils.temp_files import TempFileManager

from fakes import FakeAcquirer, FakeGenerator, FakeTranscriber


@pytest.fixture
def temp_dir(tmp_path):
    """Temporary audio directory for one test."""
    return tmp_path / "temp"


@pytest.fixture
def make_context(temp_dir):
    """Factory for an AppContext wired with fakes."""

    def _make(acquirer=None, transcriber=None, generator=None, environment="development"):
        config = Config(environment=environment, temp_dir=temp_dir, groq_api_key="test_api_key")
        return AppContext(
            config=config,
            files=TempFileManager(config.temp_dir),
            acquirer=acquirer or FakeAcquirer(),
            transcriber=transcriber or FakeTranscriber(),
            generator=generator or FakeGenerator(),
        )

    return _make


@pytest.fixture
def test_video_url():
    """Return a test YouTube video URL."""
    return "https://youtu.be/V3TUEeB0kW0?si=-InVol0JhtWji-6R"
