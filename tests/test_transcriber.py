"""
Tests for the audio transcriber module.
"""

import asyncio
import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from groq import GroqError

from ytsummarizer.core.transcriber import GroqTranscriber
from ytsummarizer.exceptions import TranscriptionError
from ytsummarizer.models.schemas import TranscriptionConfig


@pytest.fixture
def mock_groq_client():
    """Fixture to mock the Groq client."""
    with patch('ytsummarizer.core.transcriber.AsyncGroq') as mock_groq:
        mock_client = mock_groq.return_value

        mock_response = MagicMock()
        mock_response.text = " This is a test transcript "
        mock_client.audio.transcriptions.create = AsyncMock(return_value=mock_response)

        yield mock_groq


@pytest.fixture
def audio_file(tmp_path):
    path = tmp_path / "audio-1-abc.mp3"
    path.write_bytes(b"test audio data")
    return path


@pytest.fixture
def transcription_config():
    """Fixture to create a TranscriptionConfig object."""
    return TranscriptionConfig(
        model="whisper-large-v3-turbo",
        language="en",
        temperature=0.0,
        timeout=30,
    )


def test_init_transcriber(mock_groq_client, transcription_config):
    """The client is built once with the configured timeout and no retries."""
    transcriber = GroqTranscriber(transcription_config, api_key="test_api_key")

    assert transcriber.api_key == "test_api_key"
    mock_groq_client.assert_called_once_with(api_key="test_api_key", timeout=30, max_retries=0)


def test_init_requires_api_key(mock_groq_client):
    with pytest.raises(ValueError):
        GroqTranscriber(TranscriptionConfig(), api_key=None)


def test_transcribe(mock_groq_client, transcription_config, audio_file):
    """Test transcribing audio file."""
    transcriber = GroqTranscriber(transcription_config, api_key="test_api_key")
    text = asyncio.run(transcriber.transcribe(str(audio_file)))

    create = mock_groq_client.return_value.audio.transcriptions.create
    create.assert_awaited_once()
    kwargs = create.call_args.kwargs
    assert kwargs["file"] == ("audio-1-abc.mp3", b"test audio data")
    assert kwargs["model"] == "whisper-large-v3-turbo"
    assert kwargs["language"] == "en"
    assert "prompt" not in kwargs
    assert text == "This is a test transcript"


def test_transcribe_plain_text_response(mock_groq_client, audio_file):
    mock_groq_client.return_value.audio.transcriptions.create = AsyncMock(return_value="plain transcript")
    transcriber = GroqTranscriber(TranscriptionConfig(response_format="text"), api_key="test_api_key")

    assert asyncio.run(transcriber.transcribe(str(audio_file))) == "plain transcript"


@pytest.mark.parametrize("text", ["", "   ", None])
def test_transcribe_empty_result(mock_groq_client, transcription_config, audio_file, text):
    """An empty transcript in a successful-looking response is still a failure."""
    mock_groq_client.return_value.audio.transcriptions.create.return_value.text = text
    transcriber = GroqTranscriber(transcription_config, api_key="test_api_key")

    with pytest.raises(TranscriptionError, match="no text"):
        asyncio.run(transcriber.transcribe(str(audio_file)))


def test_transcribe_provider_error(mock_groq_client, transcription_config, audio_file):
    mock_groq_client.return_value.audio.transcriptions.create = AsyncMock(
        side_effect=GroqError("file format not supported")
    )
    transcriber = GroqTranscriber(transcription_config, api_key="test_api_key")

    with pytest.raises(TranscriptionError, match="file format not supported") as exc_info:
        asyncio.run(transcriber.transcribe(str(audio_file)))

    assert isinstance(exc_info.value.cause, GroqError)


def test_transcribe_file_not_found(mock_groq_client, transcription_config, tmp_path):
    """Test transcribing with non-existent audio file."""
    transcriber = GroqTranscriber(transcription_config, api_key="test_api_key")

    with pytest.raises(TranscriptionError, match="could not be read"):
        asyncio.run(transcriber.transcribe(str(tmp_path / "nonexistent_file.mp3")))

    mock_groq_client.return_value.audio.transcriptions.create.assert_not_awaited()
