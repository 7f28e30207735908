"""
Tests for the frontend API client.
"""

import pytest
import requests
from unittest.mock import MagicMock, patch

from ytsummarizer.frontend.api_client import ApiClient, ApiError


def make_response(status_code, payload):
    response = MagicMock()
    response.status_code = status_code
    response.ok = status_code < 400
    response.json.return_value = payload
    return response


@pytest.fixture
def mock_post():
    with patch("ytsummarizer.frontend.api_client.requests.post") as post:
        yield post


def test_summarize_video(mock_post):
    mock_post.return_value = make_response(200, {"summary": "A summary."})
    client = ApiClient("http://api.example.com", timeout=30)

    assert client.summarize_video("https://youtu.be/abc123") == "A summary."
    mock_post.assert_called_once_with(
        "http://api.example.com/api/summarize",
        json={"url": "https://youtu.be/abc123"},
        timeout=30,
    )


def test_ask_sends_context(mock_post):
    mock_post.return_value = make_response(200, {"answer": "Fusion."})
    client = ApiClient("http://api.example.com/")

    assert client.ask("What is the topic?", "A summary.") == "Fusion."
    assert mock_post.call_args.args[0] == "http://api.example.com/api/ask"
    assert mock_post.call_args.kwargs["json"] == {"question": "What is the topic?", "context": "A summary."}


def test_error_body_becomes_api_error(mock_post):
    mock_post.return_value = make_response(502, {"error": "Failed to download audio", "type": "AcquisitionError"})
    client = ApiClient()

    with pytest.raises(ApiError) as exc_info:
        client.summarize_video("https://youtu.be/abc123")

    assert exc_info.value.message == "Failed to download audio"
    assert exc_info.value.status_code == 502
    assert exc_info.value.error_type == "AcquisitionError"


def test_non_json_error(mock_post):
    response = make_response(503, None)
    response.json.side_effect = ValueError("no json")
    mock_post.return_value = response

    with pytest.raises(ApiError, match="status 503"):
        ApiClient().summarize_video("https://youtu.be/abc123")


def test_connection_error(mock_post):
    mock_post.side_effect = requests.ConnectionError("refused")

    with pytest.raises(ApiError, match="Could not reach"):
        ApiClient().ask("What?", "Context.")


def test_health():
    with patch("ytsummarizer.frontend.api_client.requests.get") as mock_get:
        mock_get.return_value = make_response(200, {"status": "ok", "tempDirectory": True})

        assert ApiClient("http://localhost:8000").health()["status"] == "ok"
        mock_get.assert_called_once_with("http://localhost:8000/health", timeout=10)
