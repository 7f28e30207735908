"""
API client for communicating with the YouTube Video Summarizer backend.
"""

from typing import Any, Dict
from urllib.parse import urljoin

import requests


class ApiError(Exception):
    """Raised when the backend answers with an error body or cannot be reached."""

    def __init__(self, message: str, status_code: int = 0, error_type: str = ""):
        self.message = message
        self.status_code = status_code
        self.error_type = error_type
        super().__init__(message)


class ApiClient:
    """Client for interacting with the YouTube Video Summarizer API."""

    def __init__(self, base_url: str = "http://localhost:8000", timeout: float = 600.0):
        """
        Initialize the API client.

        Args:
            base_url: Base URL of the API
            timeout: Seconds to wait for a response; summarizing a long video takes minutes
        """
        self.base_url = base_url.rstrip("/") + "/"
        self.timeout = timeout

    def _url(self, endpoint: str) -> str:
        """Get the full URL for an endpoint."""
        return urljoin(self.base_url, endpoint.lstrip("/"))

    def _handle(self, response: requests.Response) -> Dict[str, Any]:
        try:
            data = response.json()
        except ValueError:
            data = {}

        if not response.ok:
            raise ApiError(
                data.get("error") or f"Request failed with status {response.status_code}",
                status_code=response.status_code,
                error_type=data.get("type", ""),
            )
        return data

    def _post(self, endpoint: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        try:
            response = requests.post(self._url(endpoint), json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            raise ApiError(f"Could not reach the summarizer API: {e}") from e
        return self._handle(response)

    def summarize_video(self, url: str) -> str:
        """
        Request a video summary.

        Args:
            url: YouTube video URL

        Returns:
            Summary text
        """
        return self._post("api/summarize", {"url": url})["summary"]

    def ask(self, question: str, context: str) -> str:
        """
        Ask a follow-up question about a summary.

        Args:
            question: The question
            context: The summary the answer must come from

        Returns:
            Answer text
        """
        return self._post("api/ask", {"question": question, "context": context})["answer"]

    def health(self) -> Dict[str, Any]:
        """Check the health of the API server."""
        try:
            response = requests.get(self._url("health"), timeout=10)
        except requests.RequestException as e:
            raise ApiError(f"Could not reach the summarizer API: {e}") from e
        return self._handle(response)
