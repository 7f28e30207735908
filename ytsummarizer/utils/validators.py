"""
Input validation helpers.
"""

import re
from typing import Any, Optional

YOUTUBE_URL_PATTERN = re.compile(
    r"^(https?://)?(www\.|m\.|music\.)?(youtube\.com|youtu\.be)/.+$",
    re.IGNORECASE,
)

VIDEO_ID_PATTERNS = [
    re.compile(r"(?:v=|\/)([0-9A-Za-z_-]{11}).*"),
    re.compile(r"(?:embed\/)([0-9A-Za-z_-]{11})"),
    re.compile(r"(?:shorts\/)([0-9A-Za-z_-]{11})"),
]


def is_valid_youtube_url(candidate: Any) -> bool:
    """
    Check whether a value looks like a YouTube video URL.

    Args:
        candidate: Value to check; anything other than a non-empty string is rejected

    Returns:
        True if the value matches a recognized YouTube URL shape
    """
    if not isinstance(candidate, str):
        return False
    candidate = candidate.strip()
    if not candidate or any(c.isspace() for c in candidate):
        return False
    return YOUTUBE_URL_PATTERN.match(candidate) is not None


def extract_video_id(url: str) -> Optional[str]:
    """Extract the video ID from a YouTube URL."""
    for pattern in VIDEO_ID_PATTERNS:
        match = pattern.search(url)
        if match:
            return match.group(1)

    return None
