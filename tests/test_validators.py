"""
Tests for URL validation.
"""

import pytest

from ytsummarizer.utils.validators import extract_video_id, is_valid_youtube_url


@pytest.mark.parametrize("url", [
    "https://youtu.be/abc123",
    "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
    "http://youtube.com/watch?v=dQw4w9WgXcQ",
    "youtube.com/watch?v=dQw4w9WgXcQ",
    "www.youtube.com/shorts/dQw4w9WgXcQ",
    "https://m.youtube.com/watch?v=dQw4w9WgXcQ",
    "  https://youtu.be/V3TUEeB0kW0?si=-InVol0JhtWji-6R  ",
])
def test_accepts_youtube_urls(url):
    assert is_valid_youtube_url(url)


@pytest.mark.parametrize("url", [
    None,
    "",
    "   ",
    "not a url",
    "https://youtu.be/",
    "https://youtube.com",
    "https://vimeo.com/12345",
    "https://notyoutube.com/watch?v=dQw4w9WgXcQ",
    "ftp://youtube.com/watch?v=dQw4w9WgXcQ",
    "https://youtube.com/watch?v=abc def",
    12345,
])
def test_rejects_everything_else(url):
    assert not is_valid_youtube_url(url)


def test_extract_video_id():
    """Test extracting the 11-character video ID from common URL shapes."""
    assert extract_video_id("https://www.youtube.com/watch?v=dQw4w9WgXcQ") == "dQw4w9WgXcQ"
    assert extract_video_id("https://youtu.be/V3TUEeB0kW0?si=-InVol0JhtWji-6R") == "V3TUEeB0kW0"
    assert extract_video_id("https://www.youtube.com/embed/dQw4w9WgXcQ") == "dQw4w9WgXcQ"
    assert extract_video_id("https://youtu.be/abc123") is None
