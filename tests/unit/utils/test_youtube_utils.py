"""Unit tests for YouTube URL utility functions."""

import pytest

from fasty_transcript.utils.youtube_utils import extract_video_id, short_watch_url, watch_url


class TestExtractVideoId:
    """Tests for video ID extraction."""

    @pytest.mark.parametrize("url", [
        "https://youtu.be/dQw4w9WgXcQ",
        "youtu.be/dQw4w9WgXcQ?t=10",
        "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
        "https://youtube.com/watch?v=dQw4w9WgXcQ&feature=youtu.be",
        "https://m.youtube.com/watch?v=dQw4w9WgXcQ&t=42s",
        "https://www.youtube.com/embed/dQw4w9WgXcQ",
        "https://www.youtube.com/shorts/dQw4w9WgXcQ",
        "www.youtube.com/shorts/dQw4w9WgXcQ?feature=share",
        "dQw4w9WgXcQ",
        "  dQw4w9WgXcQ  ",
    ])
    def test_recognized_shapes(self, url):
        assert extract_video_id(url) == "dQw4w9WgXcQ"

    @pytest.mark.parametrize("url", [
        "",
        None,
        "dQw4w9WgXc",
        "dQw4w9WgXcQQ",
        "not a video id",
        "https://example.com",
        "https://vimeo.com/123456789",
        "https://www.youtube.com/watch",
        "https://www.youtube.com/watch?v=short",
        "https://www.youtube.com/watch?v=dQw4w9WgXcQtoolong",
    ])
    def test_unrecognized_inputs(self, url):
        assert extract_video_id(url) is None

    def test_identifier_characters(self):
        assert extract_video_id("a-B_c1D2e3F") == "a-B_c1D2e3F"
        assert extract_video_id("https://youtu.be/a-B_c1D2e3F") == "a-B_c1D2e3F"

    def test_idempotent(self):
        video_id = extract_video_id("https://youtu.be/dQw4w9WgXcQ")
        assert extract_video_id(video_id) == video_id

    def test_non_string_input(self):
        assert extract_video_id(12345678901) is None


def test_watch_urls():
    assert watch_url("dQw4w9WgXcQ") == "https://www.youtube.com/watch?v=dQw4w9WgXcQ"
    assert short_watch_url("dQw4w9WgXcQ") == "https://youtube.com/watch?v=dQw4w9WgXcQ"
