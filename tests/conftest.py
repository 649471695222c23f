"""Pytest configuration and fixtures for the transcript fetcher tests."""

import os
import sys

import pytest

# Make the src layout and the shared test helpers importable without installing
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src')))
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

# Keep test output quiet
os.environ.setdefault("LOG_LEVEL", "WARNING")

from fasty_transcript.core.config import Config, NetworkConfig, ToolConfig  # noqa: E402
from fakes import VIDEO_ID  # noqa: E402


@pytest.fixture
def video_id():
    return VIDEO_ID


@pytest.fixture
def test_config():
    """Configuration with small limits and predictable tool paths."""
    return Config(
        network=NetworkConfig(http_timeout=5, max_response_bytes=64 * 1024, retry_total=0, retry_backoff=0),
        tools=ToolConfig(
            ytdlp_path="yt-dlp",
            curl_path="curl",
            ytdlp_timeout=45,
            curl_timeout=15,
            max_output_bytes=64 * 1024
        )
    )
