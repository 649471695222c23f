"""YouTube URL utility functions."""

import re
from typing import Optional

YOUTUBE = "https://www.youtube.com"

_ID = r"([A-Za-z0-9_-]{11})(?![A-Za-z0-9_-])"

# Order matters: URL shapes first, the bare ID last
_VIDEO_ID_PATTERNS = [
    re.compile(r"(?:https?://)?(?:www\.)?youtu\.be/" + _ID),
    re.compile(r"(?:https?://)?(?:www\.)?youtube\.com/watch\?v=" + _ID),
    re.compile(r"(?:https?://)?(?:www\.)?youtube\.com/embed/" + _ID),
    re.compile(r"(?:https?://)?(?:www\.)?youtube\.com/shorts/" + _ID),
    re.compile(r"^([A-Za-z0-9_-]{11})$"),
]


def extract_video_id(url: Optional[str]) -> Optional[str]:
    """
    Extract the video ID from a YouTube URL or bare ID.

    Recognizes ``youtu.be/<id>``, ``youtube.com/watch?v=<id>``,
    ``youtube.com/embed/<id>``, ``youtube.com/shorts/<id>`` and a bare
    11-character ID.

    Args:
        url: YouTube URL or video ID

    Returns:
        Video ID or None if the input is not recognized
    """
    if not url or not isinstance(url, str):
        return None

    value = url.strip()
    for pattern in _VIDEO_ID_PATTERNS:
        match = pattern.search(value)
        if match:
            return match.group(1)

    return None


def watch_url(video_id: str) -> str:
    """Canonical watch URL used for page fetches, yt-dlp and oEmbed."""
    return f"{YOUTUBE}/watch?v={video_id}"


def short_watch_url(video_id: str) -> str:
    """Watch URL as printed in rendered documents."""
    return f"https://youtube.com/watch?v={video_id}"
