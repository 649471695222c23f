"""Transcript retrieval strategies, tried in order by TranscriptFetcher."""

from typing import List, Optional, Protocol

from ...models import TranscriptSegment
from ..config import Config
from .android import AndroidClientStrategy
from .page import WatchPageStrategy, extract_json_object
from .tracks import select_caption_track
from .ytdlp import YtDlpStrategy


class TranscriptStrategy(Protocol):
    """Anything with a ``name`` and an ``attempt`` that returns segments or raises."""

    name: str

    def attempt(self, video_id: str) -> List[TranscriptSegment]:
        ...


def default_strategies(config: Optional[Config] = None) -> List[TranscriptStrategy]:
    """ANDROID API, then page scraping, then yt-dlp."""
    return [
        AndroidClientStrategy(config=config),
        WatchPageStrategy(config=config),
        YtDlpStrategy(config=config),
    ]


__all__ = [
    "TranscriptStrategy",
    "AndroidClientStrategy",
    "WatchPageStrategy",
    "YtDlpStrategy",
    "default_strategies",
    "extract_json_object",
    "select_caption_track",
]
