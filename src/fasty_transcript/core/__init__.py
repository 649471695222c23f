"""Core modules for transcript retrieval."""

from .config import config, get_config, Config
from .exceptions import (
    TranscriptError,
    InvalidVideoIdError,
    StrategyError,
    TransportError,
    CaptionShapeError,
    CaptionParseError,
    AllStrategiesFailedError
)
from .title_resolver import resolve_title
from .transcript_fetcher import TranscriptFetcher, get_video_transcript

__all__ = [
    'config',
    'get_config',
    'Config',
    'TranscriptError',
    'InvalidVideoIdError',
    'StrategyError',
    'TransportError',
    'CaptionShapeError',
    'CaptionParseError',
    'AllStrategiesFailedError',
    'resolve_title',
    'TranscriptFetcher',
    'get_video_transcript'
]
