"""
FastyTranscript

Fetch YouTube transcripts through an ordered fallback of retrieval
strategies and render them as Markdown.
"""

__version__ = "0.1.0"

from .utils.logging import get_logger
from .core import (
    TranscriptFetcher,
    get_video_transcript,
    TranscriptError,
    InvalidVideoIdError,
    AllStrategiesFailedError
)
from .models import TranscriptResult, TranscriptSegment
from .utils import extract_video_id, format_transcript_markdown

__all__ = [
    'get_logger',
    'TranscriptFetcher',
    'get_video_transcript',
    'TranscriptError',
    'InvalidVideoIdError',
    'AllStrategiesFailedError',
    'TranscriptResult',
    'TranscriptSegment',
    'extract_video_id',
    'format_transcript_markdown'
]
