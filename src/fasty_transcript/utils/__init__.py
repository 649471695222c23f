"""
Utility modules for FastyTranscript.
"""

from .logging import setup_logger, get_logger
from .youtube_utils import extract_video_id, watch_url
from .caption_parser import parse_caption_segments, decode_html_entities
from .formatting import (
    format_timestamp,
    format_transcript_markdown,
    join_plain,
    join_segments,
    join_timestamped
)

__all__ = [
    'setup_logger',
    'get_logger',
    'extract_video_id',
    'watch_url',
    'parse_caption_segments',
    'decode_html_entities',
    'format_timestamp',
    'format_transcript_markdown',
    'join_plain',
    'join_segments',
    'join_timestamped'
]
