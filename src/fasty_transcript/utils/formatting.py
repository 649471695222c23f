"""Join policies and the Markdown document template."""

import math
from typing import Iterable, Optional

from ..models import TranscriptSegment
from .caption_parser import decode_html_entities
from .youtube_utils import short_watch_url

DEFAULT_FOOTER = "Generated by FastyTranscript"


def format_timestamp(seconds: float) -> str:
    """Render seconds as ``MM:SS``; minutes are not wrapped into hours."""
    if not seconds or not math.isfinite(seconds):
        seconds = 0.0
    seconds = max(seconds, 0.0)
    minutes = math.floor(seconds / 60)
    secs = math.floor(seconds % 60)
    return f"{minutes:02d}:{secs:02d}"


def join_plain(segments: Iterable[TranscriptSegment]) -> str:
    """Decode and join segment texts with single spaces."""
    return decode_html_entities(" ".join(segment.text for segment in segments)).strip()


def join_timestamped(segments: Iterable[TranscriptSegment]) -> str:
    """One ``[MM:SS] text`` line per segment."""
    return "\n".join(
        f"[{format_timestamp(segment.start)}] {decode_html_entities(segment.text).strip()}"
        for segment in segments
    )


def join_segments(segments: Iterable[TranscriptSegment], timestamps: bool = False) -> str:
    """Apply the timestamped or plain join policy."""
    return join_timestamped(segments) if timestamps else join_plain(segments)


def format_transcript_markdown(
    transcript: str,
    video_id: str,
    title: str,
    method: Optional[str] = None,
    footer: str = DEFAULT_FOOTER
) -> str:
    """
    Render a transcript as a Markdown document.

    Args:
        transcript: Joined transcript body (either join policy)
        video_id: YouTube video ID
        title: Video title
        method: Name of the strategy that produced the transcript, if shown
        footer: Attribution line

    Returns:
        The complete document
    """
    header = [f"# {title}", "", f"**URL:** {short_watch_url(video_id)}"]
    if method:
        header.append(f"**Method:** {method}")

    return "\n".join(header + [
        "",
        "---",
        "",
        transcript,
        "",
        "---",
        "",
        f"*{footer}*",
    ])
