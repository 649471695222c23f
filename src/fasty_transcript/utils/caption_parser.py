"""
Format-agnostic caption parsing.

YouTube serves timed text in several encodings. Three are understood here:

- srv1: one ``<text start=".." dur="..">caption</text>`` element per cue,
  timing in seconds.
- srv3: ``<p t=".." d="..">`` paragraphs, timing in milliseconds, with the
  words of a cue split into nested ``<s>`` elements.
- WebVTT: plain subtitle cues. Only used for yt-dlp sourced payloads and
  carries no timing we keep.

Parsing never raises; unrecognized input gives an empty list.
"""

import html
import math
import re
from typing import List, Optional

from ..models import TranscriptSegment

_SRV1_RE = re.compile(r"<text\b([^>]*)>([^<]*)</text>")
_SRV3_PARAGRAPH_RE = re.compile(r"<p\b([^>]*)>(.*?)</p>", re.S)
_SRV3_WORD_RE = re.compile(r"<s\b[^>]*>([^<]*)</s>")
_TAG_RE = re.compile(r"<[^>]+>")
_WHITESPACE_RE = re.compile(r"\s+")
_CUE_INDEX_RE = re.compile(r"^\d+$")
_NUMBER_RE = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?\s*$")

_VTT_HEADER_PREFIXES = ("WEBVTT", "Kind:", "Language:", "NOTE")


def _attribute(attrs: str, name: str) -> Optional[str]:
    match = re.search(r'\b' + name + r'="([^"]*)"', attrs)
    return match.group(1) if match else None


def _to_float(value: Optional[str]) -> float:
    """Plain decimal numbers only; anything else, or a non-finite result, is 0."""
    if not value or not _NUMBER_RE.match(value):
        return 0.0
    number = float(value)
    return number if math.isfinite(number) else 0.0


def strip_tags(text: str) -> str:
    """Remove every ``<...>`` tag."""
    return _TAG_RE.sub("", text)


def decode_html_entities(text: str) -> str:
    """Decode named and numeric character references and collapse whitespace."""
    return _WHITESPACE_RE.sub(" ", html.unescape(text))


def parse_srv1(payload: str) -> List[TranscriptSegment]:
    """Parse the tag-per-line dialect. Blank cues are skipped."""
    segments = []
    for match in _SRV1_RE.finditer(payload):
        attrs, text = match.group(1), match.group(2)
        if not text.strip():
            continue
        segments.append(TranscriptSegment(
            text=text,
            start=_to_float(_attribute(attrs, "start")),
            duration=_to_float(_attribute(attrs, "dur"))
        ))
    return segments


def parse_srv3(payload: str) -> List[TranscriptSegment]:
    """Parse the nested paragraph/word dialect.

    Word fragments already carry their own spacing, so they are joined with
    no separator. Paragraphs without words fall back to their stripped text.
    """
    segments = []
    for match in _SRV3_PARAGRAPH_RE.finditer(payload):
        attrs, inner = match.group(1), match.group(2)
        words = [word for word in _SRV3_WORD_RE.findall(inner) if word]
        if words:
            text = "".join(words)
        else:
            text = strip_tags(inner).strip()
        if not text:
            continue
        segments.append(TranscriptSegment(
            text=text,
            start=_to_float(_attribute(attrs, "t")) / 1000.0,
            duration=_to_float(_attribute(attrs, "d")) / 1000.0
        ))
    return segments


def parse_vtt(payload: str) -> List[TranscriptSegment]:
    """Parse WebVTT into untimed, de-duplicated text lines.

    Rolling auto-captions repeat each line several times, so any line seen
    before is dropped, not only adjacent repeats.
    """
    segments = []
    seen = set()
    for line in payload.splitlines():
        stripped = line.strip()
        if (
            not stripped
            or stripped.startswith(_VTT_HEADER_PREFIXES)
            or _CUE_INDEX_RE.match(stripped)
            or "-->" in stripped
        ):
            continue
        text = decode_html_entities(strip_tags(stripped)).strip()
        if text and text not in seen:
            seen.add(text)
            segments.append(TranscriptSegment(text=text))
    return segments


def parse_caption_segments(payload: Optional[str], allow_plain_subtitles: bool = False) -> List[TranscriptSegment]:
    """
    Parse a caption payload into ordered segments.

    Args:
        payload: Raw caption body
        allow_plain_subtitles: Also accept WebVTT when neither XML dialect matches

    Returns:
        Segments in source order; empty when nothing was recognized
    """
    if not payload:
        return []

    segments = parse_srv1(payload)
    if segments:
        return segments

    segments = parse_srv3(payload)
    if segments:
        return segments

    if allow_plain_subtitles and "WEBVTT" in payload:
        return parse_vtt(payload)

    return []
