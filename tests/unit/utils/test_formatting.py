"""Unit tests for join policies and the Markdown document."""

import pytest

from fasty_transcript.models import TranscriptSegment
from fasty_transcript.utils.caption_parser import parse_caption_segments
from fasty_transcript.utils.formatting import (
    format_timestamp,
    format_transcript_markdown,
    join_plain,
    join_segments,
    join_timestamped
)

from fakes import SRV1_XML, SRV3_XML, VIDEO_ID


class TestFormatTimestamp:

    @pytest.mark.parametrize("seconds,expected", [
        (0, "00:00"),
        (2.9, "00:02"),
        (59.99, "00:59"),
        (60, "01:00"),
        (65.5, "01:05"),
        (3725, "62:05"),
        (-3, "00:00"),
        (float("nan"), "00:00"),
        (float("inf"), "00:00"),
        (float("-inf"), "00:00"),
    ])
    def test_floor_based(self, seconds, expected):
        assert format_timestamp(seconds) == expected


class TestJoinPolicies:

    def test_plain_join(self):
        segments = parse_caption_segments(SRV1_XML)
        assert join_plain(segments) == "Hello World"

    def test_timestamped_join(self):
        segments = parse_caption_segments(SRV1_XML)
        assert join_timestamped(segments) == "[00:00] Hello\n[00:02] World"

    def test_join_segments_dispatch(self):
        segments = parse_caption_segments(SRV1_XML)
        assert join_segments(segments) == "Hello World"
        assert join_segments(segments, timestamps=True) == "[00:00] Hello\n[00:02] World"

    def test_entities_decoded_once_at_join(self):
        segments = [TranscriptSegment(text="it&#39;s &amp; great")]
        assert join_plain(segments) == "it's & great"
        assert join_timestamped(segments) == "[00:00] it's & great"

    def test_entities_decoded_for_srv3(self):
        segments = parse_caption_segments(SRV3_XML)
        assert join_plain(segments) == "one two it's & great"
        assert join_timestamped(segments).splitlines()[1] == "[01:05] it's & great"

    def test_whitespace_collapsed_and_trimmed(self):
        segments = [TranscriptSegment(text="  spaced\n out "), TranscriptSegment(text=" words  ")]
        assert join_plain(segments) == "spaced out words"
        assert join_timestamped(segments) == "[00:00] spaced out\n[00:00] words"

    def test_non_finite_timing_renders_as_zero(self):
        segments = parse_caption_segments('<text start="nan" dur="1">Hello</text><text start="inf" dur="1">World</text>')
        assert join_timestamped(segments) == "[00:00] Hello\n[00:00] World"

    def test_empty(self):
        assert join_plain([]) == ""
        assert join_timestamped([]) == ""


class TestFormatTranscriptMarkdown:

    def test_template(self):
        document = format_transcript_markdown("Hello World", VIDEO_ID, "Never Gonna Give You Up")
        assert document == (
            "# Never Gonna Give You Up\n"
            "\n"
            "**URL:** https://youtube.com/watch?v=dQw4w9WgXcQ\n"
            "\n"
            "---\n"
            "\n"
            "Hello World\n"
            "\n"
            "---\n"
            "\n"
            "*Generated by FastyTranscript*"
        )

    def test_method_line(self):
        document = format_transcript_markdown("body", VIDEO_ID, "Title", method="ANDROID API")
        assert "**URL:** https://youtube.com/watch?v=dQw4w9WgXcQ\n**Method:** ANDROID API\n" in document

    def test_body_agnostic_to_join_policy(self):
        body = "[00:00] Hello\n[00:02] World"
        document = format_transcript_markdown(body, VIDEO_ID, "Title", footer="Custom footer")
        assert "\n---\n\n[00:00] Hello\n[00:02] World\n\n---\n" in document
        assert document.endswith("*Custom footer*")
