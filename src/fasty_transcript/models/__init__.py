"""Data models for FastyTranscript."""

from .transcript import CaptionTrack, StrategyFailure, TranscriptResult, TranscriptSegment

__all__ = [
    "CaptionTrack",
    "StrategyFailure",
    "TranscriptResult",
    "TranscriptSegment",
]
