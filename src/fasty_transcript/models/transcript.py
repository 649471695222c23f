"""Data models for caption tracks, transcript segments and fetch results."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class TranscriptSegment:
    """Represents a single transcript segment with timing.

    ``text`` is kept exactly as the source encoded it (entities included);
    decoding happens when segments are joined.
    """
    text: str
    start: float = 0.0
    duration: float = 0.0

    @property
    def end(self) -> float:
        """Calculate end time."""
        return self.start + self.duration

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "text": self.text,
            "start": self.start,
            "duration": self.duration
        }


@dataclass(frozen=True)
class CaptionTrack:
    """A language-tagged pointer to a fetchable timed-text resource."""
    base_url: str
    language_code: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Optional["CaptionTrack"]:
        """Build from a player ``captionTracks`` entry; ``None`` when it has no URL."""
        if not isinstance(data, dict):
            return None
        base_url = data.get("baseUrl")
        if not base_url or not isinstance(base_url, str):
            return None
        return cls(base_url=base_url, language_code=str(data.get("languageCode") or ""))


@dataclass(frozen=True)
class StrategyFailure:
    """Why one strategy failed."""
    strategy_name: str
    message: str

    def __str__(self) -> str:
        return f"{self.strategy_name}: {self.message}"

    def to_dict(self) -> Dict[str, str]:
        return {"strategy": self.strategy_name, "message": self.message}


@dataclass
class TranscriptResult:
    """Successful transcript fetch."""
    transcript: str
    title: str
    video_id: str
    method: Optional[str] = None
    segments: List[TranscriptSegment] = field(default_factory=list)

    @property
    def segment_count(self) -> int:
        return len(self.segments)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON payload printed by ``--json``."""
        return {
            "videoId": self.video_id,
            "title": self.title,
            "method": self.method,
            "segmentCount": self.segment_count,
            "segments": [segment.to_dict() for segment in self.segments]
        }
