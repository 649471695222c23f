"""Exceptions raised while fetching transcripts."""

from typing import Any, Dict, List, Optional

from ..models import StrategyFailure


class TranscriptError(Exception):
    """Base exception class for the transcript fetcher."""

    def __init__(self, detail: str, error_code: str = "TRANSCRIPT_ERROR"):
        self.detail = detail
        self.message = detail  # Alias for compatibility
        self.error_code = error_code
        super().__init__(detail)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to a JSON-serializable dictionary."""
        return {
            "success": False,
            "error": {
                "code": self.error_code,
                "message": self.message
            }
        }


class InvalidVideoIdError(TranscriptError):
    """The input could not be recognized as a YouTube URL or video ID."""

    def __init__(self, value: Optional[str]):
        self.value = value
        super().__init__(
            detail=f"Invalid YouTube URL or ID: {value}",
            error_code="INVALID_VIDEO_ID"
        )


class StrategyError(TranscriptError):
    """A single retrieval strategy failed. Never fatal on its own."""

    def __init__(self, detail: str, error_code: str = "STRATEGY_ERROR"):
        super().__init__(detail=detail, error_code=error_code)


class TransportError(StrategyError):
    """Non-success HTTP status, network failure, subprocess exit, timeout or size overflow."""

    def __init__(self, detail: str):
        super().__init__(detail=detail, error_code="TRANSPORT_ERROR")


class CaptionShapeError(StrategyError):
    """Expected JSON/HTML structure absent or caption track list empty."""

    def __init__(self, detail: str):
        super().__init__(detail=detail, error_code="SHAPE_ERROR")


class CaptionParseError(StrategyError):
    """Caption payload present but not recognized by any dialect."""

    def __init__(self, detail: str):
        super().__init__(detail=detail, error_code="PARSE_ERROR")


class AllStrategiesFailedError(TranscriptError):
    """Every strategy failed; carries each individual reason in order."""

    def __init__(self, failures: List[StrategyFailure]):
        self.failures = list(failures)
        reasons = "\n".join(f"- {failure}" for failure in self.failures)
        super().__init__(
            detail=f"No transcript available. All methods failed:\n{reasons}",
            error_code="ALL_STRATEGIES_FAILED"
        )

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["error"]["failures"] = [failure.to_dict() for failure in self.failures]
        return data
