"""Caption track selection and fetching shared by the HTTP strategies."""

from typing import Any, Dict, List, Optional, Sequence

import requests

from ...models import CaptionTrack, TranscriptSegment
from ...utils.caption_parser import parse_caption_segments
from ...utils.logging import get_logger
from ..config import NetworkConfig
from ..exceptions import CaptionParseError, TransportError
from ..http import fetch

logger = get_logger("strategies.tracks")


def is_english(language_code: Optional[str]) -> bool:
    return bool(language_code) and language_code.startswith("en")


def select_caption_track(tracks: Sequence[CaptionTrack]) -> CaptionTrack:
    """
    Pick the first English track, else the first track.

    ``tracks`` must not be empty; callers report "no caption tracks" themselves.
    """
    for track in tracks:
        if is_english(track.language_code):
            return track
    return tracks[0]


def caption_tracks_from_tracklist(tracklist: Any) -> List[CaptionTrack]:
    """Read ``captionTracks`` from a ``playerCaptionsTracklistRenderer`` object."""
    if not isinstance(tracklist, dict):
        return []
    raw_tracks = tracklist.get("captionTracks") or []
    if not isinstance(raw_tracks, list):
        return []
    tracks = [CaptionTrack.from_dict(raw) for raw in raw_tracks]
    return [track for track in tracks if track is not None]


def caption_tracks_from_player(player: Dict[str, Any]) -> List[CaptionTrack]:
    """Read ``captions.playerCaptionsTracklistRenderer.captionTracks`` from a player response."""
    captions = player.get("captions") if isinstance(player, dict) else None
    if not isinstance(captions, dict):
        return []
    return caption_tracks_from_tracklist(captions.get("playerCaptionsTracklistRenderer"))


def fetch_caption_track(
    session: requests.Session,
    track: CaptionTrack,
    user_agent: str,
    network: Optional[NetworkConfig] = None
) -> List[TranscriptSegment]:
    """Download a caption track and parse it; an empty result is a failure."""
    logger.debug(f"Fetching caption track lang={track.language_code or '?'}")
    response = fetch(session, "GET", track.base_url, headers={"User-Agent": user_agent}, network=network)
    if not response.ok:
        raise TransportError(f"Caption track returned {response.status_code}")
    if not response.text:
        raise TransportError("Caption track returned empty response")

    segments = parse_caption_segments(response.text)
    if not segments:
        raise CaptionParseError("Could not parse caption XML")
    return segments
