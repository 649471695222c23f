"""Strategy B: scrape caption tracks out of the public watch page."""

import json
import re
from typing import List, Optional

import requests

from ...models import CaptionTrack, TranscriptSegment
from ...utils.logging import get_logger
from ...utils.youtube_utils import watch_url
from ..config import Config, get_config
from ..exceptions import CaptionShapeError, TransportError
from ..http import fetch, session_scope
from .tracks import (
    caption_tracks_from_player,
    caption_tracks_from_tracklist,
    fetch_caption_track,
    select_caption_track
)

logger = get_logger("strategies.page")

PLAYER_RESPONSE_RE = re.compile(r"ytInitialPlayerResponse\s*=\s*\{")
CAPTIONS_MARKER = '"captions":'
CAPTCHA_MARKER = 'class="g-recaptcha"'
PLAYABILITY_MARKER = '"playabilityStatus":'


def extract_json_object(text: str, start: int) -> Optional[str]:
    """
    Return the ``{...}`` span opening at ``text[start]``.

    Counts every brace until the depth returns to zero. Returns None when
    ``start`` is not an opening brace or the object never closes.
    """
    if start < 0 or start >= len(text) or text[start] != "{":
        return None
    depth = 0
    for i in range(start, len(text)):
        char = text[i]
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return text[start:i + 1]
    return None


def _load(span: Optional[str]) -> Optional[dict]:
    if not span:
        return None
    try:
        data = json.loads(span)
    except ValueError:
        return None
    return data if isinstance(data, dict) else None


def tracks_from_player_response(html: str) -> List[CaptionTrack]:
    """Caption tracks from the ``ytInitialPlayerResponse = {...}`` assignment."""
    marker = PLAYER_RESPONSE_RE.search(html)
    if not marker:
        return []
    player = _load(extract_json_object(html, marker.end() - 1))
    return caption_tracks_from_player(player) if player else []


def tracks_from_captions_marker(html: str) -> List[CaptionTrack]:
    """Caption tracks from the first ``"captions":{...}`` object in the page."""
    index = html.find(CAPTIONS_MARKER)
    if index == -1:
        return []
    brace = html.find("{", index + len(CAPTIONS_MARKER))
    captions = _load(extract_json_object(html, brace))
    if not captions:
        return []
    return caption_tracks_from_tracklist(captions.get("playerCaptionsTracklistRenderer"))


class WatchPageStrategy:
    """Fetch the watch page as a desktop browser and read the embedded player config."""

    name = "Page scraping"

    def __init__(self, session: Optional[requests.Session] = None, config: Optional[Config] = None):
        self._session = session
        self._config = config or get_config()

    def attempt(self, video_id: str) -> List[TranscriptSegment]:
        user_agent = self._config.client.web_user_agent
        network = self._config.network

        with session_scope(self._session, network) as session:
            response = fetch(
                session,
                "GET",
                watch_url(video_id),
                headers={"User-Agent": user_agent, "Accept-Language": "en-US,en;q=0.9"},
                network=network
            )
            if not response.ok:
                raise TransportError(f"YouTube page returned {response.status_code}")

            html = response.text
            if CAPTCHA_MARKER in html:
                raise TransportError("Rate limited (captcha)")

            tracks = tracks_from_player_response(html)
            if not tracks:
                logger.debug(f"{video_id}: no tracks in ytInitialPlayerResponse, trying captions marker")
                tracks = tracks_from_captions_marker(html)

            if not tracks:
                if PLAYABILITY_MARKER not in html:
                    raise CaptionShapeError("Video is unavailable")
                raise CaptionShapeError("Could not extract captions from page")

            track = select_caption_track(tracks)
            logger.debug(f"{video_id}: {len(tracks)} tracks, selected lang={track.language_code}")
            return fetch_caption_track(session, track, user_agent, network)
