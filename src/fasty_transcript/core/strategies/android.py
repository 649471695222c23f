"""Strategy A: ask the InnerTube player API for captions as the ANDROID app."""

from typing import Any, Dict, List, Optional

import requests

from ...models import TranscriptSegment
from ...utils.logging import get_logger
from ..config import Config, get_config
from ..exceptions import CaptionShapeError, TransportError
from ..http import YOUTUBE, fetch, session_scope
from .tracks import caption_tracks_from_tracklist, fetch_caption_track, select_caption_track

logger = get_logger("strategies.android")

PLAYER_ENDPOINT = f"{YOUTUBE}/youtubei/v1/player?prettyPrint=false"


class AndroidClientStrategy:
    """Fetch caption tracks from the private player endpoint as the ANDROID client."""

    name = "ANDROID API"

    def __init__(self, session: Optional[requests.Session] = None, config: Optional[Config] = None):
        self._session = session
        self._config = config or get_config()

    def build_payload(self, video_id: str) -> Dict[str, Any]:
        client = self._config.client
        return {
            "context": {
                "client": {
                    "clientName": "ANDROID",
                    "clientVersion": client.android_client_version,
                    "androidSdkVersion": client.android_sdk_version,
                    "hl": client.hl,
                    "gl": client.gl,
                    "userAgent": client.android_user_agent,
                }
            },
            "videoId": video_id,
            "contentCheckOk": True,
            "racyCheckOk": True,
        }

    def attempt(self, video_id: str) -> List[TranscriptSegment]:
        user_agent = self._config.client.android_user_agent
        network = self._config.network

        with session_scope(self._session, network) as session:
            response = fetch(
                session,
                "POST",
                PLAYER_ENDPOINT,
                headers={"Content-Type": "application/json", "User-Agent": user_agent},
                json_body=self.build_payload(video_id),
                network=network
            )
            if not response.ok:
                raise TransportError(f"ANDROID API returned {response.status_code}")

            data = response.json()
            captions = data.get("captions") if isinstance(data, dict) else None
            if not captions or not isinstance(captions, dict):
                raise CaptionShapeError("no captions in response")

            tracklist = captions.get("playerCaptionsTracklistRenderer")
            if not tracklist:
                raise CaptionShapeError("no caption tracklist")

            tracks = caption_tracks_from_tracklist(tracklist)
            if not tracks:
                raise CaptionShapeError("no caption tracks")

            track = select_caption_track(tracks)
            logger.debug(f"{video_id}: {len(tracks)} tracks, selected lang={track.language_code}")
            return fetch_caption_track(session, track, user_agent, network)
