"""Video title lookup through YouTube's oEmbed endpoint."""

from typing import Optional

import requests

from ..utils.logging import get_logger
from ..utils.youtube_utils import watch_url
from .config import Config, get_config
from .exceptions import TranscriptError
from .http import YOUTUBE, fetch, session_scope

logger = get_logger("title_resolver")

OEMBED_ENDPOINT = f"{YOUTUBE}/oembed"


def placeholder_title(video_id: str) -> str:
    return f"YouTube Video {video_id}"


def resolve_title(
    video_id: str,
    session: Optional[requests.Session] = None,
    config: Optional[Config] = None
) -> str:
    """
    Return the video title, or a placeholder built from the ID.

    Never raises: a missing title must not fail a transcript fetch.
    """
    config = config or get_config()
    try:
        with session_scope(session, config.network) as s:
            response = fetch(
                s,
                "GET",
                OEMBED_ENDPOINT,
                params={"url": watch_url(video_id), "format": "json"},
                headers={"User-Agent": config.client.web_user_agent},
                network=config.network
            )
            if not response.ok:
                logger.debug(f"oEmbed returned {response.status_code} for {video_id}")
                return placeholder_title(video_id)
            data = response.json()
    except (TranscriptError, requests.RequestException) as e:
        logger.debug(f"Title lookup failed for {video_id}: {e}")
        return placeholder_title(video_id)

    title = data.get("title") if isinstance(data, dict) else None
    if not title or not isinstance(title, str):
        return placeholder_title(video_id)
    return title
