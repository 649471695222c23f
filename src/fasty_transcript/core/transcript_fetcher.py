"""
Ordered fallback across transcript retrieval strategies.

The fetcher tries each strategy once, in order:

- ANDROID API: InnerTube player endpoint as the ANDROID app
- Page scraping: player config embedded in the watch page
- yt-dlp: subtitle URLs from the yt-dlp command-line tool

The first strategy to return segments wins. Every failure is recorded, and
only when all of them fail is a single AllStrategiesFailedError raised. The
oEmbed title lookup runs alongside the first strategy and is attached to
whichever strategy wins.
"""

import asyncio
import time
from enum import Enum
from typing import Callable, List, Optional, Sequence

from ..models import StrategyFailure, TranscriptResult
from ..utils.formatting import join_segments
from ..utils.logging import get_logger
from ..utils.youtube_utils import extract_video_id
from .config import Config, get_config
from .exceptions import AllStrategiesFailedError, InvalidVideoIdError
from .strategies import TranscriptStrategy, default_strategies
from .title_resolver import placeholder_title, resolve_title

logger = get_logger("transcript_fetcher")


class FetchState(Enum):
    """Orchestrator progress, logged as it advances."""
    IDLE = "idle"
    TRYING = "trying"
    SUCCEEDED = "succeeded"
    EXHAUSTED = "exhausted_failed"


class TranscriptFetcher:
    """Runs strategies in priority order until one returns a transcript."""

    def __init__(
        self,
        strategies: Optional[Sequence[TranscriptStrategy]] = None,
        title_resolver: Optional[Callable[[str], str]] = None,
        config: Optional[Config] = None
    ):
        self.config = config or get_config()
        self.strategies = list(strategies) if strategies is not None else default_strategies(self.config)
        self.title_resolver = title_resolver or (lambda video_id: resolve_title(video_id, config=self.config))

    async def fetch_transcript(self, video_id: str, timestamps: bool = False) -> TranscriptResult:
        """
        Fetch and join the transcript for an already validated video ID.

        Args:
            video_id: 11-character YouTube video ID
            timestamps: Prefix each segment with ``[MM:SS]`` instead of joining into one paragraph

        Returns:
            TranscriptResult from the first strategy that succeeded

        Raises:
            AllStrategiesFailedError: every strategy failed
        """
        start_time = time.time()
        state = FetchState.IDLE
        total = len(self.strategies)
        logger.debug(f"[{state.value}] Fetching {video_id} with {total} strategies")
        title_task = asyncio.ensure_future(asyncio.to_thread(self.title_resolver, video_id))
        failures: List[StrategyFailure] = []

        for index, strategy in enumerate(self.strategies, start=1):
            state = FetchState.TRYING
            logger.info(f"[{state.value} {index}/{total}] Trying {strategy.name} for {video_id}")
            try:
                segments = await asyncio.to_thread(strategy.attempt, video_id)
            except Exception as e:
                logger.warning(f"{strategy.name} failed for {video_id}: {e}")
                failures.append(StrategyFailure(strategy.name, str(e)))
                continue

            if not segments:
                logger.warning(f"{strategy.name} returned no segments for {video_id}")
                failures.append(StrategyFailure(strategy.name, "no transcript segments"))
                continue

            try:
                title = await title_task
            except Exception as e:
                logger.debug(f"Title lookup failed for {video_id}: {e}")
                title = placeholder_title(video_id)
            state = FetchState.SUCCEEDED
            logger.info(
                f"[{state.value}] Fetched {len(segments)} segments for {video_id} via {strategy.name} "
                f"in {int((time.time() - start_time) * 1000)}ms"
            )
            return TranscriptResult(
                transcript=join_segments(segments, timestamps=timestamps),
                title=title,
                video_id=video_id,
                method=strategy.name,
                segments=segments
            )

        title_task.cancel()
        state = FetchState.EXHAUSTED
        error = AllStrategiesFailedError(failures)
        logger.error(f"[{state.value}] {error.detail}")
        raise error

    def get_transcript(self, url_or_id: str, timestamps: bool = False) -> TranscriptResult:
        """
        Synchronous entry point taking a URL or bare video ID.

        Raises:
            InvalidVideoIdError: input is not a recognized URL or ID; no strategy is tried
            AllStrategiesFailedError: every strategy failed
        """
        video_id = extract_video_id(url_or_id)
        if not video_id:
            raise InvalidVideoIdError(url_or_id)
        return asyncio.run(self.fetch_transcript(video_id, timestamps=timestamps))


def get_video_transcript(url_or_id: str, timestamps: bool = False) -> TranscriptResult:
    """Fetch a transcript with the default strategies and configuration."""
    return TranscriptFetcher().get_transcript(url_or_id, timestamps=timestamps)
