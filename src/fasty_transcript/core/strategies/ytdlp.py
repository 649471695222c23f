"""Strategy C: let the yt-dlp command-line tool find subtitle URLs."""

import json
import subprocess
import tempfile
import threading
from typing import Any, Dict, List, Optional, Sequence

from ...models import TranscriptSegment
from ...utils.caption_parser import parse_caption_segments
from ...utils.logging import get_logger
from ...utils.youtube_utils import watch_url
from ..config import Config, get_config
from ..exceptions import CaptionParseError, CaptionShapeError, TransportError

logger = get_logger("strategies.ytdlp")

# srv1 and srv3 are the two XML dialects the parser knows, vtt is the fallback
FORMAT_PREFERENCE = ("srv1", "srv3", "vtt")
CHUNK_SIZE = 64 * 1024


def run_tool(args: Sequence[str], timeout: float, max_output_bytes: int) -> str:
    """
    Run a command without a shell and return its stdout.

    Every argument is passed as its own argv entry, so nothing in it is
    re-tokenized or interpreted by a shell. Stdout is read in chunks and the
    process is killed as soon as it passes ``max_output_bytes`` or ``timeout``.
    """
    tool = args[0]
    with tempfile.TemporaryFile() as stderr_file:
        try:
            proc = subprocess.Popen(
                list(args),
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=stderr_file
            )
        except FileNotFoundError as e:
            raise TransportError(f"{tool} is not installed") from e
        except OSError as e:
            raise TransportError(f"{tool} could not be started: {e}") from e

        expired = threading.Event()

        def expire():
            expired.set()
            proc.kill()

        watchdog = threading.Timer(timeout, expire)
        watchdog.daemon = True
        watchdog.start()
        output = bytearray()
        try:
            while True:
                chunk = proc.stdout.read1(CHUNK_SIZE)
                if not chunk:
                    break
                output.extend(chunk)
                if len(output) > max_output_bytes:
                    raise TransportError(f"{tool} output exceeded {max_output_bytes} bytes")
            returncode = proc.wait()
        finally:
            watchdog.cancel()
            if proc.poll() is None:
                proc.kill()
                proc.wait()
            proc.stdout.close()

        if expired.is_set():
            raise TransportError(f"{tool} timed out after {timeout:g}s")

        if returncode != 0:
            # Only the tail of stderr is read back
            size = stderr_file.seek(0, 2)
            stderr_file.seek(max(size - 500, 0))
            stderr = stderr_file.read().decode("utf-8", errors="replace").strip()
            logger.debug(f"{tool} stderr: {stderr}")
            raise TransportError(f"{tool} exited with status {returncode}")

    return bytes(output).decode("utf-8", errors="replace")


def _pick_language(tracks_by_language: Any) -> Optional[List[Dict[str, Any]]]:
    if not isinstance(tracks_by_language, dict) or not tracks_by_language:
        return None

    def usable(entries: Any) -> bool:
        return isinstance(entries, list) and any(isinstance(entry, dict) for entry in entries)

    if usable(tracks_by_language.get("en")):
        return tracks_by_language["en"]
    for language, entries in tracks_by_language.items():
        if isinstance(language, str) and language.startswith("en") and usable(entries):
            return entries
    for entries in tracks_by_language.values():
        if usable(entries):
            return entries
    return None


def select_subtitle_source(info: Dict[str, Any]) -> Optional[List[Dict[str, Any]]]:
    """Manual English, any manual, auto-generated English, any auto-generated."""
    return _pick_language(info.get("subtitles")) or _pick_language(info.get("automatic_captions"))


def select_subtitle_format(entries: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Prefer srv1, then srv3, then vtt, then the first listed entry."""
    candidates = [entry for entry in entries if isinstance(entry, dict)]
    for ext in FORMAT_PREFERENCE:
        for entry in candidates:
            if entry.get("ext") == ext:
                return entry
    return candidates[0] if candidates else {}


class YtDlpStrategy:
    """Dump video metadata with yt-dlp, then download the best subtitle with curl."""

    name = "yt-dlp"

    def __init__(self, config: Optional[Config] = None):
        self._config = config or get_config()

    def metadata_command(self, video_id: str) -> List[str]:
        return [self._config.tools.ytdlp_path, "--skip-download", "--dump-json", "--", watch_url(video_id)]

    def download_command(self, url: str) -> List[str]:
        tools = self._config.tools
        return [tools.curl_path, "-sL", "--max-filesize", str(tools.max_output_bytes), "--", url]

    def attempt(self, video_id: str) -> List[TranscriptSegment]:
        tools = self._config.tools

        output = run_tool(self.metadata_command(video_id), tools.ytdlp_timeout, tools.max_output_bytes)
        try:
            info = json.loads(output)
        except ValueError as e:
            raise CaptionShapeError("metadata was not valid JSON") from e
        if not isinstance(info, dict):
            raise CaptionShapeError("metadata was not valid JSON")

        entries = select_subtitle_source(info)
        if not entries:
            raise CaptionShapeError("no subtitle sources found")

        entry = select_subtitle_format(entries)
        url = entry.get("url")
        if not url or not isinstance(url, str):
            raise CaptionShapeError("no subtitle track URL")
        # The URL comes from yt-dlp's output, not from us
        if not url.startswith(("https://", "http://")):
            raise CaptionShapeError("subtitle track URL is not an http(s) URL")

        logger.debug(f"{video_id}: downloading {entry.get('ext', '?')} subtitles")
        content = run_tool(self.download_command(url), tools.curl_timeout, tools.max_output_bytes)
        if not content.strip():
            raise TransportError("subtitle URL returned empty")

        segments = parse_caption_segments(content, allow_plain_subtitles=True)
        if not segments:
            raise CaptionParseError("could not parse subtitle content")
        return segments
