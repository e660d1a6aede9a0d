"""
Puzzle input sources: local files, the on-disk cache, and adventofcode.com.
"""

from pathlib import Path
from typing import Optional

import requests

from . import __version__
from .logger import get_logger
from .retry import RetryError, exponential_backoff, should_retry_http_status

logger = get_logger()

AOC_BASE_URL = "https://adventofcode.com"
USER_AGENT = f"aoc2022/{__version__} python-requests/{requests.__version__}"


def input_url(year: int, day: int) -> str:
    return f"{AOC_BASE_URL}/{year}/day/{day}/input"


def input_cache_path(input_dir: Path, year: int, day: int) -> Path:
    return Path(input_dir) / str(year) / f"day{day:02d}.txt"


def read_input(path: Path) -> str:
    """
    Read puzzle input from a local file.

    Raises:
        ValueError: If the file is missing or unreadable
    """
    path = Path(path)
    logger.record_input_request("file")
    if not path.exists():
        logger.record_input_failure("file", "FileNotFound")
        raise ValueError(f"Input file not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.record_input_failure("file", type(e).__name__)
        raise ValueError(f"Could not read input file {path}: {e}")
    logger.record_input_loaded("file")
    logger.debug("Read input file", path=str(path), chars=len(text))
    return text


def _log_retry(attempt: int, error: Exception, delay: float):
    logger.warning("Input download failed, retrying", attempt=attempt, delay=delay, error=str(error))


@exponential_backoff(
    max_retries=3,
    base_delay=1.0,
    exceptions=(
        requests.exceptions.Timeout,
        requests.exceptions.ConnectionError,
        requests.exceptions.HTTPError,
    ),
    on_retry=_log_retry,
)
def _fetch_with_retry(url: str, session: str):
    """Fetch URL, retrying on transient errors. Non-transient statuses are returned as-is."""
    logger.record_api_call()
    resp = requests.get(
        url,
        cookies={"session": session},
        headers={"User-Agent": USER_AGENT},
        timeout=20,
    )
    if should_retry_http_status(resp.status_code):
        resp.raise_for_status()
    return resp


def fetch_input(day: int, year: int, session: Optional[str]) -> str:
    """
    Download puzzle input for one day.

    Args:
        day: Puzzle day (1-25)
        year: Event year
        session: Value of the adventofcode.com `session` cookie

    Returns:
        The raw input text

    Raises:
        ValueError: On missing session, bad day, HTTP error or exhausted retries
    """
    if not session:
        raise ValueError("Missing AOC_SESSION. Set env var or pass --session.")
    if not 1 <= day <= 25:
        raise ValueError(f"Day must be between 1 and 25, got {day}")

    url = input_url(year, day)
    logger.record_input_request("http")
    try:
        resp = _fetch_with_retry(url, session)
        resp.raise_for_status()
    except RetryError as e:
        logger.record_input_failure("http", type(e.__cause__).__name__)
        logger.error("Input download gave up", url=url, error=str(e))
        raise ValueError(f"Input download failed after retries: {url}")
    except requests.exceptions.HTTPError as e:
        status = e.response.status_code if e.response is not None else "HTTPError"
        logger.record_input_failure("http", f"HTTPError_{status}")
        if status == 404:
            logger.warning("Puzzle input not found", url=url, status=404)
            raise ValueError(f"Puzzle input not found (404), is day {day} of {year} unlocked? {url}")
        if status in (400, 401):
            logger.warning("Session rejected", url=url, status=status)
            raise ValueError(f"Session rejected ({status}). Refresh AOC_SESSION.")
        logger.error("Input request failed", url=url, status=status)
        raise ValueError(f"Input request failed ({status}): {url}")
    except requests.exceptions.RequestException as e:
        logger.record_input_failure("http", "RequestException")
        logger.error("Input request error", url=url, error=str(e))
        raise ValueError(f"Input request error: {e}")

    logger.record_input_loaded("http")
    logger.info("Downloaded puzzle input", year=year, day=day, chars=len(resp.text))
    return resp.text


def save_input(path: Path, text: str) -> None:
    """
    Write input text to the cache.

    Raises:
        ValueError: If the cache directory or file cannot be written
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        logger.record_input_failure("cache", type(e).__name__)
        logger.error("Could not write input cache", path=str(path), error=str(e))
        raise ValueError(f"Could not write input cache {path}: {e}")


def load_input(
    day: int,
    year: int,
    session: Optional[str],
    input_dir: Path,
    refresh: bool = False,
) -> str:
    """
    Return cached input for the day, downloading and caching it when needed.

    Args:
        day: Puzzle day
        year: Event year
        session: adventofcode.com session cookie (only needed on cache miss)
        input_dir: Cache root; files live at <input_dir>/<year>/dayNN.txt
        refresh: Ignore any cached copy

    Returns:
        The raw input text

    Raises:
        ValueError: If the cache cannot be read or written, or the download fails
    """
    path = input_cache_path(input_dir, year, day)
    if path.exists() and not refresh:
        logger.record_input_request("cache")
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.record_input_failure("cache", type(e).__name__)
            raise ValueError(f"Could not read input cache {path}: {e}")
        logger.record_input_loaded("cache")
        logger.debug("Using cached input", path=str(path))
        return text

    text = fetch_input(day, year, session)
    save_input(path, text)
    logger.debug("Cached input", path=str(path))
    return text
