import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_YEAR = 2022
DEFAULT_INPUT_DIR = "data/inputs"
DEFAULT_LOG_LEVEL = "INFO"


def load_env() -> None:
    """Load .env from the working directory if present. Existing variables win."""
    env_path = Path.cwd() / ".env"
    if env_path.exists():
        load_dotenv(dotenv_path=env_path, override=False)


def session_token() -> Optional[str]:
    return os.getenv("AOC_SESSION") or None


def puzzle_year() -> int:
    value = os.getenv("AOC_YEAR")
    if not value:
        return DEFAULT_YEAR
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"AOC_YEAR must be an integer, got {value!r}")


def input_dir() -> Path:
    return Path(os.getenv("AOC_INPUT_DIR") or DEFAULT_INPUT_DIR)


def log_level() -> str:
    return (os.getenv("AOC_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()


def log_dir() -> Optional[Path]:
    value = os.getenv("AOC_LOG_DIR")
    return Path(value) if value else None
