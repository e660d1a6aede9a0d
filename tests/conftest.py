"""
Pytest configuration and shared fixtures.
"""

import pytest
from pathlib import Path
from typing import List

ENV_VARS = ["AOC_SESSION", "AOC_YEAR", "AOC_INPUT_DIR", "AOC_LOG_LEVEL", "AOC_LOG_DIR"]

RUCKSACK_LINES = [
    "vJrwpWtwJgWrhcsFMMfFFhFp",
    "jqHRNqRjqzjGDLGLrsFMfFZSrLrFZsSL",
    "PmmdzqPrVvPwwTWBwg",
    "wMqvLMZHhHMvwLHjbvcjnnSBnvTQFn",
    "ttgJtRGJQctTZtZT",
    "CrZsJsPPZsGzwwsLwLmpwMDw",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Run every test without AOC_* settings from the shell or a .env file."""
    # setenv first so teardown also removes anything load_env() adds
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.fixture
def rucksack_lines() -> List[str]:
    """The six sample rucksacks."""
    return list(RUCKSACK_LINES)


@pytest.fixture
def rucksack_text() -> str:
    """Sample rucksacks, indented and padded the way pasted input often is."""
    body = "\n".join(f"    {line}" for line in RUCKSACK_LINES)
    return f"\n{body}\n    "


@pytest.fixture
def calories_text() -> str:
    """Sample calorie list: five elves."""
    return """
    1000
    2000
    3000

    4000

    5000
    6000

    7000
    8000
    9000

    10000"""


@pytest.fixture
def strategy_text() -> str:
    """Sample rock/paper/scissors strategy guide."""
    return """
    A Y
    B X
    C Z
    """


@pytest.fixture
def rucksack_file(tmp_path, rucksack_text) -> Path:
    """Sample rucksacks written to a temporary input file."""
    path = tmp_path / "day03.txt"
    path.write_text(rucksack_text, encoding="utf-8")
    return path
