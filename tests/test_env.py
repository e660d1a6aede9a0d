"""
Tests for environment configuration.
"""

from pathlib import Path

import pytest
from aoc2022 import env

class TestDefaults:
    def test_defaults(self):
        assert env.session_token() is None
        assert env.puzzle_year() == 2022
        assert env.input_dir() == Path("data/inputs")
        assert env.log_level() == "INFO"
        assert env.log_dir() is None


class TestOverrides:
    def test_values_from_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("AOC_SESSION", "abc123")
        monkeypatch.setenv("AOC_YEAR", "2021")
        monkeypatch.setenv("AOC_INPUT_DIR", str(tmp_path))
        monkeypatch.setenv("AOC_LOG_LEVEL", "debug")
        monkeypatch.setenv("AOC_LOG_DIR", str(tmp_path / "logs"))

        assert env.session_token() == "abc123"
        assert env.puzzle_year() == 2021
        assert env.input_dir() == tmp_path
        assert env.log_level() == "DEBUG"
        assert env.log_dir() == tmp_path / "logs"

    def test_bad_year(self, monkeypatch):
        monkeypatch.setenv("AOC_YEAR", "last year")
        with pytest.raises(ValueError, match="AOC_YEAR"):
            env.puzzle_year()

    def test_empty_session_is_unset(self, monkeypatch):
        monkeypatch.setenv("AOC_SESSION", "")
        assert env.session_token() is None


class TestLoadEnv:
    def test_loads_dotenv_file(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".env").write_text("AOC_SESSION=from-file\nAOC_YEAR=2020\n")

        env.load_env()

        assert env.session_token() == "from-file"
        assert env.puzzle_year() == 2020

    def test_existing_variables_win(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("AOC_SESSION", "from-shell")
        (tmp_path / ".env").write_text("AOC_SESSION=from-file\n")

        env.load_env()

        assert env.session_token() == "from-shell"

    def test_missing_dotenv_is_fine(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        env.load_env()
        assert env.session_token() is None
