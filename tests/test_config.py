# ruff: noqa: PLR2004
"""Tests for gnuplot_pipe.core.config module."""

import pytest
from pydantic import ValidationError

from gnuplot_pipe.const import CommandOverflow, DrawStyle
from gnuplot_pipe.core.config import SessionConfig


class TestSessionConfig:
    """Test SessionConfig defaults and validation."""

    def test_defaults(self) -> None:
        """Test default values."""
        config = SessionConfig()

        assert config.executable == "gnuplot"
        assert config.search_path is None
        assert config.display_env_var == "DISPLAY"
        assert config.temp_dir is None
        assert config.temp_prefix == "gnuplot-i-"
        assert config.max_temp_files == 64
        assert config.max_command_length == 2048
        assert config.command_overflow == CommandOverflow.TRUNCATE
        assert config.escape_text is True
        assert config.default_style == DrawStyle.POINTS
        assert config.close_timeout == 5.0
        assert config.verbose is False

    def test_string_enums(self) -> None:
        """Test that enum fields accept their string values."""
        config = SessionConfig(default_style="lines", command_overflow="reject")

        assert config.default_style == DrawStyle.LINES
        assert config.command_overflow == CommandOverflow.REJECT

    def test_invalid_default_style(self) -> None:
        """Test that the configured default style must be a known one."""
        with pytest.raises(ValidationError):
            SessionConfig(default_style="bogus")

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"max_temp_files": 1},
            {"max_command_length": 8},
            {"close_timeout": 0},
            {"executable": "  "},
            {"temp_prefix": "p" * 20, "max_command_length": 16},
        ],
    )
    def test_invalid_values(self, kwargs: dict) -> None:
        """Test that out-of-range values are rejected."""
        with pytest.raises(ValidationError):
            SessionConfig(**kwargs)

    def test_session_uses_default_style(self) -> None:
        """Test that a session starts with the configured default style."""
        from gnuplot_pipe.session import GnuplotSession

        session = GnuplotSession(default_style="steps")

        assert session.style == DrawStyle.STEPS
        assert session.temp_store.max_files == 64
