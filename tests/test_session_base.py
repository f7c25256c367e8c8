# ruff: noqa: SLF001, PLR2004
"""Tests for the session lifecycle in BaseSession."""

import gc
import logging
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from gnuplot_pipe.const import PlotVerb, SessionState
from gnuplot_pipe.core.config import SessionConfig
from gnuplot_pipe.core.session_base import BaseSession
from gnuplot_pipe.exceptions import ChannelError, NotOpenSessionError, SessionClosedError
from gnuplot_pipe.session import GnuplotSession


def usr_bin(_name: str) -> Path:
    """Resolver that always finds the executable in /usr/bin."""
    return Path("/usr/bin")


class TestInit:
    """Test BaseSession construction."""

    def test_init_basic(self) -> None:
        """Test that construction does not start anything."""
        config = SessionConfig()
        session = BaseSession(config)

        assert session.config == config
        assert session.state == SessionState.UNINITIALIZED
        assert session.channel is None
        assert session.plot_count == 0
        assert len(session.temp_store) == 0

    def test_init_with_verbose(self) -> None:
        """Test that verbose sessions log at debug level to a stream handler."""
        session = BaseSession(SessionConfig(verbose=True))
        logger = session.logger
        try:
            assert session.verbose is True
            assert logger.level == logging.DEBUG
            assert any(isinstance(handler, logging.StreamHandler) for handler in logger.handlers)
        finally:
            logger.handlers.clear()
            logger.setLevel(logging.NOTSET)

    def test_default_resolver_uses_search_path(self, tmp_path: Path) -> None:
        """Test that the default resolver honours the configured search path."""
        executable = tmp_path / "gnuplot"
        executable.write_text("#!/bin/sh\n")
        executable.chmod(0o755)
        session = BaseSession(SessionConfig(search_path=str(tmp_path)))

        assert session.resolver("gnuplot") == tmp_path

    def test_log_only_when_verbose(self) -> None:
        """Test that _log is silent unless verbose."""
        session = BaseSession(SessionConfig())
        session.logger = MagicMock()

        session._log("hello")

        session.logger.info.assert_not_called()


class TestClose:
    """Test closing a session."""

    def test_close_cleans_up(self, session: GnuplotSession, fake_process: MagicMock, tmp_path: Path) -> None:
        """Test that close deletes data files and reaps the process."""
        first = session.plot_series([1.0]).data_file
        second = session.plot_xy([1.0], [2.0]).data_file

        status = session.close()

        assert status is not None
        assert status.success
        assert session.state == SessionState.CLOSED
        assert first is not None
        assert second is not None
        assert not first.exists()
        assert not second.exists()
        assert list(tmp_path.iterdir()) == []
        assert fake_process.stdin.closed
        fake_process.wait.assert_called_once()

    def test_close_twice(self, session: GnuplotSession, fake_process: MagicMock) -> None:
        """Test that a second close is a no-op."""
        session.close()

        assert session.close() is None
        fake_process.wait.assert_called_once()

    def test_dropped_session_is_released(self, tmp_path: Path, mock_popen: MagicMock, fake_process: MagicMock) -> None:
        """Test that a session dropped without close still deletes its files and reaps the process."""
        gp = GnuplotSession(resolver=usr_bin, temp_dir=str(tmp_path), display_env_var=None)
        gp.open()
        gp.plot_series([1.0, 2.0, 3.0])
        assert list(tmp_path.iterdir()) != []

        del gp
        gc.collect()

        assert list(tmp_path.iterdir()) == []
        assert fake_process.stdin.closed
        fake_process.wait.assert_called_once()

    def test_close_detaches_release(self, session: GnuplotSession, fake_process: MagicMock) -> None:
        """Test that an explicit close is not repeated when the session is collected."""
        finalizer = session._finalizer
        session.close()

        assert finalizer is not None
        assert not finalizer.alive
        fake_process.wait.assert_called_once()

    def test_no_send_after_close(self, session: GnuplotSession) -> None:
        """Test that nothing can be sent once closed."""
        channel = session.channel
        session.close()

        assert channel is not None
        with pytest.raises(ChannelError):
            channel.send("plot x")
        with pytest.raises(SessionClosedError):
            session.send_command("plot x")
        with pytest.raises(SessionClosedError):
            session.plot_equation("x")
        with pytest.raises(SessionClosedError):
            session.reset_plot()

    def test_close_unopened(self) -> None:
        """Test that closing a session that never opened does nothing."""
        session = GnuplotSession(resolver=usr_bin)

        assert session.close() is None
        assert session.state == SessionState.UNINITIALIZED

    def test_close_marks_closed_when_process_wait_fails(
        self, session: GnuplotSession, fake_process: MagicMock
    ) -> None:
        """Test that the session is closed even if reaping raises."""
        fake_process.wait.side_effect = OSError("wait failed")

        with pytest.raises(OSError, match="wait failed"):
            session.close()

        assert session.state == SessionState.CLOSED

    def test_context_manager(self, tmp_path: Path, mock_popen: MagicMock, fake_process: MagicMock) -> None:
        """Test that the with block opens and closes the session."""
        with GnuplotSession(resolver=usr_bin, temp_dir=str(tmp_path), display_env_var=None) as gp:
            assert gp.is_open
            gp.plot_series([1.0, 2.0])

        assert gp.state == SessionState.CLOSED
        assert list(tmp_path.iterdir()) == []

    def test_context_manager_closes_on_error(self, tmp_path: Path, mock_popen: MagicMock) -> None:
        """Test that an exception in the block still closes the session."""
        with (
            pytest.raises(RuntimeError),
            GnuplotSession(resolver=usr_bin, temp_dir=str(tmp_path), display_env_var=None) as gp,
        ):
            gp.plot_series([1.0])
            msg = "boom"
            raise RuntimeError(msg)

        assert gp.state == SessionState.CLOSED
        assert list(tmp_path.iterdir()) == []


class TestReset:
    """Test reset_plot."""

    def test_reset_deletes_files(self, session: GnuplotSession) -> None:
        """Test that reset empties the pool and removes the files."""
        paths = [session.plot_series([float(i)]).data_file for i in range(3)]

        session.reset_plot()

        assert len(session.temp_store) == 0
        assert session.plot_count == 0
        assert session.is_open
        assert all(path is not None and not path.exists() for path in paths)

    def test_reset_frees_capacity(self, tmp_path: Path, mock_popen: MagicMock) -> None:
        """Test that a reset makes room for new data files."""
        with GnuplotSession(
            resolver=usr_bin, temp_dir=str(tmp_path), display_env_var=None, max_temp_files=2
        ) as gp:
            gp.plot_series([1.0])
            gp.reset_plot()

            assert gp.plot_series([2.0]).plotted

    def test_reset_not_open(self) -> None:
        """Test that reset needs an open session."""
        with pytest.raises(NotOpenSessionError):
            GnuplotSession(resolver=usr_bin).reset_plot()

    def test_next_verb(self, session: GnuplotSession) -> None:
        """Test the verb selection."""
        assert session._next_verb() == PlotVerb.PLOT
        session.plot_count = 1
        assert session._next_verb() == PlotVerb.REPLOT
