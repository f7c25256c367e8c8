import logging
import os
import types
import weakref
from collections.abc import Callable
from functools import partial
from pathlib import Path

from gnuplot_pipe.channel import CommandChannel
from gnuplot_pipe.const import PlotVerb, SessionState
from gnuplot_pipe.core.config import SessionConfig
from gnuplot_pipe.core.mixins import ConfigurationMixin
from gnuplot_pipe.data import ProcessExit
from gnuplot_pipe.exceptions import ExecutableNotFoundError, NotOpenSessionError, SessionClosedError
from gnuplot_pipe.path_resolver import locate
from gnuplot_pipe.tempfiles import TempFileStore

Resolver = Callable[[str], Path | None]


def _release(temp_store: TempFileStore, channel: CommandChannel) -> None:
    """Free the resources of a session that was dropped without being closed."""
    temp_store.clear()
    channel.close()


class BaseSession(ConfigurationMixin):
    """Session lifecycle shared by every plotting front end.

    A session goes from ``UNINITIALIZED`` to ``ACTIVE`` on :meth:`open` and to
    ``CLOSED`` on :meth:`close`. It owns one command channel and one temp
    file pool. It is not thread safe; serialize calls externally.
    """

    def __init__(self, config: SessionConfig, resolver: Resolver | None = None) -> None:
        """Initialize base session."""
        self.config = config
        self.verbose = config.verbose
        self.logger = logging.getLogger(__name__)

        # Configure logging if verbose is enabled
        if self.verbose and not self.logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)
            self.logger.setLevel(logging.DEBUG)

        self.resolver: Resolver = resolver or partial(locate, search_path=config.search_path)

        self.channel: CommandChannel | None = None
        self._finalizer: weakref.finalize | None = None
        self.temp_store = TempFileStore(
            max_files=config.max_temp_files,
            directory=config.temp_dir,
            prefix=config.temp_prefix,
        )
        self.state = SessionState.UNINITIALIZED
        self.plot_count = 0
        self.style = config.default_style

    def _log(self, message: str, level: str = "info") -> None:
        """Log message if verbose."""
        if self.verbose:
            getattr(self.logger, level)(message)

    @property
    def is_open(self) -> bool:
        """Check if the session accepts commands."""
        return self.state == SessionState.ACTIVE

    def _require_open(self) -> CommandChannel:
        if self.state == SessionState.CLOSED:
            raise SessionClosedError
        if self.state != SessionState.ACTIVE or self.channel is None:
            raise NotOpenSessionError
        return self.channel

    def _check_display(self) -> None:
        var = self.config.display_env_var
        if var and os.environ.get(var) is None:
            self.logger.warning("Cannot find %s variable: is it set?", var)

    def _resolve_executable(self) -> str:
        name = self.config.executable
        location = self.resolver(name)
        if location is None:
            raise ExecutableNotFoundError(name)
        return os.path.join(str(location), Path(name).name)

    def open(self) -> None:
        r"""Start the plotting process.

        Opening an open session does nothing.

        Raises:
            ExecutableNotFoundError: If the executable cannot be located. No process is started.
            InitFailedError: If the process cannot be started.
            SessionClosedError: If the session was already closed.

        """
        if self.state == SessionState.ACTIVE:
            return
        if self.state == SessionState.CLOSED:
            raise SessionClosedError

        self._check_display()
        executable = self._resolve_executable()
        self.channel = CommandChannel.open(
            executable,
            max_command_length=self.config.max_command_length,
            overflow=self.config.command_overflow,
            close_timeout=self.config.close_timeout,
        )
        self._finalizer = weakref.finalize(self, _release, self.temp_store, self.channel)
        self.plot_count = 0
        self.state = SessionState.ACTIVE
        self._log(f"Session opened with {executable}")

    def close(self) -> ProcessExit | None:
        r"""Delete the temp files and stop the plotting process.

        Closing a session that is not open does nothing.

        Returns:
            ProcessExit | None: Exit status of the process, or None if the session was not open.

        """
        if self.state != SessionState.ACTIVE:
            return None

        if self._finalizer is not None:
            self._finalizer.detach()

        try:
            self.temp_store.clear()
            if self.channel is None:
                return None
            status = self.channel.close()
        finally:
            self.state = SessionState.CLOSED

        self._log(f"Session closed with exit code {status.exit_code}")
        return status

    def reset_plot(self) -> None:
        """Delete the temp files and make the next plot start a fresh canvas."""
        self._require_open()
        self.temp_store.clear()
        self.plot_count = 0
        self._log("Plot reset", "debug")

    def send_command(self, command: str) -> str:
        r"""Send a raw command to the plotting process.

        Args:
            command (str): Command text without the line terminator.

        Returns:
            str: The command as sent.

        Raises:
            NotOpenSessionError: If the session is not open.
            ChannelError: If the pipe write fails.

        """
        return self._require_open().send(command)

    def _next_verb(self) -> PlotVerb:
        return PlotVerb.REPLOT if self.plot_count > 0 else PlotVerb.PLOT

    def _send_plot(self, command: str) -> str:
        sent = self.send_command(command)
        self.plot_count += 1
        return sent

    def __enter__(self) -> "BaseSession":
        r"""Enter the runtime context for the session (invokes `open()`).

        Returns:
            BaseSession: The current session instance.

        """
        self.open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: types.TracebackType | None,
    ) -> None:
        """Exit the runtime context for the session (invokes `close()`)."""
        self.close()
