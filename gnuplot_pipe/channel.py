"""One-way command pipe to the plotting process."""

import logging
import subprocess
import types
from collections.abc import Sequence

from gnuplot_pipe.const import DEFAULT_CLOSE_TIMEOUT, DEFAULT_MAX_COMMAND_LENGTH, CommandOverflow
from gnuplot_pipe.data import ProcessExit
from gnuplot_pipe.exceptions import ChannelError, CommandTooLongError, InitFailedError

logger = logging.getLogger(__name__)


class CommandChannel:
    """Owns the plotting process and the write end of its standard input.

    Commands are newline-terminated and flushed as soon as they are written.
    There is no way to read anything back: a command that the process rejects
    fails silently on its side.

    Once closed, the channel refuses further sends and the process has been
    reaped exactly once.
    """

    def __init__(
        self,
        process: subprocess.Popen,
        max_command_length: int = DEFAULT_MAX_COMMAND_LENGTH,
        overflow: CommandOverflow = CommandOverflow.TRUNCATE,
        close_timeout: float = DEFAULT_CLOSE_TIMEOUT,
    ) -> None:
        """Wrap an already spawned process. Prefer :meth:`open`."""
        self.process = process
        self.max_command_length = max_command_length
        self.overflow = CommandOverflow(overflow)
        self.close_timeout = close_timeout
        self._exit: ProcessExit | None = None

    @classmethod
    def open(
        cls,
        executable: str,
        args: Sequence[str] = (),
        max_command_length: int = DEFAULT_MAX_COMMAND_LENGTH,
        overflow: CommandOverflow = CommandOverflow.TRUNCATE,
        close_timeout: float = DEFAULT_CLOSE_TIMEOUT,
    ) -> "CommandChannel":
        r"""Spawn ``executable`` with its standard input connected to a new channel.

        Raises:
            InitFailedError: If the process cannot be started.

        """
        try:
            process = subprocess.Popen(
                [executable, *args],
                stdin=subprocess.PIPE,
                text=True,
                encoding="utf-8",
            )
        except (OSError, ValueError) as e:
            msg = f"Error starting {executable}: {e}"
            raise InitFailedError(msg) from e

        logger.debug("Started %s with pid %s", executable, process.pid)
        return cls(process, max_command_length=max_command_length, overflow=overflow, close_timeout=close_timeout)

    @property
    def is_closed(self) -> bool:
        """Check if the channel has been closed."""
        return self._exit is not None

    def _fit(self, command: str) -> str:
        if len(command) <= self.max_command_length:
            return command
        if self.overflow == CommandOverflow.REJECT:
            raise CommandTooLongError(len(command), self.max_command_length)
        logger.warning(
            "Command of %d characters truncated to %d: %.40s...",
            len(command),
            self.max_command_length,
            command,
        )
        return command[: self.max_command_length]

    def send(self, command: str) -> str:
        r"""Write one command line to the process and flush it.

        Args:
            command (str): Command text without the line terminator.

        Returns:
            str: The command as sent, after any truncation.

        Raises:
            ChannelError: If the channel is closed or the pipe write fails.
            CommandTooLongError: If the command is too long under the reject policy.

        """
        if self.is_closed:
            msg = "Cannot send on a closed channel"
            raise ChannelError(msg)

        command = self._fit(command)
        stdin = self.process.stdin
        if stdin is None:
            msg = "Plotting process has no standard input pipe"
            raise ChannelError(msg)

        try:
            stdin.write(command + "\n")
            stdin.flush()
        except (OSError, ValueError) as e:
            msg = f"Failed to send command to plotting process: {e}"
            raise ChannelError(msg) from e

        logger.debug("Sent: %s", command)
        return command

    def close(self) -> ProcessExit:
        r"""Close the pipe and wait for the process to exit.

        The process is killed if it is still running after ``close_timeout``
        seconds. Calling close again returns the first result.

        Returns:
            ProcessExit: How the process ended.

        """
        if self._exit is not None:
            return self._exit

        stdin = self.process.stdin
        if stdin is not None:
            try:
                stdin.close()
            except OSError as e:
                logger.warning("Problem closing communication to plotting process: %s", e)

        killed = False
        try:
            exit_code = self.process.wait(timeout=self.close_timeout)
        except subprocess.TimeoutExpired:
            logger.warning("Plotting process did not exit after %s seconds, killing it", self.close_timeout)
            self.process.kill()
            exit_code = self.process.wait()
            killed = True

        self._exit = ProcessExit(exit_code=exit_code, killed=killed)
        if not self._exit.success:
            logger.warning("Plotting process exited with status %s", exit_code)
        return self._exit

    def __enter__(self) -> "CommandChannel":
        """Enter the runtime context for the channel."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: types.TracebackType | None,
    ) -> None:
        """Close the channel on exit from the ``with`` block."""
        self.close()
