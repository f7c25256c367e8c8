"""Custom exceptions for gnuplot-pipe."""


class PlotError(Exception):
    """Base exception for all plotting session errors."""

    def __init__(self, message: str) -> None:
        """Initialize the PlotError."""
        super().__init__(message)


class ValidationError(PlotError):
    """Raised when input validation fails."""


class InitFailedError(PlotError):
    """Raised when the plotting process cannot be started."""

    def __init__(self, message: str) -> None:
        """Initialize the InitFailedError."""
        super().__init__(message)


class ExecutableNotFoundError(InitFailedError):
    """Raised when the plotting executable is not on the search path."""

    def __init__(self, executable: str) -> None:
        """Initialize the ExecutableNotFoundError."""
        super().__init__(f"Cannot find {executable} in your PATH")
        self.executable = executable


class CapacityExceededError(PlotError):
    """Raised when the temporary file pool is full."""

    def __init__(self, max_files: int) -> None:
        """Initialize the CapacityExceededError."""
        super().__init__(f"Maximum number of temporary files reached ({max_files}): cannot open more")
        self.max_files = max_files


class PlotIOError(PlotError):
    """Raised when writing plot data or commands fails."""


class ChannelError(PlotIOError):
    """Raised when the command pipe to the plotting process is unusable."""


class CommandTooLongError(PlotError):
    """Raised when a command exceeds the maximum length under the reject policy."""

    def __init__(self, length: int, max_length: int) -> None:
        """Initialize the CommandTooLongError."""
        super().__init__(f"Command of {length} characters exceeds the maximum of {max_length}")
        self.length = length
        self.max_length = max_length


class NotOpenSessionError(PlotError):
    """Raised when the session is not open."""

    def __init__(self, message: str | None = None) -> None:
        """Initialize the NotOpenSessionError."""
        super().__init__(message or "Session is not open. Please call open() method before plotting.")


class SessionClosedError(NotOpenSessionError):
    """Raised when a closed session is used or re-opened."""

    def __init__(self) -> None:
        """Initialize the SessionClosedError."""
        super().__init__("Session is closed and cannot be reused. Create a new session instead.")
