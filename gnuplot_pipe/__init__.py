"""gnuplot-pipe - drive a gnuplot process through a one-way command pipe."""

from .channel import CommandChannel
from .const import CommandOverflow, DrawStyle, SessionState
from .core.config import SessionConfig
from .data import PlotResult, ProcessExit
from .exceptions import (
    CapacityExceededError,
    ChannelError,
    CommandTooLongError,
    ExecutableNotFoundError,
    InitFailedError,
    NotOpenSessionError,
    PlotError,
    PlotIOError,
    SessionClosedError,
    ValidationError,
)
from .path_resolver import locate
from .session import GnuplotSession, plot_once
from .tempfiles import TempFileStore

__all__ = [
    "CapacityExceededError",
    "ChannelError",
    "CommandChannel",
    "CommandOverflow",
    "CommandTooLongError",
    "DrawStyle",
    "ExecutableNotFoundError",
    "GnuplotSession",
    "InitFailedError",
    "NotOpenSessionError",
    "PlotError",
    "PlotIOError",
    "PlotResult",
    "ProcessExit",
    "SessionClosedError",
    "SessionConfig",
    "SessionState",
    "TempFileStore",
    "ValidationError",
    "locate",
    "plot_once",
]
