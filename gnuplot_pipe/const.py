"""Constants used throughout gnuplot-pipe.

This module defines the closed set of draw styles accepted by the plotting
process, the command-overflow policies, and the default limits applied to
a session.
"""

from enum import Enum
from typing import Any


class StrEnum(str, Enum):
    """A string enumeration that combines str and Enum functionality.

    Members are strings and can be compared directly to string values.
    """

    def __new__(cls, value: str) -> "StrEnum":
        """Create a new StrEnum member."""
        if not isinstance(value, str):
            msg = f"StrEnum values must be strings, got {type(value).__name__}"
            raise TypeError(msg)

        obj = str.__new__(cls, value)
        obj._value_ = value
        return obj

    def __str__(self) -> str:
        """Return the string value."""
        return str(self.value)

    def __repr__(self) -> str:
        """Return a detailed representation."""
        return f"<{self.__class__.__name__}.{self.name}: '{self.value}'>"

    @classmethod
    def _missing_(cls, value: Any) -> "StrEnum":
        """Allow case-insensitive lookup."""
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.lower():
                    return member

        msg = f"{value!r} is not a valid {cls.__name__}"
        raise ValueError(msg)


class DrawStyle(StrEnum):
    r"""Rendering modes understood by the ``with`` clause of a plot command."""

    LINES = "lines"
    POINTS = "points"
    LINESPOINTS = "linespoints"
    IMPULSES = "impulses"
    DOTS = "dots"
    STEPS = "steps"
    HISTOGRAM = "histogram"
    ERRORBARS = "errorbars"
    BOXES = "boxes"
    BOXERRORBARS = "boxerrorbars"


class CommandOverflow(StrEnum):
    r"""What to do with a command longer than the configured maximum.

    TRUNCATE: cut the command to the maximum length and send it anyway
    REJECT: raise CommandTooLongError and send nothing
    """

    TRUNCATE = "truncate"
    REJECT = "reject"


class SessionState(StrEnum):
    """Lifecycle states of a plotting session."""

    UNINITIALIZED = "uninitialized"
    ACTIVE = "active"
    CLOSED = "closed"


class PlotVerb(StrEnum):
    """Command verbs that start a fresh canvas or add to the current one."""

    PLOT = "plot"
    REPLOT = "replot"


DEFAULT_EXECUTABLE = "gnuplot"
DEFAULT_STYLE = DrawStyle.POINTS
DEFAULT_MAX_TEMP_FILES = 64
DEFAULT_MAX_COMMAND_LENGTH = 2048
DEFAULT_TEMP_PREFIX = "gnuplot-i-"
DEFAULT_DISPLAY_ENV_VAR = "DISPLAY"
DEFAULT_CLOSE_TIMEOUT = 5.0
NO_TITLE = "no title"
