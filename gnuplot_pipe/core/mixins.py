"""Mixins for common functionality."""

from abc import abstractmethod
from typing import Any

from gnuplot_pipe.const import DEFAULT_STYLE, DrawStyle
from gnuplot_pipe.core.config import SessionConfig
from gnuplot_pipe.utils import quote_double, quote_single


class ConfigurationMixin:
    """Mixin for draw style, title and axis labels."""

    config: SessionConfig
    style: DrawStyle
    logger: Any

    @abstractmethod
    def send_command(self, command: str) -> str:
        """Send a raw command - provided by the session."""
        ...

    def set_style(self, style: str | DrawStyle) -> DrawStyle:
        r"""Change the draw style used by subsequent plots.

        Unknown styles are replaced by ``points`` with a warning. This never raises.

        Args:
            style (str | DrawStyle): One of the names in :class:`DrawStyle`.

        Returns:
            DrawStyle: The style now in effect.

        """
        try:
            self.style = DrawStyle(style)
        except ValueError:
            self.logger.warning("Unknown requested style %r: using %s", style, DEFAULT_STYLE)
            self.style = DEFAULT_STYLE
        return self.style

    def set_title(self, title: str) -> str:
        """Set the title of the plot."""
        return self.send_command(f"set title {quote_single(title, self.config.escape_text)}")

    def set_xlabel(self, label: str) -> str:
        """Set the x axis label."""
        return self.send_command(f"set xlabel {quote_double(label, self.config.escape_text)}")

    def set_ylabel(self, label: str) -> str:
        """Set the y axis label."""
        return self.send_command(f"set ylabel {quote_double(label, self.config.escape_text)}")
