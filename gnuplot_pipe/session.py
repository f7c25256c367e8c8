"""Main session module for gnuplot-pipe."""

from collections.abc import Callable, Iterable, Sequence
from typing import Any

from .const import NO_TITLE, DrawStyle
from .core.config import SessionConfig
from .core.session_base import BaseSession, Resolver
from .data import PlotResult
from .exceptions import PlotError, ValidationError
from .utils import compute_histogram, format_number, quote_double

__all__ = [
    "GnuplotSession",
    "plot_once",
]


class GnuplotSession(BaseSession):
    r"""Drive a gnuplot process through its standard input.

    Each data-backed plot writes its values to a temp file and sends a
    ``plot`` or ``replot`` command that references it. The first plot after
    :meth:`open` or :meth:`reset_plot` uses ``plot``; later ones use ``replot``
    so that series accumulate on the same canvas.

    Examples:
        ```python
        from gnuplot_pipe import GnuplotSession

        with GnuplotSession() as gp:
            gp.set_title("Squares")
            gp.set_style("lines")
            gp.plot_series([i * i for i in range(50)], "parabola")
            gp.plot_slope(2.0, 1.0, "line")
        ```

    """

    def __init__(self, config: SessionConfig | None = None, resolver: Resolver | None = None, **kwargs: Any) -> None:
        r"""Initialize a session. The plotting process is not started until :meth:`open`.

        Args:
            config (SessionConfig | None, optional): Session configuration. If None, one is built
                from ``kwargs``.
            resolver (Resolver | None, optional): Function mapping an executable name to its
                directory, or None when it cannot be found. Defaults to a search of ``PATH``.
            **kwargs: Fields of :class:`SessionConfig` when ``config`` is not given.

        """
        super().__init__(config or SessionConfig(**kwargs), resolver=resolver)

    def _title_clause(self, title: str | None) -> str:
        if title is None:
            return ""
        return f" title {quote_double(title, self.config.escape_text)}"

    def _plot_rows(self, rows: Iterable[Sequence[float]], title: str | None) -> PlotResult:
        path = self.temp_store.write_data(rows)
        command = f"{self._next_verb()} {quote_double(str(path))}{self._title_clause(title)} with {self.style}"
        sent = self._send_plot(command)
        return PlotResult(plotted=True, command=sent, data_file=path)

    def plot_series(self, values: Sequence[float] | None, title: str | None = None) -> PlotResult:
        r"""Plot values against their position in the sequence.

        Args:
            values (Sequence[float] | None): The y values. Empty or None plots nothing.
            title (str | None, optional): Legend title for the series.

        Returns:
            PlotResult: ``plotted`` is False when there was nothing to plot.

        Raises:
            NotOpenSessionError: If the session is not open.
            CapacityExceededError: If the temp file pool is full.
            PlotIOError: If writing the data or the command fails.

        """
        self._require_open()
        if values is None or len(values) == 0:
            return PlotResult()

        return self._plot_rows(((value,) for value in values), title)

    def plot_xy(
        self,
        xs: Sequence[float] | None,
        ys: Sequence[float] | None,
        title: str | None = None,
    ) -> PlotResult:
        r"""Plot paired points ``(xs[i], ys[i])``.

        Args:
            xs (Sequence[float] | None): The x coordinates.
            ys (Sequence[float] | None): The y coordinates, same length as ``xs``.
            title (str | None, optional): Legend title for the series.

        Returns:
            PlotResult: ``plotted`` is False when either sequence is None or ``xs`` is empty.

        Raises:
            ValidationError: If ``xs`` and ``ys`` differ in length.

        """
        self._require_open()
        if xs is None or ys is None or len(xs) == 0:
            return PlotResult()
        if len(xs) != len(ys):
            msg = f"x and y must have the same length, got {len(xs)} and {len(ys)}"
            raise ValidationError(msg)

        return self._plot_rows(zip(xs, ys), title)

    def plot_slope(self, a: float, b: float, title: str | None = None) -> PlotResult:
        """Plot the line ``y = a * x + b``."""
        self._require_open()
        command = (
            f"{self._next_verb()} {format_number(a)} * x + {format_number(b)}"
            f"{self._title_clause(title if title is not None else NO_TITLE)} with {self.style}"
        )
        return PlotResult(plotted=True, command=self._send_plot(command))

    def plot_equation(self, expression: str, title: str | None = None) -> PlotResult:
        r"""Plot the curve ``y = expression``.

        The expression is passed through untouched, e.g. ``"sin(x) * cos(2*x)"``;
        gnuplot itself is the only validator and its errors are not reported back.
        """
        self._require_open()
        command = (
            f"{self._next_verb()} {expression}"
            f"{self._title_clause(title if title is not None else NO_TITLE)} with {self.style}"
        )
        return PlotResult(plotted=True, command=self._send_plot(command))

    def plot_histogram(
        self,
        edges: Sequence[float],
        raw_values: Sequence[float] | None,
        nbins: int,
        include_outliers: bool = False,
        title: str | None = None,
        sentinel: float | None = 0.0,
    ) -> PlotResult:
        r"""Bin raw values and plot the counts as boxes.

        The session style is switched to ``boxes`` and stays that way once the
        plot is sent. If plotting fails the previous style is restored.

        Args:
            edges (Sequence[float]): Ascending bin edges; the first ``nbins`` are used as x values.
            raw_values (Sequence[float] | None): Data to bin. None plots nothing.
            nbins (int): Number of bins.
            include_outliers (bool, optional): Count values outside the edges in the end bins.
            title (str | None, optional): Legend title.
            sentinel (float | None, optional): Value that marks the end of ``raw_values``.
                A zero ends the data by default, so real zeros are never counted.
                Pass None to use every value.

        Returns:
            PlotResult: Result of the underlying :meth:`plot_xy` call.

        Raises:
            ValidationError: If ``nbins`` is less than 1 or there are not enough edges.

        """
        self._require_open()
        if raw_values is None:
            return PlotResult()

        counts = compute_histogram(edges, raw_values, nbins, include_outliers=include_outliers, sentinel=sentinel)
        previous_style = self.style
        self.set_style(DrawStyle.BOXES)
        try:
            return self.plot_xy(list(edges[:nbins]), counts, title)
        except PlotError:
            self.style = previous_style
            raise


def _wait_for_enter() -> None:
    input("press ENTER to continue\n")


def plot_once(
    values: Sequence[float] | None,
    ys: Sequence[float] | None = None,
    title: str | None = None,
    style: str | DrawStyle | None = None,
    xlabel: str | None = None,
    ylabel: str | None = None,
    pause: Callable[[], Any] | None = None,
    **kwargs: Any,
) -> PlotResult:
    r"""Open a session, plot one data set, wait, and close the session.

    Args:
        values (Sequence[float] | None): Series values, or x coordinates when ``ys`` is given.
        ys (Sequence[float] | None, optional): y coordinates for an XY plot.
        title (str | None, optional): Legend title.
        style (str | DrawStyle | None, optional): Draw style. Defaults to ``lines``.
        xlabel (str | None, optional): x axis label. Defaults to ``X``.
        ylabel (str | None, optional): y axis label. Defaults to ``Y``.
        pause (Callable[[], Any] | None, optional): Called while the plot is on screen.
            Defaults to waiting for ENTER on stdin.
        **kwargs: Passed to :class:`GnuplotSession`.

    Returns:
        PlotResult: Result of the plot call. Nothing is started for empty data.

    """
    if values is None or len(values) == 0:
        return PlotResult()

    with GnuplotSession(**kwargs) as session:
        session.set_style(style if style is not None else DrawStyle.LINES)
        session.set_xlabel(xlabel if xlabel is not None else "X")
        session.set_ylabel(ylabel if ylabel is not None else "Y")
        if ys is None:
            result = session.plot_series(values, title)
        else:
            result = session.plot_xy(values, ys, title)
        (pause or _wait_for_enter)()

    return result
