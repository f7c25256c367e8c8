"""Data classes for gnuplot-pipe."""

from dataclasses import dataclass
from pathlib import Path


@dataclass
class PlotResult:
    """Outcome of a plotting call."""

    plotted: bool = False
    command: str | None = None
    data_file: Path | None = None

    @property
    def skipped(self) -> bool:
        """Check if the call was a no-op because there was nothing to plot."""
        return not self.plotted


@dataclass
class ProcessExit:
    """Exit status of the plotting process once the channel is closed."""

    exit_code: int | None = None
    killed: bool = False

    @property
    def success(self) -> bool:
        """Check if the process exited cleanly."""
        return self.exit_code == 0 and not self.killed
