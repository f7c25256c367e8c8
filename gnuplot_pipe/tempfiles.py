"""Temporary data files backing plotted series."""

import logging
import os
import tempfile
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import IO

from gnuplot_pipe.const import DEFAULT_MAX_TEMP_FILES, DEFAULT_TEMP_PREFIX
from gnuplot_pipe.exceptions import CapacityExceededError, PlotIOError
from gnuplot_pipe.utils import format_number

logger = logging.getLogger(__name__)


class TempFileStore:
    """Allocates, fills and deletes the scratch files referenced by plot commands.

    Paths are kept in creation order. A path is tracked as soon as its file
    exists on disk, so a file whose write later fails is still removed by
    :meth:`clear`.

    The store refuses an allocation once ``max_files - 1`` files are tracked.
    """

    def __init__(
        self,
        max_files: int = DEFAULT_MAX_TEMP_FILES,
        directory: str | Path | None = None,
        prefix: str = DEFAULT_TEMP_PREFIX,
    ) -> None:
        """Initialize an empty store."""
        self.max_files = max_files
        self.directory = str(directory) if directory is not None else None
        self.prefix = prefix
        self._paths: list[Path] = []

    @property
    def paths(self) -> list[Path]:
        """Return a copy of the tracked paths in creation order."""
        return list(self._paths)

    @property
    def is_full(self) -> bool:
        """Check if the next allocation would be refused."""
        return len(self._paths) >= self.max_files - 1

    def __len__(self) -> int:
        """Return the number of tracked files."""
        return len(self._paths)

    def __contains__(self, path: object) -> bool:
        """Check if a path is tracked."""
        return path in self._paths

    def track(self, path: Path) -> None:
        """Add a path to the delete set."""
        if self.is_full:
            raise CapacityExceededError(self.max_files)
        self._paths.append(path)

    def allocate(self) -> tuple[IO[str], Path]:
        r"""Create a uniquely named temp file and start tracking it.

        Returns:
            tuple[IO[str], Path]: An open text handle for writing and the file path.

        Raises:
            CapacityExceededError: If the pool is full. Nothing is created.
            PlotIOError: If the file cannot be created.

        """
        if self.is_full:
            raise CapacityExceededError(self.max_files)

        try:
            fd, name = tempfile.mkstemp(prefix=self.prefix, dir=self.directory)
        except OSError as e:
            msg = f"Cannot create temporary file: {e}"
            raise PlotIOError(msg) from e

        path = Path(name)
        self.track(path)
        return os.fdopen(fd, "w", encoding="utf-8"), path

    def write_rows(self, handle: IO[str], rows: Iterable[Sequence[float]]) -> None:
        r"""Write whitespace-separated numeric rows, one per line.

        The whole buffer is formatted before anything touches the file, then
        written in a single call.

        Raises:
            PlotIOError: If the write fails.

        """
        text = "".join(" ".join(format_number(value) for value in row) + "\n" for row in rows)
        try:
            handle.write(text)
            handle.flush()
        except (OSError, ValueError) as e:
            msg = f"Write failed for {getattr(handle, 'name', handle)}: {e}"
            raise PlotIOError(msg) from e

    def write_series(self, handle: IO[str], values: Iterable[float]) -> None:
        """Write one value per line."""
        self.write_rows(handle, ((value,) for value in values))

    def write_data(self, rows: Iterable[Sequence[float]]) -> Path:
        r"""Allocate a file, write ``rows`` into it and close it.

        Returns:
            Path: The path of the populated file.

        """
        handle, path = self.allocate()
        with handle:
            self.write_rows(handle, rows)
        logger.debug("Wrote plot data to %s", path)
        return path

    def clear(self) -> None:
        """Delete every tracked file and forget them all."""
        for path in self._paths:
            try:
                path.unlink(missing_ok=True)
            except OSError as e:
                logger.error("Error removing temporary file %s: %s", path, e)
        self._paths.clear()
