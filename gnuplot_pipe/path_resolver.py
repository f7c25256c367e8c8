"""Locate an executable on the search path.

This is the equivalent of ``which`` except that it returns the directory
containing the executable rather than the executable itself.
"""

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def _is_executable(candidate: Path) -> bool:
    return candidate.is_file() and os.access(candidate, os.X_OK)


def locate(name: str, search_path: str | None = None, cwd: str | Path | None = None) -> Path | None:
    r"""Find the directory that holds the executable ``name``.

    The current working directory is checked first, then every segment of the
    search path in order. An empty segment stands for the current directory.

    A name that already contains a path separator is treated as a path: it is
    checked literally and no search is performed.

    Args:
        name (str): Bare name of the executable, e.g. ``"gnuplot"``.
        search_path (str | None, optional): Value to split on ``os.pathsep``.
            Defaults to the ``PATH`` environment variable.
        cwd (str | Path | None, optional): Directory to treat as the current one.
            Defaults to the process working directory.

    Returns:
        Path | None: The containing directory of the first match, ``Path(".")``
            for a match in the current directory, or None if nothing matched.

    Examples:
        ```python
        locate("ls")  # Path("/bin")
        locate("missing-tool")  # None
        ```

    """
    base = Path(cwd) if cwd is not None else Path()
    separators = {os.sep, os.altsep} - {None}

    if any(sep in name for sep in separators):
        candidate = Path(name) if Path(name).is_absolute() else base / name
        return Path(name).parent if _is_executable(candidate) else None

    if _is_executable(base / name):
        return Path(os.curdir)

    if search_path is None:
        search_path = os.environ.get("PATH")
    if search_path is None:
        logger.warning("PATH variable not set")
        return None

    for segment in search_path.split(os.pathsep):
        directory = Path(segment) if segment else Path(os.curdir)
        if _is_executable(base / directory / name):
            return directory

    return None
