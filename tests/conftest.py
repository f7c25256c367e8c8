"""Shared test fixtures for gnuplot-pipe tests."""

import subprocess
from collections.abc import Generator
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from gnuplot_pipe.session import GnuplotSession


class FakeStdin:
    """Records what is written to the plotting process."""

    def __init__(self) -> None:
        """Initialize an open, empty pipe."""
        self.chunks: list[str] = []
        self.closed = False
        self.broken = False
        self.flushes = 0

    def write(self, text: str) -> int:
        """Record text, failing like a real pipe when closed or broken."""
        if self.closed:
            msg = "I/O operation on closed file."
            raise ValueError(msg)
        if self.broken:
            raise BrokenPipeError(32, "Broken pipe")
        self.chunks.append(text)
        return len(text)

    def flush(self) -> None:
        """Count flushes."""
        self.flushes += 1

    def close(self) -> None:
        """Close the pipe."""
        self.closed = True

    @property
    def commands(self) -> list[str]:
        """Return the commands written so far without line terminators."""
        return "".join(self.chunks).splitlines()


@pytest.fixture
def fake_process() -> MagicMock:
    """A stand-in for the spawned plotting process."""
    process = MagicMock(spec=subprocess.Popen)
    process.stdin = FakeStdin()
    process.pid = 4242
    process.wait.return_value = 0
    return process


@pytest.fixture
def mock_popen(fake_process: MagicMock) -> Generator[MagicMock, None, None]:
    """Patch process creation so no real gnuplot is started."""
    with patch("gnuplot_pipe.channel.subprocess.Popen", return_value=fake_process) as popen:
        yield popen


@pytest.fixture
def session(tmp_path: Path, mock_popen: MagicMock) -> Generator[GnuplotSession, None, None]:
    """An open session writing its data files under ``tmp_path``."""
    gp = GnuplotSession(resolver=lambda _name: Path("/usr/bin"), temp_dir=str(tmp_path), display_env_var=None)
    gp.open()
    yield gp
    gp.close()
