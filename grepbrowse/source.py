"""Line source: run the search command and expose its stdout."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from typing import BinaryIO

from .errors import LineSourceError

logger = logging.getLogger(__name__)


def normalize_exit_status(returncode: int) -> int:
    """Map ``Popen.returncode`` to a shell-style status; signal N becomes 128 + N."""
    if returncode < 0:
        return 128 - returncode
    return returncode


class LineSource:
    """A running search command whose stdout feeds the parser."""

    def __init__(self, process: subprocess.Popen) -> None:
        if process.stdout is None:
            raise LineSourceError("line source was started without a stdout pipe")
        self._process = process
        self._stdout: BinaryIO = process.stdout

    @property
    def stdout(self) -> BinaryIO:
        return self._stdout

    def wait(self) -> int:
        """Close stdout, reap the child and return its normalized exit status."""
        self._stdout.close()
        returncode = self._process.wait()
        status = normalize_exit_status(returncode)
        logger.info("line source exited with status %d", status)
        return status

    def __enter__(self) -> "LineSource":
        return self

    def __exit__(self, exc_type, *_exc_info) -> None:
        if self._process.poll() is None:
            if exc_type is not None:
                # Nobody drains stdout anymore; a blocked writer would never exit.
                self._process.kill()
            self.wait()


def spawn_line_source(argv: Sequence[str]) -> LineSource:
    """Start ``argv`` with a binary stdout pipe; stdin and stderr are inherited."""
    if not argv:
        raise LineSourceError("no command given")
    logger.info("spawning line source: %s", " ".join(argv))
    try:
        process = subprocess.Popen(list(argv), stdout=subprocess.PIPE)
    except OSError as exc:
        reason = exc.strerror or str(exc)
        raise LineSourceError(f"cannot run {argv[0]}: {reason}") from exc
    return LineSource(process)
