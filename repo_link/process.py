"""Run external commands and capture what they print."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, Sequence

logger = logging.getLogger(__name__)

# Exit status reported when the command could not be started at all,
# matching what a POSIX shell returns for "command not found".
NOT_STARTED = 127


@dataclass(frozen=True)
class ProcessResult:
    command: list[str]
    returncode: int
    stdout: str
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def started(self) -> bool:
        return self.returncode != NOT_STARTED

    @property
    def output(self) -> str:
        """Stdout of a successful run, or an empty string for any failure."""

        return self.stdout if self.ok else ""


class ProcessRunner(Protocol):
    """Anything that can run a command in a working directory."""

    def run(self, command: str, arguments: Sequence[str], working_directory: Path) -> ProcessResult:
        ...


class SubprocessRunner:
    """Runs commands with :func:`subprocess.run`, never through a shell."""

    def run(self, command: str, arguments: Sequence[str], working_directory: Path) -> ProcessResult:
        cmd = [command, *arguments]
        logger.debug("Running %s in %s", " ".join(cmd), working_directory)
        try:
            proc = subprocess.run(
                cmd,
                cwd=str(working_directory),
                stdin=subprocess.DEVNULL,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as exc:
            logger.debug("Could not start %s: %s", command, exc)
            return ProcessResult(command=cmd, returncode=NOT_STARTED, stdout="", stderr=str(exc))
        result = ProcessResult(
            command=cmd,
            returncode=proc.returncode,
            stdout=proc.stdout.rstrip("\n"),
            stderr=proc.stderr,
        )
        if not result.ok:
            logger.debug("%s exited with %s: %s", " ".join(cmd), proc.returncode, proc.stderr.strip())
        return result


__all__ = ["NOT_STARTED", "ProcessResult", "ProcessRunner", "SubprocessRunner"]
