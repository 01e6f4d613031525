"""
Execution of external gettext tools.

The orchestrator never reimplements ``xgettext``, ``msgmerge`` or ``msgfmt``;
it only starts them and inspects their exit status. All of that goes through
a ``ToolRunner`` so the pipeline can be driven by a fake in tests.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import NamedTuple, Protocol

logger = logging.getLogger(__name__)


class ToolResult(NamedTuple):
    """Outcome of one external tool invocation."""

    command: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        """True when the tool exited with status 0."""
        return self.returncode == 0


class ToolRunner(Protocol):
    """Callable that executes a command and reports its result."""

    def __call__(
        self, command: Sequence[str], cwd: Path | None = None
    ) -> ToolResult: ...


def format_command(command: Sequence[str]) -> str:
    """Render a command the way an operator would type it."""
    return shlex.join(command)


def run_tool(command: Sequence[str], cwd: Path | None = None) -> ToolResult:
    """
    Run an external tool and wait for it to exit.

    Args:
        command: Executable followed by its arguments
        cwd: Working directory for the process (defaults to the current one)

    Returns:
        ToolResult with the exit status and captured output

    Raises:
        FileNotFoundError: If the executable cannot be found
    """
    argv = [str(part) for part in command]
    logger.debug(f"Running: {format_command(argv)}")

    completed = subprocess.run(
        argv,
        capture_output=True,
        text=True,
        errors="replace",
        check=False,
        cwd=cwd,
    )

    if completed.stderr:
        logger.debug(completed.stderr.rstrip())

    return ToolResult(
        command=tuple(argv),
        returncode=completed.returncode,
        stdout=completed.stdout,
        stderr=completed.stderr,
    )
