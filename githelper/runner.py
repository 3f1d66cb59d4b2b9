"""ProcessRunner — execute one git command and capture its output.

All git operations use :func:`subprocess.run` with an argument vector; no
shell is involved, so user-supplied values (branch names, commit messages)
reach git as single arguments.  There are no retries and no timeouts.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Optional

from pydantic import BaseModel

from githelper.config import DEFAULT_GIT_EXECUTABLE, FAILURE_MARKER
from githelper.errors import ExternalCommandError

logger = logging.getLogger(__name__)


class ExecutionResult(BaseModel):
    """Outcome of a single git invocation.

    Either an output (``error is None``) or a failure whose reason carries
    the underlying diagnostic verbatim.
    """

    args: list[str]
    returncode: Optional[int] = None
    output: str = ""
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> str:
        """Return the captured output or raise :class:`ExternalCommandError`."""
        if self.error is not None:
            raise ExternalCommandError(self.error, self.args, self.returncode)
        return self.output


class ProcessRunner:
    """Run git synchronously in a working directory.

    Parameters
    ----------
    executable:
        The version-control binary.  Defaults to ``git``.
    cwd:
        Working directory for every invocation.  Defaults to the process
        working directory.
    """

    def __init__(
        self,
        executable: str = DEFAULT_GIT_EXECUTABLE,
        cwd: str | Path | None = None,
    ) -> None:
        self.executable = executable
        self.cwd = Path(cwd) if cwd is not None else None

    @property
    def workdir(self) -> Path:
        return self.cwd if self.cwd is not None else Path.cwd()

    def run(self, *args: str) -> ExecutionResult:
        """Execute ``<executable> *args`` and wait for it to finish.

        Standard output is captured with trailing whitespace trimmed.  A
        non-zero exit status or a spawn failure (missing binary,
        permission denied) yields a failed result rather than raising.
        """
        cmd = [self.executable, *args]
        display = " ".join(cmd)
        logger.debug("%s (cwd=%s)", display, self.cwd)

        try:
            proc = subprocess.run(
                cmd,
                cwd=self.cwd,
                capture_output=True,
                text=True,
            )
        except OSError as exc:
            reason = f"{FAILURE_MARKER} {display}: {exc}"
            logger.debug(reason)
            return ExecutionResult(args=list(args), error=reason)

        if proc.returncode != 0:
            diagnostic = (proc.stderr or proc.stdout).strip()
            reason = f"{FAILURE_MARKER} {display} (rc={proc.returncode}): {diagnostic}"
            logger.debug(reason)
            return ExecutionResult(
                args=list(args),
                returncode=proc.returncode,
                output=proc.stdout.rstrip(),
                error=reason,
            )

        return ExecutionResult(
            args=list(args),
            returncode=proc.returncode,
            output=proc.stdout.rstrip(),
        )

    def check(self, *args: str) -> str:
        """Run and return the output, raising on failure."""
        return self.run(*args).unwrap()
