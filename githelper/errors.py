"""Exception hierarchy.

Only :class:`ExternalCommandError` ever reaches the user.  The other two
are absorbed where they occur.
"""

from __future__ import annotations

from typing import Sequence


class GitHelperError(Exception):
    """Base class for all git-helper errors."""


class ExternalCommandError(GitHelperError):
    """Raised when a git subprocess exits non-zero or cannot be spawned."""

    def __init__(
        self,
        message: str,
        args: Sequence[str] = (),
        returncode: int | None = None,
    ) -> None:
        super().__init__(message)
        self.command_args = tuple(args)
        self.returncode = returncode


class HistoryPersistenceError(GitHelperError):
    """The history journal could not be read or written."""


class ConfigurationError(GitHelperError):
    """A setting, such as the journal path, could not be resolved."""
