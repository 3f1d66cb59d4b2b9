"""Global configuration: paths, constants, settings.

Settings are layered: built-in defaults, then ``GIT_HELPER_*`` environment
variables.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Mapping, Optional

from pydantic import BaseModel

from githelper.errors import ConfigurationError

logger = logging.getLogger(__name__)

# Journal file, one per user account, under the home directory
HISTORY_FILENAME = ".git_helper_history.json"

# Maximum number of records retained in the journal
MAX_HISTORY_ENTRIES = 100

# Prefix of every external command failure reason
FAILURE_MARKER = "Git command failed:"

DEFAULT_GIT_EXECUTABLE = "git"
DEFAULT_LOG_LEVEL = "WARNING"

# init: ignore file written when the user accepts the prompt
GITIGNORE_FILENAME = ".gitignore"
DEFAULT_GITIGNORE = "node_modules\n.env\n"
INITIAL_COMMIT_MESSAGE = "Initial commit with .gitignore"

# commit / push prompt defaults
DEFAULT_COMMIT_MESSAGE = "Update"
DEFAULT_REMOTE = "origin"


class Settings(BaseModel):
    """Resolved runtime settings."""

    history_file: Optional[Path] = None
    """Journal path; ``None`` disables history."""

    history_limit: int = MAX_HISTORY_ENTRIES
    git_executable: str = DEFAULT_GIT_EXECUTABLE
    log_level: str = DEFAULT_LOG_LEVEL


def default_history_path() -> Path:
    """Return ``~/.git_helper_history.json``.

    Raises :class:`ConfigurationError` if the home directory cannot be
    resolved.
    """
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as exc:
        raise ConfigurationError(f"Cannot resolve home directory: {exc}") from exc
    return home / HISTORY_FILENAME


def _parse_limit(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"GIT_HELPER_HISTORY_LIMIT must be an integer, got {raw!r}") from exc
    if value < 1:
        raise ConfigurationError(f"GIT_HELPER_HISTORY_LIMIT must be positive, got {value}")
    return value


# Environment variables recognised by load_settings(), keyed to Settings fields
_ENV_KEYS: dict[str, dict[str, Any]] = {
    # Path of the command history journal
    "GIT_HELPER_HISTORY_FILE": {
        "field": "history_file",
        "parse": lambda raw: Path(raw).expanduser(),
    },
    # Number of journal records kept
    "GIT_HELPER_HISTORY_LIMIT": {
        "field": "history_limit",
        "parse": _parse_limit,
    },
    # Version-control executable to invoke
    "GIT_HELPER_GIT": {
        "field": "git_executable",
        "parse": str,
    },
    # Logging level
    "GIT_HELPER_LOG_LEVEL": {
        "field": "log_level",
        "parse": str.upper,
    },
}


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Load merged settings: defaults -> environment variables.

    Configuration problems never abort the tool.  An unresolvable journal
    path disables history; an invalid value keeps its default.
    """
    env = os.environ if environ is None else environ
    settings = Settings()

    try:
        settings.history_file = default_history_path()
    except ConfigurationError as exc:
        logger.debug("No default history path: %s", exc)

    for key, info in _ENV_KEYS.items():
        raw = env.get(key)
        if not raw:
            continue
        try:
            setattr(settings, info["field"], info["parse"](raw))
        except ConfigurationError as exc:
            logger.warning("%s; keeping %r", exc, getattr(settings, info["field"]))

    if settings.history_file is None:
        logger.debug("History disabled")
    return settings
