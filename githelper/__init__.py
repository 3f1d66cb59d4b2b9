"""git-helper — interactive front end for common Git tasks with a command history."""

__version__ = "1.0.0"

from githelper.config import Settings, load_settings
from githelper.errors import (
    ConfigurationError,
    ExternalCommandError,
    GitHelperError,
    HistoryPersistenceError,
)
from githelper.history import CommandRecord, HistoryJournal, HistoryStore
from githelper.operations import GitHelper, OperationResult
from githelper.prompts import ConsolePrompter, Prompter
from githelper.runner import ExecutionResult, ProcessRunner

__all__ = [
    "__version__",
    # Execution
    "ExecutionResult",
    "ProcessRunner",
    # History
    "CommandRecord",
    "HistoryJournal",
    "HistoryStore",
    # Operations
    "GitHelper",
    "OperationResult",
    "ConsolePrompter",
    "Prompter",
    # Configuration
    "Settings",
    "load_settings",
    # Errors
    "ConfigurationError",
    "ExternalCommandError",
    "GitHelperError",
    "HistoryPersistenceError",
]
