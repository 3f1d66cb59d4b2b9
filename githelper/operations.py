"""GitHelper — the user-facing operations.

Every operation has the same shape: gather parameters (prompting where
needed), run git one or more times in sequence, stop at the first failure,
and on success append exactly one summary command to the history journal.
Failed operations never touch the journal.  Completed sub-steps are not
rolled back.

Usage::

    helper = GitHelper(ProcessRunner(), HistoryStore(path), ConsolePrompter())
    result = helper.commit("fix typo")
    if not result.succeeded:
        print(result.message)
"""

from __future__ import annotations

import logging
from typing import Optional

from pydantic import BaseModel, Field

from githelper.config import (
    DEFAULT_COMMIT_MESSAGE,
    DEFAULT_GITIGNORE,
    DEFAULT_REMOTE,
    GITIGNORE_FILENAME,
    INITIAL_COMMIT_MESSAGE,
)
from githelper.errors import ExternalCommandError
from githelper.history import CommandRecord, HistoryStore
from githelper.prompts import Prompter
from githelper.runner import ProcessRunner

logger = logging.getLogger(__name__)


class OperationResult(BaseModel):
    """What an operation did, for the CLI to render."""

    operation: str
    succeeded: bool
    message: str = ""
    output: Optional[str] = None
    recorded: Optional[str] = None
    """Command appended to the history journal, if any."""

    records: list[CommandRecord] = Field(default_factory=list)


class GitHelper:
    """Run the six git-helper operations.

    Parameters
    ----------
    runner:
        Executes git.  Its working directory is also where ``init`` writes
        the ignore file.
    history:
        The command history journal.
    prompter:
        Asks the user for missing parameters.
    """

    def __init__(
        self,
        runner: ProcessRunner,
        history: HistoryStore,
        prompter: Prompter,
    ) -> None:
        self.runner = runner
        self.history = history
        self.prompter = prompter

    # -- Operations -----------------------------------------------------------

    def init(self) -> OperationResult:
        """Initialise a repository, optionally committing a ``.gitignore``.

        ``init`` is recorded as soon as ``git init`` succeeds, even if the
        ignore-file steps fail afterwards (re-running on an existing repo
        has nothing new to commit).
        """
        try:
            self.runner.check("init")
        except ExternalCommandError as exc:
            return self._failed("init", exc)

        error: Optional[str] = None
        if self.prompter.confirm("Create a .gitignore file?", default=True):
            try:
                (self.runner.workdir / GITIGNORE_FILENAME).write_text(
                    DEFAULT_GITIGNORE, encoding="utf-8"
                )
                self.runner.check("add", GITIGNORE_FILENAME)
                self.runner.check("commit", "-m", INITIAL_COMMIT_MESSAGE)
            except (ExternalCommandError, OSError) as exc:
                logger.info("init: ignore-file setup failed: %s", exc)
                error = str(exc)

        if error is not None:
            self._record("init")
            return OperationResult(
                operation="init", succeeded=False, message=error, recorded="init"
            )
        return self._succeeded("init", "Git repository initialized!", "init")

    def branch(self, name: str) -> OperationResult:
        """Create and switch to branch *name*."""
        try:
            self.runner.check("checkout", "-b", name)
        except ExternalCommandError as exc:
            return self._failed("branch", exc)
        return self._succeeded(
            "branch", f'Switched to new branch "{name}"!', f"checkout -b {name}"
        )

    def commit(self, message: Optional[str] = None) -> OperationResult:
        """Stage everything and commit.

        The user is prompted only when *message* is ``None``; an explicit
        empty string is passed to git unchanged.
        """
        if message is None:
            message = self.prompter.text("Enter commit message:", default=DEFAULT_COMMIT_MESSAGE)

        try:
            self.runner.check("add", ".")
            self.runner.check("commit", "-m", message)
        except ExternalCommandError as exc:
            return self._failed("commit", exc)
        return self._succeeded(
            "commit",
            f'Changes committed with message: "{message}"',
            f'commit -m "{message}"',
        )

    def push(self) -> OperationResult:
        """Push a branch to a remote, defaulting to the current branch."""
        try:
            current = self.runner.check("branch", "--show-current").strip()
        except ExternalCommandError as exc:
            return self._failed("push", exc)

        remote = self.prompter.text("Remote name:", default=DEFAULT_REMOTE)
        branch = self.prompter.text("Branch name:", default=current)

        try:
            self.runner.check("push", remote, branch)
        except ExternalCommandError as exc:
            return self._failed("push", exc)
        return self._succeeded("push", f"Pushed to {remote}/{branch}!", f"push {remote} {branch}")

    def status(self) -> OperationResult:
        """Return ``git status`` output."""
        try:
            output = self.runner.check("status")
        except ExternalCommandError as exc:
            return self._failed("status", exc)
        return self._succeeded("status", "Repository Status:", "status", output=output)

    def show_history(self) -> OperationResult:
        """Return the journal, oldest first.  Viewing is not recorded."""
        journal = self.history.load()
        if not journal:
            return OperationResult(
                operation="history", succeeded=True, message="No command history yet."
            )
        return OperationResult(
            operation="history",
            succeeded=True,
            message="Recent Git Commands:",
            records=journal.records,
        )

    # -- Internals ------------------------------------------------------------

    def _record(self, command: str) -> None:
        self.history.append(command)

    def _succeeded(
        self,
        operation: str,
        message: str,
        command: str,
        output: Optional[str] = None,
    ) -> OperationResult:
        self._record(command)
        logger.info("%s succeeded: %s", operation, command)
        return OperationResult(
            operation=operation,
            succeeded=True,
            message=message,
            output=output,
            recorded=command,
        )

    def _failed(self, operation: str, exc: ExternalCommandError) -> OperationResult:
        logger.info("%s failed: %s", operation, exc)
        return OperationResult(operation=operation, succeeded=False, message=str(exc))
