"""git-helper command line.

Usage:
    git-helper init
    git-helper branch feature-x
    git-helper commit "fix typo"
    git-helper push
    git-helper status
    git-helper history
"""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console

from githelper.config import Settings, load_settings
from githelper.history import HistoryStore
from githelper.operations import GitHelper, OperationResult
from githelper.prompts import ConsolePrompter
from githelper.runner import ProcessRunner

app = typer.Typer(
    name="git-helper",
    help="Interactive helper for common Git tasks.",
    add_completion=False,
)

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)


def build_helper(settings: Settings | None = None) -> GitHelper:
    """Wire a GitHelper for the current working directory."""
    settings = settings or load_settings()
    return GitHelper(
        runner=ProcessRunner(settings.git_executable),
        history=HistoryStore(settings.history_file, limit=settings.history_limit),
        prompter=ConsolePrompter(console),
    )


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )


def _report(result: OperationResult) -> None:
    if not result.succeeded:
        err_console.print(result.message, style="red", markup=False, highlight=False)
        raise typer.Exit(1)
    console.print(result.message, style="green", markup=False, highlight=False)


# ============================================================
# Commands
# ============================================================


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    settings = load_settings()
    _configure_logging("DEBUG" if verbose else settings.log_level)
    ctx.obj = settings

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        console.print('Use the "init" command to start a new repository!', style="cyan")


@app.command()
def init(ctx: typer.Context):
    """Initialize a new Git repository."""
    _report(build_helper(ctx.obj).init())


@app.command()
def branch(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Name of the branch to create"),
):
    """Create and switch to a new branch."""
    _report(build_helper(ctx.obj).branch(name))


@app.command()
def commit(
    ctx: typer.Context,
    message: Optional[str] = typer.Argument(None, help="Commit message (prompted if omitted)"),
):
    """Stage and commit changes."""
    _report(build_helper(ctx.obj).commit(message))


@app.command()
def push(ctx: typer.Context):
    """Push changes to a remote repository."""
    _report(build_helper(ctx.obj).push())


@app.command()
def status(ctx: typer.Context):
    """Show repository status."""
    result = build_helper(ctx.obj).status()
    if not result.succeeded:
        _report(result)
    console.print(result.message, style="blue", markup=False)
    console.print(result.output or "", style="dim", markup=False, highlight=False)


@app.command()
def history(ctx: typer.Context):
    """Show recent Git commands."""
    result = build_helper(ctx.obj).show_history()
    if not result.records:
        console.print(result.message, style="yellow", markup=False)
        return

    console.print(result.message, style="blue", markup=False)
    for index, record in enumerate(result.records, start=1):
        console.print(
            f"{index}. {record.command} ({record.timestamp})",
            markup=False,
            highlight=False,
        )


if __name__ == "__main__":
    app()
