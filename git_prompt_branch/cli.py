"""Typer-based CLI for git-prompt-branch."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import typer

from . import __version__
from .app import build_prompt
from .config import DEFAULT_CONFIG

app = typer.Typer(
    help="Print the current git branch as a zsh prompt segment",
    add_completion=False,
)

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"git-prompt-branch {__version__}")
        raise typer.Exit()


def _working_dir() -> Path | None:
    try:
        return Path(os.getcwd())
    except OSError as exc:
        logger.debug("Working directory unavailable: %s", exc)
        return None


@app.command()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log each step to stderr."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the git-prompt-branch version and exit.",
    ),
) -> None:
    """Print the branch segment, or nothing when not inside a repository.

    Add it to zsh with ``setopt PROMPT_SUBST`` and
    ``PROMPT='%~$(git-prompt-branch) %# '``. The exit status is always 0.
    """

    _ = version  # handled via callback
    configure_logging(verbose)

    cwd = _working_dir()
    if cwd is None:
        return
    line = build_prompt(cwd, DEFAULT_CONFIG)
    if line is None:
        return
    # Bytes go to the binary stream, so the glyph survives non-UTF-8 locales.
    typer.echo(line.encode("utf-8"))


if __name__ == "__main__":
    app()
