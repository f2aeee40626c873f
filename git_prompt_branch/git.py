"""Thin wrappers around git metadata and the git CLI."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Sequence

from .config import DEFAULT_CONFIG, PromptConfig
from .exceptions import GitCommandError, GitTimeoutError
from .fs import find_repo_root, inside_metadata_dir

logger = logging.getLogger(__name__)


def run_git(
    args: Sequence[str],
    *,
    cwd: Path | None = None,
    timeout: float | None = None,
    check: bool = True,
) -> subprocess.CompletedProcess[str]:
    """Execute a git command, raising GitCommandError when it does not succeed.

    ``subprocess.run`` kills and reaps the child before raising
    ``TimeoutExpired``, so nothing is left running on the timeout path.
    Output that is not valid UTF-8 (raw filenames) is decoded with
    replacement characters.
    """

    command = ["git", *args]
    logger.debug("Running command: %s", " ".join(command))
    try:
        result = subprocess.run(
            command,
            cwd=str(cwd) if cwd else None,
            stdin=subprocess.DEVNULL,
            capture_output=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired as exc:
        stdout = exc.stdout.decode(errors="replace") if isinstance(exc.stdout, bytes) else exc.stdout
        raise GitTimeoutError(command, exc.timeout, stdout=stdout) from exc
    except OSError as exc:
        raise GitCommandError(command, None, stderr=str(exc)) from exc
    if check and result.returncode != 0:
        raise GitCommandError(command, result.returncode, stdout=result.stdout, stderr=result.stderr)
    return result


def read_head_branch(repo_root: Path, config: PromptConfig = DEFAULT_CONFIG) -> str | None:
    """Return the branch named by ``<repo_root>/.git/HEAD``.

    None when the file cannot be read, when HEAD is detached (no
    ``refs/heads/`` token), or when the name is empty or not UTF-8.
    """

    head_path = Path(repo_root) / config.marker / config.head_file
    try:
        content = head_path.read_bytes()
    except OSError as exc:
        logger.debug("Cannot read %s: %s", head_path, exc)
        return None

    index = content.find(config.branch_prefix)
    if index == -1:
        logger.debug("HEAD is detached: %s", head_path)
        return None
    raw = content[index + len(config.branch_prefix):].strip()
    try:
        branch = raw.decode("utf-8")
    except UnicodeDecodeError:
        logger.debug("Branch name in %s is not UTF-8", head_path)
        return None
    return branch or None


def current_branch(path: Path, config: PromptConfig = DEFAULT_CONFIG) -> str | None:
    """Resolve the branch to display for a working directory.

    Inside the metadata directory itself the marker name stands in for the
    branch and no file is read.
    """

    if inside_metadata_dir(path, config.marker):
        return config.marker
    repo_root = find_repo_root(path, config.marker)
    if repo_root is None:
        logger.debug("No %s found above %s", config.marker, path)
        return None
    logger.debug("Repository root: %s", repo_root)
    return read_head_branch(repo_root, config)


def is_dirty(cwd: Path | None = None, config: PromptConfig = DEFAULT_CONFIG) -> bool:
    """Return True if git lists deleted, modified, unmerged, killed or untracked files.

    Any failure to get an answer within the timeout counts as clean.
    """

    try:
        proc = run_git(config.dirty_args, cwd=cwd, timeout=config.dirty_timeout)
    except GitCommandError as exc:
        logger.debug("Dirty check skipped: %s", exc)
        return False
    return bool(proc.stdout.strip())


__all__ = ["run_git", "read_head_branch", "current_branch", "is_dirty"]
