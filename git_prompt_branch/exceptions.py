"""Custom exception hierarchy for git-prompt-branch.

None of these ever reach the shell: each step catches them at its boundary
and degrades to "no segment" or "clean".
"""

from __future__ import annotations


class PromptError(RuntimeError):
    """Base error for all custom exceptions."""


class GitCommandError(PromptError):
    """Raised when a git invocation fails or cannot be launched."""

    def __init__(
        self,
        command: list[str],
        returncode: int | None,
        *,
        stdout: str | None = None,
        stderr: str | None = None,
    ):
        self.command = command
        self.returncode = returncode
        self.stdout = stdout or ""
        self.stderr = stderr or ""
        if returncode is None:
            message = f"git command could not run: {' '.join(command)}"
        else:
            message = f"git command failed (exit {returncode}): {' '.join(command)}"
        details = self.stderr.strip()
        if details:
            message = f"{message}\n{details}"
        super().__init__(message)


class GitTimeoutError(GitCommandError):
    """Raised when a git invocation outlives its deadline."""

    def __init__(self, command: list[str], timeout: float, *, stdout: str | None = None):
        super().__init__(command, None, stdout=stdout)
        self.timeout = timeout
        self.args = (f"git command timed out after {timeout:g}s: {' '.join(command)}",)


__all__ = ["PromptError", "GitCommandError", "GitTimeoutError"]
