"""Fixed settings for the prompt segment."""

from __future__ import annotations

from dataclasses import dataclass


DIRTY_ARGS = (
    "ls-files",
    "--deleted",
    "--modified",
    "--unmerged",
    "--killed",
    "--other",
    "--exclude-standard",
)


@dataclass(frozen=True)
class PromptConfig:
    """Application configuration."""

    marker: str = ".git"
    head_file: str = "HEAD"
    branch_prefix: bytes = b"refs/heads/"
    dirty_timeout: float = 2.0
    dirty_args: tuple[str, ...] = DIRTY_ARGS
    dirty_glyph: str = "💩"
    paren_color: str = "%F{blue}"
    branch_color: str = "%F{red}"
    reset: str = "%f"


DEFAULT_CONFIG = PromptConfig()
