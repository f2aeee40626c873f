"""Dataclasses shared across modules."""

from __future__ import annotations

from dataclasses import dataclass

from .config import DEFAULT_CONFIG, PromptConfig


@dataclass(frozen=True)
class PromptSegment:
    """The branch indicator printed into the shell prompt."""

    branch: str
    dirty: bool = False

    def render(self, config: PromptConfig = DEFAULT_CONFIG) -> str:
        """Return the zsh-escaped segment, without the trailing newline."""

        line = (
            f" {config.paren_color}({config.branch_color}{self.branch}"
            f"{config.paren_color}){config.reset}"
        )
        if self.dirty:
            line += config.dirty_glyph
        return line
