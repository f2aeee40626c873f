"""Main application orchestration."""

from __future__ import annotations

import logging
from pathlib import Path

from . import git
from .config import DEFAULT_CONFIG, PromptConfig
from .models import PromptSegment

logger = logging.getLogger(__name__)


def build_segment(cwd: Path, config: PromptConfig = DEFAULT_CONFIG) -> PromptSegment | None:
    """Collect branch and dirty state for ``cwd``, or None outside a repository."""

    branch = git.current_branch(cwd, config)
    if branch is None:
        return None
    dirty = git.is_dirty(cwd, config)
    logger.debug("Branch %r, dirty=%s", branch, dirty)
    return PromptSegment(branch=branch, dirty=dirty)


def build_prompt(cwd: Path, config: PromptConfig = DEFAULT_CONFIG) -> str | None:
    """Return the rendered prompt segment for ``cwd``, or None when there is none."""

    segment = build_segment(cwd, config)
    if segment is None:
        return None
    return segment.render(config)
