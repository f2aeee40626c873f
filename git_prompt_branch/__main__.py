"""Module entrypoint for `python -m git_prompt_branch`."""

from __future__ import annotations

from .cli import app


def main() -> None:
    app(prog_name="git-prompt-branch")


if __name__ == "__main__":
    main()
