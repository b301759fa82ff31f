"""Staging and committing."""

from pathlib import Path

from prchain.git.runner import run_git


def stage_files(repo: Path, files: list[str]) -> None:
    """`git add <path>` for each file, in order. Raises GitError on the first failure."""
    for path in files:
        run_git(["add", path], repo)


def commit_changes(repo: Path, message: str) -> None:
    run_git(["commit", "-m", message], repo)
