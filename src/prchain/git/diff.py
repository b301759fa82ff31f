"""Diff statistics: reduce `git diff --numstat` to a changed-lines count."""

from pathlib import Path
from typing import Optional

from prchain.git.runner import GitError, run_git
from prchain.models.core import DiffLineStat
from prchain.ui.output import warn


def _to_count(field: str) -> int:
    # Binary files report "-" for both columns
    return int(field) if field.isdecimal() else 0


def parse_numstat_line(line: str) -> Optional[DiffLineStat]:
    """Parse `<additions>\\t<deletions>\\t<path>`. Returns None for blank or short lines."""
    if not line.strip():
        return None
    parts = line.strip().split("\t")
    if len(parts) < 3:
        return None
    return DiffLineStat(
        path="\t".join(parts[2:]),
        additions=_to_count(parts[0].strip()),
        deletions=_to_count(parts[1].strip()),
    )


def parse_numstat(output: str) -> list[DiffLineStat]:
    stats = []
    for line in output.splitlines():
        stat = parse_numstat_line(line)
        if stat is not None:
            stats.append(stat)
    return stats


def compute_changed_lines(repo: Path, base_ref: str = "HEAD") -> int:
    """Sum of additions + deletions for `git diff <base_ref> --numstat`.

    `base_ref` is "HEAD" (working tree) or "<parent>...HEAD" (since the merge-base).
    Returns 0 on any git failure.
    """
    try:
        output = run_git(["diff", base_ref, "--numstat", "--no-ext-diff"], repo)
    except GitError as e:
        warn(f"Could not measure changes against {base_ref}: {e}")
        return 0
    return sum(stat.changed for stat in parse_numstat(output))


def get_changed_files(repo: Path) -> list[str]:
    """Files changed in the working tree relative to HEAD."""
    try:
        output = run_git(["diff", "HEAD", "--name-only"], repo)
    except GitError as e:
        warn(f"Could not list changed files: {e}")
        return []
    return [f.strip() for f in output.splitlines() if f.strip()]
