"""Combine working-tree and branch-vs-parent diffs into one changed-lines metric."""

from pathlib import Path
from typing import Iterable

from prchain.chain.parent import resolve_parent
from prchain.git.branch import get_current_branch
from prchain.git.diff import compute_changed_lines
from prchain.models.core import ChangeMetric
from prchain.models.state import DEFAULT_ROOTS


def compute_total(
    repo: Path, roots: Iterable[str] = DEFAULT_ROOTS, fallback: str = "master"
) -> ChangeMetric:
    """Measure the current branch.

    Root branches count only working-tree changes. Other branches add the changes
    committed since the merge-base with their parent.
    """
    roots = tuple(roots)
    branch = get_current_branch(repo) or roots[0]
    parent = resolve_parent(repo, branch, roots=roots, fallback=fallback)

    if parent.is_root:
        working = compute_changed_lines(repo)
        return ChangeMetric(branch=branch, parent=parent, working_portion=working)

    return ChangeMetric(
        branch=branch,
        parent=parent,
        branch_portion=compute_changed_lines(repo, parent.range_ref),
        working_portion=compute_changed_lines(repo, "HEAD"),
    )


def format_breakdown(metric: ChangeMetric) -> str:
    """'7 lines (branch vs feature: 3, working tree: 4)'."""
    if metric.parent.is_root:
        return f"{metric.total} lines (working tree: {metric.working_portion})"
    return (
        f"{metric.total} lines (branch vs {metric.parent}: {metric.branch_portion}, "
        f"working tree: {metric.working_portion})"
    )
