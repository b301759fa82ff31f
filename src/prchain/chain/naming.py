"""Compute the next branch name in a chain."""

from pathlib import Path
from typing import Iterable

from prchain.chain.parent import split_numeric_suffix
from prchain.git.branch import get_user_name, list_all_branches
from prchain.git.runner import GitError
from prchain.models.state import DEFAULT_ROOTS
from prchain.ui.output import warn


def next_chain_name(base: str) -> str:
    """Increment a trailing numeric suffix: 'feature-2' -> 'feature-3', 'feature' -> 'feature-1'."""
    prefix, sep, suffix = base.rpartition("-")
    if sep and suffix.isdecimal():
        return f"{prefix}-{int(suffix) + 1}"
    return f"{base}-1"


def root_prefix(repo_name: str, user: str) -> str:
    return f"{repo_name}-master-{user}"


def next_root_name(prefix: str, branches: Iterable[str]) -> str:
    """`<prefix>-<max existing suffix + 1>`, or `<prefix>-1` when none exist."""
    highest = 0
    for branch in branches:
        split = split_numeric_suffix(branch)
        if split is not None and split[0] == prefix:
            highest = max(highest, split[1])
    return f"{prefix}-{highest + 1}"


def next_name(repo: Path, base: str, roots: Iterable[str] = DEFAULT_ROOTS) -> str:
    """Next branch after `base`.

    From a root branch: `<repo dir>-master-<user>-<n>`. Otherwise the chain suffix
    is incremented. Identity or branch listing failures fall back to `<base>-1`.
    """
    if base not in tuple(roots):
        return next_chain_name(base)
    try:
        prefix = root_prefix(repo.name, get_user_name(repo))
        return next_root_name(prefix, list_all_branches(repo))
    except GitError as e:
        warn(f"Could not compute root branch name, using '{base}-1': {e}")
        return f"{base}-1"
