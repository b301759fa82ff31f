"""Infer the logical parent of a branch from its name.

Naming conventions, first match wins:

    master / main        -> root (working tree vs HEAD only)
    <x>-master-1         -> master
    <x>-master-<n>       -> <x>-master-<n-1> if it exists, else master
    <x>-1                -> <x> if it exists, else master
    <x>-<n>              -> <x>-<n-1> if it exists, else master
    anything else        -> master, main, or root, whichever exists first
"""

import re
from pathlib import Path
from typing import Iterable, Optional

from prchain.git.branch import list_all_branches
from prchain.git.runner import GitError
from prchain.models.core import ROOT, ParentRef
from prchain.models.state import DEFAULT_ROOTS
from prchain.ui.output import warn

# Greedy prefix so only the last dash-delimited numeric token is split off
_NUMERIC_SUFFIX = re.compile(r"^(?P<prefix>.+)-(?P<number>\d+)$")


def split_numeric_suffix(branch: str) -> Optional[tuple[str, int]]:
    """'feature-x-3' -> ('feature-x', 3). None when there is no trailing -<digits>."""
    match = _NUMERIC_SUFFIX.match(branch)
    if not match:
        return None
    return match.group("prefix"), int(match.group("number"))


def resolve_parent_name(
    current: str,
    branches: Iterable[str],
    roots: Iterable[str] = DEFAULT_ROOTS,
    fallback: str = "master",
) -> ParentRef:
    """Pure parent resolution from a branch name and the set of existing branches."""
    if current in tuple(roots):
        return ROOT

    existing = set(branches)
    split = split_numeric_suffix(current)
    if split is not None:
        prefix, number = split
        if prefix.endswith("-master") and prefix != "-master":
            if number == 1:
                return ParentRef("master")
            if number > 1:
                candidate = f"{prefix}-{number - 1}"
                return ParentRef(candidate if candidate in existing else fallback)
        elif number == 1:
            return ParentRef(prefix if prefix in existing else fallback)
        elif number > 1:
            candidate = f"{prefix}-{number - 1}"
            return ParentRef(candidate if candidate in existing else fallback)

    for default in ("master", "main"):
        if default in existing:
            return ParentRef(default)
    return ROOT


def resolve_parent(
    repo: Path,
    current: str,
    roots: Iterable[str] = DEFAULT_ROOTS,
    fallback: str = "master",
) -> ParentRef:
    """Resolve against the repository's local and remote-tracking branches.

    Branch enumeration failures resolve to `fallback`.
    """
    roots = tuple(roots)
    if current in roots:
        return ROOT
    try:
        branches = list_all_branches(repo)
    except GitError as e:
        warn(f"Could not list branches, assuming parent '{fallback}': {e}")
        return ParentRef(fallback)
    return resolve_parent_name(current, branches, roots=roots, fallback=fallback)
