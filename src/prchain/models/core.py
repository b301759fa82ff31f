"""Core domain models."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class DiffLineStat:
    """One parsed `git diff --numstat` line."""

    path: str
    additions: int = 0
    deletions: int = 0

    @property
    def changed(self) -> int:
        return self.additions + self.deletions


@dataclass(frozen=True)
class ParentRef:
    """Logical parent of a branch. `branch=None` means the root (working tree vs HEAD only)."""

    branch: Optional[str] = None

    @property
    def is_root(self) -> bool:
        return self.branch is None

    @property
    def range_ref(self) -> str:
        """Three-dot range against the merge-base with the parent."""
        if self.branch is None:
            return "HEAD"
        return f"{self.branch}...HEAD"

    def __str__(self) -> str:
        return self.branch if self.branch is not None else "HEAD"


ROOT = ParentRef()


@dataclass(frozen=True)
class ChangeMetric:
    """Changed lines on the current branch, split by where they come from."""

    branch: str
    parent: ParentRef = ROOT
    branch_portion: int = 0
    working_portion: int = 0

    @property
    def total(self) -> int:
        return self.branch_portion + self.working_portion

    def to_dict(self) -> dict:
        return {
            "branch": self.branch,
            "parent": str(self.parent),
            "branch_portion": self.branch_portion,
            "working_portion": self.working_portion,
            "total": self.total,
        }
