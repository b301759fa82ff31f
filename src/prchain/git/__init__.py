"""Git operations: diff statistics, branches, commits."""

from prchain.git.branch import (
    check_branch_name,
    create_and_checkout,
    get_current_branch,
    get_user_name,
    has_remote,
    list_all_branches,
    normalize_user_token,
    parse_branch_list,
    push_branch,
)
from prchain.git.commit import commit_changes, stage_files
from prchain.git.diff import (
    compute_changed_lines,
    get_changed_files,
    parse_numstat,
    parse_numstat_line,
)
from prchain.git.runner import GitError, resolve_repository, run_git, set_timeout

__all__ = [
    # Runner
    "GitError",
    "run_git",
    "set_timeout",
    "resolve_repository",
    # Diff
    "parse_numstat_line",
    "parse_numstat",
    "compute_changed_lines",
    "get_changed_files",
    # Branch
    "get_current_branch",
    "check_branch_name",
    "parse_branch_list",
    "list_all_branches",
    "has_remote",
    "normalize_user_token",
    "get_user_name",
    "create_and_checkout",
    "push_branch",
    # Commit
    "stage_files",
    "commit_changes",
]
