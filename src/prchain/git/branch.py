"""Branch, remote and identity operations."""

from pathlib import Path

from prchain.git.runner import GitError, run_git
from prchain.ui.output import warn


def get_current_branch(repo: Path) -> str:
    """Get current git branch name ("" when detached or on failure)."""
    try:
        return run_git(["branch", "--show-current"], repo).strip()
    except GitError as e:
        warn(f"Could not determine current branch: {e}")
        return ""


def parse_branch_list(output: str) -> list[str]:
    """Parse `git branch -a` into unique bare branch names.

    Strips the current-branch marker (`*`), the worktree marker (`+`) and the
    `remotes/<remote>/` prefix. Symbolic refs and detached-HEAD lines are skipped.
    """
    names: list[str] = []
    for line in output.splitlines():
        name = line.strip().lstrip("*+ ")
        if not name or name.startswith("(") or " -> " in name:
            continue
        if name.startswith("remotes/"):
            _, _, name = name[len("remotes/") :].partition("/")
            if not name:
                continue
        if name not in names:
            names.append(name)
    return names


def list_all_branches(repo: Path) -> list[str]:
    """All local and remote-tracking branch names, de-duplicated. Raises GitError."""
    return parse_branch_list(run_git(["branch", "-a"], repo))


def has_remote(repo: Path, remote: str = "origin") -> bool:
    """Check `git remote -v` for a remote with this name."""
    try:
        output = run_git(["remote", "-v"], repo)
    except GitError as e:
        warn(f"Could not list remotes: {e}")
        return False
    return any(line.split()[0] == remote for line in output.splitlines() if line.strip())


def normalize_user_token(name: str) -> str:
    """Branch-safe user token: lowercase, spaces replaced with '-'."""
    return name.strip().lower().replace(" ", "-")


def get_user_name(repo: Path) -> str:
    """Configured `user.name` as a branch-safe token. Raises GitError when unset."""
    cmd = ["config", "user.name"]
    token = normalize_user_token(run_git(cmd, repo))
    if not token:
        raise GitError(cmd, "user.name is empty")
    return token


def check_branch_name(repo: Path, name: str) -> None:
    """Raise GitError unless `name` is a valid new branch name (`git check-ref-format --branch`)."""
    run_git(["check-ref-format", "--branch", name], repo)


def create_and_checkout(repo: Path, branch: str) -> None:
    run_git(["checkout", "-b", branch], repo)


def push_branch(
    repo: Path, branch: str, remote: str = "origin", set_upstream: bool = False
) -> None:
    """Push `branch` to `remote`; `set_upstream` adds `-u` for a first push."""
    args = ["push", "-u", remote, branch] if set_upstream else ["push", remote, branch]
    run_git(args, repo)
