"""Commit, push and branch sequences for the two workflow variants.

Root branch:  stage -> commit -> create <name>-1 -> push -u -> create <name>-2
Chain branch: stage -> commit -> push current -> create next

Steps run strictly in order. The first git failure aborts the rest and leaves the
threshold unreset so the user is prompted again.
"""

from pathlib import Path
from typing import Iterable, Optional

from prchain.chain.naming import next_name
from prchain.chain.threshold import ThresholdGate
from prchain.git.branch import check_branch_name, create_and_checkout, has_remote, push_branch
from prchain.git.commit import commit_changes, stage_files
from prchain.git.runner import GitError
from prchain.models.results import WorkflowError, WorkflowResult, WorkflowSuccess
from prchain.models.state import DEFAULT_ROOTS
from prchain.ui.output import error, error_with_detail, log


def validate_request(
    files: list[str], message: str, branch_name: Optional[str] = None, root: bool = False
) -> Optional[WorkflowError]:
    """Reject empty selections before any git command runs."""
    if not files:
        return WorkflowError("Please select at least one file to commit.")
    if not message or not message.strip():
        return WorkflowError("Please provide a commit message.")
    if root and branch_name is not None and not branch_name.strip():
        return WorkflowError("Branch name cannot be empty.")
    return None


def _failed(step: str, exc: GitError, done: list[str]) -> WorkflowError:
    message = f"{step} failed: {exc}"
    if done:
        completed = f"completed: {', '.join(done)}"
        error_with_detail(message, completed)
        message += f" ({completed})"
    else:
        error(message)
    return WorkflowError(message, step=step)


def run_root_workflow(
    repo: Path,
    files: list[str],
    message: str,
    branch_name: Optional[str] = None,
    gate: Optional[ThresholdGate] = None,
    remote: str = "origin",
    root_branch: str = "master",
    roots: Iterable[str] = DEFAULT_ROOTS,
) -> WorkflowResult:
    """Move work off a protected root branch into `<branch_name>-1`, then open `<branch_name>-2`.

    With `branch_name=None` the first branch is named `<repo>-master-<user>-<n>`.
    """
    invalid = validate_request(files, message, branch_name, root=True)
    if invalid:
        return invalid
    if branch_name is not None:
        # Must fail before staging; nothing may be committed on the root branch
        try:
            check_branch_name(repo, f"{branch_name.strip()}-1")
        except GitError:
            return WorkflowError(f"'{branch_name.strip()}' is not a valid branch name.")

    done: list[str] = []
    step = "stage"
    try:
        log(f"Staging {len(files)} file(s)")
        stage_files(repo, files)
        done.append(step)

        step = "commit"
        commit_changes(repo, message.strip())
        done.append(step)

        pushed = has_remote(repo, remote)
        if branch_name is None:
            first = next_name(repo, root_branch, roots)
        else:
            first = f"{branch_name.strip()}-1"

        step = f"create branch {first}"
        create_and_checkout(repo, first)
        done.append(step)

        if pushed:
            step = f"push {first}"
            push_branch(repo, first, remote, set_upstream=True)
            done.append(step)

        following = next_name(repo, first, roots)
        step = f"create branch {following}"
        create_and_checkout(repo, following)
        done.append(step)
    except GitError as e:
        return _failed(step, e, done)

    if gate is not None:
        gate.reset_to_original()

    if pushed:
        summary = (
            f"'{root_branch}' protected! Created branch '{first}' and switched to '{following}'"
        )
    else:
        summary = f"Created branch '{first}' and switched to '{following}' (local only)"
    return WorkflowSuccess(
        message=summary,
        branch=following,
        workflow=f"{root_branch} → {first} → {following} (current)",
    )


def run_chain_workflow(
    repo: Path,
    current_branch: str,
    files: list[str],
    message: str,
    gate: Optional[ThresholdGate] = None,
    remote: str = "origin",
    roots: Iterable[str] = DEFAULT_ROOTS,
) -> WorkflowResult:
    """Commit and push the current chain branch, then open the next one."""
    invalid = validate_request(files, message)
    if invalid:
        return invalid

    done: list[str] = []
    step = "stage"
    try:
        log(f"Staging {len(files)} file(s)")
        stage_files(repo, files)
        done.append(step)

        step = "commit"
        commit_changes(repo, message.strip())
        done.append(step)

        pushed = has_remote(repo, remote)
        if pushed:
            step = f"push {current_branch}"
            push_branch(repo, current_branch, remote)
            done.append(step)

        following = next_name(repo, current_branch, roots)
        step = f"create branch {following}"
        create_and_checkout(repo, following)
        done.append(step)
    except GitError as e:
        return _failed(step, e, done)

    if gate is not None:
        gate.reset_to_original()

    if pushed:
        summary = f"Successfully pushed and switched to branch '{following}'"
    else:
        summary = f"Created and switched to branch '{following}' (local only)"
    return WorkflowSuccess(message=summary, branch=following)
