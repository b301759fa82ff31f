"""Tests for prchain.git.branch helper functions."""

from pathlib import Path

import pytest

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
from prchain.git.runner import GitError

REPO = Path("/repo")

BRANCH_A = """\
* feature-2
  feature-1
  master
  remotes/origin/HEAD -> origin/master
  remotes/origin/master
  remotes/origin/feature-1
  remotes/origin/sneh-master-1
"""


class TestParseBranchList:
    def test_strips_markers_and_remote_prefix(self):
        assert parse_branch_list(BRANCH_A) == [
            "feature-2",
            "feature-1",
            "master",
            "sneh-master-1",
        ]

    def test_detached_head_skipped(self):
        output = "* (HEAD detached at 1a2b3c)\n  master\n"
        assert parse_branch_list(output) == ["master"]

    def test_worktree_marker(self):
        assert parse_branch_list("+ other-wt\n* master\n") == ["other-wt", "master"]

    def test_other_remote_prefix(self):
        assert parse_branch_list("  remotes/upstream/dev\n") == ["dev"]

    def test_empty(self):
        assert parse_branch_list("") == []


class TestGetCurrentBranch:
    def test_returns_branch(self, fake_git):
        fake_git.respond("branch", "--show-current", stdout="feature-1\n")
        assert get_current_branch(REPO) == "feature-1"

    def test_detached_head(self, fake_git):
        assert get_current_branch(REPO) == ""

    def test_failure(self, fake_git, capsys):
        fake_git.fail("branch")
        assert get_current_branch(REPO) == ""
        assert "Could not determine current branch" in capsys.readouterr().out


class TestListAllBranches:
    def test_lists(self, fake_git):
        fake_git.respond("branch", "-a", stdout=BRANCH_A)
        assert "sneh-master-1" in list_all_branches(REPO)
        assert fake_git.calls == [["branch", "-a"]]

    def test_failure_raises(self, fake_git):
        fake_git.fail("branch", "-a")
        with pytest.raises(GitError):
            list_all_branches(REPO)


class TestHasRemote:
    def test_origin_present(self, fake_git):
        fake_git.respond(
            "remote",
            "-v",
            stdout="origin\tgit@host:a/b.git (fetch)\norigin\tgit@host:a/b.git (push)\n",
        )
        assert has_remote(REPO) is True

    def test_other_remote_only(self, fake_git):
        fake_git.respond("remote", "-v", stdout="upstream\tgit@host:a/b.git (fetch)\n")
        assert has_remote(REPO) is False
        assert has_remote(REPO, "upstream") is True

    def test_no_remotes(self, fake_git):
        assert has_remote(REPO) is False

    def test_failure_is_false(self, fake_git):
        fake_git.fail("remote")
        assert has_remote(REPO) is False


class TestUserName:
    def test_normalize(self):
        assert normalize_user_token("Sneh Patel\n") == "sneh-patel"

    def test_get_user_name(self, fake_git):
        fake_git.respond("config", "user.name", stdout="Sneh Patel\n")
        assert get_user_name(REPO) == "sneh-patel"

    def test_empty_raises(self, fake_git):
        fake_git.respond("config", "user.name", stdout="\n")
        with pytest.raises(GitError, match="empty"):
            get_user_name(REPO)

    def test_unset_raises(self, fake_git):
        fake_git.respond("config", "user.name", returncode=1)
        with pytest.raises(GitError):
            get_user_name(REPO)


class TestBranchCommands:
    def test_create_and_checkout(self, fake_git):
        create_and_checkout(REPO, "feature-2")
        assert fake_git.calls == [["checkout", "-b", "feature-2"]]

    def test_create_existing_raises(self, fake_git):
        fake_git.fail("checkout", stderr="fatal: a branch named 'x' already exists")
        with pytest.raises(GitError, match="already exists"):
            create_and_checkout(REPO, "x")

    def test_push(self, fake_git):
        push_branch(REPO, "feature-1")
        assert fake_git.calls == [["push", "origin", "feature-1"]]

    def test_push_set_upstream(self, fake_git):
        push_branch(REPO, "auth-1", remote="fork", set_upstream=True)
        assert fake_git.calls == [["push", "-u", "fork", "auth-1"]]

    def test_check_branch_name(self, fake_git):
        check_branch_name(REPO, "auth-1")
        assert fake_git.calls == [["check-ref-format", "--branch", "auth-1"]]

    def test_check_branch_name_rejects(self, fake_git):
        fake_git.fail("check-ref-format", stderr="fatal: 'add auth-1' is not a valid branch name")
        with pytest.raises(GitError, match="not a valid branch name"):
            check_branch_name(REPO, "add auth-1")
