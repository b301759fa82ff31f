"""Tests for prchain.chain.naming."""

from pathlib import Path

from prchain.chain.naming import next_chain_name, next_name, next_root_name, root_prefix

REPO = Path("/work/shop")


class TestNextChainName:
    def test_increments(self):
        assert next_chain_name("feature-2") == "feature-3"

    def test_no_dash(self):
        assert next_chain_name("feature") == "feature-1"

    def test_non_numeric_suffix(self):
        assert next_chain_name("feature-abc") == "feature-abc-1"

    def test_multi_digit(self):
        assert next_chain_name("x-master-me-19") == "x-master-me-20"

    def test_trailing_dash(self):
        assert next_chain_name("feature-") == "feature--1"


class TestNextRootName:
    def test_none_existing(self):
        assert next_root_name("shop-master-sneh", ["master"]) == "shop-master-sneh-1"

    def test_takes_max_not_count(self):
        branches = ["shop-master-sneh-1", "shop-master-sneh-4", "shop-master-other-9"]
        assert next_root_name("shop-master-sneh", branches) == "shop-master-sneh-5"

    def test_ignores_non_numeric(self):
        assert next_root_name("p", ["p-x", "p-2-old"]) == "p-1"

    def test_prefix(self):
        assert root_prefix("shop", "sneh-patel") == "shop-master-sneh-patel"


class TestNextName:
    def test_documented_examples(self, fake_git):
        assert next_name(REPO, "feature-2") == "feature-3"
        assert next_name(REPO, "feature") == "feature-1"
        assert next_name(REPO, "feature-abc") == "feature-abc-1"
        assert fake_git.calls == []

    def test_root_branch(self, fake_git):
        fake_git.respond("config", "user.name", stdout="Sneh Patel\n")
        fake_git.respond(
            "branch",
            "-a",
            stdout=(
                "* master\n"
                "  shop-master-sneh-patel-2\n"
                "  remotes/origin/shop-master-sneh-patel-3\n"
            ),
        )
        assert next_name(REPO, "master") == "shop-master-sneh-patel-4"

    def test_root_identity_failure(self, fake_git, capsys):
        fake_git.respond("config", "user.name", returncode=1)
        assert next_name(REPO, "main") == "main-1"
        assert "using 'main-1'" in capsys.readouterr().out

    def test_root_listing_failure(self, fake_git):
        fake_git.respond("config", "user.name", stdout="sneh\n")
        fake_git.fail("branch", "-a")
        assert next_name(REPO, "master") == "master-1"

    def test_repeatable(self, fake_git):
        fake_git.respond("config", "user.name", stdout="sneh\n")
        fake_git.respond("branch", "-a", stdout="  shop-master-sneh-1\n")
        assert next_name(REPO, "master") == next_name(REPO, "master") == "shop-master-sneh-2"
