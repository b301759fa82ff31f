"""Tests for prchain.ui.prompt."""

import pytest

from prchain.models.core import ChangeMetric, ParentRef
from prchain.models.results import Show
from prchain.ui.prompt import (
    ask_branch_name,
    ask_commit_message,
    choose_action,
    format_status,
    parse_selection,
    select_files,
)


def answers(*values):
    """input() replacement returning values in order, then EOF."""
    it = iter(values)

    def fake_input(prompt):
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return fake_input


def interrupted(prompt):
    raise KeyboardInterrupt


SHOW_ROOT = Show(total=6, threshold=5, branch="master")
SHOW_CHAIN = Show(
    total=7,
    threshold=5,
    branch="feature-1",
    metric=ChangeMetric(
        branch="feature-1", parent=ParentRef("feature"), branch_portion=3, working_portion=4
    ),
)


class TestFormatStatus:
    def test_root(self):
        text = format_status(SHOW_ROOT, root=True)
        assert "You're on the 'master' branch!" in text
        assert "6/5 lines (120%)" in text

    def test_chain_breakdown(self):
        text = format_status(SHOW_CHAIN, root=False)
        assert "7/5 lines (140%)" in text
        assert "branch vs feature: 3" in text
        assert "working tree: 4" in text


class TestChooseAction:
    @pytest.mark.parametrize(
        "answer, expected",
        [("c", "proceed"), ("C", "proceed"), ("i", "increase"), ("x", "cancel"), ("q", "cancel")],
    )
    def test_choices(self, answer, expected, capsys):
        assert choose_action(SHOW_CHAIN, False, input_fn=answers(answer)) == expected

    def test_reprompts_on_unknown(self, capsys):
        assert choose_action(SHOW_ROOT, True, input_fn=answers("?", "", "i")) == "increase"

    def test_eof_is_cancel(self, capsys):
        assert choose_action(SHOW_ROOT, True, input_fn=answers()) == "cancel"

    def test_interrupt_is_cancel(self, capsys):
        assert choose_action(SHOW_ROOT, True, input_fn=interrupted) == "cancel"

    def test_shows_increment(self, capsys):
        choose_action(SHOW_ROOT, True, increment=100, input_fn=answers("x"))
        assert "(+100)" in capsys.readouterr().out


class TestParseSelection:
    def test_all(self):
        assert parse_selection("", 3) == [0, 1, 2]
        assert parse_selection("all", 3) == [0, 1, 2]

    def test_list_and_ranges(self):
        assert parse_selection("1, 3-4", 4) == [0, 2, 3]

    def test_duplicates_dropped(self):
        assert parse_selection("2,1-2", 3) == [1, 0]

    def test_out_of_range(self):
        assert parse_selection("5", 3) is None
        assert parse_selection("0", 3) is None

    def test_malformed(self):
        assert parse_selection("one", 3) is None
        assert parse_selection("3-1", 3) is None


class TestSelectFiles:
    def test_default_all(self, capsys):
        assert select_files(["a.py", "b.py"], input_fn=answers("")) == ["a.py", "b.py"]

    def test_subset_after_retry(self, capsys):
        files = ["a.py", "b.py", "c.py"]
        assert select_files(files, input_fn=answers("9", "2")) == ["b.py"]
        assert "Invalid selection" in capsys.readouterr().out

    def test_no_files(self, capsys):
        assert select_files([], input_fn=answers()) == []

    def test_abort(self, capsys):
        assert select_files(["a.py"], input_fn=answers()) is None


class TestTextPrompts:
    def test_commit_message_default(self, capsys):
        assert ask_commit_message("Auto", input_fn=answers("  ")) == "Auto"

    def test_commit_message(self, capsys):
        assert ask_commit_message("Auto", input_fn=answers(" Add login ")) == "Add login"

    def test_commit_message_abort(self, capsys):
        assert ask_commit_message("Auto", input_fn=interrupted) is None

    def test_branch_name(self, capsys):
        assert ask_branch_name(input_fn=answers(" auth ")) == "auth"

    def test_branch_name_blank_returned(self, capsys):
        assert ask_branch_name(input_fn=answers("   ")) == ""
