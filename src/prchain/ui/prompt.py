"""Terminal prompts: action choice, file selection, commit message, branch name.

Every function returns None when the user aborts (EOF / Ctrl-C).
"""

from typing import Callable, Literal, Optional

from prchain.models.results import Show
from prchain.ui.output import BLUE, GRAY, NC, YELLOW
from prchain.utils.formatting import fmt_progress

Action = Literal["proceed", "increase", "cancel"]
InputFn = Callable[[str], str]


def _ask(prompt: str, input_fn: InputFn) -> Optional[str]:
    try:
        return input_fn(prompt)
    except (EOFError, KeyboardInterrupt):
        print()
        return None


def format_status(decision: Show, root: bool) -> str:
    """Prompt copy for a Show decision."""
    progress = fmt_progress(decision.total, decision.threshold)
    if root:
        return (
            f"{YELLOW}You're on the '{decision.branch}' branch!{NC}\n\n"
            f"Status: {progress}\n\n"
            "This will:\n"
            "  1. Ask for a branch name\n"
            "  2. Commit your changes and create <name>-1\n"
            "  3. Push <name>-1 if a remote exists\n"
            "  4. Create and switch to <name>-2\n"
            f"  5. Keep '{decision.branch}' clean and protected"
        )
    text = f"Status: {progress}\n\nRepository changes exceeded threshold!"
    if decision.metric is not None and not decision.metric.parent.is_root:
        text += (
            f"\n{GRAY}branch vs {decision.metric.parent}: {decision.metric.branch_portion}, "
            f"working tree: {decision.metric.working_portion}{NC}"
        )
    return text + "\n\nCommit current changes and create a new branch?"


def choose_action(
    decision: Show, root: bool, increment: int = 5, input_fn: InputFn = input
) -> Action:
    """Main prompt. Closing it counts as cancel."""
    print(format_status(decision, root))
    print(f"  {BLUE}[c]{NC} Commit & Create Branch")
    print(f"  {BLUE}[i]{NC} Increase Threshold (+{increment})")
    print(f"  {BLUE}[x]{NC} Cancel & Increase Threshold")
    while True:
        answer = _ask("Choice [c/i/x]: ", input_fn)
        if answer is None:
            return "cancel"
        answer = answer.strip().lower()
        if answer in ("c", "commit"):
            return "proceed"
        if answer in ("i", "increase"):
            return "increase"
        if answer in ("x", "cancel", "q"):
            return "cancel"


def parse_selection(answer: str, count: int) -> Optional[list[int]]:
    """'' or 'a' -> all, '1,3-4' -> [0, 2, 3]. None when malformed or out of range."""
    answer = answer.strip().lower()
    if answer in ("", "a", "all"):
        return list(range(count))
    picked: list[int] = []
    for part in answer.replace(" ", "").split(","):
        if not part:
            continue
        start, sep, end = part.partition("-")
        if not start.isdecimal() or (sep and not end.isdecimal()):
            return None
        first, last = int(start), int(end) if sep else int(start)
        if first < 1 or last > count or first > last:
            return None
        for i in range(first - 1, last):
            if i not in picked:
                picked.append(i)
    return picked


def select_files(files: list[str], input_fn: InputFn = input) -> Optional[list[str]]:
    """Pick files to commit; all are pre-selected."""
    if not files:
        print("No changed files detected")
        return []
    print("Select files to commit:")
    for i, name in enumerate(files, 1):
        print(f"  {BLUE}{i:>3}{NC} {name}")
    while True:
        answer = _ask("Files [all / e.g. 1,3-4]: ", input_fn)
        if answer is None:
            return None
        selection = parse_selection(answer, len(files))
        if selection is not None:
            return [files[i] for i in selection]
        print(f"{YELLOW}Invalid selection{NC}")


def ask_commit_message(default: str, input_fn: InputFn = input) -> Optional[str]:
    answer = _ask(f"Commit message [{default}]: ", input_fn)
    if answer is None:
        return None
    return answer.strip() or default


def ask_branch_name(input_fn: InputFn = input) -> Optional[str]:
    """Name for the new chain; `<name>-1` and `<name>-2` are created from it."""
    answer = _ask("Enter a name for the new branch: ", input_fn)
    if answer is None:
        return None
    return answer.strip()
