"""CLI entry point and argument parsing."""

import argparse
import os
import sys
from importlib.metadata import version as get_version
from typing import Optional

try:
    __version__ = get_version("prchain")
except Exception:
    __version__ = "dev"

from prchain.chain.metrics import format_breakdown
from prchain.chain.naming import next_name
from prchain.chain.parent import resolve_parent
from prchain.chain.session import ChainSession
from prchain.config import get_config, get_config_loaded_sources
from prchain.git.branch import get_current_branch
from prchain.git.runner import set_timeout
from prchain.models.results import (
    Decision,
    Show,
    SkipBelowThreshold,
    SkipCooldown,
    SkipInFlight,
    SkipNoRepository,
    WorkflowResult,
    WorkflowSuccess,
)
from prchain.models.state import SessionConfig
from prchain.ui.output import (
    GRAY,
    NC,
    YELLOW,
    error,
    log,
    success,
    success_with_detail,
    warn,
)
from prchain.ui.prompt import (
    InputFn,
    ask_branch_name,
    ask_commit_message,
    choose_action,
    select_files,
)
from prchain.utils.debug import DEBUG_LOG
from prchain.utils.formatting import fmt_duration, fmt_progress
from prchain.watch import ChangeWatcher


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prchain",
        description="Split large in-progress work into a chain of bounded-size branches.",
        epilog="""
Commands:
  prchain status                    Show changed lines, parent branch and threshold
  prchain check                     Check once and prompt if the threshold is crossed
  prchain watch                     Keep watching the working tree and prompt as needed
  prchain parent [BRANCH]           Print the inferred parent of BRANCH (default: current)
  prchain next-name [BRANCH]        Print the next branch name after BRANCH
  prchain chain -m MSG [-f FILE]... Commit and move to the next branch without prompts

Branch lineage:
  - On master/main: work moves to <name>-1, then <name>-2 is opened
  - On <name>-N: <name>-N is pushed, then <name>-(N+1) is opened
  - Changed lines = working tree vs HEAD, plus branch vs parent (merge-base)

Config (deep-merged, later wins):
  bundled defaults < ~/.config/prchain/config.yaml < .prchain/config.yaml
""",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-v", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-C",
        "--directory",
        metavar="PATH",
        help="Run as if started in PATH",
    )
    parser.add_argument("--threshold", type=int, metavar="N", help="Changed lines before prompting")
    parser.add_argument(
        "--increment", type=int, metavar="N", help="Lines added on increase/cancel"
    )
    parser.add_argument(
        "--cooldown", type=float, metavar="SECONDS", help="Prompt suppression after cancel"
    )
    parser.add_argument("--remote", help="Remote to push to (default: origin)")
    parser.add_argument(
        "--debug",
        action="store_true",
        default=None,
        help=f"Log decisions and workflow results to <repo>/{DEBUG_LOG}",
    )

    sub = parser.add_subparsers(dest="command", metavar="COMMAND")
    sub.add_parser("status", help="Show changed lines, parent branch and threshold")
    sub.add_parser("check", help="Check once and prompt if the threshold is crossed")
    sub.add_parser("watch", help="Watch the working tree and prompt as needed")

    parent = sub.add_parser("parent", help="Print the inferred parent branch")
    parent.add_argument("branch", nargs="?", help="Branch name (default: current)")

    nxt = sub.add_parser("next-name", help="Print the next branch name in the chain")
    nxt.add_argument("branch", nargs="?", help="Base branch (default: current)")

    chain = sub.add_parser("chain", help="Commit and move to the next branch without prompts")
    chain.add_argument(
        "-f", "--file", dest="files", action="append", metavar="FILE", help="File to commit"
    )
    chain.add_argument("-a", "--all", action="store_true", help="Commit all changed files")
    chain.add_argument("-m", "--message", help="Commit message (default from config)")
    chain.add_argument(
        "-b", "--branch-name", help="Chain name when on a root branch (default: auto)"
    )
    return parser


def load_session_config(args: argparse.Namespace) -> SessionConfig:
    return SessionConfig.from_config(
        get_config(),
        threshold=args.threshold,
        increment=args.increment,
        cooldown=args.cooldown,
        remote=args.remote,
        debug=args.debug,
    )


def describe_skip(decision: Decision) -> str:
    if isinstance(decision, SkipBelowThreshold):
        return f"Below threshold: {fmt_progress(decision.total, decision.threshold)}"
    if isinstance(decision, SkipCooldown):
        return f"Prompt suppressed, cooldown {fmt_duration(decision.remaining)} remaining"
    if isinstance(decision, SkipInFlight):
        return "A prompt is already open, skipping check"
    if isinstance(decision, SkipNoRepository):
        return decision.reason
    return ""


def report_result(result: WorkflowResult) -> None:
    if isinstance(result, WorkflowSuccess):
        if result.workflow:
            success_with_detail(result.message, result.workflow)
        else:
            success(result.message)
    else:
        error(result.message)


def run_prompt(
    session: ChainSession, decision: Show, input_fn: InputFn = input
) -> Optional[WorkflowResult]:
    """Walk the user through one Show decision. Returns the workflow result if one ran."""
    root = decision.branch in session.config.roots
    action = choose_action(decision, root, session.config.increment, input_fn=input_fn)

    if action == "increase":
        threshold = session.on_user_increase_threshold()
        log(f"Threshold increased to {threshold} lines. You can continue working.")
        return None
    if action == "cancel":
        threshold = session.on_user_cancel()
        log(f"Cancelled. Threshold increased to {threshold} lines. You can continue working.")
        return None

    files = select_files(session.changed_files(), input_fn=input_fn)
    if files is None:
        session.on_prompt_closed()
        return None
    message = ask_commit_message(session.config.default_message, input_fn=input_fn)
    if message is None:
        session.on_prompt_closed()
        return None
    branch_name = None
    if root:
        branch_name = ask_branch_name(input_fn=input_fn)
        if branch_name is None:
            session.on_prompt_closed()
            return None

    result = session.on_user_proceed(files, message, branch_name)
    report_result(result)
    return result


def check_once(session: ChainSession, quiet: bool = False) -> Optional[WorkflowResult]:
    decision = session.on_possible_change()
    if isinstance(decision, Show):
        return run_prompt(session, decision)
    if not quiet:
        log(describe_skip(decision))
    return None


def cmd_status(session: ChainSession) -> int:
    metric = session.measure()
    if metric is None:
        error("Not inside a git repository")
        return 1
    log(f"Branch: {YELLOW}{metric.branch}{NC}  parent: {metric.parent}")
    log(f"Changes: {format_breakdown(metric)}")
    state = session.gate.state
    progress = fmt_progress(metric.total, state.current)
    log(f"Threshold: {progress}  {GRAY}(original {state.original}){NC}")
    return 0


def cmd_watch(session: ChainSession) -> int:
    if session.repository() is None:
        error("Not inside a git repository")
        return 1
    log(
        f"Watching for changes (threshold {session.config.threshold} lines, "
        f"poll {session.config.poll_interval}s). Ctrl-C to stop."
    )
    watcher = ChangeWatcher(
        session.repository,
        lambda: check_once(session, quiet=True),
        poll_interval=session.config.poll_interval,
        debounce=session.config.debounce,
    )
    with watcher:
        try:
            watcher.join()
        except KeyboardInterrupt:
            print()
            log("Stopped watching")
    return 0


def cmd_parent(session: ChainSession, branch: Optional[str]) -> int:
    repo = session.repository()
    if repo is None:
        error("Not inside a git repository")
        return 1
    branch = branch or get_current_branch(repo) or session.config.root_branch
    parent = resolve_parent(
        repo, branch, roots=session.config.roots, fallback=session.config.fallback_parent
    )
    print(str(parent))
    return 0


def cmd_next_name(session: ChainSession, branch: Optional[str]) -> int:
    repo = session.repository()
    if repo is None:
        error("Not inside a git repository")
        return 1
    branch = branch or get_current_branch(repo) or session.config.root_branch
    print(next_name(repo, branch, session.config.roots))
    return 0


def cmd_chain(session: ChainSession, args: argparse.Namespace) -> int:
    files = session.changed_files() if args.all else (args.files or [])
    message = args.message or session.config.default_message
    result = session.on_user_proceed(files, message, args.branch_name)
    report_result(result)
    return 0 if isinstance(result, WorkflowSuccess) else 1


def main(argv: Optional[list[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    if args.directory:
        try:
            os.chdir(args.directory)
        except OSError as e:
            error(f"Cannot change to {args.directory}: {e}")
            sys.exit(1)

    try:
        config = load_session_config(args)
    except (ValueError, TypeError) as e:
        error(f"Invalid configuration: {e}")
        sys.exit(1)
    set_timeout(config.git_timeout)
    if config.debug:
        log(f"Config: {', '.join(get_config_loaded_sources())}")

    session = ChainSession(config)
    command = args.command or "check"

    if command == "status":
        code = cmd_status(session)
    elif command == "watch":
        code = cmd_watch(session)
    elif command == "parent":
        code = cmd_parent(session, args.branch)
    elif command == "next-name":
        code = cmd_next_name(session, args.branch)
    elif command == "chain":
        code = cmd_chain(session, args)
    else:
        if session.repository() is None:
            warn("Not inside a git repository")
            sys.exit(1)
        check_once(session)
        code = 0
    sys.exit(code)


if __name__ == "__main__":
    main()
