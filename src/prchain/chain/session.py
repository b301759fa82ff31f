"""One repository session: the entry points called by the edit trigger and the prompt."""

import threading
from pathlib import Path
from typing import Optional

from prchain.chain.metrics import compute_total, format_breakdown
from prchain.chain.threshold import ThresholdGate
from prchain.chain.workflow import run_chain_workflow, run_root_workflow
from prchain.git.branch import get_current_branch
from prchain.git.diff import get_changed_files
from prchain.git.runner import resolve_repository
from prchain.models.core import ChangeMetric
from prchain.models.results import (
    Decision,
    Show,
    SkipInFlight,
    SkipNoRepository,
    WorkflowError,
    WorkflowResult,
)
from prchain.models.state import SessionConfig
from prchain.ui.output import log, warn
from prchain.utils.debug import debug_log


class ChainSession:
    """Threshold state plus an in-flight guard for one repository.

    A `Show` decision claims the session until the user answers through
    `on_user_proceed`, `on_user_increase_threshold`, `on_user_cancel` or
    `on_prompt_closed`. Checks arriving meanwhile are skipped, not queued.
    """

    def __init__(self, config: SessionConfig, start: Optional[Path] = None):
        self.config = config
        self.start = start
        self.gate = ThresholdGate(
            threshold=config.threshold,
            cooldown=config.cooldown,
            increment=config.increment,
            measure=self._measure_total,
        )
        self._lock = threading.Lock()
        self._in_flight = False

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    def _claim(self) -> bool:
        with self._lock:
            if self._in_flight:
                return False
            self._in_flight = True
            return True

    def _release(self) -> None:
        with self._lock:
            self._in_flight = False

    def repository(self) -> Optional[Path]:
        # Re-resolved every time; the project directory may move
        return resolve_repository(self.start)

    def _trace(self, label: str, data) -> None:
        if self.config.debug:
            debug_log(True, label, data, root=self.repository())

    def measure(self) -> Optional[ChangeMetric]:
        repo = self.repository()
        if repo is None:
            return None
        metric = compute_total(repo, roots=self.config.roots, fallback=self.config.fallback_parent)
        self._trace("metric", metric.to_dict())
        return metric

    def _measure_total(self) -> int:
        metric = self.measure()
        return metric.total if metric is not None else 0

    def on_possible_change(self) -> Decision:
        """Measure and decide whether to prompt."""
        if not self._claim():
            return SkipInFlight()
        try:
            metric = self.measure()
            if metric is None:
                decision: Decision = SkipNoRepository("Not inside a git repository")
            else:
                decision = self.gate.decide(metric)
        except BaseException:
            self._release()
            raise

        if not isinstance(decision, Show):
            self._release()
        elif decision.metric is not None:
            log(f"Threshold crossed: {format_breakdown(decision.metric)}")
        self._trace("decision", {"decision": repr(decision)})
        return decision

    def on_user_increase_threshold(self) -> int:
        try:
            threshold = self.gate.increase_threshold()
        finally:
            self._release()
        self._trace("increase_threshold", self.gate.state.to_dict())
        return threshold

    def on_user_cancel(self) -> int:
        try:
            threshold = self.gate.cancel()
        finally:
            self._release()
        self._trace("cancel", self.gate.state.to_dict())
        return threshold

    def on_prompt_closed(self) -> None:
        """Release the session when the prompt is dismissed without an answer."""
        self._release()

    def changed_files(self) -> list[str]:
        repo = self.repository()
        return get_changed_files(repo) if repo is not None else []

    def on_user_proceed(
        self, files: list[str], message: str, branch_name: Optional[str] = None
    ) -> WorkflowResult:
        """Run the root or chain workflow depending on the current branch.

        `branch_name` only applies on a root branch; None mints a
        `<repo>-master-<user>-<n>` name.
        """
        try:
            result = self._proceed(files, message, branch_name)
        finally:
            self._release()
        self._trace("workflow", {"result": repr(result)})
        return result

    def _proceed(
        self, files: list[str], message: str, branch_name: Optional[str]
    ) -> WorkflowResult:
        repo = self.repository()
        if repo is None:
            return WorkflowError("No project directory")

        current = get_current_branch(repo)
        if not current:
            warn(f"Could not determine current branch, assuming '{self.config.root_branch}'")
            current = self.config.root_branch

        if current in self.config.roots:
            return run_root_workflow(
                repo,
                files,
                message,
                branch_name=branch_name,
                gate=self.gate,
                remote=self.config.remote,
                root_branch=current,
                roots=self.config.roots,
            )
        return run_chain_workflow(
            repo,
            current,
            files,
            message,
            gate=self.gate,
            remote=self.config.remote,
            roots=self.config.roots,
        )
