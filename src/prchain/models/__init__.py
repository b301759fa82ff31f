"""Data models for prchain."""

from prchain.models.core import ROOT, ChangeMetric, DiffLineStat, ParentRef
from prchain.models.results import (
    Decision,
    Show,
    SkipBelowThreshold,
    SkipCooldown,
    SkipInFlight,
    SkipNoRepository,
    WorkflowError,
    WorkflowResult,
    WorkflowSuccess,
)
from prchain.models.state import SessionConfig

__all__ = [
    # Core
    "DiffLineStat",
    "ParentRef",
    "ROOT",
    "ChangeMetric",
    # Decisions
    "Decision",
    "Show",
    "SkipBelowThreshold",
    "SkipCooldown",
    "SkipInFlight",
    "SkipNoRepository",
    # Workflow
    "WorkflowResult",
    "WorkflowSuccess",
    "WorkflowError",
    # State
    "SessionConfig",
]
