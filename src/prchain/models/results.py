"""Decision and workflow result models."""

from dataclasses import dataclass
from typing import Optional, Union

from prchain.models.core import ChangeMetric


@dataclass(frozen=True)
class Show:
    """Threshold crossed and no cooldown active: prompt the user."""

    total: int
    threshold: int
    branch: str
    metric: Optional[ChangeMetric] = None


@dataclass(frozen=True)
class SkipBelowThreshold:
    total: int
    threshold: int


@dataclass(frozen=True)
class SkipCooldown:
    remaining: float  # seconds left in the cooldown window


@dataclass(frozen=True)
class SkipInFlight:
    """A prompt or workflow is already open for this repository."""


@dataclass(frozen=True)
class SkipNoRepository:
    reason: str = "No project directory"


Decision = Union[Show, SkipBelowThreshold, SkipCooldown, SkipInFlight, SkipNoRepository]


@dataclass(frozen=True)
class WorkflowSuccess:
    message: str
    branch: str  # branch checked out at the end
    workflow: Optional[str] = None  # lineage summary, root workflow only


@dataclass(frozen=True)
class WorkflowError:
    message: str
    step: Optional[str] = None  # None for validation failures


WorkflowResult = Union[WorkflowSuccess, WorkflowError]
