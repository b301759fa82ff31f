"""Change-threshold decisions and branch-lineage workflows."""

from prchain.chain.metrics import compute_total, format_breakdown
from prchain.chain.naming import next_chain_name, next_name, next_root_name, root_prefix
from prchain.chain.parent import resolve_parent, resolve_parent_name, split_numeric_suffix
from prchain.chain.session import ChainSession
from prchain.chain.threshold import ThresholdGate, ThresholdState
from prchain.chain.workflow import run_chain_workflow, run_root_workflow, validate_request

__all__ = [
    # Parent
    "split_numeric_suffix",
    "resolve_parent_name",
    "resolve_parent",
    # Metrics
    "compute_total",
    "format_breakdown",
    # Threshold
    "ThresholdGate",
    "ThresholdState",
    # Naming
    "next_chain_name",
    "root_prefix",
    "next_root_name",
    "next_name",
    # Workflow
    "validate_request",
    "run_root_workflow",
    "run_chain_workflow",
    # Session
    "ChainSession",
]
