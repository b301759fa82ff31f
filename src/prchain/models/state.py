"""Session configuration bundled from config layers and CLI flags."""

from dataclasses import dataclass
from typing import Any, Optional

DEFAULT_ROOTS = ("master", "main")


@dataclass
class SessionConfig:
    """Settings for one repository session."""

    threshold: int = 5
    increment: int = 5
    cooldown: float = 10.0
    roots: tuple[str, ...] = DEFAULT_ROOTS
    fallback_parent: str = "master"
    remote: str = "origin"
    default_message: str = "Auto-commit: Changes exceeded threshold"
    poll_interval: float = 1.0
    debounce: float = 0.3
    git_timeout: Optional[float] = 30.0
    debug: bool = False

    def __post_init__(self) -> None:
        if self.threshold < 0:
            raise ValueError(f"threshold must be >= 0, got {self.threshold}")
        if self.increment < 0:
            raise ValueError(f"increment must be >= 0, got {self.increment}")
        if self.cooldown < 0:
            raise ValueError(f"cooldown must be >= 0, got {self.cooldown}")
        if not self.roots:
            raise ValueError("at least one root branch is required")

    @classmethod
    def from_config(cls, cfg: dict, **overrides: Any) -> "SessionConfig":
        """Build from a merged config dict; non-None overrides win."""
        threshold = cfg.get("threshold") or {}
        branches = cfg.get("branches") or {}
        commit = cfg.get("commit") or {}
        watch = cfg.get("watch") or {}
        git = cfg.get("git") or {}

        timeout = git.get("timeout", 30)
        values: dict[str, Any] = {
            "threshold": int(threshold.get("lines", 5)),
            "increment": int(threshold.get("increment", 5)),
            "cooldown": float(threshold.get("cooldown_seconds", 10)),
            "roots": tuple(branches.get("roots") or DEFAULT_ROOTS),
            "fallback_parent": branches.get("fallback_parent", "master"),
            "remote": cfg.get("remote", "origin"),
            "default_message": commit.get(
                "default_message", "Auto-commit: Changes exceeded threshold"
            ),
            "poll_interval": float(watch.get("poll_interval", 1.0)),
            "debounce": float(watch.get("debounce", 0.3)),
            "git_timeout": float(timeout) if timeout is not None else None,
            "debug": bool(cfg.get("debug", False)),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    @property
    def root_branch(self) -> str:
        """Root branch name used when the current branch cannot be determined."""
        return self.roots[0]
