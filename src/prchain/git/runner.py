"""Git subprocess execution and repository resolution."""

import subprocess
from pathlib import Path
from typing import Optional, Sequence

# Seconds per git invocation; None waits indefinitely. Set from config at startup.
_timeout: Optional[float] = 30.0


class GitError(Exception):
    """Git command could not be started or exited non-zero."""

    def __init__(self, cmd: Sequence[str], stderr: str) -> None:
        self.cmd = list(cmd)
        self.stderr = stderr
        super().__init__(f"git {' '.join(self.cmd)} failed: {stderr}")


def set_timeout(seconds: Optional[float]) -> None:
    global _timeout
    _timeout = seconds


def run_git(args: Sequence[str], repo: Path) -> str:
    """Run a git command in `repo` and return stdout (not stripped)."""
    try:
        result = subprocess.run(
            ["git", *args],
            cwd=repo,
            capture_output=True,
            text=True,
            timeout=_timeout,
        )
    except subprocess.TimeoutExpired:
        raise GitError(args, f"timed out after {_timeout}s") from None
    except OSError as e:
        raise GitError(args, str(e)) from e
    if result.returncode != 0:
        raise GitError(args, (result.stderr or result.stdout or "").strip() or "unknown error")
    return result.stdout


def resolve_repository(start: Optional[Path] = None) -> Optional[Path]:
    """Find the working tree root containing `.git`, walking up from `start` (default cwd).

    Not cached: the project directory may change between checks.
    """
    path = (start or Path.cwd()).resolve()
    for candidate in (path, *path.parents):
        if (candidate / ".git").exists():
            return candidate
    return None
