"""Debug logging utilities."""

import json
import time
from pathlib import Path
from typing import Optional

from prchain.git.runner import resolve_repository
from prchain.ui.output import GRAY, MAGENTA, NC

# Relative to the repository root
DEBUG_LOG = Path(".prchain/debug.log")


def debug_log(enabled: bool, label: str, data, root: Optional[Path] = None) -> None:
    """Append debug info to <repo>/.prchain/debug.log if debug mode enabled.

    `root` defaults to the repository containing cwd, or cwd outside a repository.
    """
    if not enabled:
        return

    log_file = (root or resolve_repository() or Path.cwd()) / DEBUG_LOG
    log_file.parent.mkdir(parents=True, exist_ok=True)
    timestamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
    with open(log_file, "a") as f:
        f.write(f"\n{'=' * 60}\n")
        f.write(f"[{timestamp}] {label}\n")
        f.write(f"{'=' * 60}\n")
        if isinstance(data, str):
            try:
                parsed = json.loads(data)
                f.write(json.dumps(parsed, indent=2))
            except json.JSONDecodeError:
                f.write(data)
        else:
            f.write(json.dumps(data, indent=2, default=str))
        f.write("\n")
    print(f"\r\033[K{MAGENTA}[debug]{NC} {label}  {GRAY}-> {log_file}{NC}")
