"""Polling edit trigger: notices working-tree changes and debounces them into checks."""

import threading
import time
from pathlib import Path
from typing import Callable, Optional

from prchain.git.diff import get_changed_files
from prchain.ui.output import error

Fingerprint = tuple[tuple[str, Optional[int], Optional[int]], ...]


def working_tree_fingerprint(repo: Path) -> Fingerprint:
    """Changed files with their mtime and size; differs whenever a changed file is edited."""
    entries = []
    for name in get_changed_files(repo):
        try:
            st = (repo / name).stat()
            entries.append((name, st.st_mtime_ns, st.st_size))
        except OSError:
            entries.append((name, None, None))  # deleted
    return tuple(entries)


class ChangeWatcher:
    """Poll the working tree on a worker thread and call `on_change` once per burst of edits.

    `on_change` runs on the worker thread, so a prompt or workflow it starts never
    blocks the caller. Polling pauses while it runs. Can be used as context manager.
    """

    def __init__(
        self,
        repository: Callable[[], Optional[Path]],
        on_change: Callable[[], None],
        poll_interval: float = 1.0,
        debounce: float = 0.3,
    ):
        self.repository = repository
        self.on_change = on_change
        self.poll_interval = poll_interval
        self.debounce = debounce
        self._last: Optional[Fingerprint] = None
        self._pending_since: Optional[float] = None
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def __enter__(self) -> "ChangeWatcher":
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.stop()

    @property
    def pending(self) -> bool:
        return self._pending_since is not None

    def poll_once(self, now: Optional[float] = None) -> bool:
        """One poll step. Returns True when `on_change` was called."""
        now = time.time() if now is None else now
        repo = self.repository()
        current = working_tree_fingerprint(repo) if repo is not None else ()
        if current != self._last:
            self._last = current
            self._pending_since = now
            return False
        if self._pending_since is not None and now - self._pending_since >= self.debounce:
            self._pending_since = None
            self.on_change()
            return True
        return False

    def _run(self) -> None:
        while not self._stop.is_set():
            try:
                self.poll_once()
            except Exception as e:
                # Keep watching; the next burst of edits triggers a fresh check
                self._pending_since = None
                error(f"Check failed: {e}")
            wait = min(self.poll_interval, self.debounce) if self.pending else self.poll_interval
            self._stop.wait(wait)

    def start(self) -> None:
        self._thread = threading.Thread(target=self._run, name="prchain-watch", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        self._stop.set()
        if self._thread and self._thread is not threading.current_thread():
            self._thread.join(timeout=self.poll_interval + 1.0)
        self._thread = None

    def join(self) -> None:
        """Block until stopped (Ctrl-C in the caller raises KeyboardInterrupt)."""
        while self._thread is not None and self._thread.is_alive():
            self._thread.join(timeout=0.5)
