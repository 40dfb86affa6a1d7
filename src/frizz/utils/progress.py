"""Live progress indicator shared by scans and streaming transfers."""

from __future__ import annotations

import threading
from typing import Any

from rich.console import Console
from rich.progress import (
    BarColumn,
    DownloadColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
    TimeRemainingColumn,
    TransferSpeedColumn,
)


def _count_columns() -> tuple[Any, ...]:
    return (
        SpinnerColumn(),
        TimeElapsedColumn(),
        BarColumn(bar_width=None),
        MofNCompleteColumn(),
        TaskProgressColumn(),
        TimeRemainingColumn(),
    )


def _byte_columns() -> tuple[Any, ...]:
    return (
        SpinnerColumn(),
        TimeElapsedColumn(),
        BarColumn(bar_width=None),
        DownloadColumn(),
        TransferSpeedColumn(),
        TimeRemainingColumn(),
    )


class ProgressReporter:
    """Single writer around a rich progress bar.

    The position is a shared counter updated from many probe completions or
    transfer chunks; every update goes through one lock. When ``total`` is
    known the position never exceeds it.
    """

    def __init__(
        self,
        description: str,
        total: int | None,
        *,
        enabled: bool = True,
        bytes_mode: bool = False,
        console: Console | None = None,
    ):
        self.description = description
        self.total = total if total else None
        self.enabled = enabled
        self._lock = threading.Lock()
        self._position = 0
        self._progress: Progress | None = None
        self._task_id: Any = None
        self._stopped = False
        if enabled:
            columns = _byte_columns() if bytes_mode else _count_columns()
            self._progress = Progress(
                TextColumn("[progress.description]{task.description}"),
                *columns,
                console=console or Console(stderr=True),
            )

    def __enter__(self) -> "ProgressReporter":
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.stop()

    @property
    def position(self) -> int:
        with self._lock:
            return self._position

    def start(self) -> None:
        """Begin rendering (no-op when disabled or already started)."""
        if self._progress is None or self._task_id is not None:
            return
        self._task_id = self._progress.add_task(self.description, total=self.total)
        self._progress.start()

    def advance(self, amount: int = 1) -> int:
        """Advance by ``amount`` (capped at total) and return the new position."""
        with self._lock:
            new = self._position + amount
            if self.total is not None:
                new = min(new, self.total)
            self._position = new
            if self._progress is not None and self._task_id is not None:
                self._progress.update(self._task_id, completed=new)
            return new

    def finish(self, message: str | None = None) -> None:
        """Stop rendering, replacing the description with ``message``."""
        if self._progress is not None and self._task_id is not None and message:
            self._progress.update(self._task_id, description=message)
        self.stop()

    def stop(self) -> None:
        if self._stopped:
            return
        self._stopped = True
        if self._progress is not None and self._task_id is not None:
            self._progress.stop()
