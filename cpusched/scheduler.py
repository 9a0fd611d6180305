from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from .process import Process


class Scheduler(ABC):
    """Abstract scheduler interface for selecting the process to run each tick."""

    title: str = "Scheduler"

    @abstractmethod
    def pick_next(self, processes: Sequence[Process], now: int) -> Process | None:
        """Select the process that runs for the tick starting at `now`, or None to idle."""

    def on_tick(self, process: Process, now: int) -> None:
        """Hook invoked after the selected process has run for one tick."""

    def on_task_completed(self, process: Process, now: int) -> None:
        """Hook invoked when a process finishes during the tick starting at `now`."""
