from __future__ import annotations

from typing import Sequence

from .process import Process, is_eligible
from .scheduler import Scheduler


class FcfsScheduler(Scheduler):
    """Non-preemptive First-Come, First-Served scheduler."""

    title = "First Come First Served"

    def __init__(self) -> None:
        self._cursor = 0

    def pick_next(self, processes: Sequence[Process], now: int) -> Process | None:
        while self._cursor < len(processes) and processes[self._cursor].completed:
            self._cursor += 1
        if self._cursor >= len(processes):
            return None
        candidate = processes[self._cursor]
        # Input order is arrival order; the head may still be in the future.
        if candidate.arrival_time > now:
            return None
        return candidate


class SjfScheduler(Scheduler):
    """Preemptive Shortest Job First: the least remaining time runs each tick."""

    title = "Shortest Job First"

    def pick_next(self, processes: Sequence[Process], now: int) -> Process | None:
        ready = [process for process in processes if is_eligible(process, now)]
        if not ready:
            return None
        # min() keeps the first minimum, so ties go to the lowest id.
        return min(ready, key=lambda process: process.remaining_time)


class RoundRobinScheduler(Scheduler):
    """Preemptive Round-Robin over input order with a fixed quantum."""

    def __init__(self, quantum: int) -> None:
        if isinstance(quantum, bool) or not isinstance(quantum, int) or quantum <= 0:
            msg = "quantum must be a positive integer"
            raise ValueError(msg)
        self.quantum = quantum
        self._index = 0
        self._time_in_quantum = 0
        self._count = 0

    @property
    def title(self) -> str:  # type: ignore[override]
        return f"Round Robin with Quantum {self.quantum}"

    def pick_next(self, processes: Sequence[Process], now: int) -> Process | None:
        self._count = len(processes)
        for _ in range(self._count):
            candidate = processes[self._index]
            if is_eligible(candidate, now):
                return candidate
            self._rotate()
        return None

    def on_tick(self, process: Process, now: int) -> None:
        self._time_in_quantum += 1
        if not process.completed and self._time_in_quantum == self.quantum:
            self._rotate()

    def on_task_completed(self, process: Process, now: int) -> None:
        self._rotate()

    def _rotate(self) -> None:
        self._index = (self._index + 1) % self._count
        self._time_in_quantum = 0
