from __future__ import annotations

from typing import Iterable, Optional, Sequence

from .process import Process, is_eligible


def advance_ticks(processes: Iterable[Process], now: int, active_id: Optional[int]) -> None:
    """
    Charge one tick of wait and turnaround time.

    Runs after the active process has executed for the tick. The active
    process may have just completed, yet it was eligible when the tick began,
    so its turnaround still counts this tick.
    """

    for process in processes:
        active = process.process_id == active_id
        if active or is_eligible(process, now):
            process.turnaround_time += 1
        if not active and is_eligible(process, now):
            process.wait_time += 1


def all_processes_complete(processes: Sequence[Process]) -> bool:
    return all(process.completed for process in processes)
