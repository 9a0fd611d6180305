from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class ProcessSpec:
    """Immutable process description read from the input."""

    process_id: int
    burst_time: int
    arrival_time: int

    def __post_init__(self) -> None:
        if self.process_id < 0:
            msg = "process_id cannot be negative"
            raise ValueError(msg)
        if self.burst_time <= 0:
            msg = "burst_time must be strictly positive"
            raise ValueError(msg)
        if self.arrival_time < 0:
            msg = "arrival_time cannot be negative"
            raise ValueError(msg)


@dataclass(slots=True)
class Process:
    """Mutable simulation state for a process."""

    spec: ProcessSpec
    remaining_time: int
    wait_time: int = 0
    turnaround_time: int = 0
    completed: bool = False
    completion_time: Optional[int] = None

    @classmethod
    def from_spec(cls, spec: ProcessSpec) -> Process:
        return cls(spec=spec, remaining_time=spec.burst_time)

    def record_run(self) -> None:
        """Consume one unit of CPU time."""

        if self.completed:
            msg = f"process {self.process_id} has already completed"
            raise ValueError(msg)
        self.remaining_time -= 1
        if self.remaining_time == 0:
            self.completed = True

    @property
    def process_id(self) -> int:
        return self.spec.process_id

    @property
    def burst_time(self) -> int:
        return self.spec.burst_time

    @property
    def arrival_time(self) -> int:
        return self.spec.arrival_time


def is_eligible(process: Process, now: int) -> bool:
    """Return whether the process has arrived and still needs the CPU."""

    return not process.completed and process.arrival_time <= now
