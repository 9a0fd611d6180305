from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from .accounting import advance_ticks, all_processes_complete
from .process import Process, ProcessSpec
from .scheduler import Scheduler

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TraceRecord:
    """State of the running process at the start of one tick."""

    tick: int
    process_id: Optional[int]
    remaining_time: Optional[int] = None
    wait_time: Optional[int] = None
    turnaround_time: Optional[int] = None

    @property
    def idle(self) -> bool:
        return self.process_id is None


@dataclass(slots=True)
class SimulationResult:
    processes: list[Process]
    trace: list[TraceRecord]
    total_time: int
    cpu_busy_time: int
    idle_ticks: int

    @property
    def utilization(self) -> float:
        if self.total_time == 0:
            return 0.0
        return self.cpu_busy_time / self.total_time


@dataclass(slots=True)
class SimulationConfig:
    record_trace: bool = True
    max_ticks: Optional[int] = None

    def __post_init__(self) -> None:
        if self.max_ticks is not None and self.max_ticks <= 0:
            msg = "max_ticks must be strictly positive when set"
            raise ValueError(msg)


class Simulation:
    """Tick-by-tick simulation of one scheduler over a fixed process set."""

    def __init__(self, scheduler: Scheduler, processes: Sequence[ProcessSpec], config: SimulationConfig | None = None) -> None:
        if not processes:
            msg = "no processes to schedule"
            raise ValueError(msg)
        if len({spec.process_id for spec in processes}) != len(processes):
            msg = "process ids must be unique"
            raise ValueError(msg)
        self.scheduler = scheduler
        self.config = config or SimulationConfig()
        self._processes = [Process.from_spec(spec) for spec in sorted(processes, key=lambda s: (s.arrival_time, s.process_id))]
        self._trace: list[TraceRecord] = []
        self._now = 0
        self._cpu_busy = 0
        self._idle_ticks = 0

    def run(self) -> SimulationResult:
        while not all_processes_complete(self._processes):
            if self.config.max_ticks is not None and self._now >= self.config.max_ticks:
                msg = f"simulation did not finish within {self.config.max_ticks} ticks"
                raise RuntimeError(msg)
            self._step()
            self._now += 1

        logger.debug(
            "%s finished after %d ticks (%d idle)",
            self.scheduler.title,
            self._now,
            self._idle_ticks,
        )
        return SimulationResult(self._processes, self._trace, self._now, self._cpu_busy, self._idle_ticks)

    def _step(self) -> None:
        current = self.scheduler.pick_next(self._processes, self._now)

        if current is None:
            self._idle_ticks += 1
            logger.debug("T%d: CPU idle", self._now)
            self._record(TraceRecord(tick=self._now, process_id=None))
            advance_ticks(self._processes, self._now, None)
            return

        self._record(
            TraceRecord(
                tick=self._now,
                process_id=current.process_id,
                remaining_time=current.remaining_time,
                wait_time=current.wait_time,
                turnaround_time=current.turnaround_time,
            ),
        )
        current.record_run()
        self._cpu_busy += 1
        self.scheduler.on_tick(current, self._now)
        if current.completed:
            current.completion_time = self._now + 1
            logger.debug("T%d: P%d completed", self._now, current.process_id)
            self.scheduler.on_task_completed(current, self._now)
        advance_ticks(self._processes, self._now, current.process_id)

    def _record(self, record: TraceRecord) -> None:
        if self.config.record_trace:
            self._trace.append(record)
