from __future__ import annotations

from dataclasses import dataclass
from statistics import mean
from typing import Iterable, Sequence

from .process import Process


@dataclass(slots=True)
class ProcessMetrics:
    process_id: int
    arrival_time: int
    burst_time: int
    completion_time: int
    wait_time: int
    turnaround_time: int


@dataclass(slots=True)
class AggregateMetrics:
    count: int
    mean_wait_time: float
    mean_turnaround_time: float
    max_wait_time: int
    total_time: int
    throughput: float


def build_process_metrics(processes: Iterable[Process]) -> list[ProcessMetrics]:
    metrics: list[ProcessMetrics] = []
    for process in processes:
        if not process.completed or process.completion_time is None:
            continue
        metrics.append(
            ProcessMetrics(
                process_id=process.process_id,
                arrival_time=process.arrival_time,
                burst_time=process.burst_time,
                completion_time=process.completion_time,
                wait_time=process.wait_time,
                turnaround_time=process.turnaround_time,
            ),
        )
    return metrics


def summarise(metrics: Sequence[ProcessMetrics], total_time: int) -> AggregateMetrics:
    if not metrics:
        msg = "no processes to schedule"
        raise ValueError(msg)
    wait_values = [m.wait_time for m in metrics]
    return AggregateMetrics(
        count=len(metrics),
        mean_wait_time=mean(wait_values),
        mean_turnaround_time=mean(m.turnaround_time for m in metrics),
        max_wait_time=max(wait_values),
        total_time=total_time,
        throughput=len(metrics) / total_time if total_time else 0.0,
    )
