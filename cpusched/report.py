"""Plain-text rendering of simulation traces and statistics."""

from __future__ import annotations

from typing import Sequence

from .evaluation import EvaluationOutcome
from .metrics import AggregateMetrics, ProcessMetrics
from .simulator import TraceRecord


def format_trace_line(record: TraceRecord) -> str:
    if record.idle:
        return f"T{record.tick} : idle"
    return (
        f"T{record.tick} : P{record.process_id} - Burst left {record.remaining_time:2d}, "
        f"Wait time {record.wait_time}, Turnaround time {record.turnaround_time}"
    )


def format_final_stats(per_process: Sequence[ProcessMetrics], aggregate: AggregateMetrics) -> str:
    lines: list[str] = []
    for m in per_process:
        lines.append("")
        lines.append(f"P{m.process_id}")
        lines.append(f"\tWaiting time:\t\t{m.wait_time:3d}")
        lines.append(f"\tTurnaround time:\t{m.turnaround_time:3d}")
    lines.append("")
    lines.append(f"Total average waiting time:\t{aggregate.mean_wait_time:.1f}")
    lines.append(f"Total average turnaround time:\t{aggregate.mean_turnaround_time:.1f}")
    return "\n".join(lines)


def format_comparison(outcomes: Sequence[EvaluationOutcome]) -> str:
    header_fmt = "{:<12} {:>9} {:>9} {:>8} {:>6} {:>10}"
    row_fmt = "{:<12} {:>9.2f} {:>9.2f} {:>8d} {:>6d} {:>10.3f}"
    lines = [header_fmt.format("Scheduler", "MeanWait", "MeanTurn", "MaxWait", "Ticks", "Throughput")]
    for outcome in outcomes:
        m = outcome.aggregate
        lines.append(
            row_fmt.format(
                outcome.name,
                m.mean_wait_time,
                m.mean_turnaround_time,
                m.max_wait_time,
                m.total_time,
                m.throughput,
            ),
        )
    return "\n".join(lines)
