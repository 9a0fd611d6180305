from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Sequence

from . import metrics
from .process import ProcessSpec
from .scheduler import Scheduler
from .simulator import Simulation, SimulationConfig, SimulationResult


SchedulerFactory = Callable[[], Scheduler]


@dataclass(slots=True)
class EvaluationOutcome:
    name: str
    simulation: SimulationResult
    per_process: list[metrics.ProcessMetrics]
    aggregate: metrics.AggregateMetrics


def evaluate_scheduler(
    scheduler: Scheduler,
    processes: Sequence[ProcessSpec],
    *,
    name: str | None = None,
    config: SimulationConfig | None = None,
) -> EvaluationOutcome:
    """Run one fresh scheduler over the specs; the outcome is named after its title by default."""

    result = Simulation(scheduler=scheduler, processes=processes, config=config).run()
    per_process = metrics.build_process_metrics(result.processes)
    aggregate = metrics.summarise(per_process, result.total_time)
    return EvaluationOutcome(
        name=name if name is not None else scheduler.title,
        simulation=result,
        per_process=per_process,
        aggregate=aggregate,
    )


def evaluate_suite(
    factories: Sequence[tuple[str, SchedulerFactory]],
    processes: Sequence[ProcessSpec],
    *,
    config: SimulationConfig | None = None,
) -> list[EvaluationOutcome]:
    return [evaluate_scheduler(factory(), processes, name=name, config=config) for name, factory in factories]
