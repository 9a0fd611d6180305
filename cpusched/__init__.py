"""Discrete-time CPU scheduling simulator."""

from .process import Process, ProcessSpec, is_eligible
from .simulator import Simulation, SimulationConfig, SimulationResult, TraceRecord
from . import schedulers
from . import workload
from . import metrics
from . import evaluation

__all__ = [
	"Process",
	"ProcessSpec",
	"is_eligible",
	"Simulation",
	"SimulationConfig",
	"SimulationResult",
	"TraceRecord",
	"schedulers",
	"workload",
	"metrics",
	"evaluation",
]
