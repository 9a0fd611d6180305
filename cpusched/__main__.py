from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from . import evaluation, report, schedulers, workload
from .evaluation import SchedulerFactory

logger = logging.getLogger("cpusched")


def positive_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        msg = f"quantum must be a positive integer, got {raw!r}"
        raise argparse.ArgumentTypeError(msg) from None
    if value <= 0:
        msg = f"quantum must be a positive integer, got {value}"
        raise argparse.ArgumentTypeError(msg)
    return value


def parse_arguments(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="cpusched", description="Simulate CPU scheduling one tick at a time.")
    policy = parser.add_mutually_exclusive_group(required=True)
    policy.add_argument("-f", "--fcfs", action="store_true", help="First Come First Served.")
    policy.add_argument("-s", "--sjf", action="store_true", help="Preemptive Shortest Job First.")
    policy.add_argument(
        "-r",
        "--round-robin",
        type=positive_int,
        metavar="QUANTUM",
        help="Round Robin with the given time quantum (ticks).",
    )
    policy.add_argument(
        "-a",
        "--compare",
        type=positive_int,
        metavar="QUANTUM",
        help="Run every policy (Round Robin with QUANTUM) and compare averages.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    parser.add_argument("input_file", help="Process list, one 'P<id>,<burst>' entry per line.")
    return parser.parse_args(argv)


def select_factory(args: argparse.Namespace) -> SchedulerFactory:
    if args.fcfs:
        return schedulers.FcfsScheduler
    if args.sjf:
        return schedulers.SjfScheduler
    quantum = args.round_robin
    return lambda: schedulers.RoundRobinScheduler(quantum)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_arguments(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        processes = workload.load_processes(args.input_file)
    except OSError as exc:
        logger.error("could not open file %s: %s", args.input_file, exc.strerror or exc)
        return 1
    if not processes:
        logger.error("no processes to schedule")
        return 1

    if args.compare is not None:
        quantum = args.compare
        factories: list[tuple[str, SchedulerFactory]] = [
            ("FCFS", schedulers.FcfsScheduler),
            ("SJF", schedulers.SjfScheduler),
            (f"RR(q={quantum})", lambda: schedulers.RoundRobinScheduler(quantum)),
        ]
        outcomes = evaluation.evaluate_suite(factories, processes)
        print(f"Simulated {len(processes)} processes\n")
        print(report.format_comparison(outcomes))
        return 0

    scheduler = select_factory(args)()
    outcome = evaluation.evaluate_scheduler(scheduler, processes)
    print(outcome.name)
    for record in outcome.simulation.trace:
        print(report.format_trace_line(record))
    print(report.format_final_stats(outcome.per_process, outcome.aggregate))
    return 0


if __name__ == "__main__":
    sys.exit(main())
