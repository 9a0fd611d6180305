from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterable, Sequence

from .process import ProcessSpec

logger = logging.getLogger(__name__)

# P<label>,<burst>; the label is discarded and anything after the burst is ignored.
_LINE_PATTERN = re.compile(r"\s*P([^,]+),\s*([+-]?\d+)")


def from_bursts(bursts: Sequence[int]) -> list[ProcessSpec]:
    """Build specs where each process arrives at the tick matching its position."""

    return [ProcessSpec(process_id=idx, burst_time=burst, arrival_time=idx) for idx, burst in enumerate(bursts)]


def parse_lines(lines: Iterable[str]) -> list[ProcessSpec]:
    bursts: list[int] = []
    for lineno, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        match = _LINE_PATTERN.match(line)
        if match is None:
            logger.debug("line %d: skipping malformed entry %r", lineno, line.rstrip("\n"))
            continue
        burst = int(match.group(2))
        if burst <= 0:
            logger.debug("line %d: skipping non-positive burst time %d", lineno, burst)
            continue
        bursts.append(burst)
    return from_bursts(bursts)


def load_processes(path: str | os.PathLike[str]) -> list[ProcessSpec]:
    with open(path, encoding="utf-8", errors="replace") as handle:
        specs = parse_lines(handle)
    logger.debug("loaded %d processes from %s", len(specs), path)
    return specs
