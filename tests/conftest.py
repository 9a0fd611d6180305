import pytest

from cpusched import workload

REFERENCE_BURSTS = [4, 3, 1, 2]


@pytest.fixture
def reference_specs():
    """P0,4 / P1,3 / P2,1 / P3,2 arriving at ticks 0..3."""
    return workload.from_bursts(REFERENCE_BURSTS)


@pytest.fixture
def reference_file(tmp_path):
    path = tmp_path / "processes.csv"
    path.write_text("P0,4\nP1,3\nP2,1\nP3,2\n", encoding="utf-8")
    return path
