import pytest

from cpusched.__main__ import main, parse_arguments

FCFS_EXPECTED = """\
First Come First Served
T0 : P0 - Burst left  4, Wait time 0, Turnaround time 0
T1 : P0 - Burst left  3, Wait time 0, Turnaround time 1
T2 : P0 - Burst left  2, Wait time 0, Turnaround time 2
T3 : P0 - Burst left  1, Wait time 0, Turnaround time 3
T4 : P1 - Burst left  3, Wait time 3, Turnaround time 3
T5 : P1 - Burst left  2, Wait time 3, Turnaround time 4
T6 : P1 - Burst left  1, Wait time 3, Turnaround time 5
T7 : P2 - Burst left  1, Wait time 5, Turnaround time 5
T8 : P3 - Burst left  2, Wait time 5, Turnaround time 5
T9 : P3 - Burst left  1, Wait time 5, Turnaround time 6

P0
\tWaiting time:\t\t  0
\tTurnaround time:\t  4

P1
\tWaiting time:\t\t  3
\tTurnaround time:\t  6

P2
\tWaiting time:\t\t  5
\tTurnaround time:\t  6

P3
\tWaiting time:\t\t  5
\tTurnaround time:\t  7

Total average waiting time:\t3.2
Total average turnaround time:\t5.8
"""


def test_fcfs_output(reference_file, capsys):
    assert main(["-f", str(reference_file)]) == 0
    assert capsys.readouterr().out == FCFS_EXPECTED


def test_sjf_header_and_averages(reference_file, capsys):
    assert main(["-s", str(reference_file)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Shortest Job First\nT0 : P0")
    assert "Total average waiting time:\t2.2\n" in out
    assert "Total average turnaround time:\t4.8\n" in out


def test_round_robin_header(reference_file, capsys):
    assert main(["-r", "2", str(reference_file)]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[0] == "Round Robin with Quantum 2"
    assert "T9 : P1 - Burst left  1, Wait time 6, Turnaround time 8" in out


def test_compare_prints_every_policy(reference_file, capsys):
    assert main(["-a", "2", str(reference_file)]) == 0
    out = capsys.readouterr().out
    assert "Simulated 4 processes" in out
    rows = [line.split()[0] for line in out.splitlines()[3:]]
    assert rows == ["FCFS", "SJF", "RR(q=2)"]


@pytest.mark.parametrize("quantum", ["0", "-3", "two"])
def test_invalid_quantum_is_an_argument_error(reference_file, quantum, capsys):
    with pytest.raises(SystemExit) as excinfo:
        parse_arguments(["-r", quantum, str(reference_file)])
    assert excinfo.value.code == 2
    assert "quantum must be a positive integer" in capsys.readouterr().err


@pytest.mark.parametrize(
    "argv",
    [
        ["input.csv"],
        ["-f", "-s", "input.csv"],
        ["-x", "input.csv"],
        ["-r"],
    ],
)
def test_bad_flags_are_argument_errors(argv):
    with pytest.raises(SystemExit) as excinfo:
        parse_arguments(argv)
    assert excinfo.value.code == 2


def test_missing_file_fails(tmp_path, caplog):
    assert main(["-f", str(tmp_path / "missing.csv")]) == 1
    assert "could not open file" in caplog.text


def test_file_without_processes_fails(tmp_path, caplog, capsys):
    path = tmp_path / "empty.csv"
    path.write_text("not a process\n", encoding="utf-8")
    assert main(["-s", str(path)]) == 1
    assert "no processes to schedule" in caplog.text
    assert capsys.readouterr().out == ""


def test_invalid_bytes_are_skipped_quietly(tmp_path, capsys):
    path = tmp_path / "mixed.csv"
    path.write_bytes(b"P0,4\n\xff\xfe junk\nP1,3\n")
    assert main(["-f", str(path)]) == 0
    captured = capsys.readouterr()
    assert captured.out.startswith("First Come First Served\nT0 : P0")
    assert "Total average waiting time:\t1.5\n" in captured.out
    assert "malformed" not in captured.err
