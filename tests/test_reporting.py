import csv
import json

import pytest

from flowshop.evaluation import evaluate_full
from flowshop.models import Problem
from flowshop.reporting import (
    SCHEDULE_COLUMNS,
    gap_to_bound,
    solution_rows,
    solution_to_dict,
    write_result_json,
    write_solution_csv,
)


@pytest.mark.parametrize(
    "makespan, bound, expected",
    [
        (1286, 1278, (-8, -0.63)),
        (1278, 1278, (0, 0.0)),
        (1232, 1278, (46, 3.6)),
        (8, 16, (8, 50.0)),
        (5, None, (None, None)),
        (5, 0, (-5, None)),
    ],
)
def test_gap_to_bound(makespan, bound, expected):
    assert gap_to_bound(makespan, bound) == expected


def test_solution_rows_machine_major(small_problem):
    rows = solution_rows(evaluate_full(small_problem, [2, 0, 1]))
    assert len(rows) == 6
    assert rows[0] == {
        "machine": 0,
        "position": 0,
        "job": 2,
        "start": 0,
        "end": 1,
        "process_time": 1,
    }
    assert rows[-1]["end"] == 8


def test_write_solution_csv(small_problem, tmp_path):
    path = write_solution_csv(evaluate_full(small_problem, [2, 0, 1]), tmp_path / "out" / "s.csv")
    with open(path, newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        assert reader.fieldnames == SCHEDULE_COLUMNS
        rows = list(reader)
    assert [r["job"] for r in rows[:3]] == ["2", "0", "1"]
    assert rows[5]["start"] == "6"


def test_result_json_includes_gaps(tmp_path):
    problem = Problem(
        number_of_jobs=3,
        number_of_machines=2,
        processing_times=[[2, 3, 1], [1, 2, 4]],
        bound_lower=8,
        bound_upper=10,
        name="small",
    )
    sol = evaluate_full(problem, [2, 0, 1])
    d = solution_to_dict(problem, sol)
    assert d["gap_lower"] == 0
    assert d["gap_upper"] == 2
    assert d["gap_upper_percent"] == 20.0
    path = write_result_json(problem, sol, tmp_path / "result.json")
    data = json.loads(path.read_text())
    assert data["makespan"] == 8
    assert data["sequence"] == [2, 0, 1]
    assert data["instance"] == "small"


def test_result_json_includes_history(tmp_path):
    problem = Problem.from_matrix([[2, 3, 1], [1, 2, 4]], name="small")
    sol = evaluate_full(problem, [2, 0, 1])
    sol.cmax_history = [9, 8]
    sol.time_history_ms = [0, 3]
    data = json.loads(write_result_json(problem, sol, tmp_path / "r.json").read_text())
    assert data["cmax_history"] == [9, 8]
    assert data["time_history_ms"] == [0, 3]
