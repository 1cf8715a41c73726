import csv
import random

import pytest

from flowshop.experiments import (
    RunConfig,
    generate_plan,
    random_config,
    run_plan,
    time_to_best,
    write_summary_csv,
)


def test_random_config_ranges_and_reference_fit():
    rng = random.Random(0)
    for _ in range(200):
        cfg = random_config(rng)
        assert 20 <= cfg.iter_limit <= 60
        assert 20 <= cfg.pop_size <= 200
        assert 1 <= cfg.ref_ratio <= 100
        assert 0 <= cfg.good_ratio <= 100
        assert cfg.ref_good >= 0 and cfg.ref_diverse >= 0
        assert cfg.ref_good + cfg.ref_diverse <= cfg.pop_size
        assert cfg.good_ratio + cfg.diverse_ratio == 100


def test_generate_plan_is_seeded():
    assert generate_plan(5, random.Random(9)) == generate_plan(5, random.Random(9))


def _small_plan():
    return [
        RunConfig(iter_limit=1, pop_size=4, ref_ratio=50, good_ratio=50, ref_good=1, ref_diverse=1),
        RunConfig(iter_limit=2, pop_size=5, ref_ratio=60, good_ratio=67, ref_good=2, ref_diverse=1),
    ]


def test_run_plan_and_summary(ta001, tmp_path):
    results = run_plan(ta001, _small_plan(), seed=3)
    assert [r.seed for r in results] == [3, 4]
    for r in results:
        assert r.makespan >= ta001.bound_lower
        assert r.upper_bound == 1278
        assert r.gap_percent() <= 0
        assert sorted(r.sequence) == list(range(20))
        assert r.to_dict()["config"]["pop_size"] in (4, 5)

    path = write_summary_csv(results, tmp_path / "summary.csv")
    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 2
    assert rows[1]["ref_good"] == "2"
    assert rows[0]["makespan"] == str(results[0].makespan)


def test_run_plan_carries_convergence_history(ta001):
    results = run_plan(ta001, _small_plan(), seed=0)
    for r, cfg in zip(results, _small_plan()):
        assert len(r.cmax_history) == cfg.iter_limit + 1
        assert r.cmax_history[-1] == r.makespan
        assert 0 <= r.time_to_best_ms <= r.total_time_ms
        assert r.to_dict()["cmax_history"] == r.cmax_history


def test_run_plan_time_limit_applies_per_run(ta001, tmp_path):
    results = run_plan(ta001, _small_plan(), seed=0, time_limit_ms=0)
    assert [len(r.cmax_history) for r in results] == [1, 1]

    path = write_summary_csv(results, tmp_path / "summary.csv")
    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert rows[0]["time_to_best_ms"] == str(results[0].time_to_best_ms)


@pytest.mark.parametrize(
    "history, times, expected",
    [
        ([10, 9, 9, 8], [1, 4, 6, 9], 9),
        ([7, 7, 7], [2, 3, 5], 2),
        ([12, 11, 11], [0, 5, 8], 5),
        ([], [], 42),
    ],
)
def test_time_to_best(history, times, expected):
    assert time_to_best(history, times, default=42) == expected
