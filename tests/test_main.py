import json
import logging
from pathlib import Path

import pytest
import yaml

from flowshop.main import cli, load_config, load_problem, run, search_config_from

FIXTURE = str(Path(__file__).resolve().parent / "fixtures" / "ta001")


def test_load_config_yaml_and_json(tmp_path):
    yml = tmp_path / "cfg.yaml"
    yml.write_text("instance: x\nscatter_search:\n  pop_size: 7\n")
    assert load_config(str(yml))["scatter_search"]["pop_size"] == 7
    js = tmp_path / "cfg.json"
    js.write_text(json.dumps({"instance": "y"}))
    assert load_config(str(js)) == {"instance": "y"}


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "nope.yaml"))


def test_search_config_from_defaults_and_values():
    cfg = search_config_from({})
    assert (cfg.pop_size, cfg.iter_limit, cfg.ref_good, cfg.ref_diverse) == (10, 3, 2, 2)
    cfg = search_config_from(
        {"scatter_search": {"pop_size": 20, "iter_limit": 5, "ref_size": {"good": 4, "diverse": 1}}}
    )
    assert (cfg.pop_size, cfg.iter_limit, cfg.ref_good, cfg.ref_diverse) == (20, 5, 4, 1)


def test_load_problem_generator_and_missing_instance():
    problem = load_problem({"generator": {"enabled": True, "n": 6, "m": 3, "seed": 1}})
    assert problem.number_of_jobs == 6
    assert problem.number_of_machines == 3
    assert all(1 <= p <= 99 for row in problem.processing_times for p in row)
    with pytest.raises(ValueError):
        load_problem({})
    with pytest.raises(ValueError):
        load_problem({"generator": {"enabled": True, "n": 6}})


def test_run_writes_outputs(tmp_path):
    cfg = {
        "instance": FIXTURE,
        "seed": 1,
        "scatter_search": {"pop_size": 5, "iter_limit": 1},
        "output": {"dir": str(tmp_path)},
    }
    summary = run(cfg)
    out_dir = Path(summary["out_dir"])
    assert (out_dir / "schedule.csv").exists()
    assert (out_dir / "iter_log.csv").exists()
    data = json.loads((out_dir / "result.json").read_text())
    assert data["makespan"] == summary["makespan"]
    assert data["upper_bound"] == 1278


def test_run_experiment_mode(tmp_path, monkeypatch):
    from flowshop.experiments import RunConfig
    import flowshop.main as main_module

    plan = [RunConfig(iter_limit=1, pop_size=4, ref_ratio=50, good_ratio=50, ref_good=1, ref_diverse=1)]
    monkeypatch.setattr(main_module, "generate_plan", lambda count, rng: plan[:count])
    cfg = {
        "generator": {"enabled": True, "n": 5, "m": 3, "seed": 2},
        "experiment": {"enabled": True, "runs": 1},
        "output": {"dir": str(tmp_path)},
    }
    assert run(cfg) is None
    assert list(tmp_path.glob("*/summary.csv"))


def test_cli_with_yaml_config(tmp_path, caplog):
    cfg_path = tmp_path / "config.yaml"
    cfg_path.write_text(
        yaml.safe_dump(
            {
                "instance": FIXTURE,
                "seed": 0,
                "log_level": "INFO",
                "scatter_search": {"pop_size": 4, "iter_limit": 1},
                "output": {"dir": str(tmp_path / "results"), "csv": False},
            }
        )
    )
    with caplog.at_level(logging.INFO, logger="flowshop"):
        cli(["--config", str(cfg_path)])
    assert list((tmp_path / "results").glob("*/result.json"))
    assert not list((tmp_path / "results").glob("*/schedule.csv"))
    assert any("Best makespan" in r.getMessage() for r in caplog.records)


def test_run_accepts_quoted_time_limit(tmp_path):
    cfg_path = tmp_path / "config.json"
    cfg_path.write_text(
        json.dumps(
            {
                "instance": FIXTURE,
                "seed": 0,
                "time_limit_ms": "0",
                "scatter_search": {"pop_size": 4, "iter_limit": 5},
                "output": {"dir": str(tmp_path), "csv": False},
            }
        )
    )
    summary = run(load_config(str(cfg_path)))
    data = json.loads(Path(summary["result_path"]).read_text())
    # the limit is hit before the first iteration
    assert data["cmax_history"] == [summary["makespan"]]


def test_run_experiment_mode_passes_time_limit(tmp_path, monkeypatch):
    import flowshop.main as main_module

    seen = {}

    def fake_run_plan(problem, plan, seed=0, time_limit_ms=None):
        seen["time_limit_ms"] = time_limit_ms
        return []

    monkeypatch.setattr(main_module, "run_plan", fake_run_plan)
    cfg = {
        "generator": {"enabled": True, "n": 5, "m": 3, "seed": 2},
        "time_limit_ms": "250",
        "experiment": {"enabled": True, "runs": 1},
        "output": {"dir": str(tmp_path)},
    }
    assert run(cfg) is None
    assert seen["time_limit_ms"] == 250
