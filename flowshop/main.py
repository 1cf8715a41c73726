import argparse
import json
import logging
import os
import random
from datetime import datetime
from typing import Any, Dict, Optional

import yaml

from flowshop.algorithms.scatter_search import scatter_search
from flowshop.experiments.runner import generate_plan, run_plan, write_summary_csv
from flowshop.models import Problem, ScatterSearchConfig
from flowshop.parser import parse_taillard_data
from flowshop.reporting import gap_to_bound, write_result_json, write_solution_csv
from flowshop.taillard_gen import generate_taillard_instance

logger = logging.getLogger("flowshop.main")


def load_config(config_file: str) -> Dict[str, Any]:
    """Load configuration from a YAML (``.yml``/``.yaml``) or JSON file."""
    if not os.path.isfile(config_file):
        raise FileNotFoundError(f"Config file not found: {config_file}")
    with open(config_file, "r", encoding="utf-8") as f:
        text = f.read()
    if config_file.endswith((".yml", ".yaml")):
        cfg = yaml.safe_load(text) or {}
    else:
        cfg = json.loads(text)
    if not isinstance(cfg, dict):
        raise ValueError(f"Config root must be a mapping, got {type(cfg).__name__}")
    return cfg


def _section(cfg: Dict[str, Any], key: str) -> Dict[str, Any]:
    return cfg.get(key, {}) if isinstance(cfg.get(key), dict) else {}


def search_config_from(cfg: Dict[str, Any]) -> ScatterSearchConfig:
    ss_cfg = _section(cfg, "scatter_search")
    ref_cfg = ss_cfg.get("ref_size", {}) if isinstance(ss_cfg.get("ref_size"), dict) else {}
    defaults = ScatterSearchConfig()
    return ScatterSearchConfig(
        pop_size=int(ss_cfg.get("pop_size", defaults.pop_size)),
        iter_limit=int(ss_cfg.get("iter_limit", defaults.iter_limit)),
        ref_good=int(ref_cfg.get("good", defaults.ref_good)),
        ref_diverse=int(ref_cfg.get("diverse", defaults.ref_diverse)),
    )


def load_problem(cfg: Dict[str, Any]) -> Problem:
    """Instance from ``generator`` (when enabled) or from the ``instance`` file."""
    gen_cfg = _section(cfg, "generator")
    if gen_cfg.get("enabled"):
        n = gen_cfg.get("n")
        m = gen_cfg.get("m")
        if m is None or n is None:
            raise ValueError("Generator enabled but 'm' or 'n' not provided in config.generator")
        return generate_taillard_instance(int(n), int(m), int(gen_cfg.get("seed", 0)))
    instance_path = cfg.get("instance")
    if not instance_path:
        raise ValueError("Missing 'instance' key in config")
    return parse_taillard_data(instance_path, int(cfg.get("instance_number", 0)))


def run(cfg: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """Execute the configured run and write its outputs.

    Returns:
        Summary dict of a single scatter search run (None in experiment mode).
    """
    problem = load_problem(cfg)
    seed = cfg.get("seed")
    time_limit_ms = cfg.get("time_limit_ms")
    if time_limit_ms is not None:
        time_limit_ms = int(time_limit_ms)
    out_cfg = _section(cfg, "output")
    out_root = out_cfg.get("dir", "results")
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_dir = os.path.join(out_root, f"{problem.name or 'instance'}_{ts}")
    os.makedirs(out_dir, exist_ok=True)

    logger.info(
        "Instance: %s jobs=%d machines=%d bounds=[%s, %s]",
        problem.name,
        problem.number_of_jobs,
        problem.number_of_machines,
        problem.bound_lower,
        problem.bound_upper,
    )

    exp_cfg = _section(cfg, "experiment")
    if exp_cfg.get("enabled"):
        runs = int(exp_cfg.get("runs", 10))
        plan_seed = seed if seed is not None else 0
        plan = generate_plan(runs, random.Random(plan_seed))
        results = run_plan(problem, plan, seed=plan_seed, time_limit_ms=time_limit_ms)
        summary_path = write_summary_csv(results, os.path.join(out_dir, "summary.csv"))
        logger.info("Saved experiment summary to %s", summary_path)
        return None

    rng = random.Random(seed) if seed is not None else random.Random()
    solution = scatter_search(
        problem,
        search_config_from(cfg),
        rng=rng,
        time_limit_ms=time_limit_ms,
        iter_log_path=os.path.join(out_dir, "iter_log.csv"),
    )
    for label, bound in (("lower", problem.bound_lower), ("upper", problem.bound_upper)):
        gap, gap_percent = gap_to_bound(solution.makespan, bound)
        if gap is not None:
            logger.info("Gap to %s bound %s: %s (%s%%)", label, bound, gap, gap_percent)

    if out_cfg.get("csv", True):
        csv_path = write_solution_csv(solution, os.path.join(out_dir, "schedule.csv"))
        logger.info("Saved schedule to %s", csv_path)
    result_path = None
    if out_cfg.get("json", True):
        result_path = write_result_json(problem, solution, os.path.join(out_dir, "result.json"))
        logger.info("Saved result to %s", result_path)
    logger.info("Best makespan %s sequence %s", solution.makespan, solution.sequence)
    return {
        "makespan": solution.makespan,
        "sequence": solution.sequence,
        "out_dir": out_dir,
        "result_path": str(result_path) if result_path else None,
    }


def cli(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Permutation flow shop scatter search")
    parser.add_argument(
        "--config",
        required=True,
        help="Path to the YAML/JSON configuration file",
    )
    args = parser.parse_args(argv)
    cfg = load_config(args.config)

    log_level = cfg.get("log_level", "INFO")
    logging.basicConfig(
        level=getattr(logging, str(log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        run(cfg)
    except ValueError:
        logger.exception("Run failed")
        raise


if __name__ == "__main__":
    cli()
