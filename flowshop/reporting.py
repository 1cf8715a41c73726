"""Reporting helpers: gap to reference bounds and solution export (CSV / JSON)."""

from __future__ import annotations

import csv
import json
import math
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from flowshop.models import Number, Problem, Solution

SCHEDULE_COLUMNS = ["machine", "position", "job", "start", "end", "process_time"]


def round_half_up(value: float, digits: int = 2) -> float:
    """Round half away from zero (``round`` would use banker's rounding)."""
    factor = 10**digits
    return math.copysign(math.floor(abs(value) * factor + 0.5), value) / factor


def gap_to_bound(
    makespan: Number, bound: Optional[Number]
) -> Tuple[Optional[Number], Optional[float]]:
    """Gap between a reference bound and the makespan found.

    Returns:
        ``(bound - makespan, (bound - makespan) / bound * 100)`` with the
        percentage rounded to 2 decimals. ``(None, None)`` without a bound;
        the percentage is None for a zero bound.
    """
    if bound is None:
        return None, None
    absolute = bound - makespan
    if bound == 0:
        return absolute, None
    return absolute, round_half_up(absolute / bound * 100.0)


def solution_rows(solution: Solution) -> List[Dict[str, Any]]:
    """Flatten the ``jobs[machine][position]`` table, machine by machine."""
    rows: List[Dict[str, Any]] = []
    for machine, machine_jobs in enumerate(solution.jobs):
        for position, job in enumerate(machine_jobs):
            rows.append(
                {
                    "machine": machine,
                    "position": position,
                    "job": job.name,
                    "start": job.start,
                    "end": job.end,
                    "process_time": job.process_time,
                }
            )
    return rows


def write_solution_csv(solution: Solution, path: str | Path) -> Path:
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=SCHEDULE_COLUMNS)
        writer.writeheader()
        writer.writerows(solution_rows(solution))
    return out_path


def solution_to_dict(problem: Problem, solution: Solution) -> Dict[str, Any]:
    gap_lower, gap_lower_percent = gap_to_bound(solution.makespan, problem.bound_lower)
    gap_upper, gap_upper_percent = gap_to_bound(solution.makespan, problem.bound_upper)
    return {
        "instance": problem.name,
        "jobs": problem.number_of_jobs,
        "machines": problem.number_of_machines,
        "makespan": solution.makespan,
        "sequence": list(solution.sequence),
        "lower_bound": problem.bound_lower,
        "upper_bound": problem.bound_upper,
        "gap_lower": gap_lower,
        "gap_lower_percent": gap_lower_percent,
        "gap_upper": gap_upper,
        "gap_upper_percent": gap_upper_percent,
        "cmax_history": list(solution.cmax_history),
        "time_history_ms": list(solution.time_history_ms),
    }


def write_result_json(problem: Problem, solution: Solution, path: str | Path) -> Path:
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", encoding="utf-8") as f:
        json.dump(solution_to_dict(problem, solution), f, indent=2)
    return out_path
