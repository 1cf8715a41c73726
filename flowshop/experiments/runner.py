from __future__ import annotations

import csv
import logging
import random
import time
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from flowshop.algorithms.scatter_search import scatter_search
from flowshop.models import Number, Problem, ScatterSearchConfig
from flowshop.reporting import gap_to_bound

logger = logging.getLogger("flowshop.experiments")

# Ranges of the randomised parameter plan (inclusive).
ITER_LIMIT_RANGE = (20, 60)
POP_SIZE_RANGE = (20, 200)
REF_RATIO_RANGE = (1, 100)
GOOD_RATIO_RANGE = (0, 100)


def _round_half_up(value: float) -> int:
    return int(value + 0.5)


@dataclass(frozen=True)
class RunConfig:
    """Single planned run: scatter search parameters plus the drawn ratios."""

    iter_limit: int
    pop_size: int
    ref_ratio: int  # reference set size, % of pop_size
    good_ratio: int  # good members, % of the reference set
    ref_good: int
    ref_diverse: int

    @property
    def diverse_ratio(self) -> int:
        return 100 - self.good_ratio

    def to_search_config(self) -> ScatterSearchConfig:
        return ScatterSearchConfig(
            pop_size=self.pop_size,
            iter_limit=self.iter_limit,
            ref_good=self.ref_good,
            ref_diverse=self.ref_diverse,
        )


@dataclass
class RunResult:
    config: RunConfig
    seed: int
    makespan: Number
    sequence: List[int]
    total_time_ms: int
    time_to_best_ms: int
    cmax_history: List[Number]
    time_history_ms: List[int]
    lower_bound: Optional[Number]
    upper_bound: Optional[Number]

    def gap_percent(self) -> float | None:
        """Percentage gap to the upper bound (best known), None without one."""
        return gap_to_bound(self.makespan, self.upper_bound)[1]

    def to_dict(self):
        d = asdict(self)
        d["gap_percent"] = self.gap_percent()
        d["config"] = asdict(self.config)
        return d


def random_config(rng: random.Random) -> RunConfig:
    """Draw one parameter set.

    The reference set is ``ref_ratio`` % of the population, split into
    ``good_ratio`` % good and the rest diverse members. Rounding both halves
    up may overshoot the population by one, so the diverse part is clamped.
    """
    iter_limit = rng.randint(*ITER_LIMIT_RANGE)
    pop_size = rng.randint(*POP_SIZE_RANGE)
    ref_ratio = rng.randint(*REF_RATIO_RANGE)
    good_ratio = rng.randint(*GOOD_RATIO_RANGE)
    ref_size = _round_half_up(pop_size * ref_ratio / 100)
    ref_good = _round_half_up(ref_size * good_ratio / 100)
    ref_diverse = _round_half_up(ref_size * (100 - good_ratio) / 100)
    ref_diverse = min(ref_diverse, pop_size - ref_good)
    return RunConfig(
        iter_limit=iter_limit,
        pop_size=pop_size,
        ref_ratio=ref_ratio,
        good_ratio=good_ratio,
        ref_good=ref_good,
        ref_diverse=ref_diverse,
    )


def time_to_best(
    cmax_history: Sequence[Number], time_history_ms: Sequence[int], default: int
) -> int:
    """Elapsed ms at which the final best makespan was first reached."""
    if not cmax_history:
        return default
    return time_history_ms[cmax_history.index(min(cmax_history))]


def generate_plan(count: int, rng: random.Random) -> List[RunConfig]:
    return [random_config(rng) for _ in range(count)]


def run_plan(
    problem: Problem,
    plan: Sequence[RunConfig],
    seed: int = 0,
    time_limit_ms: Optional[int] = None,
) -> List[RunResult]:
    """Run scatter search once per planned configuration.

    Run ``i`` uses ``random.Random(seed + i)`` so every run is reproducible on
    its own. ``time_limit_ms`` applies to each run separately.
    """
    results: List[RunResult] = []
    for i, cfg in enumerate(plan):
        t0 = time.perf_counter()
        solution = scatter_search(
            problem,
            cfg.to_search_config(),
            rng=random.Random(seed + i),
            time_limit_ms=time_limit_ms,
        )
        elapsed_ms = int((time.perf_counter() - t0) * 1000)
        result = RunResult(
            config=cfg,
            seed=seed + i,
            makespan=solution.makespan,
            sequence=list(solution.sequence),
            total_time_ms=elapsed_ms,
            time_to_best_ms=time_to_best(
                solution.cmax_history, solution.time_history_ms, elapsed_ms
            ),
            cmax_history=list(solution.cmax_history),
            time_history_ms=list(solution.time_history_ms),
            lower_bound=problem.bound_lower,
            upper_bound=problem.bound_upper,
        )
        logger.info(
            "[experiment] run=%d/%d pop=%d iter=%d ref=%d+%d makespan=%s gap=%s time_ms=%d",
            i + 1,
            len(plan),
            cfg.pop_size,
            cfg.iter_limit,
            cfg.ref_good,
            cfg.ref_diverse,
            result.makespan,
            result.gap_percent(),
            elapsed_ms,
        )
        results.append(result)
    return results


def write_summary_csv(results: Sequence[RunResult], path: str | Path) -> Path:
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    columns = [
        "run",
        "seed",
        "iter_limit",
        "pop_size",
        "ref_ratio",
        "good_ratio",
        "diverse_ratio",
        "ref_good",
        "ref_diverse",
        "makespan",
        "upper_bound",
        "gap_percent",
        "time_to_best_ms",
        "total_time_ms",
    ]
    with open(out_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(columns)
        for i, r in enumerate(results):
            writer.writerow(
                [
                    i,
                    r.seed,
                    r.config.iter_limit,
                    r.config.pop_size,
                    r.config.ref_ratio,
                    r.config.good_ratio,
                    r.config.diverse_ratio,
                    r.config.ref_good,
                    r.config.ref_diverse,
                    r.makespan,
                    r.upper_bound,
                    r.gap_percent(),
                    r.time_to_best_ms,
                    r.total_time_ms,
                ]
            )
    return out_path
