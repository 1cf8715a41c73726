"""Randomised parameter-plan experiments for scatter search."""

from flowshop.experiments.runner import (
    RunConfig,
    RunResult,
    generate_plan,
    random_config,
    run_plan,
    time_to_best,
    write_summary_csv,
)

__all__ = [
    "RunConfig",
    "RunResult",
    "generate_plan",
    "random_config",
    "run_plan",
    "time_to_best",
    "write_summary_csv",
]
