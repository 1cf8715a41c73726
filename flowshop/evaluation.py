"""Evaluation functions shared by the heuristics, local search and scatter search.

``evaluate`` returns just the makespan (with an optional memo cache) and is
the only thing the inner loops call; ``evaluate_full`` expands the complete
timing table and is meant for the single reported solution.
"""

from __future__ import annotations

from typing import Sequence

from .decoder import build_schedule_from_permutation
from .models import Number, Problem, Solution
from .operations import validate_permutation
from .permutation_processing import c_max

CacheType = dict[tuple[int, ...], Number]


def evaluate(
    problem: Problem,
    sequence: Sequence[int],
    cache: CacheType | None = None,
    validate: bool = False,
) -> Number:
    key = tuple(sequence)
    if cache is not None and key in cache:
        return cache[key]
    if validate:
        validate_permutation(key, problem.number_of_jobs)
    value = c_max(key, problem.processing_times)
    if cache is not None:
        cache[key] = value
    return value


def evaluate_full(problem: Problem, sequence: Sequence[int]) -> Solution:
    return build_schedule_from_permutation(problem, sequence, validate=True)
