"""Scatter Search for the permutation flow shop.

Algorithm steps:

1. Diversification: ``pop_size - 1`` random sequences plus the NEH, Palmer,
   SPT and CDS seeds (the population starts ``pop_size + 3`` strong and is
   only trimmed by the first combination).
2. Improvement: one best-improvement adjacent swap step on every member.
3. Reference set update: ``ref_good`` best members, then ``ref_diverse``
   worst members among the rest.
4. Subset generation: every pair of reference members.
5. Combination: path relinking between each pair; all intermediate
   sequences join the population, which is then sorted and cut back to
   ``pop_size``.

Steps 3-5 plus an improvement pass repeat ``iter_limit`` times; the best
member is finally expanded into a full Solution.
"""

import random
import time
from typing import Callable, List, Optional, Sequence, Tuple

from flowshop.algorithms.base import SearchState, log_iteration, logger, open_log_file
from flowshop.algorithms.path_relinking import path_relinking
from flowshop.decoder import create_random_permutation
from flowshop.errors import ReferenceSetUnderflow
from flowshop.evaluation import evaluate, evaluate_full
from flowshop.heuristics import SEED_HEURISTICS
from flowshop.models import Candidate, Problem, ScatterSearchConfig, Solution
from flowshop.neighborhoods.adjacent import improve
from flowshop.operations import validate_permutation


def initialize_population(
    problem: Problem,
    pop_size: int,
    rng: random.Random,
) -> List[Candidate]:
    """Diversification method: random sequences followed by the heuristic seeds.

    Args:
        problem: Problem data.
        pop_size: Nominal population size.
        rng: Random source for the shuffles.

    Returns:
        ``pop_size - 1`` random candidates, then NEH, Palmer, SPT and CDS.
    """
    population: List[Candidate] = []
    for _ in range(pop_size - 1):
        sequence = create_random_permutation(problem, rng=rng)
        population.append(Candidate(sequence, evaluate(problem, sequence)))
    for name, heuristic in SEED_HEURISTICS.items():
        seed = heuristic(problem)
        validate_permutation(seed.sequence, problem.number_of_jobs)
        logger.debug("[scatter] seed %s makespan=%s", name, seed.makespan)
        population.append(seed)
    return population


def improve_population(
    problem: Problem,
    population: List[Candidate],
) -> None:
    """Improvement method: local search on every member independently."""
    for candidate in population:
        improve(candidate, problem)


def reference_set_update(
    population: Sequence[Candidate],
    good: int,
    diverse: int,
) -> List[int]:
    """Pick population indices for the reference set.

    ``good`` indices are taken by repeatedly scanning for the smallest
    makespan among the not yet chosen members, then ``diverse`` indices by
    scanning for the largest one. A member only replaces the running leader
    on a strictly better value, so the first index wins ties.

    Args:
        population: Evaluated candidates.
        good: Number of best members.
        diverse: Number of worst members.

    Returns:
        Chosen indices, good ones first.

    Raises:
        ReferenceSetUnderflow: If ``good + diverse`` exceeds the population.
    """
    if good + diverse > len(population):
        raise ReferenceSetUnderflow(
            f"Reference set of {good}+{diverse} does not fit a population of "
            f"{len(population)}"
        )
    reference_set: List[int] = []
    chosen = set()

    for _ in range(good):
        best_idx = None
        for j, candidate in enumerate(population):
            if j in chosen:
                continue
            if best_idx is None or candidate.makespan < population[best_idx].makespan:
                best_idx = j
        reference_set.append(best_idx)
        chosen.add(best_idx)

    for _ in range(diverse):
        worst_idx = None
        for j, candidate in enumerate(population):
            if j in chosen:
                continue
            if worst_idx is None or candidate.makespan > population[worst_idx].makespan:
                worst_idx = j
        reference_set.append(worst_idx)
        chosen.add(worst_idx)

    return reference_set


def subset_generation(reference_set: Sequence[int]) -> List[Tuple[int, int]]:
    """Every unordered pair of reference set members."""
    subsets: List[Tuple[int, int]] = []
    for i in range(len(reference_set)):
        for j in range(i + 1, len(reference_set)):
            subsets.append((reference_set[i], reference_set[j]))
    return subsets


def combine(
    problem: Problem,
    population: List[Candidate],
    subsets: Sequence[Tuple[int, int]],
    pop_size: int,
) -> List[Candidate]:
    """Solution combination method.

    Relinks every pair, evaluates all intermediate sequences, appends them to
    the population, sorts it by ascending makespan (stable) and drops
    everything past ``pop_size``. The population list is modified in place.

    Args:
        problem: Problem data.
        population: Current population.
        subsets: Pairs of population indices (source, target).
        pop_size: Size the population is cut back to.

    Returns:
        The new candidates produced by relinking (before trimming).
    """
    offspring: List[Candidate] = []
    for source_idx, target_idx in subsets:
        for sequence in path_relinking(
            population[source_idx].sequence, population[target_idx].sequence
        ):
            validate_permutation(sequence, problem.number_of_jobs)
            offspring.append(Candidate(sequence, evaluate(problem, sequence)))

    population.extend(offspring)
    population.sort(key=lambda c: c.makespan)
    del population[pop_size:]
    return offspring


def scatter_search(
    problem: Problem,
    config: Optional[ScatterSearchConfig] = None,
    rng: Optional[random.Random] = None,
    should_stop: Optional[Callable[[], bool]] = None,
    time_limit_ms: Optional[int] = None,
    iter_log_path: str | None = None,
) -> Solution:
    """Scatter Search for the permutation flow shop problem.

    Parameters:
        problem: validated problem instance (never modified)
        config: hyper-parameters, defaults to ScatterSearchConfig()
        rng: random source for the diversification shuffles
        should_stop: polled at the start of every iteration; True ends the loop
        time_limit_ms: optional wall-clock budget, checked at the same point
        iter_log_path: path to CSV trace file

    Returns:
        Full Solution of the best sequence found, carrying the best-makespan
        history (one entry after the initial improvement plus one per
        completed iteration).

    Raises:
        ReferenceSetUnderflow: if the reference set does not fit the population
        NonPermutationSequence: if any produced sequence is corrupted
    """
    if config is None:
        config = ScatterSearchConfig()
    if rng is None:
        rng = random.Random()
    state = SearchState(start_time=time.time())
    limit_s = (time_limit_ms / 1000.0) if time_limit_ms is not None else None

    logger.info(
        "[scatter] start instance=%s jobs=%d machines=%d pop_size=%d iter_limit=%d ref=%d+%d",
        problem.name or "unnamed",
        problem.number_of_jobs,
        problem.number_of_machines,
        config.pop_size,
        config.iter_limit,
        config.ref_good,
        config.ref_diverse,
    )

    with open_log_file(iter_log_path, "scatter_search") as log_file:
        state.population = initialize_population(problem, config.pop_size, rng)
        improve_population(problem, state.population)
        state.record_best()
        log_iteration(log_file, state)

        for it in range(1, config.iter_limit + 1):
            if should_stop is not None and should_stop():
                logger.info("[scatter] stop requested before iter %d", it)
                break
            if limit_s is not None and (time.time() - state.start_time) >= limit_s:
                logger.info("[scatter] stop time_limit reached at iter %d", it)
                break
            state.iteration = it

            reference_set = reference_set_update(
                state.population, config.ref_good, config.ref_diverse
            )
            subsets = subset_generation(reference_set)
            offspring = combine(problem, state.population, subsets, config.pop_size)
            improve_population(problem, state.population)

            best = state.record_best()
            logger.info(
                "[scatter] iter=%d best=%s worst=%s offspring=%d",
                it,
                best,
                state.worst().makespan,
                len(offspring),
            )
            log_iteration(log_file, state)

    state.sort_population()
    solution = evaluate_full(problem, state.population[0].sequence)
    solution.cmax_history = list(state.best_history)
    solution.time_history_ms = list(state.time_history_ms)
    logger.info(
        "[scatter] end best=%s iterations=%d elapsed_ms=%d",
        solution.makespan,
        state.iteration,
        state.elapsed_ms(),
    )
    return solution
