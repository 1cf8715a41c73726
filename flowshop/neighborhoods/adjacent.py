"""Local search over adjacent job swaps.

A sequence π of n jobs has n-1 neighbors, one per swap of positions (i, i+1).
Every neighbor is derived from the unmodified π; swaps are never chained.

Complexity: O(n) neighbors, each evaluated in O(m·n) → O(m·n²) total
"""

from typing import Iterator, List, Tuple

from flowshop.evaluation import CacheType, evaluate
from flowshop.models import Candidate, Number, Problem
from flowshop.neighborhoods.common import swap_jobs


def generate_neighbors_adjacent(
    pi: List[int],
) -> Iterator[Tuple[List[int], Tuple[int, int]]]:
    """Generate all neighbors by swapping adjacent elements.

    Lazy generator - neighbors are generated on demand.

    Args:
        pi: Current permutation

    Yields:
        (neighbor, move): Neighboring permutation and move (i, i+1)
    """
    n = len(pi)
    for i in range(n - 1):
        neighbor = swap_jobs(pi, i, i + 1)
        yield neighbor, (i, i + 1)


def best_adjacent_neighbor(
    problem: Problem,
    pi: List[int],
    current_cmax: Number,
    cache: CacheType | None = None,
) -> Tuple[List[int], Number, Tuple[int, int]]:
    """Find the best strictly improving neighbor in the adjacent neighborhood.

    Args:
        problem: Problem data
        pi: Current permutation
        current_cmax: Makespan of ``pi``
        cache: Optional evaluation cache

    Returns:
        (best_pi, best_cmax, move): Best permutation, its Cmax, move.
        When nothing improves returns a copy of ``pi``, ``current_cmax``
        and move (-1, -1).
    """
    best_pi = pi.copy()
    best_cmax = current_cmax
    best_move = (-1, -1)

    for neighbor, move in generate_neighbors_adjacent(pi):
        c = evaluate(problem, neighbor, cache=cache)
        # first neighbor reaching a strictly smaller value wins
        if c < best_cmax:
            best_pi, best_cmax, best_move = neighbor, c, move

    return best_pi, best_cmax, best_move


def improve(
    candidate: Candidate,
    problem: Problem,
    cache: CacheType | None = None,
) -> Candidate:
    """Apply one best-improvement adjacent swap step to ``candidate`` in place.

    The candidate is replaced by its best strictly improving neighbor, or left
    untouched when no neighbor improves. Its makespan never increases.

    Args:
        candidate: Population member (evaluated first if makespan is None)
        problem: Problem data
        cache: Optional evaluation cache

    Returns:
        The same candidate object, for chaining.
    """
    if candidate.makespan is None:
        candidate.makespan = evaluate(problem, candidate.sequence, cache=cache)
    best_pi, best_cmax, move = best_adjacent_neighbor(
        problem, candidate.sequence, candidate.makespan, cache=cache
    )
    if move[0] >= 0:
        candidate.sequence = best_pi
        candidate.makespan = best_cmax
    return candidate
