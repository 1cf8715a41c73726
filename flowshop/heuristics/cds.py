"""CDS (Campbell-Dudek-Smith) heuristic.

Solves ``m - 1`` aggregated two-machine problems with Johnson's rule and keeps
the sequence that is best on the real instance.
"""

from typing import List, Tuple

from flowshop.heuristics.common import make_candidate
from flowshop.heuristics.johnson import johnsons_rule
from flowshop.models import Candidate, Number, Problem
from flowshop.permutation_processing import c_max


def surrogate_problems(problem: Problem) -> List[Tuple[List[Number], List[Number]]]:
    """Build the ``m - 1`` surrogate (machine A, machine B) time vectors.

    Surrogate ``s`` sums the first ``s + 1`` machines into A and the last
    ``s + 1`` machines into B.
    """
    rows = problem.processing_times
    m = problem.number_of_machines
    surrogates: List[Tuple[List[Number], List[Number]]] = []
    if m < 2:
        return surrogates
    times_a = list(rows[0])
    times_b = list(rows[m - 1])
    surrogates.append((list(times_a), list(times_b)))
    for s in range(1, m - 1):
        times_a = [a + p for a, p in zip(times_a, rows[s])]
        times_b = [b + p for b, p in zip(times_b, rows[m - 1 - s])]
        surrogates.append((list(times_a), list(times_b)))
    return surrogates


def cds(problem: Problem) -> Candidate:
    """Best Johnson sequence over all CDS surrogates.

    With a single machine there is no surrogate and the identity order is
    returned (every order has the same makespan).
    """
    best_seq: List[int] = list(range(problem.number_of_jobs))
    best_c = None
    for times_a, times_b in surrogate_problems(problem):
        sequence = johnsons_rule(times_a, times_b)
        c = c_max(sequence, problem.processing_times)
        if best_c is None or c < best_c:
            best_c = c
            best_seq = sequence
    return make_candidate(problem, best_seq)
