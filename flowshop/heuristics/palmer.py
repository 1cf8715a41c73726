"""Palmer's slope index heuristic.

Jobs whose processing times grow along the machine route get a high slope and
are pushed to the front of the sequence.
"""

from typing import List

from flowshop.heuristics.common import make_candidate, order_descending
from flowshop.models import Candidate, Number, Problem


def slope_indices(problem: Problem) -> List[Number]:
    """Compute Palmer's slope index of every job.

    For machine ``i`` (0-based) the weight is ``-(m - (2(i+1) - 1))``, i.e.
    ``-(m-1), -(m-3), ..., m-1``.

    Args:
        problem: Problem data.

    Returns:
        Slope per job index.
    """
    m = problem.number_of_machines
    slopes: List[Number] = [0] * problem.number_of_jobs
    for i, row in enumerate(problem.processing_times):
        weight = -(m - (2 * (i + 1) - 1))
        for j, p in enumerate(row):
            slopes[j] += weight * p
    return slopes


def palmer(problem: Problem) -> Candidate:
    """Sequence jobs by descending slope index."""
    return make_candidate(problem, order_descending(slope_indices(problem)))
