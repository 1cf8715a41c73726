"""Johnson's rule for the two-machine flow shop."""

from typing import List, Sequence

from flowshop.heuristics.common import make_candidate
from flowshop.models import Candidate, Number, Problem


def johnsons_rule(times_a: Sequence[Number], times_b: Sequence[Number]) -> List[int]:
    """Order jobs of a two-machine problem with Johnson's rule.

    Jobs faster on the first machine (``a < b``) go first, by ascending
    ``a + b``; the remaining ones (``a >= b``, ties included) follow by
    descending ``a + b``. Both sorts are stable.

    Args:
        times_a: Processing times on the first machine.
        times_b: Processing times on the second machine.

    Returns:
        Job sequence.
    """
    front = [j for j in range(len(times_a)) if times_a[j] < times_b[j]]
    back = [j for j in range(len(times_a)) if times_a[j] >= times_b[j]]
    front.sort(key=lambda j: times_a[j] + times_b[j])
    back.sort(key=lambda j: times_a[j] + times_b[j], reverse=True)
    return front + back


def johnson(problem: Problem) -> Candidate:
    """Johnson's rule on the first and last machine of ``problem``."""
    sequence = johnsons_rule(problem.processing_times[0], problem.processing_times[-1])
    return make_candidate(problem, sequence)
