"""Common helpers for the construction heuristics.

- make_candidate: wrap a finished sequence into an evaluated Candidate
- order_ascending / order_descending: stable job orderings by a score vector
"""

from typing import List, Sequence

from flowshop.evaluation import evaluate
from flowshop.models import Candidate, Number, Problem


def make_candidate(problem: Problem, sequence: List[int]) -> Candidate:
    """Evaluate ``sequence`` and return it as a Candidate."""
    return Candidate(sequence=sequence, makespan=evaluate(problem, sequence))


def order_ascending(scores: Sequence[Number]) -> List[int]:
    """Job indices sorted by ascending score; ties keep the lower index first."""
    return sorted(range(len(scores)), key=lambda j: scores[j])


def order_descending(scores: Sequence[Number]) -> List[int]:
    """Job indices sorted by descending score; ties keep the lower index first.

    Matches a repeated linear scan that only replaces the current leader on a
    strictly greater score.
    """
    return sorted(range(len(scores)), key=lambda j: scores[j], reverse=True)
