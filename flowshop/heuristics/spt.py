"""SPT - Shortest Processing Time ordering by total job time."""

from flowshop.heuristics.common import make_candidate, order_ascending
from flowshop.models import Candidate, Problem
from flowshop.permutation_processing import total_job_times


def spt(problem: Problem) -> Candidate:
    """Sequence jobs by ascending total processing time over all machines."""
    return make_candidate(problem, order_ascending(total_job_times(problem.processing_times)))
