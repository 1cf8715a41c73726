"""NEH (Nawaz-Enscore-Ham) insertion heuristic."""

from typing import List, Sequence, Tuple

from flowshop.heuristics.common import make_candidate, order_descending
from flowshop.models import Candidate, Number, Problem
from flowshop.permutation_processing import c_max, total_job_times


def best_insertion(
    sequence: Sequence[int],
    job: int,
    processing_times: List[List[Number]],
) -> Tuple[List[int], Number]:
    """Insert ``job`` at the position giving the smallest partial makespan.

    Tries every position ``0..len(sequence)``; ties keep the earliest
    position.

    Args:
        sequence: Partial sequence built so far.
        job: Job to insert.
        processing_times: m x n processing times matrix

    Returns:
        (new_sequence, makespan) of the best insertion.
    """
    best_seq: List[int] = []
    best_c = None
    for pos in range(len(sequence) + 1):
        candidate = list(sequence)
        candidate.insert(pos, job)
        c = c_max(candidate, processing_times)
        if best_c is None or c < best_c:
            best_c = c
            best_seq = candidate
    return best_seq, best_c


def neh(problem: Problem) -> Candidate:
    """Build a sequence with NEH.

    Jobs are taken by descending total processing time (lower index first on
    ties) and each one is inserted where the partial makespan is smallest.

    Args:
        problem: Problem data.

    Returns:
        Evaluated NEH Candidate.
    """
    order = order_descending(total_job_times(problem.processing_times))
    sequence = [order[0]]
    for job in order[1:]:
        sequence, _ = best_insertion(sequence, job, problem.processing_times)
    return make_candidate(problem, sequence)
