"""Permutation utilities: creation and validation of job sequences.

Concepts
--------
Sequence
    A list of job indices. A *complete* sequence is a permutation of
    ``0..number_of_jobs-1``: every job appears exactly once. Partial
    sequences (a prefix of jobs placed so far) only appear inside NEH
    construction; everything stored in the population is complete.
"""

from typing import Sequence

from flowshop.errors import NonPermutationSequence
from flowshop.models import Problem


def create_base_permutation(problem: Problem) -> list[int]:
    """Create the identity sequence ``[0, 1, ..., n-1]``.

    Args:
        problem: Parsed problem instance.

    Returns:
        Jobs in ascending index order; a trivial deterministic start solution.
    """
    return list(range(problem.number_of_jobs))


def validate_permutation(sequence: Sequence[int], number_of_jobs: int) -> bool:
    """Validate that ``sequence`` is a permutation of ``0..number_of_jobs-1``.

    Args:
        sequence: Candidate job sequence.
        number_of_jobs: Expected number of distinct jobs.

    Returns:
        True if the sequence is valid (so the call can sit inside asserts).

    Raises:
        NonPermutationSequence: If the length is wrong, a job index is out of
            range or a job is repeated.
    """
    if len(sequence) != number_of_jobs:
        raise NonPermutationSequence(
            f"Sequence has {len(sequence)} jobs, expected {number_of_jobs}"
        )
    seen = [False] * number_of_jobs
    for job in sequence:
        if not (0 <= job < number_of_jobs):
            raise NonPermutationSequence(f"Job index out of range: {job}")
        if seen[job]:
            raise NonPermutationSequence(f"Job {job} appears more than once")
        seen[job] = True
    return True
