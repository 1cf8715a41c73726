import random
from typing import Iterable, Optional

from flowshop.models import Problem, ScheduledJob, Solution
from flowshop.operations import validate_permutation


def build_schedule_from_permutation(
    problem: Problem,
    permutation: Iterable[int],
    validate: bool = True,
) -> Solution:
    """Decode a job sequence into a full permutation flow shop schedule.

    Every machine processes the jobs in the given order. A job starts on
    machine ``i`` once it has left machine ``i-1`` and machine ``i`` has
    finished the previous job of the sequence:

        start[i][k] = max(end[i-1][k], end[i][k-1])
        end[i][k]   = start[i][k] + p[i][seq[k]]

    Args:
        problem: Problem data.
        permutation: Job sequence (indices into the processing-time rows).
        validate: When True verify the sequence is a complete permutation
            before decoding.

    Returns:
        Solution: Sequence, makespan and the ``jobs[machine][position]``
        timing table.

    Raises:
        NonPermutationSequence: If ``validate`` is set and the sequence is
            not a permutation of all jobs.
    """
    sequence = list(permutation)
    if validate:
        validate_permutation(sequence, problem.number_of_jobs)

    jobs: list[list[ScheduledJob]] = []
    previous_ends = [0] * len(sequence)
    for i in range(problem.number_of_machines):
        row = problem.processing_times[i]
        machine_jobs: list[ScheduledJob] = []
        ready_machine = 0
        for k, job in enumerate(sequence):
            start = max(previous_ends[k], ready_machine)
            end = start + row[job]
            ready_machine = end
            previous_ends[k] = end
            machine_jobs.append(
                ScheduledJob(start=start, end=end, process_time=row[job], name=job)
            )
        jobs.append(machine_jobs)

    makespan = jobs[-1][-1].end if sequence else 0
    return Solution(sequence=sequence, makespan=makespan, jobs=jobs)


def check_no_machine_overlap(solution: Solution) -> bool:
    """Ensure jobs neither overlap on a machine nor overtake machine order.

    Args:
        solution: Solution returned by the decoder.

    Returns:
        True if the timing table is consistent.

    Raises:
        AssertionError: On the first detected overlap or precedence breach.
    """
    for machine, machine_jobs in enumerate(solution.jobs):
        prev_end = 0
        for position, row in enumerate(machine_jobs):
            if row.start < prev_end:
                raise AssertionError(
                    f"Overlap on machine {machine} between end {prev_end} and start {row.start}"
                )
            if machine > 0 and row.start < solution.jobs[machine - 1][position].end:
                raise AssertionError(
                    f"Job {row.name} starts on machine {machine} before leaving machine "
                    f"{machine - 1}"
                )
            prev_end = row.end
    return True


def create_random_permutation(
    problem: Problem,
    *,
    rng: Optional[random.Random] = None,
) -> list[int]:
    """Generate a uniformly random job sequence (Fisher-Yates shuffle).

    Args:
        problem: Problem data.
        rng: Optional random.Random instance (for reproducibility). If
            None uses module-level random.

    Returns:
        A random permutation of ``0..number_of_jobs-1``.
    """
    if rng is None:
        rng = random
    sequence = list(range(problem.number_of_jobs))
    rng.shuffle(sequence)
    return sequence
