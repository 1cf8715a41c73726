"""Path relinking between two job sequences."""

from typing import List, Sequence

from flowshop.neighborhoods.common import move_job


def path_relinking(source: Sequence[int], target: Sequence[int]) -> List[List[int]]:
    """Generate the trajectory of sequences leading from ``source`` to ``target``.

    Walks ``target`` from left to right. Whenever the current sequence holds a
    different job at position ``i``, the job ``target[i]`` is taken out of its
    current position and reinserted at ``i`` (insertion, not swap). Each such
    step yields one intermediate sequence.

    Args:
        source: Starting sequence (not modified).
        target: Sequence the path leads to (not modified).

    Returns:
        Intermediate sequences in the order they were produced; between 0 and
        ``len(target) - 1`` of them. Neither endpoint is added separately.
    """
    current = list(source)
    path: List[List[int]] = []
    for i, job in enumerate(target):
        if current[i] == job:
            continue
        current = move_job(current, current.index(job), i)
        path.append(list(current))
    return path
