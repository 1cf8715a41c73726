"""Common moves for Flow Shop neighborhoods.

This module contains basic operations used by local search and path relinking:
- swap_jobs: swap two elements in a permutation
- move_job: remove an element and reinsert it at another position
"""

from typing import List


def swap_jobs(pi: List[int], i: int, j: int) -> List[int]:
    """Return a new permutation with elements at positions i and j swapped.

    Args:
        pi: Input permutation
        i: First position
        j: Second position

    Returns:
        New permutation with swapped elements
    """
    neighbor = pi.copy()
    neighbor[i], neighbor[j] = neighbor[j], neighbor[i]
    return neighbor


def move_job(pi: List[int], source: int, target: int) -> List[int]:
    """Return a new permutation with the element at ``source`` moved to ``target``.

    Insertion move: every element between the two positions shifts by one.

    Args:
        pi: Input permutation
        source: Current position of the element
        target: Position the element ends up at

    Returns:
        New permutation after the move
    """
    neighbor = pi.copy()
    job = neighbor.pop(source)
    neighbor.insert(target, job)
    return neighbor
