"""Neighborhood moves for the flow shop local search.

Structure:
- common.py: shared moves (swap_jobs, move_job)
- adjacent.py: adjacent swap neighborhood and the local search step
"""

from flowshop.neighborhoods.adjacent import (
    best_adjacent_neighbor,
    generate_neighbors_adjacent,
    improve,
)
from flowshop.neighborhoods.common import move_job, swap_jobs

__all__ = [
    # Common
    "swap_jobs",
    "move_job",
    # Adjacent neighborhood
    "generate_neighbors_adjacent",
    "best_adjacent_neighbor",
    "improve",
]
