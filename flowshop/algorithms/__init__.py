"""Search algorithms module for flow shop scheduling problem.

Contains:
- Scatter Search (population, reference set, path relinking)
"""

from flowshop.algorithms.path_relinking import path_relinking
from flowshop.algorithms.scatter_search import (
    combine,
    improve_population,
    initialize_population,
    reference_set_update,
    scatter_search,
    subset_generation,
)

__all__ = [
    "scatter_search",
    "initialize_population",
    "improve_population",
    "reference_set_update",
    "subset_generation",
    "combine",
    "path_relinking",
]
