"""Core package for permutation flow shop scatter search.

Exports base data structures, parsing and the search entry point.
"""

from flowshop.algorithms.scatter_search import scatter_search  # noqa: F401
from flowshop.errors import (  # noqa: F401
    DegenerateProblem,
    FlowshopError,
    InvalidProblemShape,
    NonPermutationSequence,
    ReferenceSetUnderflow,
)
from flowshop.evaluation import evaluate, evaluate_full  # noqa: F401
from flowshop.models import (  # noqa: F401
    Candidate,
    Problem,
    ScatterSearchConfig,
    ScheduledJob,
    Solution,
)
from flowshop.parser import parse_taillard_data  # noqa: F401

__all__ = [
    "Problem",
    "Candidate",
    "ScheduledJob",
    "Solution",
    "ScatterSearchConfig",
    "FlowshopError",
    "InvalidProblemShape",
    "DegenerateProblem",
    "ReferenceSetUnderflow",
    "NonPermutationSequence",
    "evaluate",
    "evaluate_full",
    "parse_taillard_data",
    "scatter_search",
]
