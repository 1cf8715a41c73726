"""Construction heuristics for the permutation flow shop.

Structure:
- common.py: shared helpers (make_candidate, stable orderings)
- neh.py: NEH insertion
- palmer.py: Palmer's slope index
- spt.py: shortest total processing time
- johnson.py: Johnson's rule (two machines)
- cds.py: Campbell-Dudek-Smith surrogates solved with Johnson's rule

Every heuristic takes a Problem and returns one evaluated Candidate.
"""

from flowshop.heuristics.cds import cds, surrogate_problems
from flowshop.heuristics.common import make_candidate, order_ascending, order_descending
from flowshop.heuristics.johnson import johnson, johnsons_rule
from flowshop.heuristics.neh import best_insertion, neh
from flowshop.heuristics.palmer import palmer, slope_indices
from flowshop.heuristics.spt import spt

# Seeds appended to the scatter search population, in this order.
SEED_HEURISTICS = {
    "neh": neh,
    "palmer": palmer,
    "spt": spt,
    "cds": cds,
}

__all__ = [
    "SEED_HEURISTICS",
    # Common
    "make_candidate",
    "order_ascending",
    "order_descending",
    # Heuristics
    "neh",
    "best_insertion",
    "palmer",
    "slope_indices",
    "spt",
    "johnson",
    "johnsons_rule",
    "cds",
    "surrogate_problems",
]
