"""Error kinds raised by the flowshop core.

All of them are ``ValueError`` subclasses: they signal bad input (a malformed
instance, an impossible configuration or a corrupted sequence) and are never
recovered inside the search.
"""


class FlowshopError(ValueError):
    """Base class for precondition violations in the flowshop core."""


class InvalidProblemShape(FlowshopError):
    """Processing-time matrix does not match the declared jobs/machines."""


class DegenerateProblem(FlowshopError):
    """Instance with zero jobs or zero machines."""


class ReferenceSetUnderflow(FlowshopError):
    """Reference set asks for more members than the population holds."""


class NonPermutationSequence(FlowshopError):
    """Sequence is not a permutation of ``0..number_of_jobs-1``."""
