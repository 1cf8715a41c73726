"""Core data structures for permutation flow shop instances.

This module defines:
    Problem             -- immutable instance (processing times + bounds).
    Candidate           -- lightweight (sequence, makespan) population member.
    ScheduledJob        -- single operation with timing data.
    Solution            -- full timing table of the reported sequence.
    ScatterSearchConfig -- scatter search hyper-parameters.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence, Union

from flowshop.errors import DegenerateProblem, InvalidProblemShape

Number = Union[int, float]


@dataclass(frozen=True)
class Problem:
    """Immutable representation of a permutation flow shop instance.

    Attributes:
        number_of_jobs: Number of jobs (n).
        number_of_machines: Number of machines (m).
        processing_times: Nested list ``processing_times[machine][job]``; rows are
            copied on construction.
        bound_lower: Optional lower bound of the optimal makespan.
        bound_upper: Optional upper bound (best known makespan).
        name: Instance identifier.

    Raises:
        DegenerateProblem: If there are no jobs or no machines.
        InvalidProblemShape: If the matrix shape disagrees with the declared
            sizes or a processing time is negative.
    """

    number_of_jobs: int
    number_of_machines: int
    processing_times: list[list[Number]]
    bound_lower: Optional[Number] = None
    bound_upper: Optional[Number] = None
    name: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "processing_times", [list(row) for row in self.processing_times])
        if self.number_of_jobs <= 0 or self.number_of_machines <= 0:
            raise DegenerateProblem(
                f"Instance needs at least one job and one machine, got "
                f"jobs={self.number_of_jobs} machines={self.number_of_machines}"
            )
        if len(self.processing_times) != self.number_of_machines:
            raise InvalidProblemShape(
                f"Expected {self.number_of_machines} machine rows, "
                f"got {len(self.processing_times)}"
            )
        for machine, row in enumerate(self.processing_times):
            if len(row) != self.number_of_jobs:
                raise InvalidProblemShape(
                    f"Machine {machine}: expected {self.number_of_jobs} processing times, "
                    f"got {len(row)}"
                )
            if any(p < 0 for p in row):
                raise InvalidProblemShape(f"Machine {machine}: negative processing time")

    @classmethod
    def from_matrix(
        cls,
        processing_times: Sequence[Sequence[Number]],
        name: str = "",
        bound_lower: Optional[Number] = None,
        bound_upper: Optional[Number] = None,
    ) -> "Problem":
        """Build a Problem inferring sizes from a ``[machine][job]`` matrix."""
        rows = list(processing_times)
        jobs = len(rows[0]) if rows else 0
        return cls(
            number_of_jobs=jobs,
            number_of_machines=len(rows),
            processing_times=rows,
            bound_lower=bound_lower,
            bound_upper=bound_upper,
            name=name,
        )


@dataclass
class Candidate:
    """Population member: a job sequence and its makespan.

    ``makespan`` stays ``None`` until the sequence has been evaluated.
    """

    sequence: list[int]
    makespan: Optional[Number] = None


@dataclass(frozen=True)
class ScheduledJob:
    """Single scheduled operation.

    Fields:
        start: Start time of the operation.
        end: Completion time (start + process_time).
        process_time: Duration of the operation.
        name: Job identifier (job index).
    """

    start: Number
    end: Number
    process_time: Number
    name: int


@dataclass
class Solution:
    """Reported schedule.

    Fields:
        sequence: Job order.
        makespan: Completion time of the last job on the last machine.
        jobs: ``jobs[machine][position]`` timing table.
        cmax_history: Best makespan after the initial improvement and after
            every completed iteration (empty unless produced by a search).
        time_history_ms: Elapsed milliseconds matching ``cmax_history``.
    """

    sequence: list[int]
    makespan: Number
    jobs: list[list[ScheduledJob]] = field(default_factory=list)
    cmax_history: list[Number] = field(default_factory=list)
    time_history_ms: list[int] = field(default_factory=list)


@dataclass(slots=True)
class ScatterSearchConfig:
    """Scatter search hyper-parameters.

    Attributes:
        pop_size: Population size kept after every combination step.
        iter_limit: Number of reference-update/combine/improve rounds.
        ref_good: Reference set members picked by best makespan.
        ref_diverse: Reference set members picked by worst makespan.
    """

    pop_size: int = 10
    iter_limit: int = 3
    ref_good: int = 2
    ref_diverse: int = 2

    def __post_init__(self) -> None:
        if self.pop_size <= 0:
            raise ValueError(f"pop_size must be positive, got {self.pop_size}")
        if self.iter_limit < 0:
            raise ValueError(f"iter_limit must be non-negative, got {self.iter_limit}")
        if self.ref_good < 0 or self.ref_diverse < 0:
            raise ValueError(
                f"ref sizes must be non-negative, got good={self.ref_good} "
                f"diverse={self.ref_diverse}"
            )
