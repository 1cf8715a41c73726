"""Common structures and helper functions for search algorithms."""

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Iterator, List

from flowshop.models import Candidate, Number

logger = logging.getLogger("flowshop.scatter")


@dataclass
class SearchState:
    """State of a single scatter search run.

    Created fresh for every call so that nothing is shared between runs.
    """

    population: List[Candidate] = field(default_factory=list)
    best_history: List[Number] = field(default_factory=list)
    time_history_ms: List[int] = field(default_factory=list)
    start_time: float = 0.0
    iteration: int = 0

    def sort_population(self) -> None:
        """Stable sort of the population by ascending makespan."""
        self.population.sort(key=lambda c: c.makespan)

    def best(self) -> Candidate:
        """Population member with the smallest makespan (first one on ties)."""
        return min(self.population, key=lambda c: c.makespan)

    def worst(self) -> Candidate:
        return max(self.population, key=lambda c: c.makespan)

    def record_best(self) -> Number:
        """Append the current best makespan to the history and return it."""
        best = self.best().makespan
        self.best_history.append(best)
        self.time_history_ms.append(self.elapsed_ms())
        return best

    def elapsed_ms(self) -> int:
        """Return elapsed time from start in ms."""
        return int((time.time() - self.start_time) * 1000)


@contextmanager
def open_log_file(path: str | None, algo_name: str) -> Iterator[Any]:
    """Context manager for the per-iteration CSV trace."""
    log_file = None
    if path:
        try:
            log_file = open(path, "w", encoding="utf-8")
            log_file.write(
                "iteration,elapsed_ms,best_makespan,worst_makespan,population_size,best_sequence\n"
            )
        except OSError as e:
            logger.warning("[%s] Failed to open log file %s: %s", algo_name, path, e)
            log_file = None
    try:
        yield log_file
    finally:
        if log_file:
            log_file.close()


def log_iteration(log_file: Any, state: SearchState) -> None:
    """Write the current iteration to the trace file."""
    if log_file:
        best = state.best()
        sequence_str = " ".join(map(str, best.sequence))
        log_file.write(
            f"{state.iteration},{state.elapsed_ms()},{best.makespan},"
            f'{state.worst().makespan},{len(state.population)},"{sequence_str}"\n'
        )
