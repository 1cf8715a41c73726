"""Pytest configuration, shared fixtures & custom summary hook.

Also ensures the project root is on sys.path so ``import flowshop`` works
without installing the package.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path so 'import flowshop.*' works
_root = Path(__file__).resolve().parents[1]
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))

from flowshop.models import Problem  # noqa: E402
from flowshop.parser import parse_taillard_data  # noqa: E402

FIXTURES = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture
def small_problem() -> Problem:
    """3 jobs x 2 machines instance with hand-checked schedules."""
    return Problem(
        number_of_jobs=3,
        number_of_machines=2,
        processing_times=[[2, 3, 1], [1, 2, 4]],
        name="small",
    )


@pytest.fixture
def ta001() -> Problem:
    """Taillard 20x5 instance #1 (bounds 1232..1278)."""
    return parse_taillard_data(str(FIXTURES / "ta001"))


def pytest_terminal_summary(
    terminalreporter: pytest.TerminalReporter,
    exitstatus: int,
    config: pytest.Config,
) -> None:  # noqa: D401
    """Append a compact custom summary at the end of test session."""
    stats = terminalreporter.stats
    passed = len(stats.get("passed", []))
    failed = len(stats.get("failed", []))
    errors = len(stats.get("error", []))
    skipped = len(stats.get("skipped", []))

    terminalreporter.section("Custom summary", sep="=")
    terminalreporter.write_line(
        f"Passed: {passed} | Failed: {failed} | Errors: {errors} | Skipped: {skipped}"
    )
    if failed:
        terminalreporter.write_line("Failed tests:")
        for rep in stats["failed"]:
            terminalreporter.write_line(f"  - {rep.nodeid}")
