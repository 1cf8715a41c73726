"""Parser for Taillard's permutation flow shop benchmark files.

Each instance in a file looks like::

    number of jobs, number of machines, initial seed, upper bound and lower bound :
              20           5   873654221        1278        1232
    processing times :
     54 83 15 71 77 36 53 38 27 87 76 91 14 29 12 77 32 87 68 94
     ...

with one row of ``jobs`` integers per machine. A file may hold several
instances one after another.
"""

import os

from flowshop.models import Problem


def parse_taillard_text(text: str, name: str = "", instance_number: int = 0) -> Problem:
    instances = []
    lines = iter([line.strip() for line in text.splitlines() if line.strip()])

    for line in lines:
        if line.startswith("number of jobs"):
            try:
                header = next(lines).split()
                jobs, machines, seed, upper_bound, lower_bound = map(int, header)
                next(lines)  # skip "processing times :"
                processing_times = [list(map(int, next(lines).split())) for _ in range(machines)]
            except StopIteration as e:
                raise ValueError(f"Truncated instance #{len(instances)} in {name!r}") from e
            except ValueError as e:
                raise ValueError(f"Malformed instance #{len(instances)} in {name!r}: {e}") from e

            instances.append(
                {
                    "jobs": jobs,
                    "machines": machines,
                    "seed": seed,
                    "upper_bound": upper_bound,
                    "lower_bound": lower_bound,
                    "processing_times": processing_times,
                }
            )

    if not instances:
        raise ValueError(f"No Taillard instance found in {name!r}")
    if instance_number < 0 or instance_number >= len(instances):
        raise IndexError(f"instance_number {instance_number} out of range")

    info = instances[instance_number]
    return Problem(
        number_of_jobs=info["jobs"],
        number_of_machines=info["machines"],
        processing_times=info["processing_times"],
        bound_lower=info["lower_bound"],
        bound_upper=info["upper_bound"],
        name=name if instance_number == 0 else f"{name}#{instance_number}",
    )


def parse_taillard_data(file_path: str, instance_number: int = 0) -> Problem:
    """Read one instance from a Taillard benchmark file.

    Args:
        file_path: Path to the benchmark file.
        instance_number: Index of the instance inside the file (0-based).

    Returns:
        Problem named after the file (``<stem>#<k>`` for k > 0).

    Raises:
        ValueError: Missing or malformed instance data.
        IndexError: ``instance_number`` out of range.
        InvalidProblemShape: Row lengths disagree with the header.
    """
    with open(file_path, "r", encoding="utf-8") as f:
        text = f.read()
    name = os.path.splitext(os.path.basename(file_path))[0]
    return parse_taillard_text(text, name=name, instance_number=instance_number)
