import random

from flowshop.models import Problem


def generate_taillard_instance(n: int, m: int, seed: int = 0) -> Problem:
    """Generate a Taillard benchmark-like flow shop instance (times in 1..99)."""
    rng = random.Random(seed)
    processing_times = [
        [rng.randint(1, 99) for _ in range(n)] for _ in range(m)  # n jobs  # m machines
    ]
    return Problem(
        number_of_jobs=n,
        number_of_machines=m,
        processing_times=processing_times,
        name=f"generated_taillard_m{m}_n{n}_seed{seed}",
    )
