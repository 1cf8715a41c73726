from typing import List, Sequence

from flowshop.models import Number


def c_max(pi: Sequence[int], processing_times: List[List[Number]]) -> Number:
    # number of machines
    m = len(processing_times)
    # number of scheduled jobs (partial sequences are fine)
    n = len(pi)
    if n == 0:
        return 0

    # completion times of the previous machine, position by position
    previous = [0] * n
    for i in range(m):
        row = processing_times[i]
        current = [0] * n
        end = 0
        for k in range(n):
            # the job can start only after the previous job on the same machine
            # and after the same job on the previous machine
            start = previous[k] if previous[k] > end else end
            end = start + row[pi[k]]
            current[k] = end
        previous = current

    # C_max is the completion time of the last job on the last machine
    return previous[n - 1]


def total_job_times(processing_times: List[List[Number]]) -> List[Number]:
    """Sum of each job's processing times over all machines."""
    n = len(processing_times[0])
    totals = [0] * n
    for row in processing_times:
        for j in range(n):
            totals[j] += row[j]
    return totals
