import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass
class WorkItem:
    start: int
    end: int
    integrand: object
    # Written once by the worker that owns this item
    partial_sum: Optional[float] = None

    def __len__(self):
        return self.end - self.start


def partition_samples(size, num_threads, integrand):
    """Split [0, size) into num_threads contiguous slices.

    Every worker gets size // num_threads samples and the last one also
    takes the remainder. With more threads than samples all but the last
    slice are empty.
    """
    samples_per_thread = size // num_threads
    items = []
    for t in range(num_threads):
        start = t * samples_per_thread
        end = start + samples_per_thread if t < num_threads - 1 else size
        items.append(WorkItem(start, end, integrand))

    logger.debug("Partitioned %d samples into %d slices of %d (last: %d)",
                 size, num_threads, samples_per_thread, len(items[-1]))
    return items
