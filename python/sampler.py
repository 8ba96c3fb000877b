import logging
import time

import numpy as np

from intervals import Interval, map_intervals

logger = logging.getLogger(__name__)

# Native range of the raw generator, same as a 32-bit C rand()
RAND_MAX = 0x7FFFFFFF
RAND_INTERVAL = Interval(0.0, float(RAND_MAX))

# Raw draws are converted this many at a time to bound temporaries
CHUNK_SIZE = 1 << 20


def make_rng(seed=None):
    if seed is None:
        seed = int(time.time())
    logger.debug("Seeding generator with %d", seed)
    return np.random.default_rng(seed), seed


def uniform_sample(interval, samples, rng):
    """Fill samples in place with uniform draws over interval and return it."""
    size = len(samples)
    for start in range(0, size, CHUNK_SIZE):
        end = min(start + CHUNK_SIZE, size)
        raw = rng.integers(0, RAND_MAX, size=end - start, dtype=np.int64)
        samples[start:end] = map_intervals(raw.astype(samples.dtype),
                                           RAND_INTERVAL,
                                           interval)
    return samples
