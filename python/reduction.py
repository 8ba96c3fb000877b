import numpy as np

# Integrand values are evaluated this many at a time
CHUNK_SIZE = 1 << 16


def sum_range(f, samples, start, end):
    total = 0.0
    for lo in range(start, end, CHUNK_SIZE):
        hi = min(lo + CHUNK_SIZE, end)
        total += float(np.sum(f(samples[lo:hi])))
    return total


def monte_carlo_integrate(integrand, samples):
    size = len(samples)
    if size == 0:
        return 0.0
    return sum_range(integrand.evaluate, samples, 0, size) / size


def monte_carlo_integrate_thread(samples, work_item):
    # Raw sum only, the caller divides once by the full sample count
    work_item.partial_sum = sum_range(work_item.integrand.evaluate,
                                      samples,
                                      work_item.start,
                                      work_item.end)
    return work_item.partial_sum
