import enum
import logging
from concurrent.futures import ThreadPoolExecutor, wait
from dataclasses import dataclass
from typing import Optional

import numpy as np

from errors import (AllocationFailure, InvalidSampleCount,
                    InvalidThreadCount, WorkerFailure)
from integrands import get_integrand
from partition import partition_samples
from reduction import monte_carlo_integrate, monte_carlo_integrate_thread
from sampler import make_rng, uniform_sample
from timing import Timer

logger = logging.getLogger(__name__)


class Phase(enum.Enum):
    CONFIGURING = 'configuring'
    SAMPLING = 'sampling'
    REDUCING = 'reducing'
    DONE = 'done'


@dataclass(frozen=True)
class IntegrationResult:
    estimate: float
    elapsed_seconds: float
    cpu_seconds: float
    wall_seconds: float
    num_samples: int
    num_threads: int
    seed: Optional[int] = None
    partial_sums: tuple = ()
    samples: Optional[np.ndarray] = None


def allocate_samples(size, dtype=np.float64):
    try:
        return np.empty(size, dtype=dtype)
    except (MemoryError, ValueError) as exc:
        raise AllocationFailure(
            f"could not allocate {size} samples") from exc


def _enter(phase):
    logger.debug("Phase: %s", phase.value)


def _check_counts(total_samples, num_workers):
    if total_samples < 0:
        raise InvalidSampleCount(
            f"SAMPLES must be non-negative, got {total_samples}")
    if num_workers < 1:
        raise InvalidThreadCount(
            f"I need at least 1 thread, got {num_workers}")


def reduce_parallel(integrand, samples, num_workers):
    """Fan out one WorkItem per thread, join all, sum, divide once."""
    size = len(samples)
    items = partition_samples(size, num_workers, integrand)

    futures = []
    with ThreadPoolExecutor(max_workers=num_workers) as executor:
        try:
            for item in items:
                futures.append(
                    executor.submit(monte_carlo_integrate_thread, samples, item))
        except RuntimeError as exc:
            # Thread could not be started
            raise WorkerFailure(len(futures), repr(exc)) from exc
        wait(futures)

    total = 0.0
    for t, (future, item) in enumerate(zip(futures, items)):
        exc = future.exception()
        if exc is not None:
            raise WorkerFailure(t, repr(exc)) from exc
        total += item.partial_sum

    estimate = total / size if size else 0.0
    return estimate, tuple(item.partial_sum for item in items)


def integrate(integrand, total_samples, num_workers, rng, keep_samples=False):
    """Sample the integrand's domain and reduce to a mean.

    Returns (estimate, timer, partial_sums, samples). num_workers == 1
    never touches the thread pool.
    """
    _enter(Phase.CONFIGURING)
    _check_counts(total_samples, num_workers)
    samples = allocate_samples(total_samples)

    with Timer() as timer:
        _enter(Phase.SAMPLING)
        uniform_sample(integrand.domain(), samples, rng)

        _enter(Phase.REDUCING)
        if num_workers == 1:
            logger.debug("Running sequential version")
            estimate = monte_carlo_integrate(integrand, samples)
            partial_sums = ()
        else:
            logger.debug("Running parallel version")
            estimate, partial_sums = reduce_parallel(integrand, samples,
                                                     num_workers)
    _enter(Phase.DONE)

    return estimate, timer, partial_sums, samples if keep_samples else None


def validate_request(total_samples, function_id, num_workers):
    """Reject bad input before anything is allocated or drawn."""
    _check_counts(total_samples, num_workers)
    return get_integrand(function_id)


def monte_carlo_operation(total_samples, function_id, num_workers, seed=None,
                          keep_samples=False):
    integrand = validate_request(total_samples, function_id, num_workers)
    rng, seed = make_rng(seed)

    estimate, timer, partial_sums, samples = integrate(
        integrand, total_samples, num_workers, rng, keep_samples=keep_samples)

    return IntegrationResult(
        estimate=estimate,
        elapsed_seconds=timer.elapsed_seconds,
        cpu_seconds=timer.cpu_seconds,
        wall_seconds=timer.wall_seconds,
        num_samples=total_samples,
        num_threads=num_workers,
        seed=seed,
        partial_sums=partial_sums,
        samples=samples,
    )
