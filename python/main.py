#!/usr/bin/env python3
import logging
import sys

import numpy as np

from config import USAGE_MESSAGE, RunConfig
from errors import MonteCarloError, UsageError
from monte_carlo import monte_carlo_operation


def format_array(values):
    body = ", ".join(f"{v:.6f}" for v in values)
    return f"array of size [{len(values)}]: [{body}]"


def print_debug_header(config):
    print("Running on: [debug mode]")
    print(f"Samples: [{config.samples}]")
    print(f"Function id: [{config.function_id}]")
    print(f"Threads: [{config.threads}]")
    footprint = config.samples * np.dtype(np.float64).itemsize / 1e9
    print(f"Array size on memory: [{footprint:.2f}GB]")
    if config.threads == 1:
        print("Running sequential version")
    else:
        print("Running parallel version")


def report(config, result):
    if config.debug:
        print_debug_header(config)
        if config.verbose:
            if result.partial_sums:
                print(format_array(result.partial_sums))
            print(format_array(result.samples))
            print(f"Estimate: [{result.estimate:.33f}]")
        print(f"{result.estimate:.16f}, "
              f"[{result.cpu_seconds:f}, clock], "
              f"[{result.elapsed_seconds:f}, clock_gettime], "
              f"[{result.wall_seconds:f}, gettimeofday]")
    else:
        print(f"{result.estimate:.16f}, {result.elapsed_seconds:f}")


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    try:
        config = RunConfig.from_argv(argv)
    except UsageError as e:
        print(f"Error: {e}")
        print(USAGE_MESSAGE)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if config.debug else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        result = monte_carlo_operation(config.samples,
                                       config.function_id,
                                       config.threads,
                                       seed=config.seed,
                                       keep_samples=config.debug and config.verbose)
    except MonteCarloError as e:
        print(f"Error: {e}")
        print(USAGE_MESSAGE)
        return 1

    report(config, result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
