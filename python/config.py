import os
from dataclasses import dataclass
from typing import Optional

from errors import UsageError

USAGE_MESSAGE = "usage: monte_carlo SAMPLES FUNCTION_ID N_THREADS"

_TRUTHY = {'1', 'true', 'yes', 'on'}


def _flag(environ, name):
    return environ.get(name, '').strip().lower() in _TRUTHY


def _int_arg(value, name):
    try:
        return int(value)
    except ValueError:
        raise UsageError(f"{name} must be an integer, got {value!r}") from None


@dataclass(frozen=True)
class RunConfig:
    samples: int
    function_id: int
    threads: int
    debug: bool = False
    verbose: bool = False
    seed: Optional[int] = None

    @classmethod
    def from_argv(cls, argv, environ=None):
        """Build a config from positional args (program name excluded)."""
        if environ is None:
            environ = os.environ
        if len(argv) != 3:
            raise UsageError(f"expected 3 arguments, got {len(argv)}")

        seed = environ.get('MONTE_CARLO_SEED')
        return cls(
            samples=_int_arg(argv[0], 'SAMPLES'),
            function_id=_int_arg(argv[1], 'FUNCTION_ID'),
            threads=_int_arg(argv[2], 'N_THREADS'),
            debug=_flag(environ, 'MONTE_CARLO_DEBUG'),
            verbose=_flag(environ, 'MONTE_CARLO_VERBOSE'),
            seed=_int_arg(seed, 'MONTE_CARLO_SEED') if seed else None,
        )
