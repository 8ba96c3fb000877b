import numpy as np

from errors import InvalidIntegrandIndex
from intervals import Interval


class Integrand:
    def __init__(self, name, f, interval):
        self.name = name
        self._f = f
        self._interval = Interval(*interval)

    def domain(self):
        return self._interval

    def evaluate(self, x):
        return self._f(x)

    def __repr__(self):
        return f"Integrand({self.name!r}, {self._interval})"


def f1(x):
    # Grows without bound as x -> 1; the mean over [0, 1] is pi
    return 2 / np.sqrt(1 - x * x)


FUNCTIONS = (
    Integrand('2/sqrt(1-x^2)', f1, (0.0, 1.0)),
)


def get_integrand(function_id):
    if not 0 <= function_id < len(FUNCTIONS):
        raise InvalidIntegrandIndex(
            f"FUNCTION_ID must in [0,{len(FUNCTIONS) - 1}], got {function_id}")
    return FUNCTIONS[function_id]
