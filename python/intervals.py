from collections import namedtuple

# Closed range [low, high]; low <= high is up to the caller
Interval = namedtuple('Interval', ['low', 'high'])


def map_intervals(x, interval_from, interval_to):
    """Affine remap of x from interval_from onto interval_to.

    Works on scalars and numpy arrays alike. interval_from must not be
    degenerate (low == high divides by zero).
    """
    x = x - interval_from[0]
    x = x / (interval_from[1] - interval_from[0])
    x = x * (interval_to[1] - interval_to[0])
    return x + interval_to[0]
