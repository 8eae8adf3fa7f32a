"""Example spans shared by the test modules."""

import math
import random
import struct

from pyspan import Duration, Unit

PI = math.pi

MAGNITUDES = [
    5e-324,
    2.2250738585072014e-308,
    1e-100,
    1e19,
    1e100,
    1.7976931348623157e308,
]

SPAN_EXAMPLES = [Duration(0.0)] + [
    Duration.of_unit(unit, sign * factor)
    for unit in Unit
    for factor in (1.0, PI)
    for sign in (1.0, -1.0)
]

MAGNITUDE_EXAMPLES = [
    Duration(sign * value)
    for value in MAGNITUDES + [m * PI for m in MAGNITUDES[:-1]]
    for sign in (1.0, -1.0)
]


def random_finite_spans(count, seed=0x5EED):
    """Finite spans from uniformly random 64-bit patterns, covering every exponent."""
    rng = random.Random(seed)
    spans = []
    while len(spans) < count:
        (value,) = struct.unpack("<d", rng.getrandbits(64).to_bytes(8, "little"))
        if math.isfinite(value):
            spans.append(Duration(value))
    return spans


def spans_near_powers_of_ten(ulps=3):
    """Spans within a few ULPs of 10**k in every unit, where digit counts change."""
    spans = []
    for unit in Unit:
        for exponent in range(-3, 16):
            center = Duration.of_unit(unit, 10.0**exponent)
            below = above = center
            spans.append(center)
            for _ in range(ulps):
                below = below.prev()
                above = above.next()
                spans.extend([below, above])
    return spans


def span_id(span):
    return repr(span.seconds)


def bounded_spans(low_exponent, high_exponent, count, seed=0x5EED):
    """Spans with ``2**low_exponent < |span| < 2**high_exponent``.

    The binary exponent is drawn uniformly, so every octave in the range
    gets the same share of samples.
    """
    rng = random.Random(seed)
    low = math.ldexp(1.0, low_exponent)
    high = math.ldexp(1.0, high_exponent) if high_exponent <= 1023 else math.inf
    spans = []
    while len(spans) < count:
        mantissa = 1.0 + rng.getrandbits(52) / 2.0**52
        value = math.ldexp(mantissa, rng.randrange(low_exponent, high_exponent))
        if low < value < high:
            spans.append(Duration(rng.choice((1.0, -1.0)) * value))
    return spans
