"""Decomposition of a span of seconds into sign, hours, minutes and sub-seconds."""

from __future__ import annotations

import enum
import math
import sys
from dataclasses import dataclass
from fractions import Fraction

_NS_PER_SEC = 1_000_000_000


class Sign(enum.StrEnum):
    NEG = "neg"
    ZERO = "zero"
    POS = "pos"


@dataclass(frozen=True)
class Parts:
    """Structured view of a span.

    ``hr`` is unbounded: whole days are folded into hours.
    """

    sign: Sign = Sign.ZERO
    hr: int = 0
    min: int = 0
    sec: int = 0
    ms: int = 0
    us: int = 0
    ns: int = 0


def to_parts(seconds: float) -> Parts:
    """Split ``seconds`` into parts, rounding to the nearest nanosecond.

    Ties round away from zero. Infinite spans keep their sign and saturate
    ``hr``; NaN decomposes like zero.
    """
    if math.isnan(seconds):
        return Parts()
    sign = Sign.NEG if seconds < 0 else Sign.POS
    if math.isinf(seconds):
        return Parts(sign=sign, hr=sys.maxsize)

    # Exact rational arithmetic, so only the final nanosecond is rounded.
    total_ns = math.floor(abs(Fraction(seconds)) * _NS_PER_SEC + Fraction(1, 2))
    if total_ns == 0:
        return Parts()

    total_us, ns = divmod(total_ns, 1000)
    total_ms, us = divmod(total_us, 1000)
    total_sec, ms = divmod(total_ms, 1000)
    total_min, sec = divmod(total_sec, 60)
    hr, min_ = divmod(total_min, 60)
    return Parts(sign=sign, hr=hr, min=min_, sec=sec, ms=ms, us=us, ns=ns)


def create(
    sign: Sign = Sign.POS,
    hr: int = 0,
    min: int = 0,
    sec: int = 0,
    ms: int = 0,
    us: int = 0,
    ns: int = 0,
) -> float:
    """Rebuild a span of seconds from its parts.

    ``Sign.ZERO`` yields zero whatever the numeric fields hold.
    """
    if sign == Sign.ZERO:
        return 0.0
    total_ns = ((((hr * 60 + min) * 60 + sec) * 1000 + ms) * 1000 + us) * 1000 + ns
    # int / int is correctly rounded, unlike summing the scaled fields.
    try:
        magnitude = total_ns / _NS_PER_SEC
    except OverflowError:
        magnitude = math.inf
    return -magnitude if sign == Sign.NEG else magnitude
