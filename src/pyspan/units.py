"""Units of time and their exact conversion factors to seconds."""

from __future__ import annotations

import enum


class Unit(enum.IntEnum):
    """Units of time, ordered by increasing magnitude."""

    NANOSECOND = 0
    MICROSECOND = 1
    MILLISECOND = 2
    SECOND = 3
    MINUTE = 4
    HOUR = 5
    DAY = 6

    @property
    def suffix(self) -> str:
        return _SUFFIXES[self]

    @classmethod
    def of_suffix(cls, suffix: str) -> Unit:
        unit = _UNIT_BY_SUFFIX.get(suffix)
        if unit is None:
            raise ValueError(
                f"unknown unit suffix: {suffix!r}. "
                f"Available: {', '.join(SUFFIXES_LONGEST_FIRST)}"
            )
        return unit


# Units below the second are scaled by exact divisors, units above it by
# exact multipliers, so every conversion is a single correctly rounded
# operation.
_DIVISORS: dict[Unit, float] = {
    Unit.NANOSECOND: 1e9,
    Unit.MICROSECOND: 1e6,
    Unit.MILLISECOND: 1e3,
}

_MULTIPLIERS: dict[Unit, float] = {
    Unit.SECOND: 1.0,
    Unit.MINUTE: 60.0,
    Unit.HOUR: 3600.0,
    Unit.DAY: 86400.0,
}

# Constructors scale by the length of one unit in seconds. Below the second
# that factor is itself rounded, so `3 * 1e-6` and `3 / 1e6` can differ by
# an ULP; the parser divides, constructors multiply.
_SECONDS_PER_UNIT: dict[Unit, float] = {
    Unit.NANOSECOND: 1e-9,
    Unit.MICROSECOND: 1e-6,
    Unit.MILLISECOND: 1e-3,
    Unit.SECOND: 1.0,
    Unit.MINUTE: 60.0,
    Unit.HOUR: 3600.0,
    Unit.DAY: 86400.0,
}

_SUFFIXES: dict[Unit, str] = {
    Unit.NANOSECOND: "ns",
    Unit.MICROSECOND: "us",
    Unit.MILLISECOND: "ms",
    Unit.SECOND: "s",
    Unit.MINUTE: "m",
    Unit.HOUR: "h",
    Unit.DAY: "d",
}

_UNIT_BY_SUFFIX: dict[str, Unit] = {suffix: unit for unit, suffix in _SUFFIXES.items()}

ALL_UNITS: tuple[Unit, ...] = tuple(Unit)
"""All units in ascending order of magnitude."""

SUFFIXES_LONGEST_FIRST: tuple[str, ...] = tuple(
    sorted(_UNIT_BY_SUFFIX, key=lambda s: (-len(s), s))
)


def to_seconds(unit: Unit, magnitude: float) -> float:
    """Convert a magnitude expressed in ``unit`` to seconds."""
    divisor = _DIVISORS.get(unit)
    if divisor is not None:
        return magnitude / divisor
    return magnitude * _MULTIPLIERS[unit]


def scale_to_seconds(unit: Unit, magnitude: float) -> float:
    """Multiply ``magnitude`` by the length of one ``unit`` in seconds."""
    return magnitude * _SECONDS_PER_UNIT[unit]


def of_seconds(unit: Unit, seconds: float) -> float:
    """Express a number of seconds as a magnitude in ``unit``."""
    divisor = _DIVISORS.get(unit)
    if divisor is not None:
        return seconds * divisor
    return seconds / _MULTIPLIERS[unit]


def primary_unit(seconds: float) -> Unit:
    """Return the largest unit in which ``|seconds|`` is at least 1.

    Falls back to nanoseconds for magnitudes below one nanosecond.
    """
    magnitude = abs(seconds)
    for unit in reversed(ALL_UNITS):
        if of_seconds(unit, magnitude) >= 1.0:
            return unit
    return Unit.NANOSECOND
