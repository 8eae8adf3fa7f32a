"""Duration value type: a signed span of time held as a double of seconds."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass

from pyspan._formatter import format_seconds
from pyspan._parser import parse_seconds
from pyspan.parts import Parts, Sign, create, to_parts
from pyspan.units import Unit, of_seconds, primary_unit, scale_to_seconds


def _compare_floats(a: float, b: float) -> int:
    """Total order: NaN equals NaN and sorts below everything else."""
    a_nan = math.isnan(a)
    b_nan = math.isnan(b)
    if a_nan or b_nan:
        return int(b_nan) - int(a_nan)
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


@dataclass(frozen=True, eq=False)
class Duration:
    """Immutable span of time.

    Arithmetic follows IEEE-754 and never raises: infinities and NaN
    propagate. NaN is a valid value meaning "not a duration".
    """

    seconds: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "seconds", float(self.seconds))

    # --- Construction ---

    @classmethod
    def of_unit(cls, unit: Unit, magnitude: float) -> Duration:
        return cls(scale_to_seconds(unit, magnitude))

    @classmethod
    def of_ns(cls, ns: float) -> Duration:
        return cls.of_unit(Unit.NANOSECOND, ns)

    @classmethod
    def of_us(cls, us: float) -> Duration:
        return cls.of_unit(Unit.MICROSECOND, us)

    @classmethod
    def of_ms(cls, ms: float) -> Duration:
        return cls.of_unit(Unit.MILLISECOND, ms)

    @classmethod
    def of_sec(cls, sec: float) -> Duration:
        return cls(sec)

    @classmethod
    def of_min(cls, minutes: float) -> Duration:
        return cls.of_unit(Unit.MINUTE, minutes)

    @classmethod
    def of_hr(cls, hours: float) -> Duration:
        return cls.of_unit(Unit.HOUR, hours)

    @classmethod
    def of_day(cls, days: float) -> Duration:
        return cls.of_unit(Unit.DAY, days)

    @classmethod
    def create(
        cls,
        sign: Sign = Sign.POS,
        hr: int = 0,
        min: int = 0,
        sec: int = 0,
        ms: int = 0,
        us: int = 0,
        ns: int = 0,
    ) -> Duration:
        """Build a span from parts. ``Sign.ZERO`` always gives :data:`ZERO`."""
        return cls(create(sign=sign, hr=hr, min=min, sec=sec, ms=ms, us=us, ns=ns))

    @classmethod
    def of_string(cls, text: str) -> Duration:
        """Parse text such as ``"1d2h"`` or ``"-3.5ms"``.

        Raises:
            SpanParseError: If the text is not a valid duration string.
        """
        return cls(parse_seconds(text))

    # --- Accessors ---

    def to_unit(self, unit: Unit) -> float:
        return of_seconds(unit, self.seconds)

    def to_ns(self) -> float:
        return self.to_unit(Unit.NANOSECOND)

    def to_us(self) -> float:
        return self.to_unit(Unit.MICROSECOND)

    def to_ms(self) -> float:
        return self.to_unit(Unit.MILLISECOND)

    def to_sec(self) -> float:
        return self.seconds

    def to_min(self) -> float:
        return self.to_unit(Unit.MINUTE)

    def to_hr(self) -> float:
        return self.to_unit(Unit.HOUR)

    def to_day(self) -> float:
        return self.to_unit(Unit.DAY)

    def to_unit_of_time(self) -> Unit:
        """Largest unit in which the magnitude is at least 1.

        Zero and NaN report seconds; sub-nanosecond spans report nanoseconds.
        """
        if self.seconds == 0 or math.isnan(self.seconds):
            return Unit.SECOND
        return primary_unit(self.seconds)

    def to_parts(self) -> Parts:
        return to_parts(self.seconds)

    def to_string(self) -> str:
        return format_seconds(self.seconds)

    def to_bytes(self) -> bytes:
        """Native-endian IEEE-754 encoding of the seconds value."""
        return struct.pack("=d", self.seconds)

    # --- Predicates ---

    def is_nan(self) -> bool:
        return math.isnan(self.seconds)

    def is_inf(self) -> bool:
        return math.isinf(self.seconds)

    def is_finite(self) -> bool:
        return math.isfinite(self.seconds)

    # --- Arithmetic ---

    def add(self, other: Duration) -> Duration:
        return Duration(self.seconds + other.seconds)

    def sub(self, other: Duration) -> Duration:
        return Duration(self.seconds - other.seconds)

    def neg(self) -> Duration:
        return Duration(-self.seconds)

    def abs(self) -> Duration:
        return Duration(math.fabs(self.seconds))

    def scale(self, by: float) -> Duration:
        return Duration(self.seconds * by)

    def div(self, by: float) -> Duration:
        """Divide by a scalar. Division by zero yields an infinity or NaN."""
        return Duration(_ieee_divide(self.seconds, float(by)))

    def ratio(self, other: Duration) -> float:
        return _ieee_divide(self.seconds, other.seconds)

    def next(self) -> Duration:
        """Smallest representable span strictly greater than this one."""
        return Duration(math.nextafter(self.seconds, math.inf))

    def prev(self) -> Duration:
        """Largest representable span strictly less than this one."""
        return Duration(math.nextafter(self.seconds, -math.inf))

    # --- Comparison ---

    def compare(self, other: Duration) -> int:
        return _compare_floats(self.seconds, other.seconds)

    def equal(self, other: Duration) -> bool:
        return self.compare(other) == 0

    def bit_equal(self, other: Duration) -> bool:
        """Bit-for-bit equality: distinguishes NaN and zero signs."""
        return self.to_bytes() == other.to_bytes()

    def min(self, other: Duration) -> Duration:
        return self if self.compare(other) <= 0 else other

    def max(self, other: Duration) -> Duration:
        return self if self.compare(other) >= 0 else other

    # --- Python protocol ---

    def __add__(self, other: Duration) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Duration) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.sub(other)

    def __neg__(self) -> Duration:
        return self.neg()

    def __abs__(self) -> Duration:
        return self.abs()

    def __mul__(self, by: float) -> Duration:
        if not isinstance(by, (int, float)):
            return NotImplemented
        return self.scale(by)

    def __rmul__(self, by: float) -> Duration:
        return self.__mul__(by)

    def __truediv__(self, other: Duration | float) -> Duration | float:
        if isinstance(other, Duration):
            return self.ratio(other)
        if isinstance(other, (int, float)):
            return self.div(other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.equal(other)

    def __lt__(self, other: Duration) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: Duration) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: Duration) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: Duration) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.compare(other) >= 0

    def __hash__(self) -> int:
        if math.isnan(self.seconds):
            return hash(math.inf) ^ 0x5BD1E995
        return hash(self.seconds)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Duration({self.to_string()!r})"


def _ieee_divide(a: float, b: float) -> float:
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a) or math.isnan(b):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


ZERO = Duration(0.0)
NANOSECOND = Duration.of_ns(1)
MICROSECOND = Duration.of_us(1)
MILLISECOND = Duration.of_ms(1)
SECOND = Duration.of_sec(1)
MINUTE = Duration.of_min(1)
HOUR = Duration.of_hr(1)
DAY = Duration.of_day(1)
INFINITY = Duration(math.inf)
NEG_INFINITY = Duration(-math.inf)
NAN = Duration(math.nan)
MAX_VALUE = Duration(1.7976931348623157e308)
MIN_VALUE = Duration(-1.7976931348623157e308)
