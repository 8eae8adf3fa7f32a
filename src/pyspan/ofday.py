"""Time of day built on the duration parts codec."""

from __future__ import annotations

import math
from dataclasses import dataclass
from fractions import Fraction

from pyspan._errors import ERR_MSG_INVALID_OFDAY, InvalidOfdayError
from pyspan.duration import DAY, ZERO, Duration
from pyspan.parts import Parts, Sign, create, to_parts

_US_PER_SEC = 1_000_000
_DIGITS = frozenset("0123456789")


def _fail(text: str, reason: str) -> InvalidOfdayError:
    return InvalidOfdayError(
        ERR_MSG_INVALID_OFDAY,
        f"Ofday.of_string_iso8601_extended({text}): {reason}",
    )


def _two_digits(text: str, pos: int) -> int:
    value = 0
    for ch in text[pos:pos + 2]:
        if ch not in _DIGITS:
            raise _fail(text, f"not a digit: {ch!r}")
        value = value * 10 + int(ch)
    return value


def _expect(text: str, pos: int, ch: str) -> None:
    if text[pos] != ch:
        raise _fail(text, f"expected {ch!r} at position {pos}, got {text[pos]!r}")


@dataclass(frozen=True, order=True)
class Ofday:
    """A time of day, stored as the span since midnight, in ``[0s, 24h]``."""

    span: Duration

    def __post_init__(self) -> None:
        seconds = self.span.seconds
        if math.isnan(seconds) or not ZERO <= self.span <= DAY:
            raise InvalidOfdayError(
                ERR_MSG_INVALID_OFDAY,
                f"span since start of day out of range: {self.span}",
            )

    @classmethod
    def of_span_since_start_of_day(cls, span: Duration) -> Ofday:
        return cls(span)

    @classmethod
    def create(
        cls,
        hr: int = 0,
        min: int = 0,
        sec: int = 0,
        ms: int = 0,
        us: int = 0,
        ns: int = 0,
    ) -> Ofday:
        """Build a time of day from clock fields.

        Raises:
            InvalidOfdayError: If a field is out of range, or ``hr`` is 24
                and any other field is non-zero.
        """
        fields = {"hr": (hr, 24), "min": (min, 59), "sec": (sec, 59),
                  "ms": (ms, 999), "us": (us, 999), "ns": (ns, 999)}
        for name, (value, upper) in fields.items():
            if not 0 <= value <= upper:
                raise InvalidOfdayError(
                    ERR_MSG_INVALID_OFDAY,
                    f"{name} = {value} out of range [0, {upper}]",
                )
        if hr == 24 and (min or sec or ms or us or ns):
            raise InvalidOfdayError(
                ERR_MSG_INVALID_OFDAY,
                "only 24:00:00 is allowed with hour 24",
            )
        return cls(Duration(create(Sign.POS, hr, min, sec, ms, us, ns)))

    @classmethod
    def of_string_iso8601_extended(cls, text: str) -> Ofday:
        """Parse ``HH[:MM[:SS[.fraction]]]``.

        Hour 24 is accepted only as the end of the day. Second 60 is a leap
        second and folds into the start of the next minute.

        Raises:
            InvalidOfdayError: If the text is malformed or out of range.
        """
        length = len(text)
        if length < 2:
            raise _fail(text, "len < 2")
        hr = _two_digits(text, 0)
        minute = sec = 0
        fraction = ""
        if length > 2:
            if length < 5:
                raise _fail(text, "2 < len < 5")
            _expect(text, 2, ":")
            minute = _two_digits(text, 3)
            if length > 5:
                if length < 8:
                    raise _fail(text, "5 < len < 8")
                _expect(text, 5, ":")
                sec = _two_digits(text, 6)
                if length > 8:
                    _expect(text, 8, ".")
                    fraction = text[9:]
                    if not fraction or not set(fraction) <= _DIGITS:
                        raise _fail(text, f"invalid fraction: {fraction!r}")

        if hr > 24:
            raise _fail(text, "hour > 24")
        if minute > 59:
            raise _fail(text, "minute > 59")
        if sec > 60:
            raise _fail(text, f"invalid second: {sec}")

        if sec == 60:
            seconds = Fraction(hr * 3600 + minute * 60 + 60)
        else:
            seconds = Fraction(hr * 3600 + minute * 60 + sec)
            if fraction:
                seconds += Fraction(int(fraction), 10 ** len(fraction))
        if hr == 24 and seconds != 86400:
            raise _fail(text, "only 24:00:00 is allowed with hour 24")
        return cls(Duration(float(seconds)))

    @classmethod
    def of_string(cls, text: str) -> Ofday:
        return cls.of_string_iso8601_extended(text)

    def to_span_since_start_of_day(self) -> Duration:
        return self.span

    def to_parts(self) -> Parts:
        return to_parts(self.span.seconds)

    def diff(self, other: Ofday) -> Duration:
        return self.span - other.span

    def to_string(self) -> str:
        """``HH:MM:SS.ffffff``, rounded to the nearest microsecond."""
        total_us = math.floor(Fraction(self.span.seconds) * _US_PER_SEC + Fraction(1, 2))
        total_sec, us = divmod(total_us, _US_PER_SEC)
        total_min, sec = divmod(total_sec, 60)
        hr, minute = divmod(total_min, 60)
        return f"{hr:02d}:{minute:02d}:{sec:02d}.{us:06d}"

    def __str__(self) -> str:
        return self.to_string()


START_OF_DAY = Ofday(ZERO)
START_OF_NEXT_DAY = Ofday(DAY)
