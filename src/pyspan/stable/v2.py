"""V2 text format: one term in the seven-unit scheme, full double digits."""

from __future__ import annotations

import math
import re

from pyspan._constants import MAX_SIGNIFICANT_DIGITS, V2_RELATIVE_PRECISION
from pyspan._errors import ERR_MSG_INVALID_TEXT, SpanDecodeError
from pyspan._parser import parse_seconds
from pyspan.duration import Duration
from pyspan.stable._base import FormatVersion, StableFormat
from pyspan.units import of_seconds, primary_unit

_V2_TEXT_RE = re.compile(
    r"^-?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?(?:ns|us|ms|s|m|h|d)|INFs|NANs)$"
)


class V2Format(StableFormat):
    """Single-term format.

    The magnitude is written with 17 significant digits in its own unit,
    enough to pin down the double, but converting that magnitude back to
    seconds can still be off by an ULP or two (`3.1415926535897931us`).
    """

    version = FormatVersion.V2

    def to_text(self, span: Duration) -> str:
        seconds = span.seconds
        sign = "-" if math.copysign(1.0, seconds) < 0 else ""
        if math.isnan(seconds):
            return f"{sign}NANs"
        if seconds == 0:
            return "0s"
        if math.isinf(seconds):
            return f"{sign}INFs"
        unit = primary_unit(seconds)
        magnitude = of_seconds(unit, abs(seconds))
        return f"{sign}{magnitude:.{MAX_SIGNIFICANT_DIGITS}g}{unit.suffix}"

    def of_text(self, text: str) -> Duration:
        if _V2_TEXT_RE.match(text) is None:
            raise SpanDecodeError(
                ERR_MSG_INVALID_TEXT,
                f"{self.version} span text must be a single number and unit suffix: {text!r}",
            )
        return Duration(parse_seconds(text))

    def precision(self, span: Duration) -> Duration:
        seconds = span.seconds
        if not math.isfinite(seconds):
            return Duration(0.0)
        return Duration(abs(seconds) * V2_RELATIVE_PRECISION + math.ulp(0.0))
