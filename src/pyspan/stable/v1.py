"""V1 text format: one term, six significant digits, no sub-millisecond units."""

from __future__ import annotations

import math
import re

from pyspan._constants import V1_RELATIVE_PRECISION, V1_SIGNIFICANT_DIGITS
from pyspan._errors import ERR_MSG_INVALID_TEXT, SpanDecodeError
from pyspan.duration import Duration
from pyspan.stable._base import FormatVersion, StableFormat
from pyspan.units import Unit, of_seconds, to_seconds

_V1_TEXT_RE = re.compile(
    r"^(?P<number>[-+]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?|inf|nan))"
    r"(?P<suffix>ms|s|m|h|d)$"
)

# V1 predates the sub-millisecond units; spans under a second print in ms.
_V1_THRESHOLDS: tuple[tuple[float, Unit], ...] = (
    (1.0, Unit.MILLISECOND),
    (60.0, Unit.SECOND),
    (3600.0, Unit.MINUTE),
    (86400.0, Unit.HOUR),
)


def _v1_unit(seconds: float) -> Unit:
    magnitude = abs(seconds)
    for limit, unit in _V1_THRESHOLDS:
        if magnitude < limit:
            return unit
    # NaN fails every comparison and lands here too.
    return Unit.DAY


class V1Format(StableFormat):
    """Historical short format. Round-trips to about one part in 10**5."""

    version = FormatVersion.V1

    def to_text(self, span: Duration) -> str:
        seconds = span.seconds
        if seconds == 0:
            return "0s"
        unit = _v1_unit(seconds)
        magnitude = of_seconds(unit, seconds)
        return f"{magnitude:.{V1_SIGNIFICANT_DIGITS}g}{unit.suffix}"

    def of_text(self, text: str) -> Duration:
        m = _V1_TEXT_RE.match(text)
        if m is None:
            raise SpanDecodeError(
                ERR_MSG_INVALID_TEXT,
                f"{self.version} span text must be a number followed by one of "
                f"ms, s, m, h, d: {text!r}",
            )
        unit = Unit.of_suffix(m.group("suffix"))
        return Duration(to_seconds(unit, float(m.group("number"))))

    def precision(self, span: Duration) -> Duration:
        seconds = span.seconds
        if not math.isfinite(seconds):
            return Duration(0.0)
        return Duration(abs(seconds) * V1_RELATIVE_PRECISION + math.ulp(0.0))
