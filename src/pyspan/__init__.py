"""pyspan - Exact, human-readable durations backed by IEEE-754 doubles."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyspan")
except PackageNotFoundError:  # running from a source tree without installing
    __version__ = "0.0.0.dev0"

from pyspan._errors import (
    InvalidOfdayError,
    SpanDecodeError,
    SpanError,
    SpanParseError,
    UnknownFormatVersionError,
)
from pyspan.duration import (
    DAY,
    HOUR,
    INFINITY,
    MAX_VALUE,
    MICROSECOND,
    MILLISECOND,
    MIN_VALUE,
    MINUTE,
    NAN,
    NANOSECOND,
    NEG_INFINITY,
    SECOND,
    ZERO,
    Duration,
)
from pyspan.ofday import Ofday
from pyspan.parts import Parts, Sign
from pyspan.stable import FormatVersion, StableFormat, get_format
from pyspan.units import Unit

__all__ = [
    "of_string",
    "to_string",
    "Duration",
    "Ofday",
    "Parts",
    "Sign",
    "Unit",
    "FormatVersion",
    "StableFormat",
    "get_format",
    "SpanError",
    "SpanParseError",
    "SpanDecodeError",
    "UnknownFormatVersionError",
    "InvalidOfdayError",
    "ZERO",
    "NANOSECOND",
    "MICROSECOND",
    "MILLISECOND",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "INFINITY",
    "NEG_INFINITY",
    "NAN",
    "MAX_VALUE",
    "MIN_VALUE",
]


def of_string(text: str) -> Duration:
    """Parse a duration string such as ``"1d2h"``, ``"-3.5ms"`` or ``"2_400h"``.

    Args:
        text: One or more ``<decimal><unit>`` terms with an optional leading
            ``-`` for the whole value, or one of ``INFs``, ``-INFs``,
            ``NANs``, ``-NANs``.

    Returns:
        The parsed Duration.

    Raises:
        SpanParseError: If the text is not a valid duration string.
    """
    return Duration.of_string(text)


def to_string(span: Duration) -> str:
    """Format a duration as the shortest string that parses back exactly.

    Args:
        span: The Duration to format.

    Returns:
        The formatted string, e.g. ``"1d"``, ``"3m8.49555921538757s"``.
    """
    return span.to_string()
