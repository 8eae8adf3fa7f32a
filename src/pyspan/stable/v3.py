"""V3 text format: compound terms, exact for every double."""

from __future__ import annotations

import logging

from pyspan._errors import ERR_MSG_INVALID_TEXT, SpanDecodeError, SpanParseError
from pyspan._formatter import format_seconds
from pyspan._parser import parse_seconds
from pyspan.duration import Duration
from pyspan.stable._base import FormatVersion, StableFormat
from pyspan.stable.v1 import V1Format

logger = logging.getLogger(__name__)


class V3Format(StableFormat):
    """Current format.

    Reads every V1 and V2 string. All versions share one unit table, so a
    legacy string decodes to exactly what its own reader would produce.
    """

    version = FormatVersion.V3

    def __init__(self) -> None:
        self._legacy = V1Format()

    def to_text(self, span: Duration) -> str:
        return format_seconds(span.seconds)

    def of_text(self, text: str) -> Duration:
        try:
            return Duration(parse_seconds(text))
        except SpanParseError as err:
            parse_error = err

        # V1 wrote non-finite spans the way %g does ("infd", "nand").
        try:
            span = self._legacy.of_text(text)
        except SpanDecodeError:
            raise SpanDecodeError(
                ERR_MSG_INVALID_TEXT,
                f"{self.version}: {parse_error.internal()}",
                wrapped=parse_error,
            ) from parse_error
        logger.debug(f"Decoded {text!r} with the {self._legacy.version} grammar")
        return span

    def precision(self, span: Duration) -> Duration:
        return Duration(0.0)
