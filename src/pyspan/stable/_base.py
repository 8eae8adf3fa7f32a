"""Abstract base class for stable duration serialization formats."""

from __future__ import annotations

import enum
import struct
from abc import ABC, abstractmethod

from pyspan._errors import ERR_MSG_INVALID_BINARY, SpanDecodeError
from pyspan.duration import Duration

BINARY_SIZE = 8
"""Every version encodes a span as one native-endian IEEE-754 double."""

_BINARY_FORMAT = "=d"


class FormatVersion(enum.StrEnum):
    V1 = "v1"
    V2 = "v2"
    V3 = "v3"


class StableFormat(ABC):
    """A published serialization of :class:`~pyspan.duration.Duration`.

    Versions differ only in their text encoding. The binary layout is shared
    and is never version-specific.
    """

    version: FormatVersion

    # --- Text ---

    @abstractmethod
    def to_text(self, span: Duration) -> str: ...

    @abstractmethod
    def of_text(self, text: str) -> Duration: ...

    @abstractmethod
    def precision(self, span: Duration) -> Duration:
        """Largest error a text round-trip of ``span`` may introduce."""

    # --- Binary ---

    def to_bytes(self, span: Duration) -> bytes:
        return struct.pack(_BINARY_FORMAT, span.seconds)

    def of_bytes(self, data: bytes) -> Duration:
        if len(data) != BINARY_SIZE:
            raise SpanDecodeError(
                ERR_MSG_INVALID_BINARY,
                f"{self.version} binary span must be {BINARY_SIZE} bytes, got {len(data)}",
            )
        (seconds,) = struct.unpack(_BINARY_FORMAT, data)
        return Duration(seconds)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
