"""Stable, versioned binary and text serialization of durations."""

from pyspan._errors import ERR_MSG_UNKNOWN_VERSION, UnknownFormatVersionError
from pyspan.stable._base import BINARY_SIZE, FormatVersion, StableFormat
from pyspan.stable.v1 import V1Format
from pyspan.stable.v2 import V2Format
from pyspan.stable.v3 import V3Format

__all__ = [
    "BINARY_SIZE",
    "FormatVersion",
    "StableFormat",
    "V1Format",
    "V2Format",
    "V3Format",
    "LATEST",
    "get_format",
]

_REGISTRY: dict[str, type[StableFormat]] = {
    FormatVersion.V1: V1Format,
    FormatVersion.V2: V2Format,
    FormatVersion.V3: V3Format,
}

LATEST = FormatVersion.V3


def get_format(version: str = LATEST) -> StableFormat:
    """Get a stable format instance by version tag.

    Args:
        version: Version tag (e.g., "v1", "v2", "v3"). Defaults to the latest.

    Returns:
        A StableFormat instance.

    Raises:
        UnknownFormatVersionError: If the version tag is unknown.
    """
    cls = _REGISTRY.get(version)
    if cls is None:
        raise UnknownFormatVersionError(
            ERR_MSG_UNKNOWN_VERSION,
            f"unknown format version: {version!r}. "
            f"Available: {', '.join(sorted(_REGISTRY))}",
        )
    return cls()
