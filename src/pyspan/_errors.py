"""Exception hierarchy for duration parsing and decoding."""


class SpanError(Exception):
    """Base exception for duration errors.

    Provides dual messaging: a short, stable user-facing message and
    internal details with the offending input for logging.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class SpanParseError(SpanError):
    """Raised when duration text does not match the duration grammar."""


class SpanDecodeError(SpanError):
    """Raised when a stable-format payload cannot be decoded."""


class UnknownFormatVersionError(SpanError):
    """Raised when a stable-format version tag is not registered."""


class InvalidOfdayError(SpanError):
    """Raised when a time of day is out of range or malformed."""


# Sanitized user-facing error message constants
ERR_MSG_INVALID_SPAN_STRING = "invalid duration string"
ERR_MSG_INVALID_BINARY = "invalid binary duration encoding"
ERR_MSG_INVALID_TEXT = "invalid text duration encoding"
ERR_MSG_UNKNOWN_VERSION = "unknown format version"
ERR_MSG_INVALID_OFDAY = "invalid time of day"
