"""Exception hierarchy for time value interpretation."""


class TimeSpanError(Exception):
    """Base exception for time value interpretation errors.

    Inputs are typed by end users, so ``user_message`` names only the kind
    of problem and is safe to show back to them. ``internal_details`` quotes
    the offending text or value and is meant for debug logs.
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


class ParseError(TimeSpanError, ValueError):
    """Raised when text is malformed, empty, or not numeric."""


class OutOfRangeError(TimeSpanError, ValueError):
    """Raised when a value lies outside its representable or allowed bound."""


class TypeMismatchError(TimeSpanError, TypeError):
    """Raised when a strict input-kind assertion is not satisfied."""


class InvalidArgumentError(TimeSpanError, ValueError):
    """Raised when a required argument is missing or unusable."""


# Sanitized user-facing error message constants
ERR_MSG_INVALID_NUMERIC_TIME = "invalid numeric time"
ERR_MSG_NUMERIC_TIME_OUT_OF_RANGE = "numeric time out of range"
ERR_MSG_INVALID_FACTOR = "factor must be positive"
ERR_MSG_UNEXPECTED_INPUT_KIND = "unexpected numeric time input kind"
ERR_MSG_INVALID_DATE = "invalid date"
ERR_MSG_INVALID_DURATION = "invalid duration value"
ERR_MSG_DURATION_OUT_OF_RANGE = "duration out of range"
ERR_MSG_INSTANT_OUT_OF_RANGE = "instant out of range"
ERR_MSG_DIVISOR_ZERO = "divisor cannot be zero"
ERR_MSG_MISSING_ARGUMENT = "required argument missing"
