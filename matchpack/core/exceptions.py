"""Core value model exceptions."""


class MatchError(Exception):
    """Base class for MatchKit errors."""


class ValueConversionError(MatchError, TypeError):
    """Input could not be represented as a JSON value."""

    def __init__(self, side: str, reason: str) -> None:
        self.side = side
        self.reason = reason
        super().__init__(f"Couldn't convert {side} value to JSON: {reason}")
