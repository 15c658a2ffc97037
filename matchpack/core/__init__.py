"""Value model and conversion primitives for MatchKit."""

from matchpack.core.exceptions import MatchError, ValueConversionError
from matchpack.core.types import NUMBER_KINDS, VALUE_KINDS, JsonValue, ValueKind
from matchpack.core.value import pretty_json, to_value, value_kind

__all__ = [
    "MatchError",
    "ValueConversionError",
    "JsonValue",
    "ValueKind",
    "VALUE_KINDS",
    "NUMBER_KINDS",
    "to_value",
    "value_kind",
    "pretty_json",
]
