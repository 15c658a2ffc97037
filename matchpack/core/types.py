"""Type definitions for the MatchKit value model."""

from typing import Any, Literal

ValueKind = Literal[
    "null",
    "bool",
    "integer",
    "float",
    "string",
    "array",
    "object",
]

VALUE_KINDS: tuple[str, ...] = (
    "null",
    "bool",
    "integer",
    "float",
    "string",
    "array",
    "object",
)

NUMBER_KINDS: frozenset[str] = frozenset({"integer", "float"})

# None | bool | int | float | str | list[JsonValue] | dict[str, JsonValue]
JsonValue = Any
