"""Conversion of arbitrary serializable input into the generic value model."""

from __future__ import annotations

from collections.abc import Mapping
import dataclasses
import enum
import json
import math
from typing import Any, Literal

from matchpack.core.exceptions import ValueConversionError
from matchpack.core.types import JsonValue, ValueKind

OperandSide = Literal["left hand side", "right hand side"]


def value_kind(value: JsonValue) -> ValueKind:
    """Return the variant tag of an already-converted value."""
    if value is None:
        return "null"
    # bool is an int subclass, check it first.
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "float"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    raise TypeError(f"Unsupported value type: {type(value).__name__}")


def to_value(obj: Any, *, side: OperandSide = "left hand side") -> JsonValue:
    """Convert a serializable object to plain JSON-compatible values.

    Mappings, sequences, dataclasses, enums and objects exposing ``to_dict()``
    are converted recursively. Anything else that cannot be represented as
    JSON raises :class:`ValueConversionError`.
    """
    try:
        return _to_value(obj, path=())
    except ValueConversionError:
        raise
    except (TypeError, ValueError) as error:
        raise ValueConversionError(side, str(error)) from error


def _to_value(obj: Any, *, path: tuple[str, ...]) -> JsonValue:
    if obj is None or isinstance(obj, (bool, str)):
        return obj

    if isinstance(obj, enum.Enum):
        return _to_value(obj.value, path=path)

    if isinstance(obj, int):
        return int(obj)

    if isinstance(obj, float):
        if math.isnan(obj) or math.isinf(obj):
            raise ValueError(f"{_location(path)}: NaN and infinity are not representable in JSON")
        return float(obj)

    if isinstance(obj, Mapping):
        converted: dict[str, JsonValue] = {}
        for key, item in obj.items():
            key_name = _key_to_str(key, path)
            if key_name in converted:
                raise ValueError(f"{_location(path)}: duplicate key {key_name!r} after conversion")
            converted[key_name] = _to_value(item, path=path + (key_name,))
        return converted

    if isinstance(obj, (list, tuple)):
        return [_to_value(item, path=path + (str(idx),)) for idx, item in enumerate(obj)]

    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {
            field.name: _to_value(getattr(obj, field.name), path=path + (field.name,))
            for field in dataclasses.fields(obj)
        }

    to_dict = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return _to_value(to_dict(), path=path)

    raise TypeError(f"{_location(path)}: object of type {type(obj).__name__} is not JSON serializable")


def _key_to_str(key: Any, path: tuple[str, ...]) -> str:
    if isinstance(key, str):
        return key
    if isinstance(key, enum.Enum):
        return _key_to_str(key.value, path)
    if isinstance(key, (bool, int, float)):
        # Stringify the same way json.dumps does for non-string keys.
        return json.dumps(key)
    raise TypeError(f"{_location(path)}: keys must be str, int, float or bool, not {type(key).__name__}")


def _location(path: tuple[str, ...]) -> str:
    if not path:
        return "value"
    return "value at /" + "/".join(path)


def pretty_json(value: JsonValue) -> str:
    """Pretty-print a single value for diagnostics."""
    return json.dumps(value, indent=2, ensure_ascii=False)
