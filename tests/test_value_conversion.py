from dataclasses import dataclass
import enum
import math

import pytest

from matchpack.core import ValueConversionError, pretty_json, to_value, value_kind


@dataclass
class User:
    id: int
    username: str


class Color(enum.Enum):
    RED = "red"


class _HasToDict:
    def to_dict(self) -> dict:
        return {"nested": (1, 2)}


def test_plain_json_values_pass_through() -> None:
    payload = {"a": [1, 2.5, "x", None, True], "b": {}}

    assert to_value(payload) == payload


def test_tuples_become_lists_and_keys_are_stringified() -> None:
    assert to_value((1, (2, 3))) == [1, [2, 3]]
    assert to_value({1: "a", False: "b", 2.5: "c"}) == {"1": "a", "false": "b", "2.5": "c"}


def test_dataclasses_enums_and_to_dict_objects() -> None:
    assert to_value(User(id=1, username="bob")) == {"id": 1, "username": "bob"}
    assert to_value({"color": Color.RED}) == {"color": "red"}
    assert to_value(_HasToDict()) == {"nested": [1, 2]}


def test_integer_and_float_kinds_stay_distinct() -> None:
    assert value_kind(to_value(1)) == "integer"
    assert value_kind(to_value(1.0)) == "float"
    assert value_kind(to_value(True)) == "bool"
    assert value_kind(None) == "null"
    assert value_kind("s") == "string"
    assert value_kind([]) == "array"
    assert value_kind({}) == "object"


@pytest.mark.parametrize("bad", [math.nan, math.inf, {"a": [object()]}, {("k",): 1}, {1, 2}])
def test_unrepresentable_values_raise_conversion_error(bad: object) -> None:
    with pytest.raises(ValueConversionError) as excinfo:
        to_value(bad, side="right hand side")

    assert excinfo.value.side == "right hand side"
    assert "Couldn't convert right hand side value to JSON" in str(excinfo.value)


def test_conversion_error_names_location() -> None:
    with pytest.raises(ValueConversionError, match="/a/0"):
        to_value({"a": [object()]})


def test_pretty_json_uses_two_space_indent() -> None:
    assert pretty_json({"b": True}) == '{\n  "b": true\n}'
    assert pretty_json("x") == '"x"'


def test_keys_colliding_after_stringification_are_rejected() -> None:
    with pytest.raises(ValueConversionError, match="duplicate key '1'"):
        to_value({1: "a", "1": "b"})
