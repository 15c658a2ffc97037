import pytest

from matchpack.diff import (
    ArrayElementMissing,
    ArrayIndexMissing,
    AtomMismatch,
    Index,
    Key,
    ObjectKeyMissing,
    Path,
)


def test_root_path_renders_root_marker() -> None:
    assert str(Path()) == "(root)"
    assert str(Path.root()) == "(root)"
    assert Path.root().is_root is True


def test_path_renders_keys_and_indices_in_order() -> None:
    path = Path().key("data").key("users").index(0).key("country").key("name")

    assert str(path) == ".data.users[0].country.name"
    assert path.segments == (
        Key("data"),
        Key("users"),
        Index(0),
        Key("country"),
        Key("name"),
    )
    assert len(path) == 5


def test_push_returns_new_path_without_mutating_parent() -> None:
    parent = Path().key("a")
    child = parent.push(Index(3))

    assert str(parent) == ".a"
    assert str(child) == ".a[3]"
    assert child != parent


def test_paths_compare_and_hash_by_value() -> None:
    assert Path().key("a").index(1) == Path((Key("a"), Index(1)))
    assert len({Path().key("a"), Path().key("a")}) == 1


def test_negative_index_segments_are_rejected() -> None:
    with pytest.raises(ValueError):
        Index(-1)


def test_difference_payloads() -> None:
    path = Path().key("a").index(2)

    assert ObjectKeyMissing(path=path, missing_from="lhs", other_value={"b": 1}).to_dict() == {
        "kind": "object_key_missing",
        "path": ".a[2]",
        "missing_from": "lhs",
        "other_value": {"b": 1},
    }
    assert ArrayIndexMissing(path=path, missing_from="actual", other_value=3).to_dict() == {
        "kind": "array_index_missing",
        "path": ".a[2]",
        "missing_from": "actual",
        "other_value": 3,
    }
    assert ArrayElementMissing(path=path, value=None).to_dict() == {
        "kind": "array_element_missing",
        "path": ".a[2]",
        "missing_from": "actual",
        "value": None,
    }
    assert AtomMismatch(path=Path(), lhs=1, rhs=2).to_dict() == {
        "kind": "atom_mismatch",
        "path": "(root)",
        "lhs": 1,
        "rhs": 2,
    }
