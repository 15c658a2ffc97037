"""Data models for paths and difference records."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Union

from matchpack.core.types import JsonValue
from matchpack.diff.config import CompareMode

Side = Literal["lhs", "rhs", "actual", "expected"]
DifferenceKind = Literal[
    "atom_mismatch",
    "object_key_missing",
    "array_index_missing",
    "array_element_missing",
]

ROOT_MARKER = "(root)"


@dataclass(frozen=True, slots=True)
class Key:
    """Object key path segment."""

    name: str

    def __str__(self) -> str:
        return f".{self.name}"


@dataclass(frozen=True, slots=True)
class Index:
    """Array index path segment."""

    index: int

    def __post_init__(self) -> None:
        if self.index < 0:
            raise ValueError("array index segments must be non-negative")

    def __str__(self) -> str:
        return f"[{self.index}]"


PathSegment = Union[Key, Index]


@dataclass(frozen=True, slots=True)
class Path:
    """Location of a node inside a value tree.

    Paths are immutable; ``push`` returns an extended copy so every emitted
    difference owns its own snapshot.
    """

    segments: tuple[PathSegment, ...] = field(default_factory=tuple)

    @classmethod
    def root(cls) -> "Path":
        return cls()

    @property
    def is_root(self) -> bool:
        return not self.segments

    def push(self, segment: PathSegment) -> "Path":
        return Path(self.segments + (segment,))

    def key(self, name: str) -> "Path":
        return self.push(Key(name))

    def index(self, index: int) -> "Path":
        return self.push(Index(index))

    def __len__(self) -> int:
        return len(self.segments)

    def __str__(self) -> str:
        if not self.segments:
            return ROOT_MARKER
        return "".join(str(segment) for segment in self.segments)


def lhs_side(compare_mode: CompareMode) -> Side:
    return "actual" if compare_mode == "inclusive" else "lhs"


def rhs_side(compare_mode: CompareMode) -> Side:
    return "expected" if compare_mode == "inclusive" else "rhs"


@dataclass(frozen=True, slots=True)
class AtomMismatch:
    """Both sides are present at ``path`` but are not equivalent."""

    path: Path
    lhs: JsonValue
    rhs: JsonValue
    compare_mode: CompareMode = "strict"

    kind: DifferenceKind = field(default="atom_mismatch", init=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "path": str(self.path),
            lhs_side(self.compare_mode): self.lhs,
            rhs_side(self.compare_mode): self.rhs,
        }


@dataclass(frozen=True, slots=True)
class ObjectKeyMissing:
    """An object key present on one side is absent from ``missing_from``."""

    path: Path
    missing_from: Side
    other_value: JsonValue

    kind: DifferenceKind = field(default="object_key_missing", init=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "path": str(self.path),
            "missing_from": self.missing_from,
            "other_value": self.other_value,
        }


@dataclass(frozen=True, slots=True)
class ArrayIndexMissing:
    """An array position present on one side is absent from ``missing_from``."""

    path: Path
    missing_from: Side
    other_value: JsonValue

    kind: DifferenceKind = field(default="array_index_missing", init=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "path": str(self.path),
            "missing_from": self.missing_from,
            "other_value": self.other_value,
        }


@dataclass(frozen=True, slots=True)
class ArrayElementMissing:
    """No element of the actual array matches the expected element at ``path``."""

    path: Path
    value: JsonValue

    kind: DifferenceKind = field(default="array_element_missing", init=False)

    @property
    def missing_from(self) -> Side:
        return "actual"

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "path": str(self.path),
            "missing_from": self.missing_from,
            "value": self.value,
        }


Difference = Union[AtomMismatch, ObjectKeyMissing, ArrayIndexMissing, ArrayElementMissing]
