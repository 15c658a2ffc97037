"""Comparison policy configuration for the diff engine."""

from __future__ import annotations

from dataclasses import dataclass, replace
import math
from typing import Any, Literal

from matchpack.diff.exceptions import DiffConfigError

CompareMode = Literal["strict", "inclusive"]
ArraySortingMode = Literal["consider", "ignore"]
NumericMode = Literal["strict", "assume_float"]
FloatCompareKind = Literal["exact", "epsilon"]

_COMPARE_MODES = frozenset({"strict", "inclusive"})
_ARRAY_SORTING_MODES = frozenset({"consider", "ignore"})
_NUMERIC_MODES = frozenset({"strict", "assume_float"})


def _normalize_mode(value: str, *, allowed: frozenset[str], label: str) -> str:
    normalized = str(value).strip().lower().replace("-", "_")
    if normalized not in allowed:
        raise DiffConfigError(
            f"Invalid {label} '{value}'. "
            f"Supported modes: {', '.join(sorted(allowed))}"
        )
    return normalized


def normalize_compare_mode(value: str) -> CompareMode:
    return _normalize_mode(value, allowed=_COMPARE_MODES, label="compare mode")  # type: ignore[return-value]


def normalize_array_sorting_mode(value: str) -> ArraySortingMode:
    return _normalize_mode(  # type: ignore[return-value]
        value,
        allowed=_ARRAY_SORTING_MODES,
        label="array sorting mode",
    )


def normalize_numeric_mode(value: str) -> NumericMode:
    return _normalize_mode(value, allowed=_NUMERIC_MODES, label="numeric mode")  # type: ignore[return-value]


@dataclass(frozen=True, slots=True)
class FloatCompareMode:
    """How two floating point numbers are compared.

    ``exact`` requires identical values, ``epsilon`` accepts values whose
    absolute difference is at most ``threshold``.
    """

    kind: FloatCompareKind = "exact"
    threshold: float = 0.0

    def __post_init__(self) -> None:
        if self.kind not in {"exact", "epsilon"}:
            raise DiffConfigError(f"Invalid float compare mode '{self.kind}'")
        if isinstance(self.threshold, bool) or not isinstance(self.threshold, (int, float)):
            raise DiffConfigError("epsilon threshold must be a number")
        if math.isnan(self.threshold) or math.isinf(self.threshold) or self.threshold < 0:
            raise DiffConfigError("epsilon threshold must be a finite non-negative number")
        if self.kind == "exact" and self.threshold != 0.0:
            raise DiffConfigError("exact float comparison does not take a threshold")

    @classmethod
    def exact(cls) -> "FloatCompareMode":
        return cls()

    @classmethod
    def epsilon(cls, threshold: float) -> "FloatCompareMode":
        return cls(kind="epsilon", threshold=threshold)

    def floats_equal(self, left: float, right: float) -> bool:
        if left == right:
            return True
        if self.kind == "exact":
            return False
        return abs(left - right) <= self.threshold

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"kind": self.kind}
        if self.kind == "epsilon":
            payload["threshold"] = self.threshold
        return payload


@dataclass(frozen=True, slots=True)
class DiffConfig:
    """Immutable comparison policy consumed by the diff engine.

    Under ``strict`` compare mode both operands are symmetric peers. Under
    ``inclusive`` the first operand is the actual value and the second is the
    expected pattern it must contain. Ignoring array order is only meaningful
    for inclusive comparison and is rejected for strict comparison.
    """

    compare_mode: CompareMode
    array_sorting_mode: ArraySortingMode = "consider"
    numeric_mode: NumericMode = "strict"
    float_compare_mode: FloatCompareMode = FloatCompareMode()

    def __post_init__(self) -> None:
        # Frozen dataclass: normalized values go through object.__setattr__.
        object.__setattr__(self, "compare_mode", normalize_compare_mode(self.compare_mode))
        object.__setattr__(
            self,
            "array_sorting_mode",
            normalize_array_sorting_mode(self.array_sorting_mode),
        )
        object.__setattr__(self, "numeric_mode", normalize_numeric_mode(self.numeric_mode))
        if not isinstance(self.float_compare_mode, FloatCompareMode):
            raise DiffConfigError("float_compare_mode must be a FloatCompareMode")

        if self.compare_mode == "strict" and self.array_sorting_mode == "ignore":
            raise DiffConfigError(
                "strict comparison does not allow array ordering to be ignored"
            )

    @classmethod
    def strict(cls) -> "DiffConfig":
        return cls(compare_mode="strict")

    @classmethod
    def inclusive(cls) -> "DiffConfig":
        return cls(compare_mode="inclusive")

    @property
    def is_inclusive(self) -> bool:
        return self.compare_mode == "inclusive"

    def with_compare_mode(self, compare_mode: CompareMode) -> "DiffConfig":
        return replace(self, compare_mode=compare_mode)

    def with_array_sorting_mode(self, array_sorting_mode: ArraySortingMode) -> "DiffConfig":
        return replace(self, array_sorting_mode=array_sorting_mode)

    def with_numeric_mode(self, numeric_mode: NumericMode) -> "DiffConfig":
        return replace(self, numeric_mode=numeric_mode)

    def with_float_compare_mode(self, float_compare_mode: FloatCompareMode) -> "DiffConfig":
        return replace(self, float_compare_mode=float_compare_mode)

    def consider_array_sorting(self, consider: bool) -> "DiffConfig":
        return self.with_array_sorting_mode("consider" if consider else "ignore")

    def to_dict(self) -> dict[str, Any]:
        return {
            "compare_mode": self.compare_mode,
            "array_sorting_mode": self.array_sorting_mode,
            "numeric_mode": self.numeric_mode,
            "float_compare_mode": self.float_compare_mode.to_dict(),
        }
