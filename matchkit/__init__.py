"""Stable public API surface for MatchKit.

This module is the supported import path for library users.
"""

from __future__ import annotations

from typing import Any

from matchpack.core import ValueConversionError, to_value
from matchpack.diff import (
    ArrayElementMissing,
    ArrayIndexMissing,
    AssertionResult,
    AtomMismatch,
    DiffConfig,
    DiffConfigError,
    Difference,
    FloatCompareMode,
    Index,
    JsonMismatchError,
    Key,
    ObjectKeyMissing,
    Path,
    assert_json_contains,
    assert_json_eq,
    assert_json_include,
    assert_json_matches,
    assert_json_matches_no_panic,
    diff_values,
    try_assert_json_matches,
)

__version__ = "0.1.0"


def diff(lhs: Any, rhs: Any, config: DiffConfig | None = None) -> list[Difference]:
    """Diff two serializable values.

    Args:
        lhs: Left value (the actual value under inclusive comparison).
        rhs: Right value (the expected value under inclusive comparison).
        config: Comparison policy; defaults to strict comparison.

    Returns:
        Ordered difference records, empty when the values match.

    Raises:
        ValueConversionError: An operand cannot be represented as JSON.
    """
    resolved = config if config is not None else DiffConfig.strict()
    return diff_values(
        to_value(lhs, side="left hand side"),
        to_value(rhs, side="right hand side"),
        resolved,
    )


__all__ = [
    "__version__",
    "DiffConfig",
    "FloatCompareMode",
    "Path",
    "Key",
    "Index",
    "Difference",
    "AtomMismatch",
    "ObjectKeyMissing",
    "ArrayIndexMissing",
    "ArrayElementMissing",
    "AssertionResult",
    "DiffConfigError",
    "ValueConversionError",
    "JsonMismatchError",
    "diff",
    "assert_json_matches",
    "assert_json_matches_no_panic",
    "try_assert_json_matches",
    "assert_json_eq",
    "assert_json_include",
    "assert_json_contains",
]
