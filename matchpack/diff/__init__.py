"""Diff subsystem for MatchKit."""

from matchpack.diff.assertion import (
    AssertionResult,
    assert_json_contains,
    assert_json_eq,
    assert_json_include,
    assert_json_matches,
    assert_json_matches_no_panic,
    compare_json,
    try_assert_json_matches,
)
from matchpack.diff.config import (
    ArraySortingMode,
    CompareMode,
    DiffConfig,
    FloatCompareMode,
    NumericMode,
    normalize_array_sorting_mode,
    normalize_compare_mode,
    normalize_numeric_mode,
)
from matchpack.diff.engine import diff_values, values_equivalent
from matchpack.diff.exceptions import DiffConfigError, JsonMismatchError
from matchpack.diff.formatting import render_diff_summary, render_difference, render_differences
from matchpack.diff.models import (
    ArrayElementMissing,
    ArrayIndexMissing,
    AtomMismatch,
    Difference,
    Index,
    Key,
    ObjectKeyMissing,
    Path,
    PathSegment,
    Side,
)

__all__ = [
    "CompareMode",
    "ArraySortingMode",
    "NumericMode",
    "FloatCompareMode",
    "DiffConfig",
    "DiffConfigError",
    "JsonMismatchError",
    "normalize_compare_mode",
    "normalize_array_sorting_mode",
    "normalize_numeric_mode",
    "Key",
    "Index",
    "PathSegment",
    "Path",
    "Side",
    "Difference",
    "AtomMismatch",
    "ObjectKeyMissing",
    "ArrayIndexMissing",
    "ArrayElementMissing",
    "diff_values",
    "values_equivalent",
    "render_difference",
    "render_differences",
    "render_diff_summary",
    "AssertionResult",
    "compare_json",
    "try_assert_json_matches",
    "assert_json_matches_no_panic",
    "assert_json_matches",
    "assert_json_eq",
    "assert_json_include",
    "assert_json_contains",
]
