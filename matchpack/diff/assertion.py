"""Assertion helpers that turn JSON differences into test failures."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from matchpack.core.value import to_value
from matchpack.diff.config import DiffConfig
from matchpack.diff.engine import diff_values
from matchpack.diff.exceptions import JsonMismatchError
from matchpack.diff.formatting import render_differences
from matchpack.diff.models import Difference


@dataclass(slots=True)
class AssertionResult:
    """Outcome of comparing two values under a configuration."""

    config: DiffConfig
    differences: list[Difference] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.differences

    @property
    def exit_code(self) -> int:
        return 0 if self.passed else 1

    @property
    def message(self) -> str:
        return render_differences(self.differences)

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": "pass" if self.passed else "fail",
            "exit_code": self.exit_code,
            "config": self.config.to_dict(),
            "difference_count": len(self.differences),
            "differences": [difference.to_dict() for difference in self.differences],
        }


def compare_json(lhs: Any, rhs: Any, config: DiffConfig) -> AssertionResult:
    """Convert both operands and diff them.

    Raises:
        ValueConversionError: An operand cannot be represented as JSON.
    """
    left_value = to_value(lhs, side="left hand side")
    right_value = to_value(rhs, side="right hand side")
    return AssertionResult(config=config, differences=diff_values(left_value, right_value, config))


def try_assert_json_matches(lhs: Any, rhs: Any, config: DiffConfig) -> list[Difference]:
    """Return the structured differences, empty when the values match."""
    return compare_json(lhs, rhs, config).differences


def assert_json_matches_no_panic(lhs: Any, rhs: Any, config: DiffConfig) -> str | None:
    """Return the failure message instead of raising, or None on a match."""
    result = compare_json(lhs, rhs, config)
    if result.passed:
        return None
    return result.message


def assert_json_matches(
    lhs: Any,
    rhs: Any,
    config: DiffConfig,
    message: str | None = None,
) -> None:
    """Assert that two values match under ``config``.

    With inclusive compare mode ``lhs`` is the actual value and ``rhs`` the
    expected value. A custom ``message`` is printed ahead of the differences.
    """
    result = compare_json(lhs, rhs, config)
    if result.passed:
        return

    if message:
        rendered = f"\n{message}\n\n{result.message}"
    else:
        rendered = f"\n{result.message}"
    raise JsonMismatchError(rendered, result.differences)


def assert_json_eq(lhs: Any, rhs: Any, message: str | None = None) -> None:
    """Assert that two values are exactly equal."""
    assert_json_matches(lhs, rhs, DiffConfig.strict(), message)


def assert_json_include(*, actual: Any, expected: Any, message: str | None = None) -> None:
    """Assert that ``actual`` contains everything in ``expected``.

    ``actual`` may carry extra object keys and trailing array elements.
    """
    assert_json_matches(actual, expected, DiffConfig.inclusive(), message)


def assert_json_contains(*, container: Any, contained: Any, message: str | None = None) -> None:
    """Like :func:`assert_json_include` but array element order is ignored."""
    config = DiffConfig.inclusive().consider_array_sorting(False)
    assert_json_matches(container, contained, config, message)
