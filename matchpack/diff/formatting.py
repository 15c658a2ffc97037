"""Human-readable rendering for difference records."""

from __future__ import annotations

from typing import Sequence

from matchpack.core.types import JsonValue
from matchpack.core.value import pretty_json
from matchpack.diff.models import (
    ArrayElementMissing,
    AtomMismatch,
    Difference,
    lhs_side,
    rhs_side,
)

_LABEL_INDENT = " " * 4
_VALUE_INDENT = " " * 8


def render_difference(difference: Difference) -> str:
    path = str(difference.path)

    if isinstance(difference, AtomMismatch):
        lhs_label = lhs_side(difference.compare_mode)
        rhs_label = rhs_side(difference.compare_mode)
        # Inclusive messages lead with the expected value.
        if difference.compare_mode == "inclusive":
            blocks = [(rhs_label, difference.rhs), (lhs_label, difference.lhs)]
        else:
            blocks = [(lhs_label, difference.lhs), (rhs_label, difference.rhs)]

        lines = [f'json atoms at path "{path}" are not equal:']
        for label, value in blocks:
            lines.append(f"{_LABEL_INDENT}{label}:")
            lines.append(_indent_value(value))
        return "\n".join(lines)

    if isinstance(difference, ArrayElementMissing):
        return f'json atom at path "{path}" is missing from actual'

    return f'json atom at path "{path}" is missing from {difference.missing_from}'


def render_differences(differences: Sequence[Difference]) -> str:
    """Join rendered differences with a blank line between blocks."""
    return "\n\n".join(render_difference(difference) for difference in differences)


def render_diff_summary(differences: Sequence[Difference]) -> str:
    counts = {
        "atom_mismatch": 0,
        "object_key_missing": 0,
        "array_index_missing": 0,
        "array_element_missing": 0,
    }
    for difference in differences:
        counts[difference.kind] += 1
    return (
        f"differences={len(differences)} "
        f"atom_mismatch={counts['atom_mismatch']} "
        f"object_key_missing={counts['object_key_missing']} "
        f"array_index_missing={counts['array_index_missing']} "
        f"array_element_missing={counts['array_element_missing']}"
    )


def _indent_value(value: JsonValue) -> str:
    return "\n".join(f"{_VALUE_INDENT}{line}" for line in pretty_json(value).splitlines())
