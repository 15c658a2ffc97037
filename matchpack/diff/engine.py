"""Recursive JSON value diff engine with path-annotated differences."""

from __future__ import annotations

import math
from typing import Any

from matchpack.core.types import NUMBER_KINDS, JsonValue
from matchpack.core.value import value_kind
from matchpack.diff.config import DiffConfig
from matchpack.diff.models import (
    ArrayElementMissing,
    ArrayIndexMissing,
    AtomMismatch,
    Difference,
    ObjectKeyMissing,
    Path,
    lhs_side,
    rhs_side,
)


def diff_values(
    lhs: JsonValue,
    rhs: JsonValue,
    config: DiffConfig,
    *,
    max_differences: int | None = None,
) -> list[Difference]:
    """Diff two JSON values in pre-order.

    Under strict compare mode ``lhs`` and ``rhs`` are peers. Under inclusive
    compare mode ``lhs`` is the actual value and ``rhs`` the expected value it
    must contain. An empty result means the values are equivalent.

    ``max_differences`` stops the walk once that many records are collected;
    it must be at least 1 when given.
    """
    if max_differences is not None and max_differences < 1:
        raise ValueError("max_differences must be >= 1")
    out: list[Difference] = []
    _collect_differences(lhs, rhs, path=Path.root(), config=config, out=out, limit=max_differences)
    return out


def values_equivalent(lhs: JsonValue, rhs: JsonValue, config: DiffConfig) -> bool:
    return not diff_values(lhs, rhs, config, max_differences=1)


def _collect_differences(
    lhs: JsonValue,
    rhs: JsonValue,
    *,
    path: Path,
    config: DiffConfig,
    out: list[Difference],
    limit: int | None,
) -> bool:
    """Append differences below ``path``; return True once ``limit`` is reached."""
    if limit is not None and len(out) >= limit:
        return True

    left_kind = value_kind(lhs)
    right_kind = value_kind(rhs)

    if left_kind in NUMBER_KINDS and right_kind in NUMBER_KINDS:
        if not _numbers_equal(lhs, rhs, config):
            out.append(_atom_mismatch(path, lhs, rhs, config))
        return _limit_reached(out, limit)

    if left_kind != right_kind:
        out.append(_atom_mismatch(path, lhs, rhs, config))
        return _limit_reached(out, limit)

    if left_kind == "object":
        return _collect_object_differences(lhs, rhs, path=path, config=config, out=out, limit=limit)

    if left_kind == "array":
        if config.array_sorting_mode == "ignore":
            return _collect_unordered_array_differences(
                lhs, rhs, path=path, config=config, out=out, limit=limit
            )
        return _collect_array_differences(lhs, rhs, path=path, config=config, out=out, limit=limit)

    if lhs != rhs:
        out.append(_atom_mismatch(path, lhs, rhs, config))
    return _limit_reached(out, limit)


def _collect_object_differences(
    lhs: dict[str, Any],
    rhs: dict[str, Any],
    *,
    path: Path,
    config: DiffConfig,
    out: list[Difference],
    limit: int | None,
) -> bool:
    if config.is_inclusive:
        for key, expected in rhs.items():
            child_path = path.key(key)
            if key in lhs:
                if _collect_differences(
                    lhs[key], expected, path=child_path, config=config, out=out, limit=limit
                ):
                    return True
                continue
            out.append(ObjectKeyMissing(path=child_path, missing_from="actual", other_value=expected))
            if _limit_reached(out, limit):
                return True
        return False

    for key, left_value in lhs.items():
        child_path = path.key(key)
        if key in rhs:
            if _collect_differences(
                left_value, rhs[key], path=child_path, config=config, out=out, limit=limit
            ):
                return True
            continue
        out.append(ObjectKeyMissing(path=child_path, missing_from="rhs", other_value=left_value))
        if _limit_reached(out, limit):
            return True

    for key, right_value in rhs.items():
        if key in lhs:
            continue
        out.append(ObjectKeyMissing(path=path.key(key), missing_from="lhs", other_value=right_value))
        if _limit_reached(out, limit):
            return True
    return False


def _collect_array_differences(
    lhs: list[Any],
    rhs: list[Any],
    *,
    path: Path,
    config: DiffConfig,
    out: list[Difference],
    limit: int | None,
) -> bool:
    # Inclusive comparison only walks the expected indices; actual may be longer.
    max_len = len(rhs) if config.is_inclusive else max(len(lhs), len(rhs))
    for idx in range(max_len):
        child_path = path.index(idx)
        if idx >= len(lhs):
            out.append(
                ArrayIndexMissing(
                    path=child_path,
                    missing_from=lhs_side(config.compare_mode),
                    other_value=rhs[idx],
                )
            )
        elif idx >= len(rhs):
            out.append(
                ArrayIndexMissing(
                    path=child_path,
                    missing_from=rhs_side(config.compare_mode),
                    other_value=lhs[idx],
                )
            )
        elif _collect_differences(
            lhs[idx], rhs[idx], path=child_path, config=config, out=out, limit=limit
        ):
            return True
        if _limit_reached(out, limit):
            return True
    return False


def _collect_unordered_array_differences(
    lhs: list[Any],
    rhs: list[Any],
    *,
    path: Path,
    config: DiffConfig,
    out: list[Difference],
    limit: int | None,
) -> bool:
    """Multiset containment of expected elements (``rhs``) in actual (``lhs``).

    Each actual element satisfies at most one expected element. Expected
    elements are matched in order; when every equivalent actual element is
    already taken, earlier assignments are re-routed along augmenting paths
    before the expected element is reported missing.
    """
    matcher = _ContainmentMatcher(lhs, rhs, config)
    for idx, expected in enumerate(rhs):
        if matcher.match(idx):
            continue
        out.append(ArrayElementMissing(path=path.index(idx), value=expected))
        if _limit_reached(out, limit):
            return True
    return False


class _ContainmentMatcher:
    """Bipartite matching between expected and actual array elements."""

    def __init__(self, actual: list[Any], expected: list[Any], config: DiffConfig) -> None:
        self._actual = actual
        self._expected = expected
        self._config = config
        self._candidates: dict[int, list[int]] = {}
        # actual index -> expected index currently holding it
        self._owner: list[int | None] = [None] * len(actual)

    def match(self, expected_idx: int) -> bool:
        """Assign an actual element to ``expected_idx``, re-routing earlier matches if needed.

        Iterative; the current augmenting path is held in ``edges``.
        """
        free = self._free_candidate(expected_idx)
        if free is not None:
            self._owner[free] = expected_idx
            return True

        visited = [False] * len(self._actual)
        # (expected index, actual index it would take over) along the current path
        edges: list[tuple[int, int]] = []
        stack = [(expected_idx, iter(self._candidates_for(expected_idx)))]
        while stack:
            current, candidates = stack[-1]
            advanced = False
            for actual_idx in candidates:
                if visited[actual_idx]:
                    continue
                visited[actual_idx] = True
                owner = self._owner[actual_idx]
                if owner is None:
                    continue
                edges.append((current, actual_idx))
                free = self._free_candidate(owner)
                if free is not None:
                    self._owner[free] = owner
                    for holder, taken in edges:
                        self._owner[taken] = holder
                    return True
                stack.append((owner, iter(self._candidates_for(owner))))
                advanced = True
                break
            if not advanced:
                stack.pop()
                if edges:
                    edges.pop()
        return False

    def _free_candidate(self, expected_idx: int) -> int | None:
        for actual_idx in self._candidates_for(expected_idx):
            if self._owner[actual_idx] is None:
                return actual_idx
        return None

    def _candidates_for(self, expected_idx: int) -> list[int]:
        cached = self._candidates.get(expected_idx)
        if cached is None:
            expected = self._expected[expected_idx]
            cached = [
                actual_idx
                for actual_idx, actual in enumerate(self._actual)
                if values_equivalent(actual, expected, self._config)
            ]
            self._candidates[expected_idx] = cached
        return cached


def _numbers_equal(lhs: int | float, rhs: int | float, config: DiffConfig) -> bool:
    if config.numeric_mode == "strict":
        if isinstance(lhs, float) != isinstance(rhs, float):
            return False
        if not isinstance(lhs, float):
            return lhs == rhs
    if lhs == rhs:
        return True
    return config.float_compare_mode.floats_equal(_to_float(lhs), _to_float(rhs))


def _to_float(value: int | float) -> float:
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def _atom_mismatch(path: Path, lhs: JsonValue, rhs: JsonValue, config: DiffConfig) -> AtomMismatch:
    return AtomMismatch(path=path, lhs=lhs, rhs=rhs, compare_mode=config.compare_mode)


def _limit_reached(out: list[Difference], limit: int | None) -> bool:
    return limit is not None and len(out) >= limit
