"""Micro-benchmarks for the diff engine."""

from __future__ import annotations

from dataclasses import dataclass
import time
from typing import Any, Callable

from matchpack.diff import DiffConfig, assert_json_matches_no_panic, diff_values

BENCHMARK_LEFT: dict[str, Any] = {
    "name": "Alice",
    "age": 30,
    "emails": ["alice@example.com", "alice@work.com"],
    "address": {
        "city": "Wonderland",
        "zip": "12345",
    },
}

BENCHMARK_RIGHT: dict[str, Any] = {
    "name": "Bob",
    "age": 25,
    "emails": ["bob@example.com"],
    "address": {
        "city": "Builderland",
        "zip": "54321",
    },
}


@dataclass(slots=True, frozen=True)
class BenchmarkWorkloadStats:
    """Summary metrics for a single benchmark workload."""

    name: str
    iterations: int
    min_ms: float
    max_ms: float
    mean_ms: float
    total_ms: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "iterations": self.iterations,
            "min_ms": self.min_ms,
            "max_ms": self.max_ms,
            "mean_ms": self.mean_ms,
            "total_ms": self.total_ms,
        }


@dataclass(slots=True, frozen=True)
class BenchmarkSuiteResult:
    """Combined benchmark result across diff workloads."""

    iterations: int
    workloads: dict[str, BenchmarkWorkloadStats]
    total_mean_ms: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "iterations": self.iterations,
            "total_mean_ms": self.total_mean_ms,
            "workloads": {
                name: stats.to_dict()
                for name, stats in sorted(self.workloads.items())
            },
        }


def run_benchmark_suite(*, iterations: int = 1000) -> BenchmarkSuiteResult:
    """Time strict, inclusive and unordered comparisons of a fixed workload."""
    if iterations < 1:
        raise ValueError("iterations must be >= 1")

    strict = DiffConfig.strict()
    inclusive = DiffConfig.inclusive()
    unordered = inclusive.consider_array_sorting(False)
    unordered_actual = [dict(BENCHMARK_LEFT, id=idx) for idx in range(16)]
    unordered_expected = list(reversed(unordered_actual))

    workloads = {
        "strict_diff": _measure_workload(
            "strict_diff",
            iterations,
            lambda: diff_values(BENCHMARK_LEFT, BENCHMARK_RIGHT, strict),
        ),
        "inclusive_diff": _measure_workload(
            "inclusive_diff",
            iterations,
            lambda: diff_values(BENCHMARK_LEFT, BENCHMARK_RIGHT, inclusive),
        ),
        "unordered_contains": _measure_workload(
            "unordered_contains",
            iterations,
            lambda: diff_values(unordered_actual, unordered_expected, unordered),
        ),
        "render_message": _measure_workload(
            "render_message",
            iterations,
            lambda: assert_json_matches_no_panic(BENCHMARK_LEFT, BENCHMARK_RIGHT, strict),
        ),
    }

    total_mean_ms = round(sum(workload.mean_ms for workload in workloads.values()), 6)
    return BenchmarkSuiteResult(
        iterations=iterations,
        workloads=workloads,
        total_mean_ms=total_mean_ms,
    )


def render_benchmark_summary(result: BenchmarkSuiteResult) -> str:
    lines = [f"iterations={result.iterations} total_mean_ms={result.total_mean_ms}"]
    for name, stats in sorted(result.workloads.items()):
        lines.append(
            f"  {name}: mean_ms={stats.mean_ms} min_ms={stats.min_ms} "
            f"max_ms={stats.max_ms} total_ms={stats.total_ms}"
        )
    return "\n".join(lines)


def _measure_workload(
    name: str,
    iterations: int,
    fn: Callable[[], Any],
) -> BenchmarkWorkloadStats:
    samples: list[float] = []
    for _ in range(iterations):
        start = time.perf_counter()
        fn()
        end = time.perf_counter()
        samples.append((end - start) * 1000.0)

    return BenchmarkWorkloadStats(
        name=name,
        iterations=iterations,
        min_ms=round(min(samples), 6),
        max_ms=round(max(samples), 6),
        mean_ms=round(sum(samples) / len(samples), 6),
        total_ms=round(sum(samples), 6),
    )
