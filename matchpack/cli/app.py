import json
from importlib.metadata import PackageNotFoundError, version as package_version
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import typer

from matchpack.core import MatchError
from matchpack.diff import (
    AssertionResult,
    DiffConfig,
    FloatCompareMode,
    compare_json,
    render_diff_summary,
    render_differences,
)
from matchpack.performance import render_benchmark_summary, run_benchmark_suite

app = typer.Typer(help="MatchKit CLI")


@dataclass(slots=True)
class _OutputOptions:
    quiet: bool = False
    no_color: bool = False
    stable_json: bool = True


_OUTPUT_OPTIONS = _OutputOptions()


def _resolve_cli_version() -> str:
    try:
        return package_version("matchkit")
    except PackageNotFoundError:
        from matchkit import __version__ as local_version

        return local_version


def _version_callback(value: bool) -> None:
    if not value:
        return
    typer.echo(_resolve_cli_version(), color=False)
    raise typer.Exit()


@app.callback()
def app_options(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show MatchKit version and exit.",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        help="Suppress non-error text output.",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable ANSI color output.",
    ),
    stable_json: bool = typer.Option(
        True,
        "--stable-json/--pretty-json",
        help="Emit stable compact JSON (or pretty JSON).",
    ),
) -> None:
    """Global output controls for all CLI commands."""
    _OUTPUT_OPTIONS.quiet = quiet
    _OUTPUT_OPTIONS.no_color = no_color
    _OUTPUT_OPTIONS.stable_json = stable_json


def _echo(message: str, *, err: bool = False, force: bool = False) -> None:
    if _OUTPUT_OPTIONS.quiet and not err and not force:
        return
    typer.echo(message, err=err, color=not _OUTPUT_OPTIONS.no_color)


def _echo_json(payload: dict[str, Any], *, err: bool = False) -> None:
    if _OUTPUT_OPTIONS.stable_json:
        rendered = json.dumps(
            payload,
            ensure_ascii=True,
            sort_keys=True,
            separators=(",", ":"),
        )
    else:
        rendered = json.dumps(
            payload,
            ensure_ascii=True,
            sort_keys=True,
            indent=2,
        )
    typer.echo(rendered, err=err, color=not _OUTPUT_OPTIONS.no_color)


def _build_config(
    *,
    mode: str,
    ignore_order: bool,
    assume_float: bool,
    epsilon: float | None,
) -> DiffConfig:
    config = DiffConfig(compare_mode=mode)
    if ignore_order:
        config = config.consider_array_sorting(False)
    if assume_float:
        config = config.with_numeric_mode("assume_float")
    if epsilon is not None:
        config = config.with_float_compare_mode(FloatCompareMode.epsilon(epsilon))
    return config


def _load_json_file(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def _compare_files(
    command: str,
    left: Path,
    right: Path,
    *,
    mode: str,
    ignore_order: bool,
    assume_float: bool,
    epsilon: float | None,
    json_output: bool,
) -> AssertionResult:
    try:
        config = _build_config(
            mode=mode,
            ignore_order=ignore_order,
            assume_float=assume_float,
            epsilon=epsilon,
        )
        left_value = _load_json_file(left)
        right_value = _load_json_file(right)
        return compare_json(left_value, right_value, config)
    except (MatchError, OSError, ValueError) as error:
        message = f"{command} failed: {error}"
        if json_output:
            _echo_json(
                {
                    "status": "error",
                    "exit_code": 2,
                    "message": message,
                    "left_path": str(left),
                    "right_path": str(right),
                }
            )
        else:
            _echo(message, err=True)
        raise typer.Exit(code=2) from error


def _render_text_result(result: AssertionResult, *, max_differences: int) -> str:
    if result.passed:
        return "no differences detected"
    limit = max(1, max_differences)
    shown = render_differences(result.differences[:limit])
    remaining = len(result.differences) - limit
    if remaining > 0:
        shown = f"{shown}\n\n... {remaining} additional difference(s) not shown"
    return shown


_MODE_HELP = "Compare mode: strict (exact equality) or inclusive (left must contain right)."
_IGNORE_ORDER_HELP = "Ignore array element order (inclusive mode only)."
_ASSUME_FLOAT_HELP = "Convert all numbers to float before comparing."
_EPSILON_HELP = "Treat floats within this absolute tolerance as equal."


@app.command()
def diff(
    left: Path = typer.Argument(..., help="Path to left (actual) JSON file."),
    right: Path = typer.Argument(..., help="Path to right (expected) JSON file."),
    mode: str = typer.Option("strict", "--mode", help=_MODE_HELP),
    ignore_order: bool = typer.Option(False, "--ignore-order", help=_IGNORE_ORDER_HELP),
    assume_float: bool = typer.Option(False, "--assume-float", help=_ASSUME_FLOAT_HELP),
    epsilon: float | None = typer.Option(None, "--epsilon", min=0.0, help=_EPSILON_HELP),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Emit machine-readable diff output.",
    ),
    max_differences: int = typer.Option(
        20,
        "--max-differences",
        help="Maximum number of differences to print in text mode.",
    ),
) -> None:
    """Diff two JSON documents and print every difference."""
    result = _compare_files(
        "diff",
        left,
        right,
        mode=mode,
        ignore_order=ignore_order,
        assume_float=assume_float,
        epsilon=epsilon,
        json_output=json_output,
    )

    if json_output:
        payload = result.to_dict()
        _echo_json(
            {
                **payload,
                "diff_status": payload.get("status"),
                "status": "ok",
                "exit_code": 0,
                "message": "diff completed",
                "left_path": str(left),
                "right_path": str(right),
            }
        )
        return

    _echo(render_diff_summary(result.differences))
    _echo(_render_text_result(result, max_differences=max_differences))


@app.command(name="assert")
def assert_match(
    actual: Path = typer.Argument(..., help="Path to actual JSON file."),
    expected: Path = typer.Argument(..., help="Path to expected JSON file."),
    mode: str = typer.Option("inclusive", "--mode", help=_MODE_HELP),
    ignore_order: bool = typer.Option(False, "--ignore-order", help=_IGNORE_ORDER_HELP),
    assume_float: bool = typer.Option(False, "--assume-float", help=_ASSUME_FLOAT_HELP),
    epsilon: float | None = typer.Option(None, "--epsilon", min=0.0, help=_EPSILON_HELP),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Emit machine-readable assertion output.",
    ),
    max_differences: int = typer.Option(
        20,
        "--max-differences",
        help="Maximum number of differences to print in text mode.",
    ),
) -> None:
    """Assert that the actual JSON document matches the expected one."""
    result = _compare_files(
        "assert",
        actual,
        expected,
        mode=mode,
        ignore_order=ignore_order,
        assume_float=assume_float,
        epsilon=epsilon,
        json_output=json_output,
    )

    if json_output:
        payload = result.to_dict()
        payload["actual_path"] = str(actual)
        payload["expected_path"] = str(expected)
        _echo_json(payload)
    elif result.passed:
        _echo(f"assert passed ({result.config.compare_mode}): actual={actual} expected={expected}")
    else:
        _echo(
            f"assert failed: {len(result.differences)} difference(s) "
            f"(actual={actual} expected={expected})",
            force=True,
        )
        _echo(_render_text_result(result, max_differences=max_differences), force=True)

    if not result.passed:
        raise typer.Exit(code=result.exit_code)


@app.command()
def benchmark(
    iterations: int = typer.Option(
        1000,
        "--iterations",
        min=1,
        help="Iterations per benchmark workload.",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Emit machine-readable benchmark output.",
    ),
) -> None:
    """Time representative diff workloads."""
    result = run_benchmark_suite(iterations=iterations)
    if json_output:
        _echo_json({"status": "ok", "exit_code": 0, **result.to_dict()})
        return
    _echo(render_benchmark_summary(result))


def main() -> None:
    app()
