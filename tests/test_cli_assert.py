import json
from pathlib import Path
from typing import Any

from typer.testing import CliRunner

from matchpack.cli.app import app


def _write_json(path: Path, payload: Any) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_cli_assert_passes_for_included_document(tmp_path: Path) -> None:
    actual = _write_json(tmp_path / "actual.json", {"id": 1, "username": "bob", "email": "b@x"})
    expected = _write_json(tmp_path / "expected.json", {"id": 1, "username": "bob"})

    runner = CliRunner()
    result = runner.invoke(app, ["assert", str(actual), str(expected)])

    assert result.exit_code == 0
    assert "assert passed (inclusive)" in result.stdout


def test_cli_assert_fails_with_rendered_differences(tmp_path: Path) -> None:
    actual = _write_json(tmp_path / "actual.json", {"a": {}})
    expected = _write_json(tmp_path / "expected.json", {"a": {"b": 1}})

    runner = CliRunner()
    result = runner.invoke(app, ["assert", str(actual), str(expected)])

    assert result.exit_code == 1
    assert "assert failed: 1 difference(s)" in result.output
    assert 'json atom at path ".a.b" is missing from actual' in result.output


def test_cli_assert_strict_mode_rejects_extra_keys(tmp_path: Path) -> None:
    actual = _write_json(tmp_path / "actual.json", {"a": 1, "b": 2})
    expected = _write_json(tmp_path / "expected.json", {"a": 1})

    runner = CliRunner()
    inclusive = runner.invoke(app, ["assert", str(actual), str(expected)])
    strict = runner.invoke(app, ["assert", str(actual), str(expected), "--mode", "strict"])

    assert inclusive.exit_code == 0
    assert strict.exit_code == 1
    assert 'json atom at path ".b" is missing from rhs' in strict.output


def test_cli_assert_json_output(tmp_path: Path) -> None:
    actual = _write_json(tmp_path / "actual.json", [1, 2, 3])
    expected = _write_json(tmp_path / "expected.json", [3, 4])

    runner = CliRunner()
    result = runner.invoke(
        app,
        ["assert", str(actual), str(expected), "--ignore-order", "--json"],
    )

    assert result.exit_code == 1
    payload = json.loads(result.stdout.strip())
    assert payload["status"] == "fail"
    assert payload["exit_code"] == 1
    assert payload["actual_path"] == str(actual)
    assert payload["differences"] == [
        {
            "kind": "array_element_missing",
            "path": "[1]",
            "missing_from": "actual",
            "value": 4,
        }
    ]


def test_cli_assert_quiet_still_reports_failures(tmp_path: Path) -> None:
    actual = _write_json(tmp_path / "actual.json", {"a": 1})
    expected = _write_json(tmp_path / "expected.json", {"a": 2})

    runner = CliRunner()
    passing = runner.invoke(app, ["--quiet", "assert", str(actual), str(actual)])
    failing = runner.invoke(app, ["--quiet", "assert", str(actual), str(expected)])

    assert passing.exit_code == 0
    assert passing.stdout == ""
    assert failing.exit_code == 1
    assert "assert failed" in failing.output


def test_cli_assert_invalid_mode_exit_code(tmp_path: Path) -> None:
    actual = _write_json(tmp_path / "actual.json", {})

    runner = CliRunner()
    result = runner.invoke(app, ["assert", str(actual), str(actual), "--mode", "fuzzy"])

    assert result.exit_code == 2
    assert "assert failed: Invalid compare mode 'fuzzy'" in result.output


def test_cli_assert_rejects_non_finite_numbers(tmp_path: Path) -> None:
    actual = tmp_path / "actual.json"
    actual.write_text('{"a": NaN}', encoding="utf-8")

    runner = CliRunner()
    result = runner.invoke(app, ["assert", str(actual), str(actual)])

    assert result.exit_code == 2
    assert "Couldn't convert left hand side value to JSON" in result.output
