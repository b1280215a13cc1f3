"""Tests for the main CLI."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from main import MAX_LENGTH_ENVVAR, app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _clear_max_length_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(MAX_LENGTH_ENVVAR, raising=False)


def test_list_shows_operations() -> None:
    result = runner.invoke(app, ["list"])
    assert result.exit_code == 0
    assert "camel_case" in result.output
    assert "is_palindrome" in result.output


def test_run_camel_case() -> None:
    result = runner.invoke(app, ["run", "camelCase", "hello", "world"])
    assert result.exit_code == 0
    assert result.output.strip() == "helloWorld"


def test_run_truncate_with_max_length() -> None:
    result = runner.invoke(app, ["run", "truncate", "hello world", "--max-length", "8"])
    assert result.exit_code == 0
    assert result.output.strip() == "hello..."


def test_run_reads_max_length_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(MAX_LENGTH_ENVVAR, "8")
    result = runner.invoke(app, ["run", "truncate", "hello world"])
    assert result.exit_code == 0
    assert result.output.strip() == "hello..."


def test_run_ignores_max_length_for_other_operations() -> None:
    result = runner.invoke(app, ["run", "reverse", "abc", "-n", "1"])
    assert result.exit_code == 0
    assert result.output.strip() == "cba"


def test_run_prints_brackets_literally() -> None:
    result = runner.invoke(app, ["run", "clean_whitespace", "[red]  x"])
    assert result.exit_code == 0
    assert result.output.strip() == "[red] x"


def test_run_unknown_operation_exits_with_code_2() -> None:
    result = runner.invoke(app, ["run", "nope", "x"])
    assert result.exit_code == 2
    assert "Unknown operation" in result.output


def test_inspect_shows_every_operation() -> None:
    result = runner.invoke(app, ["inspect", "racecar"])
    assert result.exit_code == 0
    assert "Transformation Summary" in result.output
    assert "Racecar" in result.output
    assert "yes" in result.output


def test_file_applies_operation_per_line(tmp_path: Path) -> None:
    src = tmp_path / "names.txt"
    src.write_text("hello world\nfoo bar baz\n", encoding="utf-8")
    result = runner.invoke(app, ["file", str(src), "snake_case"])
    assert result.exit_code == 0
    assert "hello_world" in result.output
    assert "foo_bar_baz" in result.output
    assert "2 line(s)" in result.output


def test_file_empty(tmp_path: Path) -> None:
    src = tmp_path / "empty.txt"
    src.write_text("", encoding="utf-8")
    result = runner.invoke(app, ["file", str(src), "reverse"])
    assert result.exit_code == 0
    assert "No lines found" in result.output


def test_file_missing_exits_with_code_1(tmp_path: Path) -> None:
    result = runner.invoke(app, ["file", str(tmp_path / "missing.txt"), "reverse"])
    assert result.exit_code == 1
    assert "Could not read" in result.output


def test_file_invalid_utf8_exits_with_code_1(tmp_path: Path) -> None:
    src = tmp_path / "binary.txt"
    src.write_bytes(b"ok\n\xff\xfe bad\n")
    result = runner.invoke(app, ["file", str(src), "reverse"])
    assert result.exit_code == 1
    assert "Could not read" in result.output
    assert result.exception is None or isinstance(result.exception, SystemExit)


def test_file_truncates_each_line(tmp_path: Path) -> None:
    src = tmp_path / "long.txt"
    src.write_text("hello world\nhi\n", encoding="utf-8")
    result = runner.invoke(app, ["file", str(src), "truncate", "-n", "8"])
    assert result.exit_code == 0
    assert "hello..." in result.output
    assert "Applied truncate to 2 line(s)" in result.output
