"""Unit tests for CLI command handling."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from cli.main import main
from tests.fixture_paths import fixture_path


def test_cli_values_prints_metadata_block(tmp_path: Path, capsys) -> None:
    """CLI values should print the category block for a list file."""
    input_path = tmp_path / "selection.txt"
    input_path.write_text("1. Red\n2. Green\n", encoding="utf-8")

    exit_code = main(["values", "--input", str(input_path)])
    output = capsys.readouterr().out

    assert exit_code == 0 and output == '\t_1 "Red",\n\t_2 "Green"\n'


def test_cli_values_reports_invalid_lines_on_stderr(tmp_path: Path, capsys) -> None:
    """Skipped lines should be reported as warnings, not failures."""
    input_path = tmp_path / "selection.txt"
    input_path.write_text("1. Red\nBlue\n", encoding="utf-8")

    exit_code = main(["values", "--input", str(input_path)])
    captured = capsys.readouterr()

    assert exit_code == 0 and "warning=Invalid format in line: Blue" in captured.err


def test_cli_values_reads_stdin(monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    """CLI should read the selection from stdin when no input is given."""
    monkeypatch.setattr("sys.stdin", io.StringIO("Apple\nBanana"))

    exit_code = main(["values", "--mode", "index"])
    output = capsys.readouterr().out

    assert exit_code == 0 and output == '\t_1 "Apple",\n\t_2 "Banana"\n'


def test_cli_values_applies_options_file(capsys) -> None:
    """Options files should set mode and style for the command."""
    exit_code = main(
        [
            "values",
            "--input",
            str(fixture_path("selections/index_list.txt")),
            "--config",
            str(fixture_path("options_index_note.yaml")),
        ]
    )
    output = capsys.readouterr().out

    assert exit_code == 0 and output.startswith('\t_1 "Apple",\n\t_2 "Banana"')


def test_cli_empty_selection_echoes_input(tmp_path: Path, capsys) -> None:
    """Empty selections should be written back unchanged with a warning."""
    input_path = tmp_path / "selection.txt"
    input_path.write_text("  \n", encoding="utf-8")

    exit_code = main(["values", "--input", str(input_path)])
    captured = capsys.readouterr()

    assert exit_code == 0 and captured.out == "  \n" and "No text selected." in captured.err


def test_cli_swap_label_code(capsys) -> None:
    """swap-label-code should move trailing codes to the front."""
    exit_code = main(["swap-label-code", "--input", str(fixture_path("selections/label_code.txt"))])
    output = capsys.readouterr().out

    assert exit_code == 0 and output == "1\tRed\n2\tGreen\nBlue\n"


def test_cli_check_duplicates_uses_label_fields(tmp_path: Path, capsys) -> None:
    """check-duplicates should honor field and style flags."""
    input_path = tmp_path / "selection.txt"
    input_path.write_text(
        '<value label="a">Red</value>\n<value label="a">Blue</value>\n',
        encoding="utf-8",
    )

    exit_code = main(
        ["check-duplicates", "--input", str(input_path), "--fields", "label", "--style", "note"]
    )
    output = capsys.readouterr().out

    assert exit_code == 0 and "<note>❌ ERROR Duplicate Label: a</note>" in output


def test_cli_missing_input_file_returns_error(tmp_path: Path, capsys) -> None:
    """Unreadable input should print a friendly error and exit one."""
    exit_code = main(["values", "--input", str(tmp_path / "missing.txt")])
    output = capsys.readouterr().out.strip()

    assert exit_code == 1 and output.startswith("error=")


def test_cli_invalid_env_option_returns_error(monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    """Invalid environment options should be reported as config errors."""
    monkeypatch.setenv("MDDKIT_ANNOTATION_STYLE", "banner")

    exit_code = main(["check-duplicates", "--input", "-"])
    output = capsys.readouterr().out.strip()

    assert exit_code == 1 and "annotation_style" in output


def test_cli_undecodable_input_returns_error(tmp_path: Path, capsys) -> None:
    """Input that is not UTF-8 should be reported without a traceback."""
    input_path = tmp_path / "selection.txt"
    input_path.write_bytes(b"1. R\xffed\n")

    exit_code = main(["values", "--input", str(input_path)])
    output = capsys.readouterr().out.strip()

    assert exit_code == 1 and output.startswith("error=Failed to read selection")


def test_cli_values_can_turn_off_ampersand_escaping(tmp_path: Path, capsys) -> None:
    """--no-escape-ampersands should keep raw ampersands."""
    input_path = tmp_path / "selection.txt"
    input_path.write_text("1. R&D\n", encoding="utf-8")

    default_code = main(["values", "--input", str(input_path)])
    default_output = capsys.readouterr().out
    plain_code = main(["values", "--input", str(input_path), "--no-escape-ampersands"])
    plain_output = capsys.readouterr().out

    assert (default_code, plain_code) == (0, 0)
    assert default_output == '\t_1 "R&amp;D"\n' and plain_output == '\t_1 "R&D"\n'
