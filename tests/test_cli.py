from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterator

import pytest
from click.testing import CliRunner

from pdfstitch.cli import cli


@pytest.fixture(autouse=True)
def reset_cli_logger() -> Iterator[None]:
    yield
    logger = logging.getLogger("pdfstitch")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


def test_merge_command(
    tmp_path: Path,
    sample_pdfs: list[Path],
    read_widths: Callable[[bytes], list[int]],
) -> None:
    output = tmp_path / "merged.pdf"

    result = CliRunner().invoke(
        cli,
        ["merge", *map(str, sample_pdfs), "-o", str(output), "--base-dir", str(tmp_path)],
    )

    assert result.exit_code == 0, result.output
    assert "Successfully created" in result.output
    assert read_widths(output.read_bytes()) == [101, 102, 201]


def test_merge_command_fails_on_invalid_input(tmp_path: Path, sample_pdfs: list[Path]) -> None:
    broken = tmp_path / "broken.pdf"
    broken.write_text("not a pdf")
    output = tmp_path / "merged.pdf"

    result = CliRunner().invoke(
        cli,
        ["merge", str(sample_pdfs[0]), str(broken), "-o", str(output), "--base-dir", str(tmp_path)],
    )

    assert result.exit_code == 1
    assert "Failed to merge PDFs" in " ".join(result.output.split())
    assert not output.exists()


def test_merge_command_best_effort(
    tmp_path: Path,
    sample_pdfs: list[Path],
    read_widths: Callable[[bytes], list[int]],
) -> None:
    output = tmp_path / "merged.pdf"

    result = CliRunner().invoke(
        cli,
        [
            "merge",
            str(tmp_path / "missing.pdf"),
            str(sample_pdfs[1]),
            "-o",
            str(output),
            "--base-dir",
            str(tmp_path),
            "--best-effort",
        ],
    )

    assert result.exit_code == 0, result.output
    assert "file not found" in " ".join(result.output.split())
    assert read_widths(output.read_bytes()) == [201]


def test_merge_command_refuses_output_outside_base(tmp_path: Path, sample_pdfs: list[Path]) -> None:
    base = tmp_path / "base"
    base.mkdir()
    output = tmp_path / "merged.pdf"
    args = ["merge", *map(str, sample_pdfs), "-o", str(output), "--base-dir", str(base)]

    refused = CliRunner().invoke(cli, args)
    allowed = CliRunner().invoke(cli, [*args, "--allow-outside-base-dir"])

    assert refused.exit_code == 1
    assert allowed.exit_code == 0, allowed.output
    assert output.exists()


def test_append_command(
    tmp_path: Path,
    sample_pdfs: list[Path],
    read_widths: Callable[[bytes], list[int]],
) -> None:
    output = tmp_path / "combined.pdf"

    result = CliRunner().invoke(
        cli,
        ["append", str(sample_pdfs[1]), str(sample_pdfs[0]), "-o", str(output), "--base-dir", str(tmp_path)],
    )

    assert result.exit_code == 0, result.output
    assert "Appended 1 page(s)" in " ".join(result.output.split())
    assert read_widths(output.read_bytes()) == [101, 102, 201]


@pytest.mark.parametrize("command", ["merge", "append"])
def test_relative_inputs_resolve_against_base_dir(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    pdf_bytes_factory: Callable[..., bytes],
    read_widths: Callable[[bytes], list[int]],
    command: str,
) -> None:
    work = tmp_path / "work"
    work.mkdir()
    (work / "a.pdf").write_bytes(pdf_bytes_factory([101]))
    (work / "b.pdf").write_bytes(pdf_bytes_factory([201, 202]))
    monkeypatch.chdir(tmp_path)

    result = CliRunner().invoke(cli, [command, "a.pdf", "b.pdf", "-o", "m.pdf", "--base-dir", "work"])

    assert result.exit_code == 0, result.output
    expected = [101, 201, 202] if command == "merge" else [201, 202, 101]
    assert read_widths((work / "m.pdf").read_bytes()) == expected


def test_append_command_missing_input(tmp_path: Path, sample_pdfs: list[Path]) -> None:
    result = CliRunner().invoke(
        cli,
        ["append", "missing.pdf", str(sample_pdfs[0]), "-o", "out.pdf", "--base-dir", str(tmp_path)],
    )

    assert result.exit_code == 1
    output = " ".join(result.output.split())
    assert "✗ Error:" in output
    assert "No such file or directory" in output
    assert not (tmp_path / "out.pdf").exists()


def test_info_command(sample_pdfs: list[Path]) -> None:
    result = CliRunner().invoke(cli, ["info", str(sample_pdfs[0])])

    assert result.exit_code == 0, result.output
    assert "Number of Pages" in result.output


def test_info_command_invalid_pdf(tmp_path: Path) -> None:
    broken = tmp_path / "broken.pdf"
    broken.write_text("not a pdf")

    result = CliRunner().invoke(cli, ["info", str(broken)])

    assert result.exit_code == 1
    assert "Error" in result.output
