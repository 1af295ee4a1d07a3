from pathlib import Path

import errno

import pytest
from typer.testing import CliRunner

from pretex.api import transpile
from pretex.core.config import DEFAULT_FOOTER, DEFAULT_HEADER
from pretex.core.exceptions import UnsupportedHeaderLevelError
from pretex.ui.cli import app
from pretex.ui.cli.utils import write_output_file


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_convert_to_stdout(runner: CliRunner, tmp_path: Path) -> None:
    source = _write(tmp_path / "doc.pre", "# Intro\nHello\n")
    result = runner.invoke(app, [str(source)])
    assert result.exit_code == 0, result.output
    assert result.stdout.startswith(DEFAULT_HEADER)
    assert "\\section{Intro}\nHello\n" in result.stdout
    assert DEFAULT_FOOTER in result.stdout


def test_multiple_inputs_are_processed_in_order(runner: CliRunner, tmp_path: Path) -> None:
    first = _write(tmp_path / "a.pre", "# First")
    second = _write(tmp_path / "b.pre", "# Second")
    result = runner.invoke(app, [str(first), str(second)])
    assert result.exit_code == 0, result.output
    assert result.stdout.index("\\section{First}") < result.stdout.index("\\section{Second}")
    assert result.stdout.count("\\begin{document}") == 2


def test_output_file(runner: CliRunner, tmp_path: Path) -> None:
    source = _write(tmp_path / "doc.pre", ">a=b")
    target = tmp_path / "out" / "doc.tex"
    result = runner.invoke(app, [str(source), "--output", str(target)])
    assert result.exit_code == 0, result.output
    assert "a=b \\\\" in target.read_text(encoding="utf-8")
    assert "\\begin{document}" not in result.stdout


def test_output_dir(runner: CliRunner, tmp_path: Path) -> None:
    first = _write(tmp_path / "one.pre", "one")
    second = _write(tmp_path / "two.pre", "two")
    out_dir = tmp_path / "build"
    result = runner.invoke(app, [str(first), str(second), "--output-dir", str(out_dir)])
    assert result.exit_code == 0, result.output
    assert "one\n" in (out_dir / "one.tex").read_text(encoding="utf-8")
    assert "two\n" in (out_dir / "two.tex").read_text(encoding="utf-8")


def test_output_rejects_multiple_inputs(runner: CliRunner, tmp_path: Path) -> None:
    first = _write(tmp_path / "a.pre", "a")
    second = _write(tmp_path / "b.pre", "b")
    result = runner.invoke(app, [str(first), str(second), "-o", str(tmp_path / "x.tex")])
    assert result.exit_code != 0


def test_missing_inputs_is_usage_error(runner: CliRunner) -> None:
    result = runner.invoke(app, [])
    assert result.exit_code == 2


def test_unreadable_input_reports_error(runner: CliRunner, tmp_path: Path) -> None:
    result = runner.invoke(app, [str(tmp_path / "missing.pre")])
    assert result.exit_code == 1
    assert "error while reading" in result.output


def test_fatal_heading_level_exits(runner: CliRunner, tmp_path: Path) -> None:
    source = _write(tmp_path / "doc.pre", "###### deep")
    result = runner.invoke(app, [str(source)])
    assert result.exit_code == 1
    assert "unsupported header level 6" in result.output


def test_fatal_heading_level_raises_in_debug(runner: CliRunner, tmp_path: Path) -> None:
    source = _write(tmp_path / "doc.pre", "###### deep")
    result = runner.invoke(app, [str(source), "--debug"])
    assert result.exit_code == 1
    assert isinstance(result.exception, UnsupportedHeaderLevelError)


def test_config_file(runner: CliRunner, tmp_path: Path) -> None:
    config = _write(tmp_path / "pretex.toml", '[document]\nheader = "BEGIN\\n"\nfooter = "END\\n"\n')
    source = _write(tmp_path / "doc.pre", "text")
    result = runner.invoke(app, [str(source), "--config", str(config)])
    assert result.exit_code == 0, result.output
    assert result.stdout == (
        "BEGIN\n\\begin{flushleft}\ntext\n\\end{flushleft}\nEND\n\n"
    )


def test_invalid_config_file(runner: CliRunner, tmp_path: Path) -> None:
    config = _write(tmp_path / "pretex.toml", "max_header_level = 9\n")
    source = _write(tmp_path / "doc.pre", "text")
    result = runner.invoke(app, [str(source), "--config", str(config)])
    assert result.exit_code == 1


def test_numbered_equations_flag(runner: CliRunner, tmp_path: Path) -> None:
    source = _write(tmp_path / "doc.pre", ">a=b")
    result = runner.invoke(app, [str(source), "--numbered-equations"])
    assert result.exit_code == 0, result.output
    assert "\\begin{align}" in result.stdout


def test_version_flag(runner: CliRunner) -> None:
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert result.stdout.startswith("pretex ")


def test_verbose_reports_progress_on_stderr(runner: CliRunner, tmp_path: Path) -> None:
    text = "# Intro\nHello\n"
    source = _write(tmp_path / "doc.pre", text)
    result = runner.invoke(app, [str(source), "-v"])
    assert result.exit_code == 0, result.output
    assert result.stdout == transpile(text) + "\n"
    assert "Segmented 2 line(s) into 2 block(s) (header(1)=1, normal=1)" in result.stderr
    assert f"Transpiled {source}" in result.stderr


def test_quiet_run_keeps_stderr_empty(runner: CliRunner, tmp_path: Path) -> None:
    source = _write(tmp_path / "doc.pre", "Hello")
    result = runner.invoke(app, [str(source)])
    assert result.exit_code == 0, result.output
    assert result.stderr == ""


def test_verbose_reports_written_target(runner: CliRunner, tmp_path: Path) -> None:
    source = _write(tmp_path / "doc.pre", "Hello")
    target = tmp_path / "doc.tex"
    result = runner.invoke(app, [str(source), "-o", str(target), "-v"])
    assert result.exit_code == 0, result.output
    assert result.stdout == ""
    assert f"Wrote {target}" in result.stderr
    assert target.read_text(encoding="utf-8") == transpile("Hello")


def test_verbose_error_shows_exception_type(runner: CliRunner, tmp_path: Path) -> None:
    result = runner.invoke(app, [str(tmp_path / "missing.pre"), "-v"])
    assert result.exit_code == 1
    assert "type: FileNotFoundError" in result.stderr


def test_write_output_file_keeps_os_error(tmp_path: Path) -> None:
    blocker = _write(tmp_path / "blocker", "")
    with pytest.raises(FileExistsError) as excinfo:
        write_output_file(blocker / "doc.tex", "x")
    assert excinfo.value.errno == errno.EEXIST


def test_unwritable_output_reports_error(runner: CliRunner, tmp_path: Path) -> None:
    blocker = _write(tmp_path / "blocker", "")
    source = _write(tmp_path / "doc.pre", "Hello")
    result = runner.invoke(app, [str(source), "-o", str(blocker / "doc.tex")])
    assert result.exit_code == 1
    assert f"error while writing {blocker / 'doc.tex'}" in result.stderr
    assert result.stdout == ""
