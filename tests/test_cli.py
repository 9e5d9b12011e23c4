from pathlib import Path

from typer.testing import CliRunner

from ncut.cli import app

runner = CliRunner()


def test_cut_by_title_from_file(tmp_path: Path):
    path = tmp_path / "people.tsv"
    path.write_text("name\tage\tcity\nAlice\t30\tNYC\n")
    result = runner.invoke(app, [str(path), "-t", "name,city"])
    assert result.exit_code == 0
    assert result.stdout == "name\tcity\nAlice\tNYC\n"


def test_cut_by_number_from_stdin():
    result = runner.invoke(app, ["-f", "1,3-4", "-d", ","], input="a,b,c,d,e\n")
    assert result.exit_code == 0
    assert result.stdout == "a,c,d\n"


def test_characters_ignore_delimiter():
    result = runner.invoke(app, ["-c", "2,4-6", "-d", ","], input="abc,efghij\n")
    assert result.exit_code == 0
    assert result.stdout == "b,ef\n"


def test_delimiter_from_config(tmp_path: Path):
    config = tmp_path / "ncut.yaml"
    config.write_text("delimiter: ';'\n")
    result = runner.invoke(app, ["-f", "2", "--config", str(config)], input="a;b\n1;2\n")
    assert result.exit_code == 0
    assert result.stdout == "b\n2\n"


def test_selection_is_required():
    result = runner.invoke(app, [], input="a\tb\n")
    assert result.exit_code == 2


def test_selection_modes_are_exclusive():
    result = runner.invoke(app, ["-f", "1", "-t", "a"], input="a\tb\n")
    assert result.exit_code == 2


def test_missing_file_reports_path(tmp_path: Path):
    missing = tmp_path / "nope.tsv"
    result = runner.invoke(app, [str(missing), "-f", "1"])
    assert result.exit_code == 1
    assert "nope.tsv" in result.output


def test_invalid_spec_exits_without_output():
    result = runner.invoke(app, ["-f", "x"], input="a\tb\n")
    assert result.exit_code == 1
    assert "invalid field list" in result.output
    assert "a\tb" not in result.output


def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert result.stdout.startswith("ncut ")


def test_stdin_uses_configured_encoding():
    result = runner.invoke(
        app, ["-f", "1", "-d", ",", "--encoding", "latin-1"], input="café,x\n".encode("latin-1")
    )
    assert result.exit_code == 0
    assert result.stdout == "café\n"


def test_stdin_keeps_embedded_carriage_return():
    result = runner.invoke(app, ["-f", "2", "-d", ","], input=b"x\ry,z\n1,2\n")
    assert result.exit_code == 0
    assert result.stdout == "z\n2\n"
