import warnings

import pytest
from click.testing import CliRunner

from jobseq import service
from jobseq.cli import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class TestSequenceCommand:

    def test_sequence_argument(self, runner) -> None:
        result = runner.invoke(cli, ["sequence", r"a => \nb => c\nc => f\nd => a\ne => b\nf =>"])
        assert result.exit_code == 0
        assert result.output.strip() == "afcbde"

    def test_sequence_separator(self, runner) -> None:
        result = runner.invoke(cli, ["sequence", "--separator", " ", "a =>, b => c, c =>"])
        assert result.exit_code == 0
        assert result.output.strip() == "a c b"

    def test_sequence_stdin(self, runner) -> None:
        result = runner.invoke(cli, ["sequence"], input="a =>\nb =>\nc =>\n")
        assert result.exit_code == 0
        assert result.output.strip() == "abc"

    def test_sequence_empty(self, runner) -> None:
        result = runner.invoke(cli, ["sequence", "-"], input="")
        assert result.exit_code == 0
        assert result.output.strip() == ""

    def test_sequence_file(self, runner, tmp_path) -> None:
        path = tmp_path / "jobs.txt"
        path.write_text("a =>\nb => c\nc =>\n", encoding="utf-8")
        result = runner.invoke(cli, ["sequence", "--file", str(path)])
        assert result.exit_code == 0
        assert result.output.strip() == "acb"

    def test_self_dependency_exit_code(self, runner) -> None:
        result = runner.invoke(cli, ["sequence", r"a => \nb => \nc => c"])
        assert result.exit_code == 1
        assert "Jobs cannot depend on themselves" in result.output

    def test_circular_dependency_exit_code(self, runner) -> None:
        result = runner.invoke(cli, ["sequence", r"a => \nb => c\nc => f\nd => a\ne => \nf => b"])
        assert result.exit_code == 1
        assert "Jobs cannot have circular dependencies" in result.output
        assert "b -> c -> f -> b" in result.output

    def test_format_error_exit_code(self, runner) -> None:
        result = runner.invoke(cli, ["sequence", "hello world"])
        assert result.exit_code == 1
        assert "Invalid job declarations" in result.output

    def test_unknown_job_exit_code(self, runner) -> None:
        result = runner.invoke(cli, ["sequence", "a => b"])
        assert result.exit_code == 1
        assert "Unknown job" in result.output

    def test_missing_file(self, runner, tmp_path) -> None:
        result = runner.invoke(cli, ["sequence", "--file", str(tmp_path / "nope.txt")])
        assert result.exit_code == 1
        assert "Jobs file not found" in result.output

    def test_argument_and_file_is_usage_error(self, runner, tmp_path) -> None:
        result = runner.invoke(cli, ["sequence", "a =>", "--file", str(tmp_path / "x.txt")])
        assert result.exit_code == 2


class TestParseCommand:

    def test_parse_prints_map(self, runner) -> None:
        result = runner.invoke(cli, ["parse", "a => b, b =>"])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["a => b", "b =>"]

    def test_parse_error(self, runner) -> None:
        result = runner.invoke(cli, ["parse", "a -> b"])
        assert result.exit_code == 1


def test_debug_flag(runner) -> None:
    result = runner.invoke(cli, ["--debug", "sequence", "a =>"])
    assert result.exit_code == 0
    assert "[DEBUG] Parsed 1 job(s)" in result.output


def test_stdin_read_without_deprecation_warnings(runner) -> None:
    with warnings.catch_warnings():
        warnings.filterwarnings("error", message=".*get_text_stream.*", category=DeprecationWarning)
        result = runner.invoke(cli, ["sequence", "-"], input="a =>\nb => a\n")
    assert result.exit_code == 0
    assert result.output.strip() == "ab"


@pytest.mark.parametrize("command", ["sequence", "parse"])
def test_interrupt_exit_code(runner, monkeypatch, command) -> None:
    def interrupted(text):
        raise KeyboardInterrupt

    monkeypatch.setattr(service, "parse", interrupted)
    result = runner.invoke(cli, [command, "a =>"])
    assert result.exit_code == 130
    assert "Interrupted by user" in result.output
