import os

import pytest

from pipex import pipeline
from pipex.pipeline import main, open_input, open_output, run_pipeline

CONTENT = "hello\nworld\nagain\n"


@pytest.fixture
def infile(tmp_path):
    path = tmp_path / "in.txt"
    path.write_text(CONTENT)
    return str(path)


@pytest.fixture
def env():
    return dict(os.environ)


def test_open_input_reads(infile):
    with open_input(infile) as handle:
        assert handle.read() == CONTENT.encode()


def test_open_input_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        open_input(str(tmp_path / "missing"))


def test_open_output_truncates(tmp_path):
    target = tmp_path / "out.txt"
    target.write_bytes(b"old content that is long")
    with open_output(str(target)) as handle:
        handle.write(b"new")
    assert target.read_bytes() == b"new"


def test_open_output_creates(tmp_path):
    target = tmp_path / "fresh.txt"
    with open_output(str(target)) as handle:
        handle.write(b"data")
    assert target.read_bytes() == b"data"


def test_pipeline_transforms(infile, tmp_path, env):
    outfile = tmp_path / "out.txt"
    statuses = run_pipeline(infile, "cat", "tr a-z A-Z", str(outfile), env)
    assert statuses == (0, 0)
    assert outfile.read_text() == CONTENT.upper()


def test_pipeline_filters(infile, tmp_path, env):
    outfile = tmp_path / "out.txt"
    statuses = run_pipeline(infile, "cat", "grep world", str(outfile), env)
    assert statuses == (0, 0)
    assert outfile.read_text() == "world\n"


def test_missing_infile_still_creates_outfile(tmp_path, env, capsys):
    outfile = tmp_path / "out.txt"
    outfile.write_text("stale")
    statuses = run_pipeline(str(tmp_path / "nope"), "cat", "cat", str(outfile), env)
    assert statuses[0] == pipeline.FAILURE_STATUS
    assert outfile.read_text() == ""
    assert "Open file error" in capsys.readouterr().err


def test_unknown_command(infile, tmp_path, env, capsys):
    outfile = tmp_path / "out.txt"
    statuses = run_pipeline(
        infile, "definitely-absent-command-xyz", "cat", str(outfile), env
    )
    assert statuses[0] == pipeline.FAILURE_STATUS
    assert outfile.read_text() == ""
    assert "Path is empty" in capsys.readouterr().err


def test_no_path_in_environment(infile, tmp_path):
    outfile = tmp_path / "out.txt"
    statuses = run_pipeline(infile, "cat", "cat", str(outfile), {})
    assert statuses == (pipeline.FAILURE_STATUS, pipeline.FAILURE_STATUS)


def test_main_wrong_argument_count(capsys):
    assert main(["only", "two"]) == 0
    assert pipeline.USAGE in capsys.readouterr().err


def test_main_runs_pipeline(infile, tmp_path):
    outfile = tmp_path / "out.txt"
    assert main([infile, "cat", "tr a-z A-Z", str(outfile)]) == 0
    assert outfile.read_text() == CONTENT.upper()


def test_usage_error_carries_message():
    with pytest.raises(pipeline.UsageError, match="infile cmd1 cmd2 outfile"):
        pipeline._parse_arguments(["a", "b", "c"])