import io
import os

import pytest

from megashell.pipex import PipexError, find_path, pipex, run_single, split_paths


@pytest.fixture
def env():
    return {"PATH": os.environ.get("PATH", "/usr/bin:/bin")}


@pytest.fixture
def infile(tmp_path):
    path = tmp_path / "in.txt"
    path.write_text("hello\nworld\n")
    return path


def test_split_paths_appends_slash_and_drops_empty():
    assert split_paths({"PATH": "/bin::/usr/bin"}) == ["/bin/", "/usr/bin/"]


def test_split_paths_without_path_is_none():
    assert split_paths({"HOME": "/home"}) is None


def test_find_path_searches_directories(tmp_path):
    tool = tmp_path / "tool"
    tool.write_text("#!/bin/sh\necho ran\n")
    tool.chmod(0o755)
    assert find_path(["/nonexistent-dir/", str(tmp_path) + "/"], "tool") == str(tool)


def test_find_path_accepts_executable_as_given(tmp_path):
    tool = tmp_path / "tool"
    tool.write_text("#!/bin/sh\n")
    tool.chmod(0o755)
    assert find_path([], str(tool)) == str(tool)


def test_find_path_missing_inputs():
    assert find_path(None, "cat") is None
    assert find_path(["/bin/"], None) is None


def test_find_path_not_executable(tmp_path):
    plain = tmp_path / "plain"
    plain.write_text("data")
    plain.chmod(0o644)
    assert find_path([str(tmp_path) + "/"], "plain") is None


def test_pipex_runs_pipeline(tmp_path, env, infile):
    out = tmp_path / "out.txt"
    codes = pipex([str(infile), "cat", "tr a-z A-Z", str(out)], env)
    assert codes == [0, 0]
    assert out.read_text() == "HELLO\nWORLD\n"


def test_pipex_truncates_outfile(tmp_path, env, infile):
    out = tmp_path / "out.txt"
    out.write_text("old content that is longer than the new one\n" * 10)
    pipex([str(infile), "cat", "cat", str(out)], env)
    assert out.read_text() == infile.read_text()


def test_pipex_heredoc(tmp_path, env):
    out = tmp_path / "out.txt"
    stdin = io.StringIO("one\ntwo\nEOF\nthree\n")
    codes = pipex(["here_doc", "EOF", "cat", "cat", str(out)], env, stdin)
    assert codes == [0, 0]
    assert out.read_text() == "one\ntwo\n"


def test_pipex_heredoc_limiter_matches_prefix(tmp_path, env):
    out = tmp_path / "out.txt"
    stdin = io.StringIO("alpha\nEOFX\nbeta\n")
    pipex(["here_doc", "EOF", "cat", "cat", str(out)], env, stdin)
    assert out.read_text() == "alpha\n"


def test_pipex_heredoc_needs_five_arguments(tmp_path, env):
    out = tmp_path / "out.txt"
    with pytest.raises(PipexError) as err:
        pipex(["here_doc", "EOF", "cat", str(out)], env, io.StringIO(""))
    assert err.value.exit_code == 1
    assert str(err.value) == "input error"


def test_pipex_missing_command_reports_127(tmp_path, env, infile, capsys):
    out = tmp_path / "out.txt"
    codes = pipex([str(infile), "no_such_command_qq", "cat", str(out)], env)
    assert codes == [127, 0]
    assert out.read_text() == ""
    assert "path error" in capsys.readouterr().err


def test_pipex_too_few_arguments(env, infile):
    with pytest.raises(PipexError) as err:
        pipex([str(infile), "cat", "out"], env)
    assert err.value.exit_code == 1


def test_pipex_missing_infile(tmp_path, env):
    with pytest.raises(PipexError) as err:
        pipex([str(tmp_path / "missing"), "cat", "cat", str(tmp_path / "out")], env)
    assert str(err.value).startswith("infile error")
    assert not (tmp_path / "out").exists()


def test_pipex_without_path(tmp_path, infile):
    with pytest.raises(PipexError) as err:
        pipex([str(infile), "cat", "cat", str(tmp_path / "out")], {})
    assert str(err.value).startswith("path error")


def test_run_single_runs_command(tmp_path, env, infile):
    out = tmp_path / "out.txt"
    assert run_single([str(infile), "x", "tr a-z A-Z", str(out)], env) == 0
    assert out.read_text() == "HELLO\nWORLD\n"


def test_run_single_missing_command(tmp_path, env, infile):
    with pytest.raises(PipexError) as err:
        run_single([str(infile), "x", "no_such_command_qq", str(tmp_path / "o")], env)
    assert err.value.exit_code == 127


def test_run_single_too_few_arguments(env, infile):
    with pytest.raises(PipexError) as err:
        run_single([str(infile), "cat"], env)
    assert str(err.value) == "input error"