import json

import pytest

from bf_trace.cli import main

HELLO_A = "++++++++[>++++++++<-]>+."


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    monkeypatch.delenv("BF_EXECUTION_LIMIT", raising=False)
    monkeypatch.delenv("BF_MEMORY_LIMIT", raising=False)
    monkeypatch.chdir(tmp_path)


def write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text)
    return str(path)


def test_runs_program_file(tmp_path, capsys):
    code = main([write(tmp_path, "a.bf", HELLO_A)])
    assert code == 0
    assert capsys.readouterr().out == "A"


def test_input_text(tmp_path, capsys):
    code = main([write(tmp_path, "inc.bf", ",+."), "--input", "a"])
    assert code == 0
    assert capsys.readouterr().out == "b"


def test_input_file(tmp_path, capsys):
    data = tmp_path / "in.bin"
    data.write_bytes(b"xy\x00")
    code = main([write(tmp_path, "echo.bf", ",[.,]"), "--input-file", str(data)])
    assert code == 0
    assert capsys.readouterr().out == "xy"


def test_error_exit_code(tmp_path, capsys):
    code = main([write(tmp_path, "bad.bf", "<")])
    assert code == 1
    assert "PointerUnderflow" in capsys.readouterr().err


def test_execution_limit_flag(tmp_path, capsys):
    code = main([write(tmp_path, "loop.bf", "+[]"), "--execution-limit", "10"])
    assert code == 3
    assert "ExecutionLimitExceeded" in capsys.readouterr().err


def test_limit_from_environment(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("BF_MEMORY_LIMIT", "1")
    code = main([write(tmp_path, "right.bf", ">")])
    assert code == 1
    assert "MemoryLimitExceeded" in capsys.readouterr().err


def test_flag_overrides_config_file(tmp_path, capsys):
    config = write(tmp_path, "limits.yaml", "execution_limit: 3\n")
    program = write(tmp_path, "p.bf", "+++++")
    assert main([program, "--config", config]) == 3
    assert main([program, "--config", config, "--execution-limit", "0"]) == 0


def test_bad_config_is_usage_error(tmp_path, capsys):
    config = write(tmp_path, "limits.yaml", "nonsense: 1\n")
    with pytest.raises(SystemExit) as exc:
        main([write(tmp_path, "p.bf", "+"), "--config", config])
    assert exc.value.code == 2


def test_missing_program_is_usage_error(tmp_path):
    with pytest.raises(SystemExit) as exc:
        main([str(tmp_path / "missing.bf")])
    assert exc.value.code == 2


def test_trace_and_summary(tmp_path, capsys):
    code = main([write(tmp_path, "p.bf", "+."), "--trace", "--summary"])
    captured = capsys.readouterr()
    assert code == 0
    assert "Step 1: '+'" in captured.out
    assert captured.out.endswith("\x01")
    summary = json.loads(captured.err)
    assert summary["executed"] == 2


def test_program_from_stdin(monkeypatch, capsys):
    import io
    monkeypatch.setattr("sys.stdin", io.StringIO(HELLO_A))
    assert main(["-"]) == 0
    assert capsys.readouterr().out == "A"


@pytest.mark.parametrize("text", ["execution_limit:\n", "memory_limit: 2.5\n"])
def test_bad_config_value_is_usage_error(tmp_path, text):
    config = write(tmp_path, "limits.yaml", text)
    with pytest.raises(SystemExit) as exc:
        main([write(tmp_path, "p.bf", "+"), "--config", config])
    assert exc.value.code == 2


def test_trailing_newline_still_hits_limit(tmp_path, capsys):
    code = main([write(tmp_path, "p.bf", "++\n"), "--execution-limit", "2"])
    assert code == 3
