#!/usr/bin/env python3
import pytest

import myapp.core.app as app
import myapp.core.config as cfg
from myapp.cli.__main__ import main


@pytest.fixture(autouse=True)
def isolated_context(tmp_path, monkeypatch):
    monkeypatch.setattr(app, "_CTX", None)
    monkeypatch.setattr(cfg, "GLOBAL_CONFIG_PATH", tmp_path / "missing.json", raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("MYAPP_LOG_LEVEL", raising=False)
    monkeypatch.delenv("MYAPP_MAN_DIR", raising=False)


# --- One line per valid invocation --- #

@pytest.mark.parametrize("argv,expected", [
    (["server"], "server start on 127.0.0.1:8080 (verbosity: 0)"),
    (["server", "-vv", "--port", "9090"], "server start on 127.0.0.1:9090 (verbosity: 2)"),
    (["remote", "origin"], "remote info requested: origin"),
    (["remote", "origin", "--url", "https://example.com/repo.git"],
     "remote added: origin -> https://example.com/repo.git"),
    (["remote", "origin", "--remove", "--url", "https://x"], "remote removed: origin"),
    (["config", "get", "core.editor"], "config get core.editor (format: Plain)"),
    (["config", "get", "core.editor", "--format", "json"], "config get core.editor (format: Json)"),
    (["config", "set", "core.editor", "vim", "--global"], "config set core.editor=vim (global: true)"),
    (["config", "set", "core.editor", "vim"], "config set core.editor=vim (global: false)"),
])
def test_main_prints_one_line_and_returns_0(argv, expected, capsys):
    assert main(argv) == 0
    out, err = capsys.readouterr()
    assert out.splitlines() == [expected]
    assert err == ""


# --- Grammar violations never reach dispatch --- #

@pytest.mark.parametrize("argv", [
    ["badcommand"],
    ["server", "--port", "99999"],
    ["config"],
    ["remote"],
    ["remote", "origin", "--rem"],
    ["server", "--port", "8_080"],
])
def test_main_grammar_violation(argv, capsys, monkeypatch):
    import myapp.cli.__main__ as entry

    calls = []
    monkeypatch.setattr(entry, "dispatch", lambda command: calls.append(command))

    with pytest.raises(SystemExit) as info:
        entry.main(argv)

    assert info.value.code == 2
    assert calls == []
    out, err = capsys.readouterr()
    assert out == ""
    assert "error:" in err


def test_main_debug_logging_goes_to_stderr(monkeypatch, capsys):
    monkeypatch.setenv("MYAPP_LOG_LEVEL", "DEBUG")

    assert main(["remote", "origin"]) == 0

    out, err = capsys.readouterr()
    assert out == "remote info requested: origin\n"
    assert "DEBUG myapp.core.grammar.parser" in err
