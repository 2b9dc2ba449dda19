#!/usr/bin/env python3
import json

import pytest
import yaml

import myapp.core.app as app
import myapp.core.config as cfg
from myapp.cli.docs import main

EXPECTED_PAGES = [
    "myapp.1",
    "myapp-config.1",
    "myapp-config-get.1",
    "myapp-config-set.1",
    "myapp-server.1",
    "myapp-remote.1",
]


@pytest.fixture(autouse=True)
def isolated_context(tmp_path, monkeypatch):
    monkeypatch.setattr(app, "_CTX", None)
    monkeypatch.setattr(cfg, "GLOBAL_CONFIG_PATH", tmp_path / "missing.json", raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("MYAPP_LOG_LEVEL", raising=False)
    monkeypatch.delenv("MYAPP_MAN_DIR", raising=False)


# --- no subcommand --- #

def test_docs_without_subcommand_prints_help(capsys):
    assert main([]) == 1
    assert "usage: myapp-docs" in capsys.readouterr().out


# --- man --- #

def test_man_writes_one_page_per_command(tmp_path, capsys):
    out_dir = tmp_path / "out" / "man"
    assert main(["man", "--out-dir", str(out_dir)]) == 0

    assert sorted(p.name for p in out_dir.iterdir()) == sorted(EXPECTED_PAGES)
    out = capsys.readouterr().out
    assert f"Generated 6 man pages to {out_dir.resolve()}" in out


def test_man_defaults_to_configured_directory_and_section(tmp_path):
    (tmp_path / cfg.PROJECT_CONFIG_NAME).write_text(
        json.dumps({"man": {"out_dir": "docs/man", "section": "8"}}), encoding="utf-8"
    )

    assert main(["man"]) == 0

    pages = sorted(p.name for p in (tmp_path / "docs" / "man").iterdir())
    assert pages == sorted(name.replace(".1", ".8") for name in EXPECTED_PAGES)


def test_man_out_dir_from_env(tmp_path, monkeypatch):
    monkeypatch.setenv("MYAPP_MAN_DIR", str(tmp_path / "from-env"))
    assert main(["man"]) == 0
    assert (tmp_path / "from-env" / "myapp.1").is_file()


def test_man_reports_io_errors(tmp_path, capsys):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")

    assert main(["man", "--out-dir", str(blocker)]) == 1
    assert "Error generating man pages" in capsys.readouterr().out


# --- grammar --- #

def test_grammar_prints_yaml_by_default(capsys):
    assert main(["grammar"]) == 0
    data = yaml.safe_load(capsys.readouterr().out)
    assert data["name"] == "myapp"
    assert [s["name"] for s in data["subcommands"]] == ["config", "server", "remote"]


def test_grammar_json_to_file(tmp_path, capsys):
    target = tmp_path / "nested" / "grammar.json"
    assert main(["grammar", "--format", "json", "--output", str(target)]) == 0

    data = json.loads(target.read_text(encoding="utf-8"))
    assert data["version"] == "0.1.0"
    assert f"Wrote grammar to {target}" in capsys.readouterr().out


def test_grammar_rejects_unknown_format(capsys):
    with pytest.raises(SystemExit) as info:
        main(["grammar", "--format", "toml"])
    assert info.value.code == 2
