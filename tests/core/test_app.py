#!/usr/bin/env python3
import myapp.core.app as app


class _StubContext:
    def __init__(self, tag, **kwargs):
        self.tag = tag
        self.kwargs = kwargs


def _recording_builder(calls):
    def fake_build_context(**kwargs):
        calls.append(kwargs)
        return _StubContext(tag=len(calls), **kwargs)
    return fake_build_context


def test_get_context_builds_once_and_caches(monkeypatch):
    monkeypatch.setattr(app, "_CTX", None)
    calls = []
    monkeypatch.setattr(app, "build_context", _recording_builder(calls))

    ctx1 = app.get_context()
    ctx2 = app.get_context()

    assert ctx1.tag == 1
    assert ctx2 is ctx1
    assert calls == [{"config": None, "grammar": None}]


def test_get_context_force_reload_triggers_rebuild(monkeypatch):
    monkeypatch.setattr(app, "_CTX", None)
    calls = []
    monkeypatch.setattr(app, "build_context", _recording_builder(calls))

    first = app.get_context()
    second = app.get_context(force_reload=True)

    assert second is not first
    assert second.tag == 2
    assert len(calls) == 2


def test_get_context_passes_overrides(monkeypatch):
    monkeypatch.setattr(app, "_CTX", None)
    calls = []
    monkeypatch.setattr(app, "build_context", _recording_builder(calls))

    cfg = {"logging": {"level": "DEBUG"}}
    grammar = object()
    ctx = app.get_context(config_override=cfg, grammar_override=grammar)

    assert ctx.kwargs["config"] is cfg
    assert ctx.kwargs["grammar"] is grammar
