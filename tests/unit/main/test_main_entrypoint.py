from __future__ import annotations

import runpy


def test_main_module_invokes_server(monkeypatch):
    executed = {}

    def fake_main() -> None:
        executed["called"] = True

    monkeypatch.setattr("meshbridge.main.server.main", fake_main)

    runpy.run_module("meshbridge.main.__main__", run_name="__main__")

    assert executed["called"] is True


def test_server_main_runs_uvicorn(monkeypatch):
    calls = {}

    def fake_run(app, **kwargs) -> None:
        calls["app"] = app
        calls.update(kwargs)

    monkeypatch.setattr("meshbridge.main.server.uvicorn.run", fake_run)

    from meshbridge.main.server import main

    main()

    assert calls["app"] == "meshbridge.main.app:app"
    assert calls["port"] == 8000
