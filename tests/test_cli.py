"""Mini README: Tests for the Typer launcher."""

from __future__ import annotations

from typer.testing import CliRunner

import main_budget_tracker


def test_run_passes_options_to_uvicorn(monkeypatch) -> None:
    calls = {}
    monkeypatch.setattr(main_budget_tracker.uvicorn, "run", lambda app, **kwargs: calls.update(app=app, **kwargs))

    result = CliRunner().invoke(main_budget_tracker.cli, ["--host", "0.0.0.0", "--port", "9100", "--production"])

    assert result.exit_code == 0
    assert "http://127.0.0.1:9100" in result.output
    assert calls["app"] == "budget_tracker.interface.web_app:create_application"
    assert calls["port"] == 9100
    assert calls["factory"] is True
    assert calls["reload"] is False
