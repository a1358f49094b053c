"""Mini README: Tests for environment driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from budget_tracker.configuration import BudgetTrackerSettings


def test_settings_read_prefixed_environment(monkeypatch) -> None:
    monkeypatch.setenv("BUDGET_TRACKER_INTERFACE_PORT", "9001")
    monkeypatch.setenv("BUDGET_TRACKER_CURRENCY_SYMBOL", "£")
    monkeypatch.setenv("BUDGET_TRACKER_LOG_LEVEL", "debug")

    settings = BudgetTrackerSettings()

    assert settings.interface_port == 9001
    assert settings.currency_symbol == "£"
    assert settings.log_level == "DEBUG"
    assert settings.seed_demo_data is False


@pytest.mark.parametrize(("name", "value"), [("INTERFACE_PORT", "0"), ("LOG_LEVEL", "chatty")])
def test_settings_reject_invalid_values(monkeypatch, name, value) -> None:
    monkeypatch.setenv(f"BUDGET_TRACKER_{name}", value)

    with pytest.raises(ValidationError):
        BudgetTrackerSettings()


@pytest.mark.parametrize("value", ["notset", "trace", "level 5"])
def test_settings_reject_levels_uvicorn_cannot_use(monkeypatch, value) -> None:
    monkeypatch.setenv("BUDGET_TRACKER_LOG_LEVEL", value)

    with pytest.raises(ValidationError):
        BudgetTrackerSettings()


def test_settings_canonicalise_level_aliases(monkeypatch) -> None:
    monkeypatch.setenv("BUDGET_TRACKER_LOG_LEVEL", "warn")

    assert BudgetTrackerSettings().log_level == "WARNING"
