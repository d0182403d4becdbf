"""Shared test fixtures."""

import pytest


@pytest.fixture
def output_lines(capsys):
    """Return a callable giving the stdout lines printed so far."""

    def _lines() -> list[str]:
        return capsys.readouterr().out.splitlines()

    return _lines


@pytest.fixture(autouse=True)
def clean_demo_env(monkeypatch, tmp_path):
    """Isolate DemoSettings from the developer's environment and .env file."""
    monkeypatch.delenv("SOLID_DEMO_PRINCIPLES", raising=False)
    monkeypatch.delenv("SOLID_DEMO_SHOW_VIOLATIONS", raising=False)
    monkeypatch.chdir(tmp_path)
