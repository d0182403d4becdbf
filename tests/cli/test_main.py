"""Tests for the solid-demo command line.

Why these tests exist:
- Running with no arguments must have no observable effect
- The walkthrough must report violations instead of crashing
"""

import pytest

from solid_demo.cli import main, run_walkthrough
from solid_demo.config import Principle


def test_no_arguments_is_noop(capsys) -> None:
    assert main([]) == 0
    assert capsys.readouterr().out == ""


def test_run_single_principle(output_lines) -> None:
    assert main(["--run", "dip"]) == 0
    assert output_lines() == ["== DIP ==", "Toggling the switch.", "Light is On!"]


def test_run_all_by_default(output_lines) -> None:
    assert main(["--run"]) == 0
    lines = output_lines()
    headings = [line for line in lines if line.startswith("== ")]
    assert headings == ["== SRP ==", "== OCP ==", "== LSP ==", "== ISP ==", "== DIP =="]
    assert "Penguins can't fly, so this method does nothing." in lines


def test_violations_reported(output_lines) -> None:
    assert main(["--run", "lsp", "--violations"]) == 0
    assert output_lines() == [
        "== LSP ==",
        "-- before --",
        "Flying!",
        "  ! Penguins can't fly!",
        "-- after --",
        "Flying!",
        "Penguins can't fly, so this method does nothing.",
    ]


def test_settings_supply_defaults(monkeypatch, output_lines) -> None:
    monkeypatch.setenv("SOLID_DEMO_PRINCIPLES", '["isp"]')
    monkeypatch.setenv("SOLID_DEMO_SHOW_VIOLATIONS", "true")

    assert main(["--run"]) == 0
    lines = output_lines()
    assert lines[0] == "== ISP =="
    assert "  ! Robots can't eat!" in lines


def test_unknown_principle_exits() -> None:
    with pytest.raises(SystemExit):
        main(["--run", "xyz"])


def test_walkthrough_ocp_prints_areas(output_lines) -> None:
    run_walkthrough([Principle.OCP])
    lines = output_lines()
    assert lines[0] == "== OCP =="
    assert lines[1].endswith("area 12.000")
    assert lines[2].endswith("area 12.566")


def test_all_violations_reported(output_lines) -> None:
    """Every "before" design runs, and its failures are reported inline."""
    assert main(["--run", "--violations"]) == 0
    assert output_lines() == [
        "== SRP ==",
        "-- before --",
        "Report generated and saved by the same class.",
        "-- after --",
        "Report generated and saved by separate classes.",
        "== OCP ==",
        "-- before --",
        "Rectangle(width=3, height=4): area 12.000",
        "-- after --",
        "Rectangle(width=3, height=4): area 12.000",
        "Circle(radius=2): area 12.566",
        "== LSP ==",
        "-- before --",
        "Flying!",
        "  ! Penguins can't fly!",
        "-- after --",
        "Flying!",
        "Penguins can't fly, so this method does nothing.",
        "== ISP ==",
        "-- before --",
        "Managing!",
        "Eating!",
        "Working!",
        "  ! Robots can't eat!",
        "-- after --",
        "Managing!",
        "Eating!",
        "Working!",
        "== DIP ==",
        "-- before --",
        "Toggling the switch.",
        "Light is On!",
        "-- after --",
        "Toggling the switch.",
        "Light is On!",
    ]


def test_violations_without_run_rejected(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["--violations"])
    assert exc_info.value.code == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "--violations requires --run" in captured.err
