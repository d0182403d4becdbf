"""Configuration settings using Pydantic Settings.

Usage:
    from solid_demo.config import DemoSettings

    # Load from environment variables (SOLID_DEMO_*)
    settings = DemoSettings()

    # Or override with explicit values
    settings = DemoSettings(principles=["lsp", "isp"])
"""

from __future__ import annotations

from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Principle(str, Enum):
    """The five SOLID principles, one example package each."""

    SRP = "srp"
    OCP = "ocp"
    LSP = "lsp"
    ISP = "isp"
    DIP = "dip"


class DemoSettings(BaseSettings):  # type: ignore[misc]
    """Defaults for the `solid-demo --run` walkthrough.

    Attributes:
        principles: Principles to walk through when none are named on the command line.
        show_violations: Also exercise the "before" designs.

    Environment Variables:
        SOLID_DEMO_PRINCIPLES (JSON list, e.g. '["srp", "dip"]')
        SOLID_DEMO_SHOW_VIOLATIONS
    """

    model_config = SettingsConfigDict(
        env_prefix="SOLID_DEMO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    principles: list[Principle] = Field(default_factory=lambda: list(Principle))
    show_violations: bool = False
