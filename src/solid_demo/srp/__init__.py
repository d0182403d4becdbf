"""Single Responsibility: report generation and report saving as separate classes."""

from solid_demo.srp.after import ReportGenerator, ReportSaver

__all__ = [
    "ReportGenerator",
    "ReportSaver",
]
