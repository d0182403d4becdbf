"""Each class owns a single concern.

Usage:
    ReportGenerator().generate_reports()
    ReportSaver().save_into_file()
"""


class ReportGenerator:
    """Produces the report artifact."""

    def generate_reports(self) -> None:
        pass


class ReportSaver:
    """Persists a report artifact."""

    def save_into_file(self) -> None:
        pass
