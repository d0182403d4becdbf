"""One class, two reasons to change."""


class Report:
    """Generates and saves reports. Changes to either concern touch this class."""

    def generate_reports(self) -> None:
        pass

    def save_into_file(self) -> None:
        pass
