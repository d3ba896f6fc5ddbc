"""Report formatting and preview."""

from .formatter import generate_report, report_date_label
from .preview import ReportPreviewer

__all__ = ["ReportPreviewer", "generate_report", "report_date_label"]
