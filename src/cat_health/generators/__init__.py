"""Output generators for cat-health."""

from .report import ReportConfig, VetReportGenerator, report_filename

__all__ = ["ReportConfig", "report_filename", "VetReportGenerator"]
