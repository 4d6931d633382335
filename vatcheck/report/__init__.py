"""Rendering of validation results for humans."""

from vatcheck.report.summary import build_job_summary, build_summary_line, build_summary_table

__all__ = ["build_job_summary", "build_summary_line", "build_summary_table"]
