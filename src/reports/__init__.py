"""Catalog insight reports.

Usage:
    from src.reports import ReportEngine, run_report

    engine = ReportEngine(catalog)
    run_report(engine, "q01_count_by_type")
"""

from src.reports.engine import ReportEngine
from src.reports.registry import (
    REPORTS,
    ReportDefinition,
    UnknownReportError,
    get_report,
    run_all,
    run_report,
)
from src.reports.render import render_table, save_report

__all__ = [
    "ReportEngine",
    "ReportDefinition",
    "UnknownReportError",
    "get_report",
    "REPORTS",
    "run_report",
    "run_all",
    "render_table",
    "save_report",
]
