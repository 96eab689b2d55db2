from .exceptions import CivicReportException, ConfigError, ReportIngestError
from .logger_config import setup_logger
from .report_taxonomy import (
    CLOSED_STATUSES,
    Department,
    ReportCategory,
    ReportStatus,
    parse_category,
    parse_department,
    parse_status,
)

__all__ = [
    "CivicReportException",
    "ConfigError",
    "ReportIngestError",
    "setup_logger",
    "CLOSED_STATUSES",
    "Department",
    "ReportCategory",
    "ReportStatus",
    "parse_category",
    "parse_department",
    "parse_status",
]
