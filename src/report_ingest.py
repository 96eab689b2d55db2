"""
Report Ingest – map persisted rows onto Report records.

The persistence layer stores reports as flat snake_case rows (``lat``/``lng``
columns, ``image_url``, ``created_at`` ...). This module only reshapes those
rows for the engine; it does not apply business validation. Rows that cannot be
reshaped at all (missing columns or values, unknown enum labels, unparseable timestamps)
raise ReportIngestError.

Usage:
    reports = load_reports('data/reports.csv')
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, Mapping, Optional

import pandas as pd

from engine_config import LOG_DIR
from engine_utils.exceptions import ReportIngestError
from engine_utils.logger_config import setup_logger
from engine_utils.report_taxonomy import parse_category, parse_department, parse_status
from report_model import Location, Report

logger = setup_logger(__name__, LOG_DIR)

REQUIRED_COLUMNS = [
    'id', 'title', 'category', 'description', 'lat', 'lng', 'address',
    'status', 'created_at', 'upvotes', 'priority',
]


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def _to_datetime(value: Any, column: str):
    if _is_missing(value):
        return None
    try:
        return pd.Timestamp(value).to_pydatetime()
    except (TypeError, ValueError) as e:
        raise ReportIngestError(f'Unparseable {column}: {value!r} ({e})')


def _optional_text(value: Any) -> Optional[str]:
    return None if _is_missing(value) else str(value)


def report_from_record(record: Mapping[str, Any]) -> Report:
    """Build a Report from one persisted row."""
    missing = [c for c in REQUIRED_COLUMNS if c not in record]
    if missing:
        raise ReportIngestError(f'Report row is missing columns: {missing}')
    blank = [c for c in REQUIRED_COLUMNS if _is_missing(record[c])]
    if blank:
        raise ReportIngestError(f'Report {record.get("id")!r} has empty required values: {blank}')

    try:
        location = Location(lat=float(record['lat']), lng=float(record['lng']))
        upvotes = int(record['upvotes'])
        priority = int(record['priority'])
    except (TypeError, ValueError) as e:
        raise ReportIngestError(f'Bad numeric field on report {record.get("id")!r}: {e}')

    return Report(
        id=str(record['id']),
        title=str(record['title']),
        category=parse_category(record['category']),
        description=str(record['description']),
        location=location,
        address=str(record['address']),
        status=parse_status(record['status']),
        created_at=_to_datetime(record['created_at'], 'created_at'),
        upvotes=upvotes,
        priority=priority,
        resolved_at=_to_datetime(record.get('resolved_at'), 'resolved_at'),
        assigned_to=parse_department(_optional_text(record.get('assigned_to'))),
        image_url=_optional_text(record.get('image_url')),
    )


def reports_from_frame(df: pd.DataFrame, sort: bool = True) -> List[Report]:
    """
    Convert a frame of persisted rows into Reports.

    Parameters
    df (pd.DataFrame) : Rows with at least REQUIRED_COLUMNS
    sort (bool) : Newest first by created_at, matching the listing endpoint order

    Returns:
    List[Report] : Reports in listing order
    """
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ReportIngestError(f'Report frame is missing columns: {missing}')

    reports = [report_from_record(row) for row in df.to_dict(orient='records')]
    if sort:
        reports.sort(key=lambda r: r.created_at, reverse=True)
    return reports


def load_reports(path) -> List[Report]:
    """Read a report snapshot from a .csv, .json or .parquet export."""
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix == '.csv':
        df = pd.read_csv(path, dtype={'id': str})
    elif suffix == '.json':
        df = pd.read_json(path, orient='records', dtype={'id': str})
    elif suffix == '.parquet':
        df = pd.read_parquet(path, engine='pyarrow')
    else:
        raise ReportIngestError(f'Unsupported report file type: {path.suffix}')

    reports = reports_from_frame(df)
    logger.info(f'Loaded {len(reports)} reports from {path}')
    return reports
