"""
Report Analytics – tabular summaries behind the analytics page.

- Category breakdown (open vs resolved per category)
- Daily intake trend over a trailing window
- Department workload and average resolution time
- Resolution rate, critical issue count, most recent reports

Everything is computed from a pandas frame built off the report snapshot; the
snapshot itself is left untouched.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import List, Optional, Sequence

import pandas as pd

from engine_config import LOG_DIR
from engine_utils.logger_config import setup_logger
from engine_utils.report_taxonomy import CLOSED_STATUSES, Department, ReportCategory, ReportStatus
from report_metrics import DashboardMetrics, calculate_metrics, local_midnight
from report_model import Report

logger = setup_logger(__name__, LOG_DIR)

FRAME_COLUMNS = [
    'id', 'category', 'status', 'priority', 'upvotes',
    'created_at', 'resolved_at', 'assigned_to', 'lat', 'lng',
]


@dataclass(frozen=True)
class CategoryStats:
    category: ReportCategory
    count: int
    resolved: int


@dataclass(frozen=True)
class TrendData:
    date: date
    count: int


@dataclass(frozen=True)
class DepartmentWorkload:
    department: Department
    open_issues: int
    avg_resolution_time: float  # days


@dataclass(frozen=True)
class AnalyticsSummary:
    metrics: DashboardMetrics
    total_reports: int
    resolution_rate: float
    critical_issues: int
    top_category: Optional[CategoryStats]
    avg_resolution_time: float = 0.0  # days, mean of the per-department averages
    category_stats: List[CategoryStats] = field(default_factory=list)
    trend: List[TrendData] = field(default_factory=list)
    department_workload: List[DepartmentWorkload] = field(default_factory=list)
    recent: List[Report] = field(default_factory=list)


def reports_to_frame(reports: Sequence[Report]) -> pd.DataFrame:
    """One row per report with enum fields as their labels."""
    rows = [
        {
            'id': r.id,
            'category': r.category.value,
            'status': r.status.value,
            'priority': r.priority,
            'upvotes': r.upvotes,
            'created_at': r.created_at,
            'resolved_at': r.resolved_at,
            'assigned_to': r.assigned_to.value if r.assigned_to else None,
            'lat': r.location.lat,
            'lng': r.location.lng,
        }
        for r in reports
    ]
    return pd.DataFrame(rows, columns=FRAME_COLUMNS)


def _open_mask(df: pd.DataFrame) -> pd.Series:
    closed = [s.value for s in CLOSED_STATUSES]
    return ~df['status'].isin(closed)


def category_stats(reports: Sequence[Report]) -> List[CategoryStats]:
    """Open and resolved counts for every category, busiest first."""
    df = reports_to_frame(reports)
    labels = [c.value for c in ReportCategory]
    open_counts = df.loc[_open_mask(df), 'category'].value_counts().reindex(labels, fill_value=0)
    resolved_counts = (
        df.loc[df['status'] == ReportStatus.RESOLVED.value, 'category']
        .value_counts()
        .reindex(labels, fill_value=0)
    )
    stats = [
        CategoryStats(ReportCategory(label), int(open_counts[label]), int(resolved_counts[label]))
        for label in labels
    ]
    return sorted(stats, key=lambda s: s.count, reverse=True)


def _day_in_zone(ts: datetime, now: datetime) -> date:
    if ts.tzinfo is not None and now.tzinfo is not None:
        ts = ts.astimezone(now.tzinfo)
    return ts.date()


def trend_data(reports: Sequence[Report], days: int = 7, now: Optional[datetime] = None) -> List[TrendData]:
    """Reports created per calendar day over the trailing window ending today (zero-filled)."""
    now = now or datetime.now()
    today = local_midnight(now).date()
    window = pd.date_range(end=pd.Timestamp(today), periods=days, freq='D').date

    if not reports:
        counts = pd.Series(0, index=window)
    else:
        # same calendar as calculate_metrics: days are counted in now's timezone
        created_days = pd.Series([_day_in_zone(r.created_at, now) for r in reports])
        counts = created_days.value_counts().reindex(window, fill_value=0)
    return [TrendData(d, int(counts[d])) for d in window]


def department_workload(reports: Sequence[Report]) -> List[DepartmentWorkload]:
    """Open issues and mean resolution days per department, fastest first."""
    df = reports_to_frame(reports)
    labels = [d.value for d in Department]
    assigned = df[df['assigned_to'].notna()].copy()

    open_counts = assigned.loc[_open_mask(assigned), 'assigned_to'].value_counts().reindex(labels, fill_value=0)

    done = assigned[assigned['resolved_at'].notna()].copy()
    if done.empty:
        avg_days = pd.Series(0.0, index=labels)
    else:
        elapsed = done['resolved_at'] - done['created_at']
        done['resolution_days'] = [delta.total_seconds() / 86400.0 for delta in elapsed]
        avg_days = done.groupby('assigned_to')['resolution_days'].mean().reindex(labels, fill_value=0.0)

    workload = [
        DepartmentWorkload(Department(label), int(open_counts[label]), round(float(avg_days[label]), 1))
        for label in labels
    ]
    return sorted(workload, key=lambda w: w.avg_resolution_time)


def resolution_rate(reports: Sequence[Report]) -> float:
    """Percentage of reports with status Resolved."""
    if not reports:
        return 0.0
    resolved = sum(1 for r in reports if r.status == ReportStatus.RESOLVED)
    return round(100.0 * resolved / len(reports), 1)


def critical_issues(reports: Sequence[Report]) -> int:
    # Rejected priority-5 reports still count; only Resolved is excluded.
    return sum(1 for r in reports if r.priority == 5 and r.status != ReportStatus.RESOLVED)


def recent_reports(reports: Sequence[Report], limit: int = 5) -> List[Report]:
    return sorted(reports, key=lambda r: r.created_at, reverse=True)[:limit]


def build_analytics_summary(reports: Sequence[Report], now: Optional[datetime] = None) -> AnalyticsSummary:
    now = now or datetime.now()
    stats = category_stats(reports)
    workload = department_workload(reports)
    summary = AnalyticsSummary(
        metrics=calculate_metrics(reports, now),
        total_reports=len(reports),
        resolution_rate=resolution_rate(reports),
        critical_issues=critical_issues(reports),
        top_category=stats[0] if reports else None,
        avg_resolution_time=round(sum(w.avg_resolution_time for w in workload) / len(workload), 1),
        category_stats=stats,
        trend=trend_data(reports, now=now),
        department_workload=workload,
        recent=recent_reports(reports),
    )
    logger.info(
        'Analytics summary: %d reports, %.1f%% resolved, %d critical',
        summary.total_reports, summary.resolution_rate, summary.critical_issues,
    )
    return summary
