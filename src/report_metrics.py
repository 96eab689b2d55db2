"""KPI counts for the dashboard header cards."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Dict, Optional, Sequence

from engine_config import HIGH_PRIORITY_FLOOR, RESOLVED_WINDOW_DAYS
from report_model import Report


@dataclass(frozen=True)
class DashboardMetrics:
    total_open_issues: int = 0
    new_reports_today: int = 0
    resolved_this_week: int = 0
    high_priority_alerts: int = 0

    def as_dict(self) -> Dict[str, int]:
        """camelCase keys, as consumed by the KPI widgets."""
        return {
            "totalOpenIssues": self.total_open_issues,
            "newReportsToday": self.new_reports_today,
            "resolvedThisWeek": self.resolved_this_week,
            "highPriorityAlerts": self.high_priority_alerts,
        }


def local_midnight(now: datetime) -> datetime:
    # keeps now's tzinfo, so aware and naive inputs both work
    return now.replace(hour=0, minute=0, second=0, microsecond=0)


def calculate_metrics(reports: Sequence[Report], now: Optional[datetime] = None) -> DashboardMetrics:
    """Compute the four KPI counts in a single pass over the snapshot.

    Args:
        reports: Report snapshot.
        now: Reference time; defaults to the current local time. Timestamps on
            the reports must share its naive/aware convention.
    """
    now = now or datetime.now()
    today = local_midnight(now)
    week_ago = today - timedelta(days=RESOLVED_WINDOW_DAYS)

    open_issues = new_today = resolved_week = high_priority = 0
    for r in reports:
        if r.is_open:
            open_issues += 1
            if r.priority >= HIGH_PRIORITY_FLOOR:
                high_priority += 1
        if r.created_at >= today:
            new_today += 1
        if r.resolved_at is not None and r.resolved_at >= week_ago:
            resolved_week += 1

    return DashboardMetrics(
        total_open_issues=open_issues,
        new_reports_today=new_today,
        resolved_this_week=resolved_week,
        high_priority_alerts=high_priority,
    )
