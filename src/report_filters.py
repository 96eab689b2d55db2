"""
Report Filters – narrow a snapshot by category, status, priority floor and text.

All present criteria are conjunctive. A dashboard search box that should look
at text alone sets ``search_only=True``; the category/status/priority fields are
then ignored for that call while a search term is present.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from engine_utils.report_taxonomy import ReportCategory, ReportStatus
from report_model import Report


@dataclass(frozen=True)
class FilterCriteria:
    category: Optional[ReportCategory] = None
    status: Optional[ReportStatus] = None
    priority: Optional[int] = None
    search: Optional[str] = None
    search_only: bool = False

    def active_count(self) -> int:
        return sum(
            1 for v in (self.category, self.status, self.priority, self.search) if v not in (None, "")
        )


def matches_search(report: Report, term: str) -> bool:
    """Case-insensitive substring test over id, title, address and description."""
    needle = term.lower()
    return any(
        needle in field.lower()
        for field in (report.id, report.title, report.address, report.description)
    )


def _matches(report: Report, criteria: FilterCriteria) -> bool:
    if criteria.search:
        if not matches_search(report, criteria.search):
            return False
        if criteria.search_only:
            return True
    if criteria.category is not None and report.category != criteria.category:
        return False
    if criteria.status is not None and report.status != criteria.status:
        return False
    if criteria.priority is not None and report.priority < criteria.priority:
        return False
    return True


def filter_reports(reports: Sequence[Report], criteria: FilterCriteria) -> List[Report]:
    """Subsequence of reports satisfying the criteria, in input order."""
    return [r for r in reports if _matches(r, criteria)]
