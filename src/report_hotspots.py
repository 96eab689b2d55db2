"""Hotspot detection: dense clusters of unresolved reports, ranked for field teams."""

from typing import List, Optional, Sequence

from engine_config import HOTSPOT_MIN_MEMBERS, HOTSPOT_RADIUS_M, LOG_DIR
from engine_utils.logger_config import setup_logger
from engine_utils.report_taxonomy import ReportCategory, ReportStatus
from report_grouping import group_reports
from report_model import GroupedReport, Location, Report

logger = setup_logger(__name__, LOG_DIR)


def rank_hotspot_clusters(
    reports: Sequence[Report],
    category: Optional[ReportCategory] = None,
    *,
    radius: float = HOTSPOT_RADIUS_M,
    min_members: int = HOTSPOT_MIN_MEMBERS,
) -> List[GroupedReport]:
    """Hotspot clusters, highest total upvotes first (ties keep cluster order)."""
    # Only Resolved is dropped here; Rejected reports still feed hotspots.
    candidates = [
        r for r in reports
        if r.status != ReportStatus.RESOLVED and (category is None or r.category == category)
    ]
    clusters = group_reports(candidates, radius)
    dense = [c for c in clusters if c.member_count >= min_members]
    ranked = sorted(dense, key=lambda c: c.total_upvotes, reverse=True)

    logger.debug(
        'Hotspots: %d candidates, %d clusters, %d dense (category=%s)',
        len(candidates), len(clusters), len(ranked), category.value if category else 'all',
    )
    return ranked


def find_hotspots(
    reports: Sequence[Report],
    category: Optional[ReportCategory] = None,
    *,
    top_n: Optional[int] = None,
) -> List[Location]:
    """Locations of ranked hotspot clusters, optionally capped to the first top_n."""
    ranked = rank_hotspot_clusters(reports, category)
    if top_n is not None:
        ranked = ranked[:top_n]
    return [c.location for c in ranked]
