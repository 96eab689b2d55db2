"""
Report Grouping – fold near-identical citizen reports into clusters.

Single-pass seed clustering, not connected components:

- Reports are walked in input order; any report not yet claimed seeds a cluster.
- Every unclaimed report of the same category whose status is still active
  and that lies within ``max_distance`` metres of the seed joins the cluster.
- Only candidates are checked against the closed statuses. A Resolved or
  Rejected seed still anchors a cluster and absorbs active neighbours.

The result is order sensitive and non-transitive: two reports that are each
close to a seed are grouped together even when far from one another, while a
report close to a member (but not to the seed) starts its own cluster.
One vectorised distance row is computed per seed, so a call costs O(n^2)
distance evaluations. That is fine for a single city's active reports.
"""

from typing import List, Sequence

import numpy as np

from engine_config import GROUP_RADIUS_M, LOG_DIR
from engine_utils.logger_config import setup_logger
from engine_utils.report_taxonomy import CLOSED_STATUSES
from geo_distance import haversine_m
from report_model import GroupedReport, Report

logger = setup_logger(__name__, LOG_DIR)


def group_reports(reports: Sequence[Report], max_distance: float = GROUP_RADIUS_M) -> List[GroupedReport]:
    """
    Partition reports into proximity + category clusters.

    Parameters
    reports (Sequence[Report]) : Snapshot to group, in display order
    max_distance (float) : Merge radius in metres (inclusive). Defaults to 25 m

    Returns:
    List[GroupedReport] : One entry per cluster, ordered by each seed's position
    """
    n = len(reports)
    if n == 0:
        return []

    lats = np.fromiter((r.location.lat for r in reports), dtype=float, count=n)
    lngs = np.fromiter((r.location.lng for r in reports), dtype=float, count=n)
    # candidate eligibility does not change during the pass
    active = np.fromiter((r.status not in CLOSED_STATUSES for r in reports), dtype=bool, count=n)
    categories = np.array([r.category.value for r in reports], dtype=object)

    seen = np.zeros(n, dtype=bool)
    clusters: List[GroupedReport] = []

    for i, seed in enumerate(reports):
        if seen[i]:
            continue

        distances = haversine_m(seed.location.lat, seed.location.lng, lats, lngs)
        matches = ~seen & active & (categories == seed.category.value) & (distances <= max_distance)
        matches[i] = False

        member_idx = np.flatnonzero(matches)
        seen[member_idx] = True
        seen[i] = True

        clusters.append(GroupedReport.from_cluster(seed, tuple(reports[j] for j in member_idx)))

    logger.debug(
        'Grouped %d reports into %d clusters (radius=%.1fm)', n, len(clusters), max_distance
    )
    return clusters
