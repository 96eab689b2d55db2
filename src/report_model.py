"""Report records handed to the engine and the clusters it derives from them.

Reports are read-only snapshots owned by the surrounding dashboard; nothing in
this package mutates them. GroupedReport values are produced per computation
and never persisted.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple

from engine_utils.report_taxonomy import (
    CLOSED_STATUSES,
    Department,
    ReportCategory,
    ReportStatus,
)


@dataclass(frozen=True)
class Location:
    lat: float
    lng: float


@dataclass(frozen=True)
class Report:
    id: str
    title: str
    category: ReportCategory
    description: str
    location: Location
    address: str
    status: ReportStatus
    created_at: datetime
    upvotes: int
    priority: int
    resolved_at: Optional[datetime] = None
    assigned_to: Optional[Department] = None
    image_url: Optional[str] = None

    @property
    def is_open(self) -> bool:
        return self.status not in CLOSED_STATUSES


@dataclass(frozen=True)
class GroupedReport(Report):
    """A cluster of reports describing one real-world issue.

    Fields are copied from the representative (seed) report, except
    ``priority`` which holds the maximum across the whole cluster.
    """

    members: Tuple[Report, ...] = ()
    total_upvotes: int = 0
    representative: Optional[Report] = None

    @classmethod
    def from_cluster(cls, seed: Report, members: Tuple[Report, ...]) -> "GroupedReport":
        fields = {name: getattr(seed, name) for name in Report.__dataclass_fields__}
        fields["priority"] = max([seed.priority] + [m.priority for m in members])
        return cls(
            **fields,
            members=members,
            total_upvotes=seed.upvotes + sum(m.upvotes for m in members),
            representative=seed,
        )

    @property
    def member_count(self) -> int:
        return len(self.members)

    @property
    def size(self) -> int:
        return len(self.members) + 1

    def all_reports(self) -> Tuple[Report, ...]:
        """Representative first, then members in input order."""
        return (self.representative,) + self.members
