"""Closed-set vocabularies for civic reports (category, status, department)."""

from __future__ import annotations

import re
from enum import Enum
from typing import Dict, Optional, Type, TypeVar

from .exceptions import ReportIngestError


class ReportCategory(str, Enum):
    POTHOLE = "Pothole"
    STREETLIGHT_OUT = "Streetlight Out"
    WASTE_MANAGEMENT = "Waste Management"
    WATER_LOGGING = "Water Logging"
    BROKEN_SIGNAGE = "Broken Signage"
    ELECTRICAL_HAZARD = "Electrical Hazard"


class ReportStatus(str, Enum):
    NEW = "New"
    ACKNOWLEDGED = "Acknowledged"
    IN_PROGRESS = "In Progress"
    RESOLVED = "Resolved"
    REJECTED = "Rejected"


class Department(str, Enum):
    PUBLIC_WORKS = "Public Works"
    ELECTRICAL = "Electrical"
    SANITATION = "Sanitation"
    TRAFFIC = "Traffic"
    WATER_BOARD = "Water Board"


# Statuses that take a report out of the active workload.
CLOSED_STATUSES = frozenset({ReportStatus.RESOLVED, ReportStatus.REJECTED})

E = TypeVar("E", bound=Enum)


def _label_key(raw: str) -> str:
    # "Streetlight Out", "streetlight_out", "StreetlightOut" -> "streetlightout"
    return re.sub(r"[\s_\-]+", "", raw).lower()


def _build_lookup(enum_cls: Type[E]) -> Dict[str, E]:
    lookup: Dict[str, E] = {}
    for member in enum_cls:
        lookup[_label_key(member.value)] = member
        lookup[_label_key(member.name)] = member
    return lookup


_CATEGORY_LOOKUP = _build_lookup(ReportCategory)
_STATUS_LOOKUP = _build_lookup(ReportStatus)
_DEPARTMENT_LOOKUP = _build_lookup(Department)


def _parse(raw, enum_cls: Type[E], lookup: Dict[str, E]) -> E:
    if isinstance(raw, enum_cls):
        return raw
    if raw is None or not str(raw).strip():
        raise ReportIngestError(f"Missing {enum_cls.__name__} label")
    member = lookup.get(_label_key(str(raw)))
    if member is None:
        raise ReportIngestError(f"Unknown {enum_cls.__name__} label: {raw!r}")
    return member


def parse_category(raw) -> ReportCategory:
    """Map a stored category label onto ReportCategory."""
    return _parse(raw, ReportCategory, _CATEGORY_LOOKUP)


def parse_status(raw) -> ReportStatus:
    """Map a stored status label onto ReportStatus."""
    return _parse(raw, ReportStatus, _STATUS_LOOKUP)


def parse_department(raw) -> Optional[Department]:
    """Map an optional department tag; blank values mean unassigned."""
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return None
    return _parse(raw, Department, _DEPARTMENT_LOOKUP)


__all__ = [
    "ReportCategory",
    "ReportStatus",
    "Department",
    "CLOSED_STATUSES",
    "parse_category",
    "parse_status",
    "parse_department",
]
