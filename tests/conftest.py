import os
import sys
import tempfile
from datetime import datetime
from pathlib import Path

import pytest

# Keep test log files out of the working tree
os.environ.setdefault('CIVIC_LOG_DIR', tempfile.mkdtemp(prefix='civic_logs_'))

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from engine_utils.report_taxonomy import ReportCategory, ReportStatus  # noqa: E402
from report_model import Location, Report  # noqa: E402

# Connaught Place, New Delhi. At this latitude 1e-5 deg lat ~= 1.11 m.
BASE_LAT = 28.6315
BASE_LNG = 77.2167
METERS_PER_DEG_LAT = 111_195.0

NOW = datetime(2024, 5, 15, 14, 30)


def offset_north(meters: float) -> Location:
    return Location(BASE_LAT + meters / METERS_PER_DEG_LAT, BASE_LNG)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def make_report():
    counter = {'n': 0}

    def _make(
        north_m: float = 0.0,
        category: ReportCategory = ReportCategory.POTHOLE,
        status: ReportStatus = ReportStatus.NEW,
        **overrides,
    ) -> Report:
        counter['n'] += 1
        fields = dict(
            id=f'RPT-{counter["n"]:03d}',
            title='Large pothole near bus stop',
            category=category,
            description='Deep pothole damaging two-wheelers',
            location=offset_north(north_m),
            address='Block A, Connaught Place, New Delhi',
            status=status,
            created_at=datetime(2024, 5, 1, 9, 0),
            upvotes=1,
            priority=2,
        )
        fields.update(overrides)
        return Report(**fields)

    return _make
