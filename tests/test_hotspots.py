import pytest

from conftest import offset_north
from engine_utils.report_taxonomy import ReportCategory, ReportStatus
from report_hotspots import find_hotspots, rank_hotspot_clusters


@pytest.fixture
def make_site(make_report):
    """Build `size` same-category reports packed within ~20 m around `north_m`."""
    def _site(north_m, size=3, upvotes=1, category=ReportCategory.POTHOLE, status=ReportStatus.NEW):
        return [
            make_report(north_m + 10 * k, category=category, status=status, upvotes=upvotes)
            for k in range(size)
        ]
    return _site


class TestFindHotspots:
    def test_three_reports_make_one_hotspot(self, make_site):
        reports = make_site(0, size=3)
        assert find_hotspots(reports) == [reports[0].location]

    def test_two_reports_are_not_a_hotspot(self, make_site):
        assert find_hotspots(make_site(0, size=2)) == []

    def test_hotspot_radius_is_wider_than_grouping_radius(self, make_report):
        reports = [make_report(0), make_report(40), make_report(45)]
        assert find_hotspots(reports) == [offset_north(0)]

    def test_resolved_reports_are_ignored(self, make_site, make_report):
        reports = make_site(0, size=2) + [make_report(5, status=ReportStatus.RESOLVED)]
        assert find_hotspots(reports) == []

    def test_rejected_reports_still_count(self, make_site, make_report):
        # Only Resolved is filtered before the hotspot pass. A Rejected report
        # seeds the cluster here and its neighbours join it.
        reports = [make_report(0, status=ReportStatus.REJECTED)] + make_site(10, size=2)
        assert find_hotspots(reports) == [offset_north(0)]

    def test_category_filter(self, make_site):
        potholes = make_site(0, category=ReportCategory.POTHOLE)
        waste = make_site(2000, category=ReportCategory.WASTE_MANAGEMENT)
        reports = potholes + waste
        assert find_hotspots(reports, ReportCategory.WASTE_MANAGEMENT) == [waste[0].location]
        assert len(find_hotspots(reports)) == 2

    def test_ranked_by_total_upvotes(self, make_site):
        quiet = make_site(0, upvotes=1)
        busy = make_site(1000, upvotes=10)
        medium = make_site(2000, upvotes=4)
        locations = find_hotspots(quiet + busy + medium)
        assert locations == [busy[0].location, medium[0].location, quiet[0].location]

    def test_ties_keep_cluster_order(self, make_site):
        first = make_site(0, upvotes=2)
        second = make_site(1000, upvotes=2)
        assert find_hotspots(first + second) == [first[0].location, second[0].location]

    def test_shared_coordinates_rank_independently(self, make_site):
        # Two hotspots of different categories anchored on the same point.
        low = make_site(0, upvotes=1, category=ReportCategory.POTHOLE)
        high = make_site(0, upvotes=9, category=ReportCategory.BROKEN_SIGNAGE)
        clusters = rank_hotspot_clusters(low + high)
        assert [c.category for c in clusters] == [ReportCategory.BROKEN_SIGNAGE, ReportCategory.POTHOLE]
        assert [c.total_upvotes for c in clusters] == [27, 3]

    def test_top_n_cap(self, make_site):
        reports = []
        for k in range(7):
            reports += make_site(1000 * k, upvotes=k + 1)
        locations = find_hotspots(reports, top_n=5)
        assert len(locations) == 5
        assert locations[0] == reports[-3].location
