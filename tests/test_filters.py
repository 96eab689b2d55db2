import pytest

from engine_utils.report_taxonomy import ReportCategory, ReportStatus
from report_filters import FilterCriteria, filter_reports


@pytest.fixture
def reports(make_report):
    return [
        make_report(
            id='RPT-101', title='Streetlight flickering', category=ReportCategory.STREETLIGHT_OUT,
            description='Light keeps switching off at night', address='Sector 62, Noida', priority=2,
        ),
        make_report(
            id='RPT-102', title='Garbage not collected', category=ReportCategory.WASTE_MANAGEMENT,
            description='Bins overflowing for a week', address='Near Gate No. 2, Sector 18, Noida',
            status=ReportStatus.ACKNOWLEDGED, priority=4,
        ),
        make_report(
            id='RPT-103', title='Deep pothole', category=ReportCategory.POTHOLE,
            description='Two-wheelers skidding', address='MG Road, Gurugram',
            status=ReportStatus.RESOLVED, priority=5,
        ),
    ]


def _ids(result):
    return [r.id for r in result]


class TestFilterReports:
    def test_no_criteria_keeps_everything(self, reports):
        assert filter_reports(reports, FilterCriteria()) == reports

    def test_category(self, reports):
        assert _ids(filter_reports(reports, FilterCriteria(category=ReportCategory.POTHOLE))) == ['RPT-103']

    def test_status(self, reports):
        assert _ids(filter_reports(reports, FilterCriteria(status=ReportStatus.ACKNOWLEDGED))) == ['RPT-102']

    def test_priority_floor_is_inclusive(self, reports):
        assert _ids(filter_reports(reports, FilterCriteria(priority=4))) == ['RPT-102', 'RPT-103']

    def test_search_matches_address_only(self, reports):
        assert _ids(filter_reports(reports, FilterCriteria(search='gate no. 2'))) == ['RPT-102']

    def test_search_is_case_insensitive_over_id_title_description(self, reports):
        assert _ids(filter_reports(reports, FilterCriteria(search='rpt-101'))) == ['RPT-101']
        assert _ids(filter_reports(reports, FilterCriteria(search='POTHOLE'))) == ['RPT-103']
        assert _ids(filter_reports(reports, FilterCriteria(search='overflowing'))) == ['RPT-102']

    def test_empty_search_is_ignored(self, reports):
        assert filter_reports(reports, FilterCriteria(search='')) == reports

    def test_search_is_conjunctive_by_default(self, reports):
        criteria = FilterCriteria(search='noida', category=ReportCategory.STREETLIGHT_OUT)
        assert _ids(filter_reports(reports, criteria)) == ['RPT-101']

    def test_search_only_ignores_other_criteria(self, reports):
        criteria = FilterCriteria(search='noida', category=ReportCategory.STREETLIGHT_OUT, search_only=True)
        assert _ids(filter_reports(reports, criteria)) == ['RPT-101', 'RPT-102']

    def test_search_only_without_term_applies_other_criteria(self, reports):
        criteria = FilterCriteria(priority=5, search_only=True)
        assert _ids(filter_reports(reports, criteria)) == ['RPT-103']

    def test_active_count(self):
        assert FilterCriteria().active_count() == 0
        assert FilterCriteria(category=ReportCategory.POTHOLE, search='x', priority=3).active_count() == 3
