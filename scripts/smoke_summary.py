#!/usr/bin/env python3
"""Run every engine component over a report snapshot and write a cluster summary CSV.

Usage:
    python scripts/smoke_summary.py data/reports.csv

Writes: reports/smoke_summary.csv
"""
from pathlib import Path
import pandas as pd
import sys

ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT / 'src'
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from engine_config import HOTSPOT_TOP_N
from report_analytics import build_analytics_summary
from report_grouping import group_reports
from report_hotspots import rank_hotspot_clusters
from report_ingest import load_reports

OUT = ROOT / 'reports' / 'smoke_summary.csv'


def summarize_clusters(reports):
    hotspot_rank_by_report = {}
    for rank, hotspot in enumerate(rank_hotspot_clusters(reports)[:HOTSPOT_TOP_N], start=1):
        for r in hotspot.all_reports():
            hotspot_rank_by_report[r.id] = rank

    rows = []
    for cluster in group_reports(reports):
        ranks = [hotspot_rank_by_report[r.id] for r in cluster.all_reports() if r.id in hotspot_rank_by_report]
        rows.append({
            'id': cluster.id,
            'category': cluster.category.value,
            'status': cluster.status.value,
            'lat': cluster.location.lat,
            'lng': cluster.location.lng,
            'size': cluster.size,
            'priority': cluster.priority,
            'total_upvotes': cluster.total_upvotes,
            'member_ids': ';'.join(m.id for m in cluster.members),
            # best rank of any top hotspot (coarser pass) sharing a report with this cluster
            'hotspot_rank': min(ranks) if ranks else None,
        })
    return rows


def main():
    if len(sys.argv) < 2:
        print('Usage: python scripts/smoke_summary.py <reports.csv|json|parquet>', file=sys.stderr)
        return 2

    reports = load_reports(sys.argv[1])
    if not reports:
        print('No reports found; nothing to report.', file=sys.stderr)
        return 2

    df = pd.DataFrame(summarize_clusters(reports))
    OUT.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(OUT, index=False)

    summary = build_analytics_summary(reports)
    for key, value in summary.metrics.as_dict().items():
        print(f'{key}: {value}')
    print(f'resolutionRate: {summary.resolution_rate}%')
    print('Wrote', OUT)
    return 0

if __name__ == '__main__':
    raise SystemExit(main())
