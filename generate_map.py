#!/usr/bin/env python3
"""
DisasterWatch - Generate Interactive Report Map
Fetches disaster reports from the backend and creates an interactive map.
"""
import argparse
import os
import sys
from datetime import datetime

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from dotenv import load_dotenv

# Load environment variables before settings are read
load_dotenv()

from disasterwatch.core.logging import setup_logging
from disasterwatch.crowdsource.client import ReportClient
from disasterwatch.crowdsource.filters import FilterCriteria
from disasterwatch.visualization.coordinates import format_coordinates
from disasterwatch.visualization.engine import ReportVisualizationEngine
from disasterwatch.visualization.map_generator import save_report_map
from disasterwatch.visualization.map_view import MapViewController, create_file_storage


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Generate a DisasterWatch report map")
    parser.add_argument("--search", default="", help="Match category or note")
    parser.add_argument("--start-date", default=None, help="Inclusive lower bound (YYYY-MM-DD)")
    parser.add_argument("--end-date", default=None, help="Inclusive upper bound (YYYY-MM-DD)")
    parser.add_argument("--select", default=None, help="Report ID to center the map on")
    parser.add_argument("--output", default="disaster_reports_map.html", help="Output HTML path")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    setup_logging()

    try:
        criteria = FilterCriteria.from_strings(args.search, args.start_date, args.end_date)
    except ValueError as e:
        print(f"ERROR: {e}")
        sys.exit(1)

    print("=" * 60)
    print("DisasterWatch - Generating Report Map")
    print("=" * 60)

    print("\nFetching reports from backend...")
    with ReportClient() as client:
        reports = client.get_reports()

    engine = ReportVisualizationEngine(
        reports=reports,
        map_view=MapViewController(create_file_storage()),
    )
    engine.set_criteria(criteria)

    filtered = engine.filtered_reports
    print(f"\nTotal reports:    {len(reports)}")
    print(f"Matching filters: {len(filtered)}")

    if args.select:
        if engine.select_by_id(args.select) is None:
            print(f"WARNING: report {args.select} not found, map not centered")
        elif engine.viewport.target is not None:
            print(f"Centered on:      {format_coordinates(*engine.viewport.center)}")

    # Statistics
    analytics = engine.analytics
    print(f"\nStatistics:")
    print(f"  - Most common:   {analytics.most_common}")
    print(f"  - Latest report: {analytics.latest}")
    for category in analytics.category_counts:
        print(f"  - {category.name}: {category.value}")

    if analytics.top_regions:
        print(f"\nTop affected regions:")
        for region, count in analytics.top_regions:
            print(f"  - {region}: {count}")

    print("\nGenerating interactive map...")
    report_map = engine.render_map(
        title=f"DisasterWatch - Live Reports ({datetime.now().strftime('%Y-%m-%d %H:%M')})"
    )
    output_path = save_report_map(report_map, args.output)

    print(f"\nMap saved to: {output_path}")
    print(f"Basemap: {engine.map_view.basemap.value}")
    print("=" * 60)


if __name__ == "__main__":
    main()
