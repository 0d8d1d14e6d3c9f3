"""
DisasterWatch - Analysis Module
Dashboard analytics over report collections.
"""

from disasterwatch.analysis.analytics import (
    AnalyticsAggregator,
    AnalyticsSnapshot,
    CategoryCount,
    TimeSeriesPoint,
    aggregate_reports,
)

__all__ = [
    "AnalyticsAggregator",
    "AnalyticsSnapshot",
    "CategoryCount",
    "TimeSeriesPoint",
    "aggregate_reports",
]
