"""
DisasterWatch - Report Analytics
Aggregates a report collection into chart-ready dashboard statistics.
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import List, Optional, Dict, Any, Tuple, Iterable

from disasterwatch.core.config import settings
from disasterwatch.core.constants import NO_DATA, NOT_AVAILABLE, UNKNOWN_REGION
from disasterwatch.crowdsource.report import Report

logger = logging.getLogger(__name__)


@dataclass
class CategoryCount:
    """Number of reports for one disaster category."""
    key: str    # lower-cased grouping key
    name: str   # display label
    value: int


@dataclass
class TimeSeriesPoint:
    """Number of reports created on one calendar day."""
    day: date
    label: str
    count: int


@dataclass
class AnalyticsSnapshot:
    """Derived dashboard statistics for a report collection."""
    total_reports: int = 0
    category_counts: List[CategoryCount] = field(default_factory=list)
    time_series: List[TimeSeriesPoint] = field(default_factory=list)
    most_common: str = NOT_AVAILABLE
    latest: str = NO_DATA
    latest_at: Optional[datetime] = None
    top_regions: List[Tuple[str, int]] = field(default_factory=list)

    @property
    def counts_by_category(self) -> Dict[str, int]:
        return {c.key: c.value for c in self.category_counts}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_reports": self.total_reports,
            "category_counts": [
                {"name": c.name, "value": c.value} for c in self.category_counts
            ],
            "time_series": [
                {"date": p.label, "count": p.count} for p in self.time_series
            ],
            "most_common": self.most_common,
            "latest": self.latest,
            "top_regions": [
                {"region": region, "count": count} for region, count in self.top_regions
            ],
        }


def category_label(key: str) -> str:
    """Upper-case the first character only ("damaged_buildings" -> "Damaged_buildings")."""
    return key[:1].upper() + key[1:]


def region_of(location: str) -> str:
    """Region label: text before the first comma, trimmed."""
    region = location.split(",", 1)[0].strip()
    return region or UNKNOWN_REGION


class AnalyticsAggregator:
    """
    Computes categorical, temporal and regional statistics.

    Ties in "most common" and "top regions" are broken by first-seen order:
    Counter.most_common and sorted() are both stable over insertion order.
    """

    def __init__(
        self,
        top_regions_limit: Optional[int] = None,
        date_format: Optional[str] = None,
        timestamp_format: Optional[str] = None
    ):
        """
        Initialize aggregator.

        Args:
            top_regions_limit: Number of regions to rank
            date_format: strftime format for time-series labels
            timestamp_format: strftime format for the latest report time
        """
        self.top_regions_limit = top_regions_limit or settings.top_regions_limit
        self.date_format = date_format or settings.date_format
        self.timestamp_format = timestamp_format or settings.timestamp_format

    def aggregate(self, reports: Iterable[Report]) -> AnalyticsSnapshot:
        """
        Aggregate reports into an analytics snapshot.

        Args:
            reports: Reports in any order

        Returns:
            AnalyticsSnapshot; an empty collection yields sentinel values
        """
        reports = list(reports)
        if not reports:
            return AnalyticsSnapshot()

        category_counts = self.count_categories(reports)
        latest_at = self.latest_timestamp(reports)

        return AnalyticsSnapshot(
            total_reports=len(reports),
            category_counts=category_counts,
            time_series=self.time_series(reports),
            most_common=self.most_common(category_counts),
            latest=latest_at.strftime(self.timestamp_format) if latest_at else NO_DATA,
            latest_at=latest_at,
            top_regions=self.top_regions(reports),
        )

    def count_categories(self, reports: List[Report]) -> List[CategoryCount]:
        """Count reports per lower-cased category, in first-seen order."""
        counts = Counter(r.category.lower() for r in reports)
        return [
            CategoryCount(key=key, name=category_label(key), value=value)
            for key, value in counts.items()
        ]

    @staticmethod
    def most_common(category_counts: List[CategoryCount]) -> str:
        if not category_counts:
            return NOT_AVAILABLE
        ranked = sorted(category_counts, key=lambda c: c.value, reverse=True)
        return ranked[0].name

    def time_series(self, reports: List[Report]) -> List[TimeSeriesPoint]:
        """
        Count reports per calendar day, in chronological order.

        Reports without a parseable timestamp are left out.
        """
        counts = Counter(r.created_at.date() for r in reports if r.created_at is not None)

        skipped = len(reports) - sum(counts.values())
        if skipped:
            logger.debug(f"{skipped} reports without timestamp left out of time series")

        return [
            TimeSeriesPoint(day=day, label=day.strftime(self.date_format), count=counts[day])
            for day in sorted(counts)
        ]

    @staticmethod
    def latest_timestamp(reports: List[Report]) -> Optional[datetime]:
        timestamps = [r.created_at for r in reports if r.created_at is not None]
        return max(timestamps) if timestamps else None

    def top_regions(self, reports: List[Report]) -> List[Tuple[str, int]]:
        """Most frequent region labels, highest count first."""
        counts = Counter(region_of(r.location) for r in reports)
        return counts.most_common(self.top_regions_limit)


def aggregate_reports(reports: Iterable[Report]) -> AnalyticsSnapshot:
    """
    Convenience function to aggregate reports with default settings.

    Args:
        reports: Reports to aggregate

    Returns:
        AnalyticsSnapshot
    """
    return AnalyticsAggregator().aggregate(reports)
