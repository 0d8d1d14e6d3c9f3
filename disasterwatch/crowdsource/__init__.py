"""
DisasterWatch - Crowdsource Module
Report records, the backend client and report filtering.
"""

from disasterwatch.crowdsource.report import (
    Report,
    parse_timestamp,
)
from disasterwatch.crowdsource.client import ReportClient
from disasterwatch.crowdsource.filters import (
    FilterCriteria,
    filter_reports,
)

__all__ = [
    # Report model
    "Report",
    "parse_timestamp",
    # Backend client
    "ReportClient",
    # Filtering
    "FilterCriteria",
    "filter_reports",
]
