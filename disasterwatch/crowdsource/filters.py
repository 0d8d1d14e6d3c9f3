"""
Report filtering for the organization dashboard
Search-term and date-range predicates over a report collection
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, List, Iterable

from disasterwatch.crowdsource.report import Report, parse_timestamp

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FilterCriteria:
    """
    Transient filter state set by the user.

    Empty search term and missing bounds mean "no constraint". Both date
    bounds are inclusive.
    """
    search_term: str = ""
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None

    @classmethod
    def from_strings(
        cls,
        search_term: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None
    ) -> "FilterCriteria":
        """
        Build criteria from form-style string inputs.

        Date strings use any layout parse_timestamp accepts; a bare date
        ("2024-03-01") is midnight UTC.

        Raises:
            ValueError: If a non-empty date string cannot be parsed
        """
        return cls(
            search_term=search_term or "",
            start_date=_parse_bound(start_date, "start_date"),
            end_date=_parse_bound(end_date, "end_date"),
        )

    @property
    def is_empty(self) -> bool:
        return not self.search_term and self.start_date is None and self.end_date is None


def _parse_bound(value: Optional[str], name: str) -> Optional[datetime]:
    if not value:
        return None
    parsed = parse_timestamp(value)
    if parsed is None:
        raise ValueError(f"Invalid {name}: {value!r}")
    return parsed


def matches_search(report: Report, search_term: str) -> bool:
    """Case-insensitive substring match on category or note."""
    if not search_term:
        return True
    term = search_term.lower()
    return term in report.category.lower() or term in report.note.lower()


def within_bounds(
    report: Report,
    start_date: Optional[datetime] = None,
    end_date: Optional[datetime] = None
) -> bool:
    """
    Check the report's creation time against inclusive bounds.

    A report without a parseable timestamp fails any bound that is set.
    """
    if start_date is None and end_date is None:
        return True
    if report.created_at is None:
        return False
    if start_date is not None and report.created_at < parse_timestamp(start_date):
        return False
    if end_date is not None and report.created_at > parse_timestamp(end_date):
        return False
    return True


def filter_reports(reports: Iterable[Report], criteria: FilterCriteria) -> List[Report]:
    """
    Apply search and date predicates to a report collection.

    Args:
        reports: Reports in any order
        criteria: Filter criteria

    Returns:
        Matching reports in input order
    """
    filtered = [
        r for r in reports
        if matches_search(r, criteria.search_term)
        and within_bounds(r, criteria.start_date, criteria.end_date)
    ]

    logger.debug(f"Filter {criteria} kept {len(filtered)} reports")
    return filtered
