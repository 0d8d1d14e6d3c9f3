"""
Reports backend client for DisasterWatch

Fetches the report collection from the DisasterWatch backend. The backend
returns a JSON array of report records with no pagination, filtering or
ordering guarantees.
"""

import logging
from typing import Optional

import httpx

from disasterwatch.core.config import settings
from disasterwatch.crowdsource.report import Report

logger = logging.getLogger(__name__)


class ReportClient:
    """
    Client for the reports backend.

    Usage:
        with ReportClient() as client:
            reports = client.get_reports()

    Transport and HTTP status errors are raised as httpx.HTTPError
    subclasses; nothing is retried here.
    """

    REPORTS_PATH = "/reports"

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None):
        """
        Initialize reports client.

        Args:
            base_url: Backend API base URL (defaults to settings)
            timeout: HTTP request timeout in seconds
        """
        self.base_url = (base_url or settings.reports_api_url).rstrip("/")
        self.timeout = timeout or settings.request_timeout_seconds
        self._client = httpx.Client(timeout=self.timeout)

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    def close(self) -> None:
        self._client.close()

    def get_reports(self) -> list[Report]:
        """
        Fetch all reports from the backend.

        Returns:
            Reports in backend order
        """
        url = f"{self.base_url}{self.REPORTS_PATH}"
        logger.info(f"Fetching reports from {url}")

        response = self._client.get(url)
        response.raise_for_status()

        payload = response.json()
        if not isinstance(payload, list):
            raise ValueError(f"Expected a list of reports, got {type(payload).__name__}")

        reports = []
        for record in payload:
            if not isinstance(record, dict):
                logger.warning(f"Skipping non-object report record: {record!r}")
                continue
            reports.append(Report.from_dict(record))

        logger.info(f"Fetched {len(reports)} reports")
        return reports
