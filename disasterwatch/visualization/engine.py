"""
DisasterWatch - Report Visualization Engine

Composition root for the organization dashboard. Holds the report
collection, the filter criteria and the current selection, and derives
filtered reports, analytics and map markers from them on demand.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Callable, Tuple, Dict, Any, Iterable

import folium

from disasterwatch.analysis.analytics import AnalyticsAggregator, AnalyticsSnapshot
from disasterwatch.crowdsource.filters import FilterCriteria, filter_reports
from disasterwatch.crowdsource.report import Report
from disasterwatch.visualization.coordinates import extract_coordinates
from disasterwatch.visualization.fly_to import (
    FlyToController,
    MapViewport,
    CoordinateExtractor,
)
from disasterwatch.visualization.map_generator import create_report_map
from disasterwatch.visualization.map_view import MapViewController
from disasterwatch.visualization.styles import DisasterStyle, resolve_style

logger = logging.getLogger(__name__)

SelectionListener = Callable[[Optional[Report]], None]
StyleResolver = Callable[[str, Optional[float]], DisasterStyle]


@dataclass
class MarkerDescriptor:
    """Renderable circle marker for one report."""
    id: str
    center: Tuple[float, float]
    radius: float
    color: str
    fill: str
    on_click: Callable[[], None] = field(repr=False, compare=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "center": list(self.center),
            "radius": self.radius,
            "color": self.color,
            "fill": self.fill,
        }


class ReportVisualizationEngine:
    """
    Wires filtering, styling, coordinate extraction and map control.

    Reports whose location has no coordinates still count in the filtered
    list and in analytics; they are only left off the map.
    """

    def __init__(
        self,
        reports: Optional[Iterable[Report]] = None,
        map_view: Optional[MapViewController] = None,
        viewport: Optional[MapViewport] = None,
        aggregator: Optional[AnalyticsAggregator] = None,
        extractor: CoordinateExtractor = extract_coordinates,
        style_resolver: StyleResolver = resolve_style
    ):
        """
        Initialize engine.

        Args:
            reports: Initial report collection
            map_view: Basemap controller (in-memory preference if omitted)
            viewport: Map camera
            aggregator: Analytics aggregator
            extractor: Location text to (lat, lon) parser
            style_resolver: Category and confidence to DisasterStyle
        """
        self._reports: List[Report] = list(reports or [])
        self.criteria = FilterCriteria()
        self.map_view = map_view or MapViewController()
        self.viewport = viewport or MapViewport()
        self.aggregator = aggregator or AnalyticsAggregator()
        self.extractor = extractor
        self.style_resolver = style_resolver
        self.fly_to = FlyToController(self.viewport, extractor=extractor)

        self._selected: Optional[Report] = None
        self._listeners: List[SelectionListener] = [self.fly_to.on_select]

        logger.info(f"ReportVisualizationEngine initialized with {len(self._reports)} reports")

    # ---------------- Report collection ----------------

    @property
    def reports(self) -> List[Report]:
        return list(self._reports)

    def set_reports(self, reports: Iterable[Report]) -> None:
        """Replace the report collection."""
        self._reports = list(reports)
        logger.info(f"Report collection replaced: {len(self._reports)} reports")

    def get_report(self, report_id: str) -> Optional[Report]:
        for report in self._reports:
            if report.id == report_id:
                return report
        return None

    # ---------------- Filter criteria ----------------

    def set_search_term(self, search_term: str) -> None:
        self.criteria = FilterCriteria(
            search_term=search_term or "",
            start_date=self.criteria.start_date,
            end_date=self.criteria.end_date,
        )

    def set_date_range(
        self,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None
    ) -> None:
        self.criteria = FilterCriteria(
            search_term=self.criteria.search_term,
            start_date=start_date,
            end_date=end_date,
        )

    def set_criteria(self, criteria: FilterCriteria) -> None:
        self.criteria = criteria

    def clear_filters(self) -> None:
        self.criteria = FilterCriteria()

    # ---------------- Derived state ----------------

    @property
    def filtered_reports(self) -> List[Report]:
        return filter_reports(self._reports, self.criteria)

    @property
    def analytics(self) -> AnalyticsSnapshot:
        return self.aggregator.aggregate(self.filtered_reports)

    def markers(self) -> List[MarkerDescriptor]:
        """
        Build map markers for the filtered reports.

        Returns:
            One marker per report with resolvable coordinates, in filter order
        """
        markers = []
        excluded = 0

        for report in self.filtered_reports:
            coords = self.extractor(report.location)
            if coords is None:
                excluded += 1
                continue

            style = self.style_resolver(report.category, report.confidence)
            markers.append(MarkerDescriptor(
                id=report.id,
                center=coords,
                radius=style.radius,
                color=style.color,
                fill=style.fill,
                on_click=self._click_handler(report),
            ))

        if excluded:
            logger.info(f"{excluded} reports without coordinates left off the map")

        return markers

    def _click_handler(self, report: Report) -> Callable[[], None]:
        def on_click() -> None:
            self.select(report)
        return on_click

    # ---------------- Selection ----------------

    @property
    def selected_report(self) -> Optional[Report]:
        return self._selected

    def subscribe(self, listener: SelectionListener) -> Callable[[], None]:
        """
        Register a selection listener.

        Returns:
            Callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def select(self, report: Optional[Report]) -> None:
        """Set the selected report and notify listeners (fly-to first)."""
        self._selected = report
        for listener in list(self._listeners):
            listener(report)

    def select_by_id(self, report_id: str) -> Optional[Report]:
        report = self.get_report(report_id)
        if report is not None:
            self.select(report)
        return report

    # ---------------- Map ----------------

    def toggle_basemap(self):
        return self.map_view.toggle()

    def render_map(self, title: str = "DisasterWatch - Live Reports") -> folium.Map:
        """Render the current markers on the current basemap and camera."""
        reports = {r.id: r for r in self.filtered_reports}
        return create_report_map(
            markers=self.markers(),
            reports=reports,
            basemap=self.map_view.basemap,
            center=self.viewport.center,
            zoom=self.viewport.zoom,
            title=title,
        )
