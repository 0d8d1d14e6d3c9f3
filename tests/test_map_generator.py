"""
Tests for map rendering
"""
import pytest

import sys
sys.path.insert(0, '.')

import folium

from disasterwatch.visualization.engine import ReportVisualizationEngine
from disasterwatch.visualization.map_generator import (
    build_popup_html,
    create_report_map,
    legend_entries,
    save_report_map,
)
from disasterwatch.visualization.map_view import Basemap


class TestCreateReportMap:
    """Test suite for folium map generation."""

    def test_empty_map(self):
        """Test a map with no markers still renders."""
        report_map = create_report_map(markers=[], center=(0, 0), zoom=3)

        assert isinstance(report_map, folium.Map)
        assert "0 reports on map" in report_map.get_root().render()

    def test_basemap_tiles(self, sample_reports):
        """Test the selected basemap's tiles are used."""
        engine = ReportVisualizationEngine(reports=sample_reports)

        html = create_report_map(engine.markers(), basemap=Basemap.DARK).get_root().render()

        assert "basemaps.cartocdn.com/dark_all" in html
        assert "3 reports on map" in html

    def test_popups_include_report_details(self, sample_reports):
        """Test popups show category, note and location."""
        engine = ReportVisualizationEngine(reports=sample_reports)
        reports = {r.id: r for r in sample_reports}

        html = create_report_map(engine.markers(), reports=reports).get_root().render()

        assert "Smoke rising near the market" in html
        assert "https://cdn.example.org/r1.jpg" in html

    def test_popup_placeholder_image(self, make_report):
        """Test reports without images use the placeholder."""
        report = make_report("a", note="no photo")
        assert "/placeholder.jpg" in build_popup_html(report)

    def test_popup_escapes_text(self, make_report):
        """Test user text is HTML-escaped."""
        report = make_report("a", note="<script>alert(1)</script>")
        assert "<script>" not in build_popup_html(report)

    def test_legend_entries(self):
        """Test the legend lists the five disaster styles."""
        entries = legend_entries()
        assert len(entries) == 5
        assert ("#1e90ff", "Flood") in entries

    def test_save_report_map(self, tmp_path):
        """Test saving writes an HTML file."""
        output = tmp_path / "map.html"
        path = save_report_map(create_report_map([]), str(output))

        assert path == str(output)
        assert output.exists()


class TestRenderedMarkerStyles:
    """Test resolved marker styles reach the rendered circles."""

    def render(self, reports):
        engine = ReportVisualizationEngine(reports=reports)
        return create_report_map(engine.markers(), show_legend=False).get_root().render()

    def test_fill_uses_style_fill(self, sample_reports):
        """Test circles are filled with the RGBA fill, not the stroke color."""
        html = self.render(sample_reports)

        assert "rgba(255,0,0,0.4)" in html
        assert "rgba(30,144,255,0.4)" in html

    def test_stroke_color(self, sample_reports):
        """Test circles are outlined with the style color."""
        html = self.render(sample_reports)

        assert "#ff4d4d" in html
        assert "#1e90ff" in html

    def test_radius_scaled_by_confidence(self, sample_reports):
        """Test the rendered radius is base radius times confidence."""
        html = self.render(sample_reports)

        assert "4500.0" in html
        assert "12000.0" in html

    def test_reports_without_coordinates_not_drawn(self, sample_reports):
        """Test a report with no coordinates contributes no circle."""
        html = self.render(sample_reports)

        assert "rgba(255,204,0,0.4)" not in html

    def test_popup_shows_coordinates(self, make_report):
        """Test the popup lists the marker coordinates."""
        report = make_report("a", location="Latitude: 28.6139, Longitude: 77.2090")

        popup = build_popup_html(report, (28.6139, 77.2090))

        assert "Latitude: 28.6139, Longitude: 77.2090" in popup

    def test_popup_without_center(self, make_report):
        """Test the coordinates line is omitted without a center."""
        report = make_report("a", location="Delhi")
        assert "Latitude:" not in build_popup_html(report)
