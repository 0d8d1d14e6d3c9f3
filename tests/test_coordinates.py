"""
Tests for coordinate extraction
"""
import pytest

import sys
sys.path.insert(0, '.')

from disasterwatch.visualization.coordinates import extract_coordinates, format_coordinates


class TestExtractCoordinates:
    """Test suite for location text parsing."""

    def test_standard_format(self):
        """Test the format submitted by field devices."""
        assert extract_coordinates("Latitude: 28.6139, Longitude: 77.2090") == (28.6139, 77.209)

    def test_negative_values(self):
        """Test signed coordinates."""
        assert extract_coordinates("Latitude: -22.5, Longitude: -45.5") == (-22.5, -45.5)

    def test_embedded_in_text(self):
        """Test labels surrounded by other text."""
        location = "Near the bridge. Latitude: 12.9716, Longitude: 77.5946 (reported by volunteer)"
        assert extract_coordinates(location) == (12.9716, 77.5946)

    def test_reversed_order(self):
        """Test longitude appearing before latitude."""
        assert extract_coordinates("Longitude: 77.59, Latitude: 12.97") == (12.97, 77.59)

    def test_no_space_after_label(self):
        """Test label immediately followed by the number."""
        assert extract_coordinates("Latitude:10.5,Longitude:20") == (10.5, 20.0)

    def test_out_of_range_passes_through(self):
        """Test values are not range-checked."""
        assert extract_coordinates("Latitude: 999, Longitude: -500.25") == (999.0, -500.25)

    @pytest.mark.parametrize("location", [
        "Delhi, India",
        "Latitude: 28.6",
        "Longitude: 77.2",
        "Latitude: north, Longitude: 77.2",
        "latitude: 28.6, longitude: 77.2",
        "",
    ])
    def test_missing_label_returns_none(self, location):
        """Test any string missing a label or its number."""
        assert extract_coordinates(location) is None

    def test_none_location(self):
        """Test None is treated as missing."""
        assert extract_coordinates(None) is None

    def test_format_roundtrip_label(self):
        """Test the device label format is parseable."""
        text = format_coordinates(19.07601, 72.87771)
        assert text == "Latitude: 19.0760, Longitude: 72.8777"
        assert extract_coordinates(text) == (19.076, 72.8777)
