"""
Tests for fly-to camera control
"""
import pytest
from unittest.mock import MagicMock

import sys
sys.path.insert(0, '.')

from disasterwatch.visualization.fly_to import CameraCommand, FlyToController, MapViewport


class TestFlyToController:
    """Test suite for selection-driven camera moves."""

    def setup_method(self):
        """Setup test fixtures."""
        self.viewport = MagicMock()
        self.controller = FlyToController(self.viewport, zoom=9, duration_seconds=1.5)

    def test_moves_to_selected_report(self, make_report):
        """Test a resolvable selection issues a camera command."""
        report = make_report("a", location="Latitude: 28.6, Longitude: 77.2")

        command = self.controller.on_select(report)

        assert command == CameraCommand(latitude=28.6, longitude=77.2, zoom=9, duration_seconds=1.5)
        self.viewport.fly_to.assert_called_once_with(command)

    def test_unresolvable_location_is_silent(self, make_report):
        """Test no command and no error for text-only locations."""
        report = make_report("a", location="Delhi, India")

        assert self.controller.on_select(report) is None
        self.viewport.fly_to.assert_not_called()

    def test_clear_selection(self):
        """Test None selection issues nothing."""
        assert self.controller.on_select(None) is None
        self.viewport.fly_to.assert_not_called()

    def test_reselect_same_report(self, make_report):
        """Test selecting the same report twice moves twice."""
        report = make_report("a", location="Latitude: 1, Longitude: 2")

        self.controller.on_select(report)
        self.controller.on_select(report)

        assert self.viewport.fly_to.call_count == 2

    def test_custom_extractor(self, make_report):
        """Test the extractor is injectable."""
        controller = FlyToController(self.viewport, extractor=lambda text: (0.0, 0.0))
        command = controller.on_select(make_report("a", location="anywhere"))
        assert command.center == (0.0, 0.0)


class TestMapViewport:
    """Test suite for viewport camera state."""

    def test_initial_view(self):
        """Test the configured center before any move."""
        viewport = MapViewport(center=(20.5937, 78.9629), zoom=5)
        assert viewport.center == (20.5937, 78.9629)
        assert viewport.zoom == 5
        assert viewport.target is None

    def test_latest_command_wins(self):
        """Test a new move supersedes the previous one."""
        viewport = MapViewport(center=(0, 0), zoom=5)

        viewport.fly_to(CameraCommand(1.0, 2.0, 9, 1.5))
        viewport.fly_to(CameraCommand(3.0, 4.0, 9, 1.5))

        assert viewport.center == (3.0, 4.0)
        assert viewport.zoom == 9
        assert viewport.commands_received == 2

    def test_reset(self):
        """Test reset returns to the initial view."""
        viewport = MapViewport(center=(0, 0), zoom=5)
        viewport.fly_to(CameraCommand(1.0, 2.0, 9, 1.5))
        viewport.reset()
        assert viewport.center == (0, 0)
