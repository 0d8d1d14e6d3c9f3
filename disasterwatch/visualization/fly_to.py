"""
Fly-to navigation for the selected report

Every selection whose location resolves to coordinates issues an animated
camera move. Selections that do not resolve are ignored.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Callable, Tuple, Protocol, Dict, Any

from disasterwatch.core.config import settings
from disasterwatch.crowdsource.report import Report
from disasterwatch.visualization.coordinates import extract_coordinates

logger = logging.getLogger(__name__)

CoordinateExtractor = Callable[[str], Optional[Tuple[float, float]]]


@dataclass(frozen=True)
class CameraCommand:
    """Animated transition of the map camera."""
    latitude: float
    longitude: float
    zoom: int
    duration_seconds: float

    @property
    def center(self) -> Tuple[float, float]:
        return (self.latitude, self.longitude)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "latitude": self.latitude,
            "longitude": self.longitude,
            "zoom": self.zoom,
            "duration_seconds": self.duration_seconds,
        }


class Viewport(Protocol):
    """Map camera able to animate to a target."""

    def fly_to(self, command: CameraCommand) -> None:
        ...


class MapViewport:
    """
    Camera state of a rendered map.

    A new command replaces any transition still in flight, so the
    viewport always ends at the most recent target.
    """

    def __init__(
        self,
        center: Optional[Tuple[float, float]] = None,
        zoom: Optional[int] = None
    ):
        self.initial_center = center or settings.map_center
        self.initial_zoom = zoom or settings.map_default_zoom
        self.target: Optional[CameraCommand] = None
        self.commands_received = 0

    def fly_to(self, command: CameraCommand) -> None:
        if self.target is not None:
            logger.debug(f"Superseding camera move to {self.target.center}")
        self.target = command
        self.commands_received += 1

    @property
    def center(self) -> Tuple[float, float]:
        return self.target.center if self.target else self.initial_center

    @property
    def zoom(self) -> int:
        return self.target.zoom if self.target else self.initial_zoom

    def reset(self) -> None:
        self.target = None


class FlyToController:
    """Moves the viewport camera to each selected report."""

    def __init__(
        self,
        viewport: Viewport,
        extractor: CoordinateExtractor = extract_coordinates,
        zoom: Optional[int] = None,
        duration_seconds: Optional[float] = None
    ):
        """
        Initialize fly-to controller.

        Args:
            viewport: Camera to drive
            extractor: Location text to (lat, lon) parser
            zoom: Zoom level for every move
            duration_seconds: Animation duration for every move
        """
        self.viewport = viewport
        self.extractor = extractor
        self.zoom = zoom or settings.fly_to_zoom
        self.duration_seconds = duration_seconds or settings.fly_to_duration_seconds

    def on_select(self, report: Optional[Report]) -> Optional[CameraCommand]:
        """
        Handle a selection change.

        Selecting the same report again issues the move again.

        Args:
            report: Newly selected report, or None when cleared

        Returns:
            The issued command, or None if no move was made
        """
        if report is None:
            return None

        coords = self.extractor(report.location)
        if coords is None:
            logger.debug(f"No coordinates for report {report.id}, camera unchanged")
            return None

        command = CameraCommand(
            latitude=coords[0],
            longitude=coords[1],
            zoom=self.zoom,
            duration_seconds=self.duration_seconds,
        )
        self.viewport.fly_to(command)
        return command
