"""
DisasterWatch - Visualization Module
Coordinate extraction, styling, basemap and camera control, and map rendering.
"""

from disasterwatch.visualization.coordinates import extract_coordinates
from disasterwatch.visualization.styles import DisasterStyle, resolve_style
from disasterwatch.visualization.map_view import (
    Basemap,
    MapViewController,
    MemoryStorage,
    JSONFileStorage,
)
from disasterwatch.visualization.fly_to import (
    CameraCommand,
    FlyToController,
    MapViewport,
)
from disasterwatch.visualization.engine import (
    MarkerDescriptor,
    ReportVisualizationEngine,
)

__all__ = [
    # Coordinates and styles
    "extract_coordinates",
    "DisasterStyle",
    "resolve_style",
    # Basemap
    "Basemap",
    "MapViewController",
    "MemoryStorage",
    "JSONFileStorage",
    # Camera
    "CameraCommand",
    "FlyToController",
    "MapViewport",
    # Composition
    "MarkerDescriptor",
    "ReportVisualizationEngine",
]
