"""
DisasterWatch - Constants and Reference Data
Static values used throughout the application.
"""

from typing import Dict, List, Tuple

# =============================================================================
# DISASTER STYLES
# =============================================================================

# Keyword stems in match precedence order. A category containing several
# stems resolves to the first one listed here.
STYLE_PRECEDENCE: Tuple[str, ...] = (
    "fire",
    "flood",
    "damaged",
    "landslide",
    "tree",
)

# Style per stem: stroke color, fill (RGBA) and base radius in meters
DISASTER_STYLES: Dict[str, Dict[str, object]] = {
    "fire": {"color": "#ff4d4d", "fill": "rgba(255,0,0,0.4)", "radius": 5000},
    "flood": {"color": "#1e90ff", "fill": "rgba(30,144,255,0.4)", "radius": 12000},
    "damaged": {"color": "#ffcc00", "fill": "rgba(255,204,0,0.4)", "radius": 3000},
    "landslide": {"color": "#996633", "fill": "rgba(153,102,51,0.4)", "radius": 8000},
    "tree": {"color": "#228b22", "fill": "rgba(34,139,34,0.4)", "radius": 2000},
}

FALLBACK_STYLE: Dict[str, object] = {
    "color": "#b266ff",
    "fill": "rgba(178,102,255,0.4)",
    "radius": 3000,
}

# Legend labels shown on the map, in display order
LEGEND_LABELS: List[Tuple[str, str]] = [
    ("flood", "Flood"),
    ("fire", "Fire"),
    ("damaged", "Damaged Buildings"),
    ("landslide", "Landslide"),
    ("tree", "Fallen Trees"),
]

# =============================================================================
# BASEMAPS
# =============================================================================

BASEMAP_TILES: Dict[str, Dict[str, str]] = {
    "satellite": {
        "name": "Satellite",
        "url": "https://server.arcgisonline.com/ArcGIS/rest/services/World_Imagery/MapServer/tile/{z}/{y}/{x}",
        "attribution": "Tiles &copy; Esri",
    },
    "street": {
        "name": "Street",
        "url": "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png",
        "attribution": '&copy; <a href="https://www.openstreetmap.org/">OpenStreetMap</a>',
    },
    "dark": {
        "name": "Dark",
        "url": "https://{s}.basemaps.cartocdn.com/dark_all/{z}/{x}/{y}{r}.png",
        "attribution": '&copy; <a href="https://carto.com/">CARTO</a>',
    },
}

# =============================================================================
# ANALYTICS SENTINELS
# =============================================================================

NO_DATA = "No Data"
NOT_AVAILABLE = "N/A"
UNKNOWN_REGION = "Unknown Region"
