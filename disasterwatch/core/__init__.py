"""
DisasterWatch - Core Utilities
Central configuration, logging, and reference data.
"""

from disasterwatch.core.config import settings, get_settings
from disasterwatch.core.constants import (
    STYLE_PRECEDENCE,
    DISASTER_STYLES,
    FALLBACK_STYLE,
    BASEMAP_TILES,
    NO_DATA,
    NOT_AVAILABLE,
    UNKNOWN_REGION,
)

__all__ = [
    "settings",
    "get_settings",
    "STYLE_PRECEDENCE",
    "DISASTER_STYLES",
    "FALLBACK_STYLE",
    "BASEMAP_TILES",
    "NO_DATA",
    "NOT_AVAILABLE",
    "UNKNOWN_REGION",
]
