"""
Coordinate extraction from free-text report locations

Field devices submit locations as text such as
"Latitude: 28.6139, Longitude: 77.2090", sometimes with extra commentary.
Extraction is best effort and never raises.
"""

import re
from typing import Optional, Tuple

# Signed decimal immediately after the label
_NUMBER = r"([-+]?(?:\d+\.?\d*|\.\d+))"

LATITUDE_PATTERN = re.compile(r"Latitude:\s*" + _NUMBER)
LONGITUDE_PATTERN = re.compile(r"Longitude:\s*" + _NUMBER)


def extract_coordinates(location: Optional[str]) -> Optional[Tuple[float, float]]:
    """
    Extract a (latitude, longitude) pair from a location string.

    Both labels are searched independently, so their order and any
    surrounding text do not matter. Values are not range-checked.

    Args:
        location: Free-text location

    Returns:
        (lat, lon), or None if either label or its number is missing
    """
    if not location:
        return None

    lat_match = LATITUDE_PATTERN.search(location)
    lon_match = LONGITUDE_PATTERN.search(location)
    if not lat_match or not lon_match:
        return None

    return (float(lat_match.group(1)), float(lon_match.group(1)))


def format_coordinates(latitude: float, longitude: float, precision: int = 4) -> str:
    """Render a coordinate pair in the labelled form field devices submit."""
    return f"Latitude: {latitude:.{precision}f}, Longitude: {longitude:.{precision}f}"
