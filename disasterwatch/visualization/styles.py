"""
Disaster category to map style resolution.
"""

from dataclasses import dataclass
from typing import Optional, Dict, Any

from disasterwatch.core.constants import (
    STYLE_PRECEDENCE,
    DISASTER_STYLES,
    FALLBACK_STYLE,
)


@dataclass(frozen=True)
class DisasterStyle:
    """Marker style: stroke color, RGBA fill and radius in meters."""
    color: str
    fill: str
    radius: float

    def to_dict(self) -> Dict[str, Any]:
        return {"color": self.color, "fill": self.fill, "radius": self.radius}


def match_stem(category: str) -> Optional[str]:
    """
    Find the first style stem contained in the category.

    Matching is a plain substring test on the lower-cased text, so
    "Wildfire and Flood Damage" matches "fire" and "mudslide" matches nothing.
    """
    key = (category or "").lower()
    for stem in STYLE_PRECEDENCE:
        if stem in key:
            return stem
    return None


def resolve_style(category: str, confidence: Optional[float] = None) -> DisasterStyle:
    """
    Resolve the map style for a disaster category.

    Args:
        category: Disaster category label
        confidence: Optional classifier confidence (0-1) scaling the radius

    Returns:
        DisasterStyle
    """
    stem = match_stem(category)
    base = DISASTER_STYLES[stem] if stem else FALLBACK_STYLE

    scale = confidence if confidence is not None else 1.0

    return DisasterStyle(
        color=base["color"],
        fill=base["fill"],
        radius=base["radius"] * scale,
    )
