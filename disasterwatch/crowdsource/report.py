"""
Disaster report model for crowdsourced sightings
Reports arrive already classified from the backend and are read-only here
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Optional, Dict, Any

from disasterwatch.core.config import settings

logger = logging.getLogger(__name__)

# Non-ISO layouts seen from browsers and spreadsheets, tried in order
FALLBACK_TIMESTAMP_FORMATS = (
    "%m/%d/%Y, %I:%M:%S %p",
    "%m/%d/%Y %H:%M:%S",
    "%m/%d/%Y %H:%M",
    "%m/%d/%Y",
    "%Y/%m/%d %H:%M:%S",
    "%Y/%m/%d",
)


def _parse_text(text: str) -> Optional[datetime]:
    if text.endswith("Z"):
        try:
            return datetime.fromisoformat(text[:-1] + "+00:00")
        except ValueError:
            pass
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass

    # RFC 2822, e.g. "Fri, 05 Jan 2024 14:30:00 GMT"
    try:
        return parsedate_to_datetime(text)
    except (TypeError, ValueError, IndexError):
        pass

    for fmt in FALLBACK_TIMESTAMP_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def parse_timestamp(value: Any) -> Optional[datetime]:
    """
    Parse a timestamp into a timezone-aware datetime.

    Accepts datetime objects, ISO-8601 strings (a trailing "Z" means UTC),
    RFC 2822 strings and the US-style layouts in FALLBACK_TIMESTAMP_FORMATS.
    Naive values are taken as UTC.

    Args:
        value: datetime or string

    Returns:
        Aware datetime, or None if the value cannot be parsed
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        parsed = value
    else:
        text = str(value).strip()
        if not text:
            return None
        parsed = _parse_text(text)
        if parsed is None:
            return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_confidence(value: Any) -> Optional[float]:
    """Confidence as a float, or None when absent or not numeric."""
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


@dataclass(frozen=True)
class Report:
    """
    Disaster sighting submitted by a field user.

    The category is the classifier's prediction label. The location is free
    text and may embed "Latitude: <float>, Longitude: <float>".
    """
    id: str
    category: str
    note: str = ""
    location: str = ""
    image_url: Optional[str] = None
    created_at: Optional[datetime] = None
    confidence: Optional[float] = None

    @property
    def display_category(self) -> str:
        """Category label with underscores shown as spaces."""
        return self.category.replace("_", " ")

    @property
    def image_or_placeholder(self) -> str:
        """Image reference, or the placeholder when the report has none."""
        return self.image_url or settings.placeholder_image_url

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Report":
        """
        Build a report from a backend JSON record.

        Args:
            data: Record with _id, prediction, note, location, imageUrl,
                createdAt and confidence keys

        Returns:
            Report
        """
        raw_created = data.get("createdAt", data.get("created_at"))
        created_at = parse_timestamp(raw_created)
        if raw_created and created_at is None:
            logger.warning(f"Unparseable createdAt {raw_created!r} on report {data.get('_id')}")

        raw_confidence = data.get("confidence")
        confidence = parse_confidence(raw_confidence)
        if raw_confidence is not None and confidence is None:
            logger.warning(f"Ignoring non-numeric confidence {raw_confidence!r} on report {data.get('_id')}")

        return cls(
            id=str(data.get("_id", data.get("id", ""))),
            category=data.get("prediction", data.get("category")) or "",
            note=data.get("note") or "",
            location=data.get("location") or "",
            image_url=data.get("imageUrl", data.get("image_url")) or None,
            created_at=created_at,
            confidence=confidence,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "category": self.category,
            "display_category": self.display_category,
            "note": self.note,
            "location": self.location,
            "image_url": self.image_or_placeholder,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "confidence": self.confidence,
        }
