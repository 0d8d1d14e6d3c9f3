"""
Basemap selection for the report map

The selected basemap is loaded once when the controller is created, cycled
by the user, and written back to client-side storage on every change.
"""

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Optional, Dict, Protocol, Union

from disasterwatch.core.config import settings
from disasterwatch.core.constants import BASEMAP_TILES

logger = logging.getLogger(__name__)


class Basemap(str, Enum):
    """Background tile styles available under the markers."""

    SATELLITE = "satellite"
    STREET = "street"
    DARK = "dark"

    @property
    def tiles(self) -> Dict[str, str]:
        """Tile source URL, attribution and display name."""
        return BASEMAP_TILES[self.value]

    @property
    def url(self) -> str:
        return self.tiles["url"]

    @property
    def attribution(self) -> str:
        return self.tiles["attribution"]


DEFAULT_BASEMAP = Basemap.SATELLITE

# satellite -> street -> dark -> satellite
TOGGLE_CYCLE: Dict[Basemap, Basemap] = {
    Basemap.SATELLITE: Basemap.STREET,
    Basemap.STREET: Basemap.DARK,
    Basemap.DARK: Basemap.SATELLITE,
}


class PreferenceStorage(Protocol):
    """Durable string key/value storage for UI preferences."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class MemoryStorage:
    """Process-local preference storage."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value


class JSONFileStorage:
    """
    Preference storage backed by a JSON object on disk.

    Unreadable, undecodable or malformed files read as empty.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read preferences from {self.path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def get(self, key: str) -> Optional[str]:
        value = self._load().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")


def parse_basemap(value: Optional[str]) -> Optional[Basemap]:
    """Return the basemap for a stored tag, or None if the tag is not valid."""
    try:
        return Basemap(value)
    except ValueError:
        return None


class MapViewController:
    """
    Owns the current basemap.

    Usage:
        view = MapViewController(JSONFileStorage("prefs.json"))
        view.toggle()       # satellite -> street
        view.basemap.url
    """

    def __init__(
        self,
        storage: Optional[PreferenceStorage] = None,
        storage_key: Optional[str] = None
    ):
        """
        Initialize controller and restore the persisted basemap.

        Args:
            storage: Preference storage port (in-memory if omitted)
            storage_key: Key holding the basemap tag
        """
        self.storage = storage if storage is not None else MemoryStorage()
        self.storage_key = storage_key or settings.basemap_storage_key
        self._basemap = self._restore()

    @property
    def basemap(self) -> Basemap:
        return self._basemap

    def _restore(self) -> Basemap:
        try:
            stored = self.storage.get(self.storage_key)
        except OSError as e:
            logger.warning(f"Basemap preference unavailable, using default: {e}")
            return DEFAULT_BASEMAP

        basemap = parse_basemap(stored)
        if basemap is None:
            if stored is not None:
                logger.info(f"Ignoring invalid stored basemap {stored!r}")
            return DEFAULT_BASEMAP
        return basemap

    def _persist(self) -> None:
        try:
            self.storage.set(self.storage_key, self._basemap.value)
        except OSError as e:
            logger.error(f"Failed to persist basemap preference: {e}")

    def toggle(self) -> Basemap:
        """
        Switch to the next basemap in the cycle and persist it.

        Returns:
            The new basemap
        """
        previous = self._basemap
        self._basemap = TOGGLE_CYCLE[previous]
        self._persist()

        logger.info(f"Basemap: {previous.value} -> {self._basemap.value}")
        return self._basemap


def create_file_storage(path: Optional[str] = None) -> PreferenceStorage:
    """Storage at the configured preferences path, or in memory if none is set."""
    path = path or settings.basemap_storage_path
    if not path:
        return MemoryStorage()
    return JSONFileStorage(path)
