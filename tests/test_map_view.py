"""
Tests for basemap selection and persistence
"""
import json
import pytest

import sys
sys.path.insert(0, '.')

from disasterwatch.visualization.map_view import (
    Basemap,
    MapViewController,
    MemoryStorage,
    JSONFileStorage,
    parse_basemap,
)


class FailingStorage:
    """Storage whose reads and writes fail."""

    def get(self, key):
        raise OSError("storage unavailable")

    def set(self, key, value):
        raise OSError("storage unavailable")


class TestMapViewController:
    """Test suite for the basemap state machine."""

    def test_default_is_satellite(self):
        """Test an empty store starts on satellite."""
        assert MapViewController(MemoryStorage()).basemap == Basemap.SATELLITE

    def test_restores_valid_preference(self):
        """Test a stored tag is restored."""
        view = MapViewController(MemoryStorage({"basemap": "dark"}))
        assert view.basemap == Basemap.DARK

    def test_invalid_preference_falls_back(self):
        """Test an unknown tag restores satellite."""
        view = MapViewController(MemoryStorage({"basemap": "moon"}))
        assert view.basemap == Basemap.SATELLITE

    def test_toggle_cycle(self):
        """Test satellite -> street -> dark -> satellite."""
        view = MapViewController(MemoryStorage({"basemap": "moon"}))

        assert view.toggle() == Basemap.STREET
        assert view.toggle() == Basemap.DARK
        assert view.toggle() == Basemap.SATELLITE

    def test_toggle_persists_each_change(self):
        """Test every transition is written immediately."""
        storage = MemoryStorage()
        view = MapViewController(storage)

        view.toggle()
        assert storage.get("basemap") == "street"
        view.toggle()
        assert storage.get("basemap") == "dark"

    def test_custom_storage_key(self):
        """Test the storage key is configurable."""
        storage = MemoryStorage({"mapStyle": "street"})
        assert MapViewController(storage, storage_key="mapStyle").basemap == Basemap.STREET

    def test_failing_storage_does_not_raise(self):
        """Test unavailable storage degrades to in-memory state."""
        view = MapViewController(FailingStorage())

        assert view.basemap == Basemap.SATELLITE
        assert view.toggle() == Basemap.STREET

    def test_tile_sources_are_distinct(self):
        """Test each basemap has its own tiles and attribution."""
        urls = {b.url for b in Basemap}
        assert len(urls) == 3
        assert all(b.attribution for b in Basemap)

    def test_parse_basemap(self):
        assert parse_basemap("street") == Basemap.STREET
        assert parse_basemap(None) is None
        assert parse_basemap("SATELLITE") is None


class TestJSONFileStorage:
    """Test suite for file-backed preferences."""

    def test_missing_file(self, tmp_path):
        """Test a missing file reads as empty."""
        storage = JSONFileStorage(tmp_path / "prefs.json")
        assert storage.get("basemap") is None

    def test_persist_and_restore(self, tmp_path):
        """Test a toggle survives a new controller."""
        path = tmp_path / "nested" / "prefs.json"
        MapViewController(JSONFileStorage(path)).toggle()

        assert json.loads(path.read_text())["basemap"] == "street"
        assert MapViewController(JSONFileStorage(path)).basemap == Basemap.STREET

    def test_malformed_file(self, tmp_path):
        """Test a corrupt file falls back to the default."""
        path = tmp_path / "prefs.json"
        path.write_text("{not json")

        assert MapViewController(JSONFileStorage(path)).basemap == Basemap.SATELLITE

    def test_undecodable_file(self, tmp_path):
        """Test a file that is not valid UTF-8 falls back to the default."""
        path = tmp_path / "prefs.json"
        path.write_bytes(b"\xff\xfe\x00garbage")

        assert JSONFileStorage(path).get("basemap") is None
        assert MapViewController(JSONFileStorage(path)).basemap == Basemap.SATELLITE

    def test_non_string_value(self, tmp_path):
        """Test non-string stored values are ignored."""
        path = tmp_path / "prefs.json"
        path.write_text(json.dumps({"basemap": 3}))

        assert JSONFileStorage(path).get("basemap") is None

    def test_keeps_other_keys(self, tmp_path):
        """Test writing one key keeps the rest."""
        path = tmp_path / "prefs.json"
        path.write_text(json.dumps({"theme": "dark"}))

        JSONFileStorage(path).set("basemap", "dark")

        assert json.loads(path.read_text()) == {"theme": "dark", "basemap": "dark"}
