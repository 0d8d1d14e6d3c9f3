"""
Pytest configuration and fixtures
"""
import pytest
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from disasterwatch.crowdsource.report import Report


@pytest.fixture
def sample_records():
    """Backend report records as returned by GET /reports."""
    return [
        {
            "_id": "r1",
            "prediction": "Fire",
            "note": "Smoke rising near the market",
            "location": "Latitude: 28.6139, Longitude: 77.2090",
            "imageUrl": "https://cdn.example.org/r1.jpg",
            "createdAt": "2024-01-05T14:30:00.000Z",
            "confidence": 0.9
        },
        {
            "_id": "r2",
            "prediction": "flood",
            "note": "Water entering homes",
            "location": "Latitude: 19.0760, Longitude: 72.8777",
            "createdAt": "2024-01-05T18:00:00.000Z"
        },
        {
            "_id": "r3",
            "prediction": "damaged_buildings",
            "note": "Wall collapsed after tremor",
            "location": "Delhi, India",
            "createdAt": "2024-01-07T09:15:00.000Z",
            "confidence": 0.6
        },
        {
            "_id": "r4",
            "prediction": "fire",
            "note": "Forest fire spreading uphill",
            "location": "Latitude: 30.0668, Longitude: 79.0193 (near Chamoli)",
            "createdAt": "2024-01-06T07:45:00.000Z"
        }
    ]


@pytest.fixture
def sample_reports(sample_records):
    """Parsed sample reports."""
    return [Report.from_dict(r) for r in sample_records]


@pytest.fixture
def make_report():
    """Factory for reports with sensible defaults."""
    def _make(report_id="x", category="fire", note="", location="", created_at=None, confidence=None, image_url=None):
        return Report.from_dict({
            "_id": report_id,
            "prediction": category,
            "note": note,
            "location": location,
            "createdAt": created_at,
            "confidence": confidence,
            "imageUrl": image_url,
        })
    return _make
