"""Pytest configuration and fixtures."""

import json
import pytest
import tempfile
from pathlib import Path


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def menu_json():
    """The SVG viewer menu document."""
    return {
        "menu": {
            "header": "SVG Viewer",
            "items": [
                {"id": "Open", "label": "Open"},
                {"id": "OpenNew", "label": "Open New"}
            ]
        }
    }


@pytest.fixture
def menu_json_string(menu_json):
    return json.dumps(menu_json)


@pytest.fixture
def weather_json():
    """Weather report with repeated shapes and mixed numbers."""
    return {
        "coord": {"lon": -122.08, "lat": 37.39},
        "weather": [
            {"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"}
        ],
        "base": "stations",
        "main": {
            "temp": 282.55,
            "feels_like": 281.86,
            "pressure": 1023,
            "humidity": 100
        },
        "visibility": 16093,
        "wind": {"speed": 1.5, "deg": 350},
        "clouds": {"all": 1},
        "dt": 1560350645,
        "sys": {
            "type": 1,
            "id": 5122,
            "message": 0.0139,
            "country": "US",
            "sunrise": 1560343627,
            "sunset": 1560396563
        },
        "timezone": -25200,
        "id": 420006353,
        "name": "Mountain View",
        "cod": 200
    }


@pytest.fixture
def users_json():
    """Array of users whose objects do not share identical keys."""
    return {
        "users": [
            {"name": "Alice", "age": 30, "address": {"city": "New York", "zip": "10001"}},
            {"name": "Bob", "email": "bob@example.com", "address": {"city": "Boston"}},
            {"name": "Carol", "age": 41.5, "address": None}
        ]
    }
