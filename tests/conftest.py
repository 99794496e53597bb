import pytest

from models import WeatherRecord


LONDON_PAYLOAD = {
    "coord": {"lon": -0.1257, "lat": 51.5085},
    "weather": [{"id": 803, "main": "Clouds", "description": "broken clouds", "icon": "04d"}],
    "base": "stations",
    "main": {
        "temp": 12.5,
        "feels_like": 11.46,
        "temp_min": 11.1,
        "temp_max": 13.8,
        "pressure": 1012,
        "humidity": 76,
    },
    "visibility": 10000,
    "wind": {"speed": 4.12, "deg": 240},
    "clouds": {"all": 75},
    "dt": 1697630400,
    "sys": {"country": "GB", "sunrise": 1697611000, "sunset": 1697648800},
    "timezone": 3600,
    "id": 2643743,
    "name": "London",
    "cod": 200,
}

NOT_FOUND_PAYLOAD = {"cod": "404", "message": "city not found"}


@pytest.fixture
def london_payload():
    return {k: (dict(v) if isinstance(v, dict) else v) for k, v in LONDON_PAYLOAD.items()}


@pytest.fixture
def london_record():
    return WeatherRecord.from_payload(LONDON_PAYLOAD)
