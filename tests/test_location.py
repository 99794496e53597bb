from api import ApiError
from services import resolve_initial_city


class GeocoderStub:
    def __init__(self, name="", error=None):
        self.name = name
        self.error = error
        self.calls = []

    def __call__(self, lat, lon, api_key):
        self.calls.append((lat, lon, api_key))
        if self.error is not None:
            raise self.error
        return self.name


def test_resolves_city_from_coordinates():
    geocoder = GeocoderStub(name="Madrid")

    city = resolve_initial_city({"ok": True, "lat": 40.4168, "lon": -3.7038}, "key", geocoder=geocoder)

    assert city == "Madrid"
    assert geocoder.calls == [(40.4168, -3.7038, "key")]


def test_permission_denied_returns_empty_without_geocoding():
    geocoder = GeocoderStub(name="Madrid")

    city = resolve_initial_city(
        {"ok": False, "error_code": "permission_denied", "error_message": "User denied Geolocation"},
        "key",
        geocoder=geocoder,
    )

    assert city == ""
    assert geocoder.calls == []


def test_unsupported_geolocation_returns_empty():
    assert resolve_initial_city({"ok": False, "error_code": "unsupported"}, "key", geocoder=GeocoderStub()) == ""


def test_geocoding_failure_is_swallowed():
    geocoder = GeocoderStub(error=ApiError("network"))

    assert resolve_initial_city({"ok": True, "lat": 1.0, "lon": 2.0}, "key", geocoder=geocoder) == ""


def test_no_candidates_returns_empty():
    geocoder = GeocoderStub(name="")

    assert resolve_initial_city({"ok": True, "lat": 1.0, "lon": 2.0}, "key", geocoder=geocoder) == ""


def test_unknown_browser_error_is_swallowed():
    geocoder = GeocoderStub(name="Madrid")

    assert resolve_initial_city({"ok": False, "error_code": "unknown"}, "key", geocoder=geocoder) == ""
    assert geocoder.calls == []
