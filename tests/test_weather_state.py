import pytest

from api import ApiError
from config import DEFAULT_ERROR_MESSAGE
from services import UIState, WeatherController


class FetcherStub:
    def __init__(self, state, result=None, error=None):
        self.state = state
        self.result = result
        self.error = error
        self.calls = []
        self.loading_during_call = []

    def __call__(self, city_name, api_key):
        self.calls.append((city_name, api_key))
        self.loading_during_call.append(self.state.is_loading)
        if self.error is not None:
            raise self.error
        return self.result


class Recorder:
    def __init__(self):
        self.snapshots = []

    def __call__(self, state):
        self.snapshots.append(
            (state.is_loading, state.error_message, state.weather is not None, state.city_text)
        )


def make_controller(state, fetcher, recorder=None):
    return WeatherController(state, api_key="key", on_change=recorder, fetcher=fetcher)


@pytest.mark.parametrize("city", ["", "   ", "\t\n"])
def test_blank_city_is_a_no_op(city, london_record):
    state = UIState(city_text="Paris", weather=london_record)
    fetcher = FetcherStub(state, result=london_record)
    recorder = Recorder()

    make_controller(state, fetcher, recorder).fetch_weather(city)

    assert fetcher.calls == []
    assert recorder.snapshots == []
    assert state == UIState(city_text="Paris", weather=london_record)


def test_success_sets_weather_and_city(london_record):
    state = UIState(error_message="old error")
    fetcher = FetcherStub(state, result=london_record)

    make_controller(state, fetcher).fetch_weather("London")

    assert fetcher.calls == [("London", "key")]
    assert state.weather == london_record
    assert state.city_text == "London"
    assert state.error_message is None
    assert state.is_loading is False


@pytest.mark.parametrize(
    "error",
    [ApiError("api", 404, "city not found"), ApiError("network"), ApiError("badjson", 200)],
)
def test_loading_is_true_during_call_and_false_after(error, london_record):
    for outcome in (dict(result=london_record), dict(error=error)):
        state = UIState()
        fetcher = FetcherStub(state, **outcome)
        recorder = Recorder()

        make_controller(state, fetcher, recorder).fetch_weather("London")

        assert fetcher.loading_during_call == [True]
        assert recorder.snapshots[0][0] is True
        assert recorder.snapshots[-1][0] is False
        assert state.is_loading is False


def test_api_error_clears_previous_weather(london_record):
    state = UIState(city_text="London", weather=london_record)
    fetcher = FetcherStub(state, error=ApiError("api", 404, "city not found"))

    make_controller(state, fetcher).fetch_weather("Zzzxxqq")

    assert state.weather is None
    assert state.error_message == "city not found"
    assert state.city_text == "London"


def test_error_without_message_uses_default():
    state = UIState()
    fetcher = FetcherStub(state, error=ApiError("network"))

    make_controller(state, fetcher).fetch_weather("London")

    assert state.error_message == DEFAULT_ERROR_MESSAGE


def test_unexpected_exception_propagates_but_resets_loading():
    state = UIState()
    fetcher = FetcherStub(state, error=RuntimeError("boom"))

    with pytest.raises(RuntimeError):
        make_controller(state, fetcher).fetch_weather("London")

    assert state.is_loading is False


def test_loading_clears_previous_error_before_request(london_record):
    state = UIState(error_message="city not found")
    fetcher = FetcherStub(state, result=london_record)
    recorder = Recorder()

    make_controller(state, fetcher, recorder).fetch_weather("London")

    assert recorder.snapshots[1] == (True, None, False, "")


def test_handle_search_trims_input(london_record):
    state = UIState()
    fetcher = FetcherStub(state, result=london_record)
    controller = make_controller(state, fetcher)

    assert controller.handle_search("  London  ") is True
    assert fetcher.calls == [("London", "key")]
    assert state.city_text == "London"


@pytest.mark.parametrize("text", [None, "", "    "])
def test_handle_search_ignores_blank_input(text, london_record):
    state = UIState()
    fetcher = FetcherStub(state, result=london_record)

    assert make_controller(state, fetcher).handle_search(text) is False
    assert fetcher.calls == []


def test_malformed_payload_shows_default_message(requests_mock, london_record):
    from config import OWM_URL_WEATHER

    requests_mock.get(OWM_URL_WEATHER, json={"cod": 200, "name": "London", "main": {"temp": 1}, "weather": ["Clouds"]})
    state = UIState(city_text="London", weather=london_record)

    WeatherController(state, api_key="key").fetch_weather("London")

    assert state.weather is None
    assert state.error_message == DEFAULT_ERROR_MESSAGE
    assert state.is_loading is False
