"""
Cliente API OpenWeather
Tiempo actual por nombre de ciudad y geocodificación inversa de coordenadas
"""
import logging
from typing import Any, Optional

import requests

from config import (
    OWM_URL_WEATHER, OWM_URL_REVERSE_GEOCODE, OWM_UNITS,
    OWM_SUCCESS_CODE, OWM_TIMEOUT_SECONDS,
)
from models import WeatherRecord

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class ApiError(Exception):
    """
    Error de una llamada remota.

    kind: timeout | network | badjson | api
    Solo los errores "api" llevan el mensaje devuelto por OpenWeather.
    """

    def __init__(self, kind: str, status_code: Optional[int] = None, message: str = ""):
        self.kind = kind
        self.status_code = status_code
        self.message = message
        super().__init__(message or kind)


def _status_code(raw: Any) -> Optional[int]:
    # OpenWeather devuelve "cod" como entero en éxito y como string en error ("404")
    if raw is None:
        return None
    try:
        return int(str(raw).strip())
    except (TypeError, ValueError):
        return None


def _get_json(url: str, params: dict):
    try:
        r = requests.get(url, params=params, timeout=OWM_TIMEOUT_SECONDS)
    except requests.Timeout:
        raise ApiError("timeout")
    except requests.RequestException:
        raise ApiError("network")

    # El código HTTP no decide nada: el cuerpo JSON trae su propio "cod"
    try:
        return r.json(), r.status_code
    except ValueError:
        raise ApiError("badjson", r.status_code)


def fetch_current_weather(city_name: str, api_key: str) -> WeatherRecord:
    """Obtiene el tiempo actual de una ciudad en unidades métricas"""
    params = {
        "q": city_name,
        "appid": api_key,
        "units": OWM_UNITS,
    }

    logger.info(f"Consultando tiempo actual para '{city_name}'")

    data, http_status = _get_json(OWM_URL_WEATHER, params)
    if not isinstance(data, dict):
        raise ApiError("badjson", http_status)

    cod = _status_code(data.get("cod"))
    if cod != OWM_SUCCESS_CODE:
        message = str(data.get("message") or "").strip()
        logger.warning(f"OpenWeather cod={data.get('cod')} para '{city_name}': {message or 'sin mensaje'}")
        raise ApiError("api", cod, message)

    try:
        record = WeatherRecord.from_payload(data)
    except (KeyError, IndexError, TypeError, ValueError, AttributeError):
        logger.warning(f"Respuesta incompleta de OpenWeather para '{city_name}'")
        raise ApiError("badjson", cod)

    logger.info(
        f"✅ {record.location_name} ({record.country_code}): "
        f"T={record.temperature_c:.1f}°C, {record.condition_main}"
    )
    return record


def reverse_geocode(lat: float, lon: float, api_key: str) -> str:
    """
    Traduce coordenadas al nombre de la ciudad más cercana.

    Devuelve "" si OpenWeather no encuentra candidatos.
    """
    params = {
        "lat": lat,
        "lon": lon,
        "appid": api_key,
    }

    logger.info(f"Geocodificación inversa de ({lat:.4f}, {lon:.4f})")

    data, http_status = _get_json(OWM_URL_REVERSE_GEOCODE, params)

    # Un error de OpenWeather llega como objeto {"cod": 401, "message": ...}
    if not isinstance(data, list):
        message = str(data.get("message") or "").strip() if isinstance(data, dict) else ""
        raise ApiError("api", http_status, message)

    if not data:
        logger.info("Sin candidatos en la geocodificación inversa")
        return ""

    first = data[0]
    name = str(first.get("name") or "").strip() if isinstance(first, dict) else ""
    logger.info(f"Ubicación resuelta: '{name}'")
    return name
