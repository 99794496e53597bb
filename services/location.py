"""
Resolución de la ciudad inicial a partir de la geolocalización del navegador.
"""
import logging
from typing import Any, Callable, Dict, Optional

from api import ApiError, reverse_geocode
from models import Coordinates

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def resolve_initial_city(
    geo_result: Optional[Dict[str, Any]],
    api_key: str,
    geocoder: Callable[[float, float, str], str] = reverse_geocode,
) -> str:
    """
    Devuelve el nombre de la ciudad del usuario o "" si no se puede resolver.

    Los fallos (sin soporte, permiso denegado, error de geocodificación) no se
    muestran al usuario: simplemente no hay ciudad automática.
    """
    coords = Coordinates.from_geolocation(geo_result)
    if coords is None:
        error_code = geo_result.get("error_code") if isinstance(geo_result, dict) else None
        logger.info(f"Geolocalización no disponible ({error_code or 'sin datos'})")
        return ""

    accuracy = geo_result.get("accuracy_m")
    if isinstance(accuracy, (int, float)):
        logger.info(f"Ubicación detectada (±{accuracy:.0f} m)")

    try:
        return geocoder(coords.latitude, coords.longitude, api_key)
    except ApiError as e:
        logger.info(f"Geocodificación inversa fallida: {e.kind} ({e.status_code})")
        return ""
