"""
Tipos de dominio: coordenadas del navegador y registro normalizado de tiempo actual.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional


def _opt_float(value: Any) -> Optional[float]:
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _opt_int(value: Any) -> Optional[int]:
    number = _opt_float(value)
    if number is None or number != number:
        return None
    return int(number)


def _block(value: Any) -> Dict[str, Any]:
    # Bloques opcionales: cualquier cosa que no sea un objeto cuenta como ausente
    return value if isinstance(value, dict) else {}


@dataclass(frozen=True)
class Coordinates:
    latitude: float
    longitude: float

    @classmethod
    def from_geolocation(cls, result: Optional[Dict[str, Any]]) -> Optional["Coordinates"]:
        """Extrae coordenadas de la respuesta del componente de geolocalización."""
        if not isinstance(result, dict) or not result.get("ok"):
            return None
        lat = _opt_float(result.get("lat"))
        lon = _opt_float(result.get("lon"))
        if lat is None or lon is None:
            return None
        if not (-90.0 <= lat <= 90.0 and -180.0 <= lon <= 180.0):
            return None
        return cls(latitude=lat, longitude=lon)


@dataclass(frozen=True)
class WeatherRecord:
    """Vista normalizada de la respuesta /data/2.5/weather de OpenWeather."""
    location_name: str
    country_code: str
    temperature_c: float
    feels_like_c: float
    condition_main: str
    condition_description: str
    condition_icon_id: str
    humidity_pct: Optional[int]
    wind_speed_ms: Optional[float]
    pressure_hpa: Optional[int]
    visibility_m: Optional[int]
    cloudiness_pct: Optional[int]

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "WeatherRecord":
        """
        Construye el registro a partir del JSON de OpenWeather.

        Lanza KeyError/IndexError/TypeError/ValueError si faltan los campos
        imprescindibles (nombre, temperatura o condición).
        """
        main = data["main"]
        condition = data["weather"][0]
        if not isinstance(main, dict) or not isinstance(condition, dict):
            raise TypeError("bloque main o weather[0] mal formado")
        sys_block = _block(data.get("sys"))
        wind = _block(data.get("wind"))
        clouds = _block(data.get("clouds"))

        temperature = float(main["temp"])
        feels_like = _opt_float(main.get("feels_like"))

        return cls(
            location_name=str(data["name"]),
            country_code=str(sys_block.get("country") or ""),
            temperature_c=temperature,
            feels_like_c=temperature if feels_like is None else feels_like,
            condition_main=str(condition.get("main") or ""),
            condition_description=str(condition.get("description") or ""),
            condition_icon_id=str(condition.get("icon") or ""),
            humidity_pct=_opt_int(main.get("humidity")),
            wind_speed_ms=_opt_float(wind.get("speed")),
            pressure_hpa=_opt_int(main.get("pressure")),
            visibility_m=_opt_int(data.get("visibility")),
            cloudiness_pct=_opt_int(clouds.get("all")),
        )
