"""
Iconos de condición (alojados en OpenWeather) y glifos de la rejilla de detalles
"""
from config import OWM_ICON_URL_TEMPLATE

DETAIL_ICONS = {
    "humidity": "💧",
    "wind": "💨",
    "pressure": "🔽",
    "visibility": "👁️",
    "clouds": "☁️",
    "uv": "↗️",
}


def weather_icon_url(icon_id: str) -> str:
    """
    URL de la imagen de condición. No se descarga ni se valida aquí;
    solo se referencia en el <img>.
    """
    return OWM_ICON_URL_TEMPLATE.format(icon=icon_id)


def detail_icon(kind: str) -> str:
    return DETAIL_ICONS.get(kind, "")
