"""
Componentes HTML de la tarjeta de tiempo, la rejilla de detalles y los avisos
"""

from html import escape

from config import LOADING_TEXT, EMPTY_STATE_TEXT
from models import WeatherRecord
from utils.helpers import (
    html_clean, round_half_up, fmt_number, fmt_visibility_km,
)
from .icons import weather_icon_url, detail_icon


def uv_placeholder(temperature_c: float) -> int:
    # Aproximación heredada (temperatura / 5); no es un índice UV medido
    return round_half_up(temperature_c / 5)


def detail_item(kind: str, label: str, value: str) -> str:
    """
    Genera HTML de una celda de la rejilla de detalles.
    """
    return html_clean(
        f"""
    <div class="detail-item">
      <span class="detail-icon">{detail_icon(kind)}</span>
      <div class="detail-content">
        <p class="detail-label">{escape(label)}</p>
        <p class="detail-value">{escape(value)}</p>
      </div>
    </div>
"""
    )


def details_grid(record: WeatherRecord) -> str:
    items = [
        detail_item("humidity", "Humidity", fmt_number(record.humidity_pct, "%")),
        detail_item("wind", "Wind Speed", fmt_number(record.wind_speed_ms, " m/s")),
        detail_item("pressure", "Pressure", fmt_number(record.pressure_hpa, " hPa")),
        detail_item("visibility", "Visibility", fmt_visibility_km(record.visibility_m)),
        detail_item("clouds", "Cloudiness", fmt_number(record.cloudiness_pct, "%")),
        detail_item("uv", "UV Index", str(uv_placeholder(record.temperature_c))),
    ]
    return f"<div class='weather-details'>{''.join(items)}</div>"


def weather_card(record: WeatherRecord, time_text: str) -> str:
    """
    Genera HTML de la tarjeta completa de tiempo actual.

    Args:
        record: Registro normalizado de OpenWeather
        time_text: Hora local ya formateada (se lee en el momento del render)

    Returns:
        String con el HTML de la tarjeta
    """
    description = record.condition_description
    return html_clean(
        f"""
  <div class="weather-card">
    <div class="weather-header-card">
      <div>
        <h2 class="city-name">{escape(record.location_name)}</h2>
        <p class="country">{escape(record.country_code)}</p>
      </div>
      <div class="time-display">
        <p>{escape(time_text)}</p>
      </div>
    </div>
    <div class="weather-main">
      <img src="{escape(weather_icon_url(record.condition_icon_id))}"
           alt="{escape(description)}" class="weather-icon"/>
      <div class="temperature-section">
        <div class="temperature">{round_half_up(record.temperature_c)}<span class="degree">°C</span></div>
        <p class="weather-description">{escape(record.condition_main)}</p>
        <p class="weather-desc-detail">{escape(description.upper())}</p>
      </div>
    </div>
    <div class="feels-like">
      <p>Feels like <strong>{round_half_up(record.feels_like_c)}°C</strong></p>
    </div>
    <hr class="divider"/>
    {details_grid(record)}
  </div>
"""
    )


def loading_banner() -> str:
    return f"<div class='loading-spinner'>{escape(LOADING_TEXT)}</div>"


def error_banner(message: str) -> str:
    return f"<div class='error-message'>❌ {escape(message)}</div>"


def empty_state() -> str:
    return f"<div class='empty-state'><p>{escape(EMPTY_STATE_TEXT)}</p></div>"
