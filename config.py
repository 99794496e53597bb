"""
Configuración global de Weather App
"""
import os

# ============================================================
# API OPENWEATHER
# ============================================================
OWM_URL_WEATHER = "https://api.openweathermap.org/data/2.5/weather"
OWM_URL_REVERSE_GEOCODE = "https://api.openweathermap.org/geo/1.0/reverse"
OWM_ICON_URL_TEMPLATE = "https://openweathermap.org/img/wn/{icon}@4x.png"
OWM_UNITS = "metric"
OWM_SUCCESS_CODE = 200
OWM_TIMEOUT_SECONDS = 10

# Credencial: se inyecta en despliegue, nunca se guarda en el repo
OWM_API_KEY = str(os.getenv("OPENWEATHER_API_KEY", "")).strip()

# ============================================================
# GEOLOCALIZACIÓN DEL NAVEGADOR
# ============================================================
GEO_TIMEOUT_MS = 12000
GEO_HIGH_ACCURACY = False

# ============================================================
# TEXTOS DE LA INTERFAZ
# ============================================================
APP_TITLE = "🌤️ Weather App"
APP_SUBTITLE = "Get Real-Time Weather Updates"
SEARCH_PLACEHOLDER = "Enter city name (e.g., Delhi, London, New York)"
SEARCH_BUTTON_LABEL = "🔍 Search"
LOADING_TEXT = "Loading..."
EMPTY_STATE_TEXT = "🌍 Search for a city to get started!"
DEFAULT_ERROR_MESSAGE = "City not found"

# ============================================================
# KEYS DE SESSION_STATE
# ============================================================
SS_UI_STATE = "ui_state"
SS_CITY_INPUT = "city_input"
SS_SYNC_CITY_INPUT = "sync_city_input"
SS_GEO_PENDING = "geo_pending"
SS_GEO_REQUEST_ID = "geo_request_id"
