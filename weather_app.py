"""
Weather App - Tiempo actual por ciudad
Aplicación principal
"""
import streamlit as st
st.set_page_config(
    page_title="Weather App",
    page_icon="🌤️",
    layout="centered",
)
import logging

# Imports locales
from config import (
    OWM_API_KEY, GEO_TIMEOUT_MS, GEO_HIGH_ACCURACY, APP_TITLE, APP_SUBTITLE,
    SS_UI_STATE, SS_CITY_INPUT, SS_SYNC_CITY_INPUT, SS_GEO_PENDING, SS_GEO_REQUEST_ID,
)
from utils import html_clean
from services import UIState, WeatherController, resolve_initial_city
from components import render_view, render_search_form, get_browser_geolocation

# Configurar logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


# ============================================================
# ESTADO DE SESIÓN
# ============================================================

if SS_UI_STATE not in st.session_state:
    st.session_state[SS_UI_STATE] = UIState()
if SS_GEO_PENDING not in st.session_state:
    # La geolocalización se pide una sola vez, al arrancar la sesión
    st.session_state[SS_GEO_PENDING] = True
if SS_GEO_REQUEST_ID not in st.session_state:
    st.session_state[SS_GEO_REQUEST_ID] = 1

ui_state = st.session_state[SS_UI_STATE]

# El input solo se puede reescribir antes de instanciar el widget
if st.session_state.pop(SS_SYNC_CITY_INPUT, False):
    st.session_state[SS_CITY_INPUT] = ui_state.city_text


# ============================================================
# ESTILOS Y CABECERA
# ============================================================

st.markdown(
    html_clean("""
    <style>
    .weather-header { text-align: center; margin-bottom: 1.2rem; }
    .weather-header h1 { margin-bottom: 0.2rem; }
    .weather-header p { opacity: 0.7; margin: 0; }
    .loading-spinner, .empty-state { text-align: center; padding: 2rem 0; opacity: 0.8; }
    .error-message {
      background: rgba(255, 75, 75, 0.12); color: #c62828;
      border-radius: 12px; padding: 0.9rem 1.1rem; font-weight: 600;
    }
    .weather-card {
      border-radius: 22px; padding: 1.4rem 1.6rem;
      background: linear-gradient(135deg, rgba(94,139,255,0.16), rgba(255,138,91,0.12));
      box-shadow: 0 10px 30px rgba(0,0,0,0.08);
    }
    .weather-header-card { display: flex; justify-content: space-between; align-items: flex-start; }
    .city-name { margin: 0; padding: 0; }
    .country, .time-display p { margin: 0; opacity: 0.7; }
    .weather-main { display: flex; align-items: center; gap: 1rem; }
    .weather-icon { width: 120px; height: 120px; }
    .temperature { font-size: 3.4rem; font-weight: 700; line-height: 1; }
    .degree { font-size: 1.4rem; vertical-align: top; margin-left: 0.2rem; }
    .weather-description { margin: 0.3rem 0 0 0; font-weight: 600; }
    .weather-desc-detail { margin: 0; opacity: 0.65; font-size: 0.8rem; letter-spacing: 0.05em; }
    .feels-like p { margin: 0.6rem 0; }
    .divider { margin: 0.8rem 0; opacity: 0.3; }
    .weather-details { display: grid; grid-template-columns: repeat(3, 1fr); gap: 0.8rem; }
    .detail-item { display: flex; align-items: center; gap: 0.5rem; }
    .detail-icon { font-size: 1.4rem; }
    .detail-label { margin: 0; font-size: 0.75rem; opacity: 0.65; }
    .detail-value { margin: 0; font-weight: 600; }
    </style>
    """),
    unsafe_allow_html=True
)

st.markdown(
    html_clean(f"""
    <div class="weather-header">
      <h1>{APP_TITLE}</h1>
      <p>{APP_SUBTITLE}</p>
    </div>
    """),
    unsafe_allow_html=True
)


# ============================================================
# BUSCADOR Y CONTENIDO
# ============================================================

search_text = render_search_form()
content_slot = st.empty()

controller = WeatherController(
    ui_state,
    api_key=OWM_API_KEY,
    on_change=lambda state: render_view(state, content_slot),
)


# ============================================================
# UBICACIÓN INICIAL
# ============================================================

if st.session_state.get(SS_GEO_PENDING):
    geo_result = get_browser_geolocation(
        request_id=st.session_state[SS_GEO_REQUEST_ID],
        timeout_ms=GEO_TIMEOUT_MS,
        high_accuracy=GEO_HIGH_ACCURACY,
    )
    if isinstance(geo_result, dict):
        st.session_state[SS_GEO_PENDING] = False
        initial_city = resolve_initial_city(geo_result, OWM_API_KEY)
        previous_city = ui_state.city_text
        controller.fetch_weather(initial_city)
        if ui_state.city_text != previous_city:
            logger.info(f"Ciudad inicial por geolocalización: '{ui_state.city_text}'")
            st.session_state[SS_SYNC_CITY_INPUT] = True
            st.rerun()

if search_text is not None:
    controller.handle_search(search_text)

render_view(ui_state, content_slot)
