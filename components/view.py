"""
Proyección del estado de la interfaz a pantalla y formulario de búsqueda
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

import streamlit as st

from config import SEARCH_PLACEHOLDER, SEARCH_BUTTON_LABEL, SS_CITY_INPUT
from services import UIState
from utils.helpers import fmt_time_of_day, normalize_text_input
from .cards import weather_card, loading_banner, error_banner, empty_state

MODE_LOADING = "loading"
MODE_ERROR = "error"
MODE_WEATHER = "weather"
MODE_EMPTY = "empty"


@dataclass(frozen=True)
class DisplayTree:
    mode: str
    html: str


def build_view(state: UIState, now: datetime) -> DisplayTree:
    """
    Función pura: mismo estado y misma hora producen la misma salida.

    El orden de comprobación decide qué rama se muestra:
    cargando, error, tarjeta de tiempo y, si no hay nada, estado vacío.
    """
    if state.is_loading:
        return DisplayTree(MODE_LOADING, loading_banner())
    if state.error_message:
        return DisplayTree(MODE_ERROR, error_banner(state.error_message))
    if state.weather is not None:
        return DisplayTree(MODE_WEATHER, weather_card(state.weather, fmt_time_of_day(now)))
    return DisplayTree(MODE_EMPTY, empty_state())


def render_view(state: UIState, container=None, now: Optional[datetime] = None) -> DisplayTree:
    """
    Pinta el estado en `container` (un st.empty()) o en la página.
    """
    tree = build_view(state, now or datetime.now())
    target = container if container is not None else st
    target.markdown(tree.html, unsafe_allow_html=True)
    return tree


def render_search_form() -> Optional[str]:
    """
    Renderiza el buscador. Devuelve el texto enviado, o None si no hubo envío.
    """
    with st.form("search_form", clear_on_submit=False, border=False):
        input_col, button_col = st.columns([4, 1], gap="small")
        with input_col:
            text = st.text_input(
                "City",
                key=SS_CITY_INPUT,
                placeholder=SEARCH_PLACEHOLDER,
                label_visibility="collapsed",
            )
        with button_col:
            submitted = st.form_submit_button(SEARCH_BUTTON_LABEL, type="primary")

    if not submitted:
        return None
    return normalize_text_input(text)
