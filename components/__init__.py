"""
Módulo de componentes visuales
"""
from .icons import weather_icon_url, detail_icon
from .cards import weather_card, details_grid, uv_placeholder
from .view import DisplayTree, build_view, render_view, render_search_form
from .browser_geolocation import get_browser_geolocation

__all__ = [
    'weather_icon_url',
    'detail_icon',
    'weather_card',
    'details_grid',
    'uv_placeholder',
    'DisplayTree',
    'build_view',
    'render_view',
    'render_search_form',
    'get_browser_geolocation',
]
