"""
Módulo de servicios: estado de la interfaz y resolución de ubicación
"""
from .weather_state import UIState, WeatherController
from .location import resolve_initial_city

__all__ = [
    'UIState',
    'WeatherController',
    'resolve_initial_city',
]
