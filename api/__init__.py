"""
Módulo API
"""
from .openweather import (
    ApiError,
    fetch_current_weather,
    reverse_geocode,
)

__all__ = [
    'ApiError',
    'fetch_current_weather',
    'reverse_geocode',
]
