"""
Módulo de modelos de dominio
"""
from .weather import Coordinates, WeatherRecord

__all__ = [
    'Coordinates',
    'WeatherRecord',
]
