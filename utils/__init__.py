"""
Utilidades generales
"""
from .helpers import (
    html_clean,
    is_nan,
    normalize_text_input,
    round_half_up,
    fmt_number,
    fmt_visibility_km,
    fmt_time_of_day,
)

__all__ = [
    'html_clean',
    'is_nan',
    'normalize_text_input',
    'round_half_up',
    'fmt_number',
    'fmt_visibility_km',
    'fmt_time_of_day',
]
