"""
Funciones auxiliares generales
"""
import math
import textwrap
from datetime import datetime


def html_clean(s: str) -> str:
    """Limpia y dedenta HTML"""
    return textwrap.dedent(s).strip()


def is_nan(x):
    """Verifica si un valor es NaN o falta"""
    if x is None:
        return True
    return x != x


def normalize_text_input(value) -> str:
    """Normaliza entrada de texto a string"""
    if value is None:
        return ""
    return str(value)


def round_half_up(x: float) -> int:
    """Redondeo al entero más cercano, .5 hacia arriba (como Math.round)"""
    return int(math.floor(x + 0.5))


def fmt_number(x, unit: str = "") -> str:
    """Formatea un número tal cual llega, sin ceros sobrantes"""
    if is_nan(x):
        return "—"
    if isinstance(x, float) and x.is_integer():
        x = int(x)
    return f"{x}{unit}"


def fmt_visibility_km(meters) -> str:
    """Convierte visibilidad en metros a km con un decimal"""
    if is_nan(meters):
        return "—"
    # Redondeo de mitades hacia arriba, como toFixed(1)
    tenths = round_half_up(meters / 100)
    return f"{tenths / 10:.1f} km"


def fmt_time_of_day(dt: datetime) -> str:
    """Hora local HH:MM:SS"""
    return dt.strftime("%H:%M:%S")
