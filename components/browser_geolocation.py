"""Componente custom que pide la posición al navegador una vez por sesión."""
from pathlib import Path
from typing import Any, Dict, Optional

import streamlit.components.v1 as components

GEO_ERROR_CODES = ("unsupported", "permission_denied", "position_unavailable", "timeout")

_FRONTEND_DIR = Path(__file__).resolve().parent / "browser_geolocation_frontend"
_geolocation_component = components.declare_component(
    "browser_geolocation",
    path=str(_FRONTEND_DIR),
)


def _normalize_result(value: Any) -> Optional[Dict[str, Any]]:
    """Deja solo las claves del contrato; None si el navegador aún no respondió."""
    if not isinstance(value, dict):
        return None
    if value.get("ok"):
        return {
            "ok": True,
            "lat": value.get("lat"),
            "lon": value.get("lon"),
            "accuracy_m": value.get("accuracy_m"),
        }
    error_code = str(value.get("error_code") or "")
    return {
        "ok": False,
        "error_code": error_code if error_code in GEO_ERROR_CODES else "unknown",
        "error_message": str(value.get("error_message") or ""),
    }


def get_browser_geolocation(
    request_id: int,
    *,
    timeout_ms: int,
    high_accuracy: bool = False,
) -> Optional[Dict[str, Any]]:
    """
    Devuelve la posición del navegador para `request_id`.

    None mientras el navegador no responde. Después, un dict con
    {"ok": True, "lat", "lon", "accuracy_m"} o
    {"ok": False, "error_code", "error_message"}.
    """
    raw = _geolocation_component(
        request_id=int(request_id),
        timeout_ms=int(timeout_ms),
        high_accuracy=bool(high_accuracy),
        key=f"geolocation_request_{int(request_id)}",
        default=None,
    )
    return _normalize_result(raw)
