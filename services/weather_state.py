"""
Estado de la interfaz y controlador de consultas de tiempo.

UIState es el único registro que lee el render. Solo WeatherController lo
modifica, siempre a través de sus setters, y cada cambio se notifica al
observador opcional `on_change` (la página lo usa para repintar el hueco de
contenido mientras una petición está en curso).
"""
import logging
from dataclasses import dataclass
from typing import Callable, Optional

from api import ApiError, fetch_current_weather
from config import DEFAULT_ERROR_MESSAGE
from models import WeatherRecord

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@dataclass
class UIState:
    city_text: str = ""
    weather: Optional[WeatherRecord] = None
    error_message: Optional[str] = None
    is_loading: bool = False


class WeatherController:
    def __init__(
        self,
        state: UIState,
        api_key: str,
        *,
        on_change: Optional[Callable[[UIState], None]] = None,
        fetcher: Callable[[str, str], WeatherRecord] = fetch_current_weather,
    ):
        self.state = state
        self.api_key = api_key
        self._on_change = on_change
        self._fetcher = fetcher

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change(self.state)

    # ------------------------------------------------------------
    # Setters
    # ------------------------------------------------------------

    def set_city_text(self, text: str) -> None:
        self.state.city_text = text
        self._notify()

    def set_weather(self, record: Optional[WeatherRecord]) -> None:
        self.state.weather = record
        self._notify()

    def set_error(self, message: Optional[str]) -> None:
        self.state.error_message = message
        self._notify()

    def set_loading(self, loading: bool) -> None:
        self.state.is_loading = loading
        self._notify()

    # ------------------------------------------------------------
    # Operaciones
    # ------------------------------------------------------------

    def fetch_weather(self, city_name: str) -> None:
        """
        Consulta el tiempo de `city_name` y vuelca el resultado en el estado.

        Una ciudad vacía o solo con espacios no toca el estado.
        """
        if not city_name or not city_name.strip():
            return

        try:
            self.set_loading(True)
            self.set_error(None)
            record = self._fetcher(city_name, self.api_key)
            self.set_weather(record)
            self.set_city_text(city_name)
        except ApiError as e:
            logger.warning(f"Consulta fallida para '{city_name}': {e.kind} ({e.status_code})")
            self.set_weather(None)
            self.set_error(e.message or DEFAULT_ERROR_MESSAGE)
        finally:
            self.set_loading(False)

    def handle_search(self, raw_text) -> bool:
        """Procesa el envío del buscador. Devuelve True si se lanzó la consulta."""
        text = "" if raw_text is None else str(raw_text).strip()
        if not text:
            return False
        self.fetch_weather(text)
        return True
