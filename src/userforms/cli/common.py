"""
Utilidades comunes para los comandos CLI: configuración y API activas.
"""

import asyncio
from pathlib import Path
from typing import Any, Coroutine, Optional, TypeVar

from userforms.config import Settings, load_settings
from userforms.services import UserAPI, get_user_api

T = TypeVar("T")

# Estado global de la CLI (se fija en el callback principal)
_config_path: Optional[Path] = None
_settings: Optional[Settings] = None


def configure(config_path: Optional[Path] = None) -> None:
    """Fija el archivo de configuración y descarta la configuración cargada."""
    global _config_path, _settings
    _config_path = config_path
    _settings = None


def get_config_path() -> Optional[Path]:
    return _config_path


def get_settings() -> Settings:
    """Obtiene la configuración efectiva (singleton)."""
    global _settings
    if _settings is None:
        _settings = load_settings(_config_path)
    return _settings


def set_settings(settings: Settings) -> None:
    global _settings
    _settings = settings


def get_api() -> UserAPI:
    """Crea la API de usuarios según la configuración activa."""
    return get_user_api(get_settings())


def run(coro: Coroutine[Any, Any, T]) -> T:
    """Ejecuta una corrutina desde un comando síncrono."""
    return asyncio.run(coro)
