"""Modelos Pydantic para configuración de la aplicación."""

import json
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import Field, ValidationError
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

DEFAULT_HOME = Path.home() / ".userforms"
DEFAULT_CONFIG_PATH = DEFAULT_HOME / "config.json"

LOCAL_API_URL = "http://localhost:3001/users"
REMOTE_API_URL = (
    "https://my-json-server.typicode.com/deepthiboppana/react-schema-form-manager/users"
)


class ConfigError(Exception):
    """Archivo de configuración ilegible o con valores inválidos."""


class StorageMode(str, Enum):
    """Estrategia de persistencia."""
    API = "api"  # Backend REST real
    DEMO = "demo"  # Almacén local sembrado desde el mock remoto


class ThemeName(str, Enum):
    """Temas disponibles."""
    LIGHT = "light"
    DARK = "dark"


class Settings(BaseSettings):
    """
    Configuración efectiva de la aplicación.

    Cada campo puede sobrescribirse con una variable USERFORMS_<CAMPO>
    (p.ej. USERFORMS_API_URL); las variables vacías se ignoran.
    """

    model_config = SettingsConfigDict(
        env_prefix="USERFORMS_",
        env_ignore_empty=True,
        extra="ignore",
    )

    storage: StorageMode = StorageMode.API
    api_url: str = Field(default=LOCAL_API_URL, description="Colección REST de usuarios")
    remote_api_url: str = Field(default=REMOTE_API_URL, description="Mock remoto para el modo demo")
    timeout_s: float = Field(default=10.0, gt=0, description="Timeout HTTP (s)")
    db_path: Path = Field(default=DEFAULT_HOME / "userforms.db", description="Almacén local (demo)")
    theme: ThemeName = ThemeName.LIGHT

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # El entorno tiene prioridad sobre el archivo (que llega como kwargs)
        return env_settings, init_settings


def _resolve(path: Optional[Path]) -> Path:
    return Path(path) if path is not None else DEFAULT_CONFIG_PATH


def read_config_file(path: Optional[Path] = None) -> dict:
    """
    Lee el contenido propio del archivo de configuración, sin overrides.

    Returns:
        dict con las claves guardadas ({} si el archivo no existe)
    """
    path = _resolve(path)
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid config file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid config file {path}: expected an object")
    return data


def load_settings(path: Optional[Path] = None) -> Settings:
    """
    Carga la configuración desde JSON y aplica overrides de entorno.

    Args:
        path: Archivo de configuración. Default: ~/.userforms/config.json

    Returns:
        Settings (valores por defecto si el archivo no existe)
    """
    data = read_config_file(path)
    try:
        return Settings(**data)
    except ValidationError as e:
        raise ConfigError(str(e)) from e


def save_theme(theme: ThemeName, path: Optional[Path] = None) -> Path:
    """
    Guarda la preferencia de tema.

    Solo modifica la clave "theme"; el resto del archivo se conserva tal
    cual y los overrides de entorno nunca se escriben.
    """
    path = _resolve(path)
    data = read_config_file(path)
    data["theme"] = ThemeName(theme).value
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path


def toggle_theme(settings: Settings) -> Settings:
    """Retorna la configuración con el tema opuesto."""
    new_theme = ThemeName.DARK if settings.theme == ThemeName.LIGHT else ThemeName.LIGHT
    return settings.model_copy(update={"theme": new_theme})
