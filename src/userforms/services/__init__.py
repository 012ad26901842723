"""
Estrategias de persistencia de usuarios.

- HttpUserAPI: backend REST (json-server en desarrollo)
- DemoUserAPI: almacén local SQLite sembrado desde el mock remoto
"""

from userforms.config import Settings, StorageMode
from userforms.services.base import (
    UserAPI,
    PersistenceError,
    ConnectionFailed,
    UserNotFoundError,
    coerce_users,
)
from userforms.services.http import HttpUserAPI
from userforms.services.demo import DemoUserAPI


def get_user_api(settings: Settings) -> UserAPI:
    """Crea la API de usuarios según la estrategia configurada."""
    if settings.storage == StorageMode.DEMO:
        from userforms.database import open_user_repository

        remote = HttpUserAPI(settings.remote_api_url, timeout=settings.timeout_s)
        return DemoUserAPI(open_user_repository(settings.db_path), remote)

    return HttpUserAPI(settings.api_url, timeout=settings.timeout_s)


__all__ = [
    "UserAPI",
    "PersistenceError",
    "ConnectionFailed",
    "UserNotFoundError",
    "coerce_users",
    "HttpUserAPI",
    "DemoUserAPI",
    "get_user_api",
]
