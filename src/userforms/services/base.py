"""
Contrato de la API de persistencia de usuarios.

El motor de formularios solo depende de estas cuatro operaciones; la
estrategia concreta (backend REST o almacén demo) se elige por
configuración.
"""

from abc import ABC, abstractmethod
from typing import Any

from loguru import logger

from userforms.models import User


class PersistenceError(Exception):
    """Fallo de la capa de persistencia (red, HTTP o almacén)."""


class ConnectionFailed(PersistenceError):
    """No se pudo contactar al backend."""


class UserNotFoundError(PersistenceError):
    """El usuario indicado no existe."""

    def __init__(self, user_id: Any):
        super().__init__(f"User '{user_id}' not found")
        self.user_id = user_id


def coerce_users(data: Any) -> list[User]:
    """
    Convierte una respuesta de listado a usuarios.

    Una respuesta que no es lista se trata como listado vacío.
    """
    if not isinstance(data, list):
        logger.warning(f"Respuesta de listado inesperada ({type(data).__name__}), se usa lista vacía")
        return []
    return [User.model_validate(item) for item in data if isinstance(item, dict)]


class UserAPI(ABC):
    """API CRUD asíncrona de usuarios."""

    @abstractmethod
    async def list_users(self) -> list[User]:
        """Lista todos los usuarios."""

    @abstractmethod
    async def create_user(self, payload: dict) -> User:
        """Crea un usuario; el ID lo asigna la persistencia."""

    @abstractmethod
    async def update_user(self, user_id: Any, payload: dict) -> User:
        """Actualiza un usuario existente."""

    @abstractmethod
    async def delete_user(self, user_id: Any) -> Any:
        """Elimina un usuario y retorna su ID."""
