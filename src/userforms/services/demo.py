"""
Persistencia demo: almacén local sembrado desde un mock remoto.

El mock remoto no guarda escrituras, así que las altas, ediciones y bajas
se aplican solo al almacén local. Los IDs se asignan en el cliente a partir
de un timestamp en milisegundos: no garantizan unicidad frente a un backend
real.
"""

import time
from typing import Any, Callable

from loguru import logger

from userforms.database import UserRepository
from userforms.models import User
from userforms.services.base import UserAPI, UserNotFoundError


def _timestamp_id() -> int:
    return int(time.time() * 1000)


class DemoUserAPI(UserAPI):
    """API de usuarios sobre el almacén local."""

    def __init__(
        self,
        repository: UserRepository,
        remote: UserAPI,
        id_factory: Callable[[], int] = _timestamp_id,
    ):
        """
        Args:
            repository: Almacén local
            remote: API de solo lectura usada para sembrar el almacén vacío
            id_factory: Generador de IDs para altas
        """
        self._repo = repository
        self._remote = remote
        self._id_factory = id_factory

    async def list_users(self) -> list[User]:
        local = self._repo.list_all()
        if local:
            return [User.model_validate(r) for r in local]

        # Almacén vacío: sembrar desde el mock remoto
        users = await self._remote.list_users()
        logger.debug(f"Almacén demo sembrado con {len(users)} usuarios")
        self._repo.replace_all([u.model_dump(by_alias=True) for u in users])
        return users

    async def create_user(self, payload: dict) -> User:
        new_id = self._id_factory()
        while self._repo.get(new_id) is not None:
            new_id += 1
        record = self._repo.insert({**payload, "id": new_id})
        return User.model_validate(record)

    async def update_user(self, user_id: Any, payload: dict) -> User:
        record = self._repo.update(user_id, payload)
        if record is None:
            raise UserNotFoundError(user_id)
        return User.model_validate(record)

    async def delete_user(self, user_id: Any) -> Any:
        if not self._repo.delete(user_id):
            raise UserNotFoundError(user_id)
        return user_id
