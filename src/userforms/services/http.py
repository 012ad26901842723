"""Cliente HTTP para un backend REST de usuarios (estilo json-server)."""

from typing import Any, Optional

import httpx
from loguru import logger

from userforms.models import User
from userforms.services.base import (
    ConnectionFailed,
    PersistenceError,
    UserAPI,
    UserNotFoundError,
    coerce_users,
)


class HttpUserAPI(UserAPI):
    """
    Persistencia contra una colección REST.

    GET / lista, POST / crea, PUT /{id} actualiza y DELETE /{id} elimina.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    def _item_url(self, user_id: Any) -> str:
        return f"{self.base_url}/{user_id}"

    async def _request(self, method: str, url: str, user_id: Any = None, **kwargs) -> Any:
        """
        Ejecuta una petición y retorna el cuerpo JSON (o None si está vacío).

        Un 404 sobre un recurso individual (user_id) se reporta como
        UserNotFoundError.
        """
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.request(method, url, **kwargs)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404 and user_id is not None:
                raise UserNotFoundError(user_id) from e
            logger.error(f"{method} {url} -> HTTP {e.response.status_code}")
            raise PersistenceError(f"{method} {url} failed with HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.error(f"{method} {url} -> {e}")
            raise ConnectionFailed(f"Could not reach {url}: {e}") from e

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise PersistenceError(f"{method} {url} returned a non-JSON body") from e

    async def list_users(self) -> list[User]:
        data = await self._request("GET", self.base_url)
        return coerce_users(data)

    async def create_user(self, payload: dict) -> User:
        data = await self._request("POST", self.base_url, json=payload)
        if not isinstance(data, dict):
            raise PersistenceError("Create response is not a user record")
        return User.model_validate(data)

    async def update_user(self, user_id: Any, payload: dict) -> User:
        data = await self._request("PUT", self._item_url(user_id), user_id=user_id, json=payload)
        if not isinstance(data, dict):
            data = {**payload, "id": user_id}
        return User.model_validate(data)

    async def delete_user(self, user_id: Any) -> Any:
        await self._request("DELETE", self._item_url(user_id), user_id=user_id)
        return user_id
