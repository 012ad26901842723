"""Configuración de pytest para tests de userforms."""

from typing import Any

import pytest

from userforms.database import open_user_repository
from userforms.models import User
from userforms.services import PersistenceError, UserAPI


class FakeUserAPI(UserAPI):
    """API en memoria que registra las llamadas recibidas."""

    def __init__(self, users: list[dict] = None, fail: bool = False):
        self.users = [User.model_validate(u) for u in (users or [])]
        self.fail = fail
        self.calls: list[tuple] = []
        self._next_id = 100

    def _check(self):
        if self.fail:
            raise PersistenceError("backend unavailable")

    async def list_users(self) -> list[User]:
        self.calls.append(("list",))
        self._check()
        return list(self.users)

    async def create_user(self, payload: dict) -> User:
        self.calls.append(("create", payload))
        self._check()
        self._next_id += 1
        user = User.model_validate({**payload, "id": self._next_id})
        self.users.append(user)
        return user

    async def update_user(self, user_id: Any, payload: dict) -> User:
        self.calls.append(("update", user_id, payload))
        self._check()
        return User.model_validate({**payload, "id": user_id})

    async def delete_user(self, user_id: Any) -> Any:
        self.calls.append(("delete", user_id))
        self._check()
        return user_id


@pytest.fixture
def fake_api():
    """API falsa vacía."""
    return FakeUserAPI()


@pytest.fixture
def failing_api():
    """API falsa que falla en todas las operaciones."""
    return FakeUserAPI(fail=True)


@pytest.fixture
def seed_record():
    """Registro de usuario existente para modo edición."""
    return {
        "id": 7,
        "firstName": "Al",
        "lastName": "Lee",
        "email": "a@l.com",
        "phone": "5551234567",
        "dob": "1990-05-01",
        "address": "",
    }


@pytest.fixture
def valid_inputs():
    """Entradas válidas para todos los campos de texto."""
    return {
        "firstName": "Ada",
        "lastName": "Lovelace",
        "email": "ada@example.com",
        "phone": "5550001111",
        "address": "12 St James's Square",
    }


@pytest.fixture
def temp_repo(tmp_path):
    """Repositorio de usuarios sobre una base SQLite temporal."""
    return open_user_repository(tmp_path / "users.db")


@pytest.fixture
def remote_api(seed_record):
    """Mock remoto con un usuario, para sembrar el almacén demo."""
    return FakeUserAPI(users=[seed_record])


@pytest.fixture
def populated_api(seed_record):
    """API falsa con un usuario registrado."""
    return FakeUserAPI(users=[seed_record])
