"""
Módulo de base de datos SQLite para UserForms.

Almacén local de usuarios usado por la estrategia de persistencia demo.
"""

from pathlib import Path
from typing import Optional

from userforms.database.connection import DatabaseConnection
from userforms.database.users import UserRepository


def open_user_repository(db_path: Optional[Path] = None) -> UserRepository:
    """Abre (o crea) el almacén local y retorna su repositorio de usuarios."""
    return UserRepository(DatabaseConnection(db_path))


__all__ = [
    "DatabaseConnection",
    "UserRepository",
    "open_user_repository",
]
