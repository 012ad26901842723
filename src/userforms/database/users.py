"""
Operaciones de base de datos para usuarios.
"""

from typing import Any, Optional

from userforms.database.connection import DatabaseConnection

# Clave de la API -> columna SQLite
COLUMNS = {
    "firstName": "first_name",
    "lastName": "last_name",
    "email": "email",
    "phone": "phone",
    "dob": "dob",
    "address": "address",
}

_ID_MATCH = "(id = ? OR CAST(id AS TEXT) = ?)"


class UserRepository:
    """Repositorio para operaciones CRUD de usuarios."""

    def __init__(self, db: DatabaseConnection):
        """
        Inicializa el repositorio.

        Args:
            db: Instancia de DatabaseConnection
        """
        self._db = db

    def _row_to_dict(self, row) -> dict:
        """Convierte una fila de la BD a diccionario de usuario."""
        record = {"id": row["id"]}
        for key, column in COLUMNS.items():
            record[key] = row[column]
        return record

    def _column_values(self, record: dict) -> list:
        values = []
        for key, column in COLUMNS.items():
            value = record.get(key)
            if value is None and column != "dob":
                value = ""
            values.append(value)
        return values

    def list_all(self) -> list[dict]:
        """Lista todos los usuarios en orden de inserción."""
        with self._db.connection() as conn:
            cursor = conn.execute("SELECT * FROM users ORDER BY rowid")
            return [self._row_to_dict(row) for row in cursor]

    def get(self, user_id: Any) -> Optional[dict]:
        """Obtiene un usuario por ID (acepta el ID como texto)."""
        with self._db.connection() as conn:
            row = conn.execute(
                f"SELECT * FROM users WHERE {_ID_MATCH}",
                (user_id, str(user_id))
            ).fetchone()
            return self._row_to_dict(row) if row else None

    def insert(self, record: dict) -> dict:
        """Inserta un usuario. El registro debe traer su ID."""
        columns = ", ".join(["id", *COLUMNS.values()])
        placeholders = ", ".join("?" * (len(COLUMNS) + 1))
        with self._db.connection() as conn:
            conn.execute(
                f"INSERT INTO users ({columns}) VALUES ({placeholders})",
                (record["id"], *self._column_values(record))
            )
        return self.get(record["id"])

    def replace_all(self, records: list[dict]) -> None:
        """Reemplaza el contenido completo del almacén."""
        columns = ", ".join(["id", *COLUMNS.values()])
        placeholders = ", ".join("?" * (len(COLUMNS) + 1))
        with self._db.connection() as conn:
            conn.execute("DELETE FROM users")
            conn.executemany(
                f"INSERT OR REPLACE INTO users ({columns}) VALUES ({placeholders})",
                [(r["id"], *self._column_values(r)) for r in records if r.get("id") is not None]
            )

    def update(self, user_id: Any, fields: dict) -> Optional[dict]:
        """
        Actualiza los campos indicados de un usuario.

        Returns:
            El registro actualizado, o None si no existe
        """
        updates = []
        params = []
        for key, column in COLUMNS.items():
            if key in fields:
                value = fields[key]
                if value is None and column != "dob":
                    value = ""
                updates.append(f"{column} = ?")
                params.append(value)

        if updates:
            with self._db.connection() as conn:
                cursor = conn.execute(
                    f"UPDATE users SET {', '.join(updates)} WHERE {_ID_MATCH}",
                    (*params, user_id, str(user_id))
                )
                if cursor.rowcount == 0:
                    return None

        return self.get(user_id)

    def delete(self, user_id: Any) -> bool:
        """Elimina un usuario. Retorna True si existía."""
        with self._db.connection() as conn:
            cursor = conn.execute(
                f"DELETE FROM users WHERE {_ID_MATCH}",
                (user_id, str(user_id))
            )
            return cursor.rowcount > 0
