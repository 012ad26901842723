"""
Modelo de usuario (User).

Representa un registro tal como lo entrega la capa de persistencia. El ID
lo asigna siempre el backend (o el almacén demo).
"""

from datetime import date
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class User(BaseModel):
    """Registro de usuario."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: Optional[Union[int, str]] = None
    first_name: str = Field(default="", alias="firstName")
    last_name: str = Field(default="", alias="lastName")
    email: str = ""
    phone: str = ""
    dob: Optional[str] = None  # YYYY-MM-DD
    address: str = ""

    @field_validator("first_name", "last_name", "email", "phone", "address", mode="before")
    @classmethod
    def _text_or_empty(cls, value: Any) -> str:
        if value is None:
            return ""
        return str(value)

    @field_validator("dob", mode="before")
    @classmethod
    def _iso_date(cls, value: Any) -> Optional[str]:
        """Normaliza la fecha a YYYY-MM-DD (descarta la parte horaria)."""
        if value is None or value == "":
            return None
        if isinstance(value, date):
            return value.strftime("%Y-%m-%d")
        return str(value)[:10]

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def to_payload(self) -> dict:
        """Campos del registro con las claves de la API, sin ID."""
        return self.model_dump(by_alias=True, exclude={"id"})
