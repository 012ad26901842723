"""
Registro de descriptores de campo del formulario de usuarios.

USER_FIELDS es la única fuente de verdad para las claves de FormValues,
su orden de render (y de columnas en la tabla), su obligatoriedad y sus
validadores.
"""

import re
from typing import Optional, Union

from .models import FieldDescriptor, FieldKind

_DIGIT = re.compile(r"[0-9]")
_EMAIL = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
_ONLY_DIGITS = re.compile(r"[0-9]+")
_TEN_DIGITS = re.compile(r"[0-9]{10}")


def _name_validator(prefix: str):
    """Crea el validador de nombre/apellido con el prefijo del mensaje."""

    def validate(value: str) -> Union[bool, str]:
        if not value:
            return f"{prefix} is required"
        if len(value) < 2:
            return f"{prefix} must be at least 2 characters"
        if _DIGIT.search(value):
            return f"{prefix} should not contain numbers"
        return True

    return validate


validate_first_name = _name_validator("First name")
validate_last_name = _name_validator("Last name")


def validate_email(value: str) -> Union[bool, str]:
    if not value:
        return "Email is required"
    if _EMAIL.fullmatch(value):
        return True
    return "Please enter a valid email address (e.g. name@example.com)"


def validate_phone(value: str) -> Union[bool, str]:
    if not value:
        return "Phone number is required"
    if not _ONLY_DIGITS.fullmatch(value):
        return "Phone number must contain only digits"
    if _TEN_DIGITS.fullmatch(value):
        return True
    return "Phone number must be exactly 10 digits"


USER_FIELDS: tuple[FieldDescriptor, ...] = (
    FieldDescriptor(
        name="firstName",
        label="First Name",
        kind=FieldKind.TEXT,
        required=True,
        validator=validate_first_name,
    ),
    FieldDescriptor(
        name="lastName",
        label="Last Name",
        kind=FieldKind.TEXT,
        required=True,
        validator=validate_last_name,
    ),
    FieldDescriptor(
        name="email",
        label="Email Address",
        kind=FieldKind.EMAIL,
        required=True,
        validator=validate_email,
    ),
    FieldDescriptor(
        name="phone",
        label="Phone Number",
        kind=FieldKind.TEL,
        required=True,
        validator=validate_phone,
    ),
    FieldDescriptor(
        name="dob",
        label="Date of Birth",
        kind=FieldKind.DATE,
        required=True,
    ),
    FieldDescriptor(
        name="address",
        label="Address",
        kind=FieldKind.TEXT,
        required=False,
        full_width=True,
    ),
)


def get_field(
    name: str,
    fields: tuple[FieldDescriptor, ...] = USER_FIELDS,
) -> Optional[FieldDescriptor]:
    """Obtiene un descriptor por su nombre."""
    for f in fields:
        if f.name == name:
            return f
    return None


def field_names(fields: tuple[FieldDescriptor, ...] = USER_FIELDS) -> list[str]:
    """Nombres de los campos en orden de registro."""
    return [f.name for f in fields]
