"""
Validación y formateo de valores de campos.
"""

from typing import Any, Optional

from loguru import logger

from .fields import USER_FIELDS, get_field
from .kinds import get_handler, parse_date
from .models import FieldDescriptor, FieldKind, ValidationReport


def is_empty(value: Any) -> bool:
    """Un valor es vacío si es None o texto en blanco."""
    if value is None:
        return True
    return str(value).strip() == ""


def format_field_value(field: FieldDescriptor, value: Any) -> str:
    """Formatea el valor de un campo para mostrar en la tabla."""
    if is_empty(value):
        return "-"

    if field.kind == FieldKind.DATE:
        parsed = parse_date(value)
        if parsed is None:
            return str(value)
        return f"{parsed.month}/{parsed.day}/{parsed.year}"

    return str(value)


def validate_field(
    name: str,
    value: Any,
    fields: tuple[FieldDescriptor, ...] = USER_FIELDS,
) -> Optional[str]:
    """
    Valida el valor de un campo.

    Args:
        name: Nombre del campo
        value: Valor crudo (para fechas, un objeto date)
        fields: Registro de descriptores

    Returns:
        Mensaje de error o None si es válido (o si el campo no existe)
    """
    field = get_field(name, fields)
    if field is None:
        logger.debug(f"Campo desconocido ignorado en validación: {name}")
        return None

    if field.required and is_empty(value):
        return f"{field.label} is required"

    # Validador personalizado (recibe siempre el valor normalizado)
    if field.validator:
        result = field.validator(get_handler(field.kind).normalize(value))
        if result is True:
            return None
        elif isinstance(result, str):
            return result
        else:
            return "Invalid value"

    return None


def validate_all(
    values: dict,
    fields: tuple[FieldDescriptor, ...] = USER_FIELDS,
) -> ValidationReport:
    """Valida todos los campos en orden de registro y los marca tocados."""
    errors = {}
    touched = {}
    for field in fields:
        error = validate_field(field.name, values.get(field.name), fields)
        if error:
            errors[field.name] = error
        touched[field.name] = True
    return ValidationReport(errors=errors, touched=touched)
