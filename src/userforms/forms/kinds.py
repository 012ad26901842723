"""
Tabla de despacho por tipo de campo.

Cada FieldKind define su valor vacío, cómo se moldea la entrada del
usuario, cómo se normaliza hacia el payload y cómo se interpreta un valor
recibido desde la capa de persistencia. Agregar un tipo de campo solo
requiere una entrada nueva en KIND_HANDLERS.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Callable, Optional

from loguru import logger

from .models import FieldKind

DATE_FORMAT = "%Y-%m-%d"
PHONE_MAX_DIGITS = 10

_NON_DIGITS = re.compile(r"[^0-9]")


def _identity(value: Any) -> Any:
    return value


def _as_text(value: Any) -> str:
    """Valor de texto desde persistencia (None -> "")."""
    if value is None:
        return ""
    return str(value)


def _keep_input(raw: Any, previous: Any) -> Any:
    return raw


def shape_phone_input(raw: Any, previous: Any) -> Any:
    """
    Filtra la entrada telefónica a dígitos y rechaza el cambio si excede
    el máximo de dígitos.

    Returns:
        El nuevo valor a guardar, o `previous` si el cambio se rechaza
    """
    digits = _NON_DIGITS.sub("", _as_text(raw))
    if len(digits) > PHONE_MAX_DIGITS:
        return previous
    return digits


def parse_date(value: Any) -> Optional[date]:
    """
    Convierte un valor de fecha a objeto date.

    Acepta date, datetime o texto ISO ("1990-05-01" o con parte horaria).
    Un texto vacío o inválido retorna None.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).strip()[:10])
    except ValueError:
        logger.warning(f"Fecha inválida ignorada: {value!r}")
        return None


def format_date(value: Any) -> Optional[str]:
    """Serializa una fecha a YYYY-MM-DD. None se mantiene como None."""
    if value is None:
        return None
    if isinstance(value, date):
        return value.strftime(DATE_FORMAT)
    # Ya normalizado (texto)
    return str(value)


@dataclass(frozen=True)
class KindHandler:
    """Comportamiento asociado a un tipo de campo."""
    empty: Any
    shape_input: Callable[[Any, Any], Any] = _keep_input
    normalize: Callable[[Any], Any] = _identity
    from_storage: Callable[[Any], Any] = _as_text


KIND_HANDLERS: dict[FieldKind, KindHandler] = {
    FieldKind.TEXT: KindHandler(empty=""),
    FieldKind.EMAIL: KindHandler(empty=""),
    FieldKind.TEL: KindHandler(empty="", shape_input=shape_phone_input),
    FieldKind.DATE: KindHandler(
        empty=None,
        normalize=format_date,
        from_storage=parse_date,
    ),
}


def get_handler(kind: FieldKind) -> KindHandler:
    """Obtiene el handler de un tipo de campo."""
    return KIND_HANDLERS[kind]
