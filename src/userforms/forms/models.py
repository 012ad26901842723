"""
Modelos de datos para el motor de formularios.
"""

from dataclasses import dataclass, field
from typing import Callable, Optional, Any, Union
from enum import Enum


class FieldKind(Enum):
    """Tipos de campo disponibles."""
    TEXT = "text"
    EMAIL = "email"
    TEL = "tel"
    DATE = "date"


class FormMode(Enum):
    """Modo del formulario (derivado de la semilla)."""
    CREATE = "create"
    EDIT = "edit"


class SubmitStatus(Enum):
    """Resultado de un envío del formulario."""
    READY = "ready"  # Validado y normalizado, sin despachar
    INVALID = "invalid"  # Errores de validación, sin llamada externa
    SAVED = "saved"  # Persistido correctamente


Validator = Callable[[Any], Union[bool, str]]


@dataclass(frozen=True)
class FieldDescriptor:
    """Definición estática de un campo del formulario."""
    name: str
    label: str
    kind: FieldKind = FieldKind.TEXT
    required: bool = False
    validator: Optional[Validator] = None
    full_width: bool = False  # Solo layout


@dataclass
class ValidationReport:
    """Resultado de validar todo el formulario."""
    errors: dict[str, str]
    touched: dict[str, bool]

    @property
    def is_valid(self) -> bool:
        return not self.errors


@dataclass
class SubmitResult:
    """Resultado de SubmissionCoordinator.prepare / submit."""
    status: SubmitStatus
    payload: Optional[dict] = None
    errors: dict[str, str] = field(default_factory=dict)
    record: Any = None

    @property
    def ok(self) -> bool:
        return self.status != SubmitStatus.INVALID
