"""
Motor de formularios basado en descriptores de campo.

Un registro ordenado de descriptores define qué claves existen, su orden,
su obligatoriedad y sus validadores; el estado del formulario y el
coordinador de envío se derivan de él.
"""

from .models import (
    FieldKind,
    FieldDescriptor,
    FormMode,
    SubmitStatus,
    SubmitResult,
    ValidationReport,
)
from .fields import USER_FIELDS, get_field, field_names
from .kinds import KIND_HANDLERS, parse_date, format_date
from .validators import validate_field, validate_all, format_field_value
from .state import FormState
from .submission import SubmissionCoordinator, build_payload

__all__ = [
    "FieldKind",
    "FieldDescriptor",
    "FormMode",
    "SubmitStatus",
    "SubmitResult",
    "ValidationReport",
    "USER_FIELDS",
    "get_field",
    "field_names",
    "KIND_HANDLERS",
    "parse_date",
    "format_date",
    "validate_field",
    "validate_all",
    "format_field_value",
    "FormState",
    "SubmissionCoordinator",
    "build_payload",
]
