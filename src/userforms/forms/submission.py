"""
Coordinador de envío del formulario.

Ejecuta la validación completa, normaliza el payload (fechas a texto ISO)
y lo despacha a la API de persistencia mediante create o update.
"""

from typing import TYPE_CHECKING

from loguru import logger

from .fields import USER_FIELDS
from .kinds import get_handler
from .models import FieldDescriptor, FieldKind, FormMode, SubmitResult, SubmitStatus
from .state import FormState
from .validators import validate_all

if TYPE_CHECKING:
    from userforms.services.base import UserAPI


def build_payload(
    values: dict,
    fields: tuple[FieldDescriptor, ...] = USER_FIELDS,
) -> dict:
    """Copia superficial de los valores con las fechas serializadas."""
    payload = dict(values)
    for fld in fields:
        if fld.kind == FieldKind.DATE:
            payload[fld.name] = get_handler(fld.kind).normalize(payload.get(fld.name))
    return payload


class SubmissionCoordinator:
    """Orquesta validación, normalización y persistencia de un formulario."""

    def __init__(self, api: "UserAPI"):
        self._api = api
        self.is_loading = False

    def prepare(self, state: FormState) -> SubmitResult:
        """
        Valida todo el formulario y construye el payload normalizado.

        Marca todos los campos como tocados para que sus errores se muestren.
        No realiza llamadas externas.
        """
        report = validate_all(state.values, state.fields)
        state.errors = dict(report.errors)
        state.touched = dict(report.touched)

        if not report.is_valid:
            return SubmitResult(status=SubmitStatus.INVALID, errors=dict(report.errors))

        return SubmitResult(
            status=SubmitStatus.READY,
            payload=build_payload(state.values, state.fields),
        )

    async def submit(self, state: FormState) -> SubmitResult:
        """
        Valida y persiste el formulario.

        En modo creación, un envío exitoso vacía el formulario; en modo
        edición el estado queda como está hasta que el llamador cambie la
        semilla. Los errores de persistencia se propagan sin tocar el estado.
        """
        result = self.prepare(state)
        if not result.ok:
            logger.debug(f"Envío bloqueado por validación: {sorted(result.errors)}")
            return result

        mode = state.mode
        self.is_loading = True
        try:
            if mode == FormMode.EDIT:
                logger.debug(f"Actualizando usuario {state.record_id}")
                record = await self._api.update_user(state.record_id, result.payload)
            else:
                logger.debug("Creando usuario")
                record = await self._api.create_user(result.payload)
        finally:
            self.is_loading = False

        if mode == FormMode.CREATE:
            state.reset()

        return SubmitResult(
            status=SubmitStatus.SAVED,
            payload=result.payload,
            record=record,
        )
