"""
Formulario interactivo de usuario en terminal.

Recorre el registro de campos pidiendo cada valor con questionary y lo
pasa por los eventos del FormState (cambio + blur, o cambio de fecha), de
modo que la terminal se comporta como un formulario web: los errores
aparecen al salir del campo y el envío valida todo antes de persistir.
"""

from datetime import date
from typing import Callable, Optional

import questionary
from questionary import Style

from userforms.cli.common import run
from userforms.cli.theme import get_palette, print_field_error
from userforms.forms import (
    FieldDescriptor,
    FieldKind,
    FormState,
    SubmissionCoordinator,
    SubmitResult,
    format_date,
)
from userforms.forms.kinds import get_handler

# (descriptor, valor por defecto) -> respuesta, o None si el usuario cancela
AskFunc = Callable[[FieldDescriptor, str], Optional[str]]

# Una respuesta completa es un solo cambio: si el moldeado la rechaza
# (devuelve el valor anterior), se avisa y se vuelve a preguntar
_REJECTED = object()
REJECTED_INPUT = {
    FieldKind.TEL: "Phone number must be exactly 10 digits",
}


def get_form_style() -> Style:
    """Estilo de questionary basado en el tema actual."""
    p = get_palette()
    return Style([
        ('qmark', f'fg:{p.accent} bold'),
        ('question', 'bold'),
        ('answer', f'fg:{p.success} bold'),
        ('instruction', f'fg:{p.muted} italic'),
    ])


def ask_questionary(fld: FieldDescriptor, default: str) -> Optional[str]:
    """Pide el valor de un campo con questionary."""
    label = fld.label
    if fld.kind == FieldKind.DATE:
        label += " (YYYY-MM-DD)"
    if not fld.required:
        label += " (optional)"
    return questionary.text(f"{label}:", default=default, style=get_form_style()).ask()


def _current_text(state: FormState, fld: FieldDescriptor) -> str:
    value = state.values.get(fld.name)
    if fld.kind == FieldKind.DATE:
        return format_date(value) or ""
    return value or ""


def prompt_field(state: FormState, fld: FieldDescriptor, ask: AskFunc) -> bool:
    """
    Pide un campo hasta que quede sin errores.

    Returns:
        False si el usuario canceló
    """
    while True:
        answer = ask(fld, _current_text(state, fld))
        if answer is None:
            return False

        if fld.kind == FieldKind.DATE:
            text = answer.strip()
            try:
                value = date.fromisoformat(text) if text else None
            except ValueError:
                print_field_error(fld.label, "Use the format YYYY-MM-DD")
                continue
            state.on_date_change(fld.name, value)
        else:
            if get_handler(fld.kind).shape_input(answer, _REJECTED) is _REJECTED:
                print_field_error(fld.label, REJECTED_INPUT.get(fld.kind, "Invalid value"))
                continue
            state.on_change(fld.name, answer)
            state.on_blur(fld.name)

        error = state.visible_error(fld.name)
        if error is None:
            return True
        print_field_error(fld.label, error)


def run_form(
    state: FormState,
    coordinator: SubmissionCoordinator,
    ask: Optional[AskFunc] = None,
) -> Optional[SubmitResult]:
    """
    Completa y envía el formulario.

    Si el envío falla por validación, vuelve a pedir solo los campos con
    error. Los errores de persistencia se propagan al llamador.

    Returns:
        SubmitResult con status SAVED, o None si el usuario canceló
    """
    ask = ask or ask_questionary
    pending = list(state.fields)

    while True:
        for fld in pending:
            if not prompt_field(state, fld, ask):
                return None

        result = run(coordinator.submit(state))
        if result.ok:
            return result

        for name, message in result.errors.items():
            fld = state.get_field(name)
            print_field_error(fld.label if fld else name, message)
        pending = [f for f in state.fields if f.name in result.errors]
