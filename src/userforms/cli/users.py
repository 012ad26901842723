"""
Comandos de gestión de usuarios: listar, registrar, editar y eliminar.
"""

from typing import Annotated, Optional

import questionary
import typer
from loguru import logger

from userforms.cli.common import get_api, run
from userforms.cli.form_prompt import AskFunc, run_form
from userforms.cli.theme import (
    get_console,
    print_error,
    print_header,
    print_info,
    print_success,
    print_users_table,
    print_warning,
)
from userforms.forms import FormState, SubmissionCoordinator
from userforms.models import User
from userforms.services import PersistenceError, UserAPI

CONNECTION_HELP = "Could not connect to the API. Use: npx json-server --watch db.json --port 3001"


def find_user(users: list[User], user_id: str) -> Optional[User]:
    """Busca un usuario por ID (comparando como texto)."""
    for user in users:
        if str(user.id) == str(user_id):
            return user
    return None


def _load_users(api: UserAPI) -> list[User]:
    try:
        return run(api.list_users())
    except PersistenceError as e:
        logger.error(f"Listado fallido: {e}")
        print_error(CONNECTION_HELP)
        raise typer.Exit(1)


def _save(state: FormState, api: UserAPI, ask: Optional[AskFunc]) -> Optional[User]:
    """Completa el formulario y lo persiste. Retorna el usuario guardado."""
    coordinator = SubmissionCoordinator(api)
    try:
        result = run_form(state, coordinator, ask=ask)
    except PersistenceError as e:
        logger.error(f"Guardado fallido: {e}")
        print_error("Error saving user data.")
        raise typer.Exit(1)

    if result is None:
        print_warning("Cancelled, nothing was saved.")
        return None
    return result.record


def users_list() -> None:
    """
    Lista los usuarios registrados.

    Las columnas siguen el orden del registro de campos.
    """
    users = _load_users(get_api())

    if not users:
        print_info("No users registered yet.")
        print_info("Use 'userforms add' to register one.")
        return

    console = get_console()
    console.print()
    print_users_table(users, title=f"Users ({len(users)})")
    console.print()


def register_user(api: UserAPI, ask: Optional[AskFunc] = None) -> None:
    """Registra un usuario nuevo con el formulario interactivo."""
    print_header("Register User", "Fields marked optional may be left blank")
    state = FormState()
    user = _save(state, api, ask)
    if user is not None:
        print_success("User registered successfully!")
        print_info(f"ID: {user.id}")


def edit_user(api: UserAPI, user_id: str, ask: Optional[AskFunc] = None) -> None:
    """Edita un usuario existente con el formulario precargado."""
    user = find_user(_load_users(api), user_id)
    if user is None:
        print_error(f"User '{user_id}' not found.")
        raise typer.Exit(1)

    print_header(f"Edit User {user.id}", user.full_name)
    state = FormState(seed=user)
    if _save(state, api, ask) is not None:
        print_success("User updated successfully!")


def users_add() -> None:
    """Registra un usuario nuevo con el formulario interactivo."""
    register_user(get_api())


def users_edit(
    user_id: Annotated[str, typer.Argument(help="ID del usuario a editar")],
) -> None:
    """Edita un usuario existente con el formulario precargado."""
    edit_user(get_api(), user_id)


def users_delete(
    user_id: Annotated[str, typer.Argument(help="ID del usuario a eliminar")],
    yes: Annotated[bool, typer.Option("--yes", "-y", help="No pedir confirmación")] = False,
) -> None:
    """Elimina un usuario (pide confirmación)."""
    if not yes:
        confirmed = questionary.confirm(
            f"Delete user {user_id}? This action cannot be undone.",
            default=False,
        ).ask()
        if not confirmed:
            print_warning("Cancelled.")
            return

    try:
        run(get_api().delete_user(user_id))
    except PersistenceError as e:
        logger.error(f"Eliminación fallida: {e}")
        print_error("Failed to delete user.")
        raise typer.Exit(1)

    print_success("User deleted successfully")
