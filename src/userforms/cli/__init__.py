"""
CLI de UserForms - Registro de usuarios.

Comandos:
- list: Tabla de usuarios
- add: Registrar usuario (formulario interactivo)
- edit: Editar usuario
- delete: Eliminar usuario
- theme: Tema claro/oscuro (preferencia persistida)
- config: Configuración efectiva
"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from userforms.cli import common
from userforms.cli.settings import show_config, theme_command
from userforms.cli.theme import CLITheme, print_error
from userforms.cli.users import users_add, users_delete, users_edit, users_list
from userforms.config import ConfigError
from userforms.log import configure_logging

# Crear aplicación principal
app = typer.Typer(
    name="userforms",
    help="Registro de usuarios con formularios validados por campo.",
    no_args_is_help=True,
)

app.command("list")(users_list)
app.command("add")(users_add)
app.command("edit")(users_edit)
app.command("delete")(users_delete)
app.command("theme")(theme_command)
app.command("config")(show_config)


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Logging de depuración")] = False,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Archivo de configuración JSON"),
    ] = None,
):
    """
    UserForms - Alta, edición y baja de usuarios.

    La persistencia es un backend REST o un almacén demo local,
    según la configuración.
    """
    configure_logging(verbose)
    common.configure(config)
    try:
        settings = common.get_settings()
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(1)
    CLITheme.set_theme(settings.theme)
