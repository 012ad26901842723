"""
Comandos de preferencias: tema y configuración efectiva.
"""

from typing import Annotated, Optional

import typer

from userforms.cli.common import get_config_path, get_settings, set_settings
from userforms.cli.theme import CLITheme, print_header, print_setting, print_success
from userforms.config import ThemeName, save_theme, toggle_theme


def theme_command(
    name: Annotated[
        Optional[ThemeName],
        typer.Argument(help="Tema a usar (sin argumento alterna entre light y dark)"),
    ] = None,
) -> None:
    """Cambia el tema de la terminal y guarda la preferencia."""
    settings = get_settings()
    if name is None:
        settings = toggle_theme(settings)
    else:
        settings = settings.model_copy(update={"theme": name})

    save_theme(settings.theme, get_config_path())
    set_settings(settings)
    CLITheme.set_theme(settings.theme)
    print_success(f"Theme set to {settings.theme.value}")


def show_config() -> None:
    """Muestra la configuración efectiva."""
    settings = get_settings()
    print_header("Settings")
    print_setting("storage", settings.storage.value)
    print_setting("api_url", settings.api_url)
    print_setting("remote_api_url", settings.remote_api_url)
    print_setting("timeout_s", settings.timeout_s)
    print_setting("db_path", settings.db_path)
    print_setting("theme", settings.theme.value)
