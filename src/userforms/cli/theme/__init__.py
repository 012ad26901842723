"""
Sistema de temas para la interfaz CLI de UserForms.

El paquete esta organizado en modulos:
- palette: Definicion de paletas y gestion de temas (CLITheme, ColorPalette)
- printing: Funciones que imprimen directamente a consola
- tables: Tabla de usuarios
"""

from userforms.cli.theme.palette import (
    ColorPalette,
    THEME_LIGHT,
    THEME_DARK,
    THEMES,
    CLITheme,
    get_console,
    get_palette,
)

from userforms.cli.theme.printing import (
    print_header,
    print_success,
    print_warning,
    print_error,
    print_info,
    print_field_error,
    print_setting,
)

from userforms.cli.theme.tables import (
    create_users_table,
    print_users_table,
)

__all__ = [
    # palette
    "ColorPalette",
    "THEME_LIGHT",
    "THEME_DARK",
    "THEMES",
    "CLITheme",
    "get_console",
    "get_palette",
    # printing
    "print_header",
    "print_success",
    "print_warning",
    "print_error",
    "print_info",
    "print_field_error",
    "print_setting",
    # tables
    "create_users_table",
    "print_users_table",
]
