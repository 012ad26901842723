"""
Funciones para crear e imprimir tablas Rich.
"""

from rich.table import Table
from rich.text import Text
from rich import box

from userforms.cli.theme.palette import get_console, get_palette
from userforms.forms import USER_FIELDS, FieldDescriptor, format_field_value
from userforms.models import User


def create_users_table(
    title: str = None,
    fields: tuple[FieldDescriptor, ...] = USER_FIELDS,
) -> Table:
    """Crea la tabla de usuarios con columnas en orden de registro."""
    p = get_palette()

    table = Table(
        title=title,
        title_style=f"bold {p.primary}",
        border_style=p.border,
        header_style=f"bold {p.table_header}",
        box=box.ROUNDED,
        show_header=True,
        padding=(0, 1),
    )

    table.add_column("ID", style=p.muted, justify="right")
    for fld in fields:
        table.add_column(fld.label.upper())

    return table


def print_users_table(
    users: list[User],
    title: str = None,
    fields: tuple[FieldDescriptor, ...] = USER_FIELDS,
) -> None:
    """Imprime la tabla de usuarios."""
    p = get_palette()
    table = create_users_table(title, fields)

    for user in users:
        record = user.model_dump(by_alias=True)
        cells = []
        for fld in fields:
            style = f"bold {p.highlight}" if fld.name == "firstName" else ""
            cells.append(Text(format_field_value(fld, record.get(fld.name)), style=style))
        table.add_row(str(user.id), *cells)

    get_console().print(table)
