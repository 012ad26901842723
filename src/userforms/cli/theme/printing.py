"""
Funciones que imprimen directamente a la consola.
"""

from rich.text import Text

from userforms.cli.theme.palette import get_console, get_palette


def print_header(text: str, subtitle: str = None) -> None:
    """Imprime un encabezado."""
    console = get_console()
    p = get_palette()
    console.print()
    console.print(Text(text, style=f"bold {p.primary}"))
    if subtitle:
        console.print(Text(subtitle, style=p.muted))
    console.print("─" * max(len(text), 40), style=p.border)


def print_success(message: str) -> None:
    """Imprime mensaje de éxito."""
    get_console().print(Text(f"✓ {message}", style=get_palette().success))


def print_warning(message: str) -> None:
    """Imprime advertencia."""
    get_console().print(Text(f"! {message}", style=get_palette().warning))


def print_error(message: str) -> None:
    """Imprime error."""
    get_console().print(Text(f"✗ {message}", style=f"bold {get_palette().error}"))


def print_info(message: str) -> None:
    """Imprime información."""
    get_console().print(Text(message, style=get_palette().info))


def print_field_error(label: str, message: str) -> None:
    """Imprime el error de validación de un campo, debajo de su entrada."""
    p = get_palette()
    text = Text("  ")
    text.append(f"{label}: ", style=p.label)
    text.append(message, style=p.error)
    get_console().print(text)


def print_setting(label: str, value: str) -> None:
    """Imprime un par etiqueta/valor de configuración."""
    p = get_palette()
    text = Text("  ")
    text.append(f"{label:<16}", style=p.label)
    text.append(str(value), style=f"bold {p.accent}")
    get_console().print(text)
