"""
Definicion de paletas de colores y gestion de temas.
"""

from dataclasses import dataclass
from typing import Optional

from rich.console import Console
from rich.theme import Theme

from userforms.config import ThemeName


@dataclass
class ColorPalette:
    """Paleta de colores para un tema."""
    # Colores principales
    primary: str      # Títulos, destacados
    secondary: str    # Subtítulos
    accent: str       # Valores importantes

    # Colores semánticos
    success: str
    warning: str
    error: str
    info: str
    muted: str        # Texto secundario/atenuado

    # Datos y tablas
    label: str        # Etiquetas
    border: str       # Bordes y separadores
    table_header: str
    highlight: str    # Primera columna (nombre)


THEME_LIGHT = ColorPalette(
    primary="#6366f1",      # Índigo
    secondary="#475569",    # Pizarra
    accent="#7c3aed",       # Violeta
    success="#15803d",
    warning="#b45309",
    error="#b91c1c",
    info="#1d4ed8",
    muted="#64748b",
    label="#334155",
    border="#cbd5e1",
    table_header="#475569",
    highlight="#0f172a",
)

THEME_DARK = ColorPalette(
    primary="#818cf8",      # Índigo claro
    secondary="#94a3b8",
    accent="#a78bfa",
    success="#4ade80",
    warning="#fbbf24",
    error="#f87171",
    info="#60a5fa",
    muted="#64748b",
    label="#cbd5e1",
    border="#334155",
    table_header="#94a3b8",
    highlight="#f8fafc",
)

# Mapeo de nombres a temas
THEMES = {
    ThemeName.LIGHT: THEME_LIGHT,
    ThemeName.DARK: THEME_DARK,
}


class CLITheme:
    """Gestor de tema para la CLI."""

    _instance: Optional["CLITheme"] = None
    _palette: ColorPalette = THEME_LIGHT
    _console: Optional[Console] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @classmethod
    def set_theme(cls, theme: ThemeName) -> None:
        """Establece el tema activo."""
        cls._palette = THEMES.get(theme, THEME_LIGHT)
        cls._console = None  # Resetear console para recrear con nuevo tema

    @classmethod
    def get_palette(cls) -> ColorPalette:
        """Obtiene la paleta de colores actual."""
        return cls._palette

    @classmethod
    def get_console(cls) -> Console:
        """Obtiene la consola Rich con el tema aplicado."""
        if cls._console is None:
            p = cls._palette
            custom_theme = Theme({
                "primary": p.primary,
                "secondary": p.secondary,
                "accent": p.accent,
                "success": p.success,
                "warning": p.warning,
                "error": p.error,
                "info": p.info,
                "muted": p.muted,
                "label": p.label,
                "title": f"bold {p.primary}",
                "table.header": f"bold {p.table_header}",
            })
            cls._console = Console(theme=custom_theme)
        return cls._console


def get_console() -> Console:
    """Obtiene la consola Rich con tema aplicado."""
    return CLITheme.get_console()


def get_palette() -> ColorPalette:
    """Obtiene la paleta de colores actual."""
    return CLITheme.get_palette()
