"""Configuración de logging (loguru)."""

import sys

from loguru import logger

LOG_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {name}:{line} - {message}"


def configure_logging(verbose: bool = False) -> None:
    """Reemplaza el sink por defecto de loguru por stderr con el nivel indicado."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING", format=LOG_FORMAT)
