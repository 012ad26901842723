"""
Modelos de datos para UserForms.
"""

from userforms.models.user import User

__all__ = [
    "User",
]
