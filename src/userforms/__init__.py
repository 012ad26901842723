"""
UserForms - Registro de usuarios con formularios declarativos.

El núcleo es un motor de formularios genérico: una lista ordenada de
descriptores de campo define el render, la validación y la forma del
payload enviado a la capa de persistencia.
"""

__version__ = "0.1.0"
