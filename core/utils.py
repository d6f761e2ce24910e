"""
Funciones de utilidad generales.
"""

from typing import Any
from enum import Enum as PyEnum


def enum_to_value(value: Any) -> Any:
    """
    Convierte un Enum a su valor, o devuelve el valor sin cambios.

    Args:
        value: Valor a convertir

    Returns:
        Enum.value si value es un Enum, de lo contrario el valor sin cambios
    """
    if isinstance(value, PyEnum):
        return value.value
    return value


def attribute_key(value: Any) -> str:
    """
    Convierte una clave de atributo (miembro de Enum o cadena) a su nombre.

    Un miembro de Enum cuyo valor no es una cadena (por ejemplo un Enum
    con auto()) se convierte usando el nombre del miembro.

    Args:
        value: Miembro de Enum o nombre de atributo

    Returns:
        Nombre del atributo como cadena
    """
    raw = enum_to_value(value)
    if isinstance(raw, str):
        return raw
    if isinstance(value, PyEnum):
        return value.name
    return str(raw)
