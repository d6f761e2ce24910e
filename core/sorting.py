"""
Criterios de ordenamiento para las consultas.

Un criterio de ordenamiento se puede expresar de tres formas equivalentes:

- una sola clave (miembro del Enum de atributos o cadena) más el flag ascending
- una secuencia ordenada de tuplas (clave, ascendente)
- una secuencia ordenada de SortDescriptor ya construidos

normalize_sort convierte cualquiera de ellas en una tupla de SortDescriptor.
El orden de la tupla define el desempate: de izquierda a derecha.
"""

from typing import Any, Optional, Sequence, Tuple, Union
from enum import Enum as PyEnum
from pydantic import BaseModel, ConfigDict, Field

from core.exceptions import InvalidSortSpecException
from core.utils import attribute_key


class SortDescriptor(BaseModel):
    """Descriptor de ordenamiento de bajo nivel: atributo y dirección."""
    model_config = ConfigDict(frozen=True)

    key: str = Field(..., description="Nombre del atributo mapeado")
    ascending: bool = Field(True, description="Dirección del ordenamiento")

    @classmethod
    def of(cls, key: Any, ascending: bool = True) -> "SortDescriptor":
        """
        Crea un descriptor a partir de un miembro de Enum o una cadena.

        Raises:
            InvalidSortSpecException: Si ascending no es un bool
        """
        if not isinstance(ascending, bool):
            raise InvalidSortSpecException((key, ascending))
        return cls(key=attribute_key(key), ascending=ascending)


SortKey = Union[PyEnum, str]
SortCriterion = Tuple[SortKey, bool]
SortSpec = Union[None, SortKey, Sequence[Union[SortCriterion, SortDescriptor]]]


def _is_key(value: Any) -> bool:
    return isinstance(value, (PyEnum, str))


def _is_criterion(value: Any) -> bool:
    return (
        isinstance(value, tuple)
        and len(value) == 2
        and _is_key(value[0])
        and isinstance(value[1], bool)
    )


def _to_descriptor(item: Any) -> SortDescriptor:
    if isinstance(item, SortDescriptor):
        return item
    if _is_key(item):
        return SortDescriptor.of(item)
    if _is_criterion(item):
        key, ascending = item
        return SortDescriptor.of(key, ascending)
    raise InvalidSortSpecException(item)


def normalize_sort(
    sorted_by: SortSpec = None,
    ascending: bool = True,
) -> Tuple[SortDescriptor, ...]:
    """
    Normaliza cualquier forma de criterio de ordenamiento.

    Args:
        sorted_by: None, una clave, o una secuencia de tuplas / SortDescriptor
        ascending: Dirección, solo se usa cuando sorted_by es una sola clave

    Returns:
        Tupla ordenada de SortDescriptor (vacía si no hay ordenamiento)

    Raises:
        InvalidSortSpecException: Si sorted_by no tiene una forma soportada
    """
    if sorted_by is None:
        return ()

    # str es una secuencia: se evalúa antes que las secuencias
    if _is_key(sorted_by):
        return (SortDescriptor.of(sorted_by, ascending),)

    if isinstance(sorted_by, SortDescriptor):
        return (sorted_by,)

    if isinstance(sorted_by, (list, tuple)):
        # una sola tupla (clave, ascendente) sin envolver en lista
        if _is_criterion(sorted_by):
            return (SortDescriptor.of(sorted_by[0], sorted_by[1]),)
        return tuple(_to_descriptor(item) for item in sorted_by)

    raise InvalidSortSpecException(sorted_by)


def describe_sort(descriptors: Sequence[SortDescriptor]) -> Optional[str]:
    """Representación corta para logs, por ejemplo 'nombre ASC, edad DESC'."""
    if not descriptors:
        return None
    return ", ".join(
        f"{d.key} {'ASC' if d.ascending else 'DESC'}" for d in descriptors
    )
