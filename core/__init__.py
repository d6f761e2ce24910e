""" Utilidades principales y componentes compartidos.

Este paquete contiene:

- Excepciones personalizadas
- Criterios de ordenamiento y su normalización
- Funciones auxiliares
"""

from .exceptions import (
    AppException,
    NotFoundException,
    ValidationException,
    EntityNotFoundException,
    InvalidSortSpecException,
    ContextUnavailableException,
)
from .sorting import (
    SortDescriptor,
    SortKey,
    SortCriterion,
    SortSpec,
    normalize_sort,
    describe_sort,
)
from .utils import (
    enum_to_value,
    attribute_key,
)

__all__ = [
    # Excepciones
    "AppException",
    "NotFoundException",
    "ValidationException",
    "EntityNotFoundException",
    "InvalidSortSpecException",
    "ContextUnavailableException",
    # ordenamiento
    "SortDescriptor",
    "SortKey",
    "SortCriterion",
    "SortSpec",
    "normalize_sort",
    "describe_sort",
    # utils
    "enum_to_value",
    "attribute_key",
]
