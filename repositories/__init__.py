"""
Capa de repositorio para el acceso a datos.
Este paquete contiene el repositorio genérico de consultas y las piezas con
las que construye sus sentencias. Los repositorios son una abstracción sobre
el ORM y no deben contener lógica de negocio.

"""

from .fetchable_repository import FetchableRepository, ContextLookup
from .protocols import Fetchable
from .query import (
    QueryDescriptor,
    build_descriptor,
    resolve_entity_name,
)
from .deletion import supports_batch_delete, resolve_strategy

__all__ = [
    "FetchableRepository",
    "ContextLookup",
    "Fetchable",
    "QueryDescriptor",
    "build_descriptor",
    "resolve_entity_name",
    "supports_batch_delete",
    "resolve_strategy",
]
