"""
Construcción de consultas.

build_descriptor es la única rutina que convierte los parámetros opcionales
(predicado, ordenamiento, límite) en un QueryDescriptor. Todas las operaciones
del repositorio pasan por ella; las funciones *_statement traducen el
descriptor a sentencias de SQLAlchemy.
"""

from typing import Any, Optional, Tuple, Type
import logging

from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy import Select, func, inspect, select
from sqlalchemy.orm import Mapper

from core.exceptions import EntityNotFoundException
from core.sorting import SortDescriptor, SortSpec, describe_sort, normalize_sort

logger = logging.getLogger(__name__)


class QueryDescriptor(BaseModel):
    """Descriptor normalizado de una consulta. Se construye en cada llamada."""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    entity_name: str = Field(..., description="Nombre de la entidad")
    predicate: Optional[Any] = Field(None, description="Expresión booleana opaca del backend")
    sort_descriptors: Tuple[SortDescriptor, ...] = Field((), description="Orden, de izquierda a derecha")
    limit: int = Field(0, description="Máximo de registros; 0 = sin límite")

    @property
    def is_bounded(self) -> bool:
        return self.limit != 0

    def __str__(self) -> str:
        parts = [self.entity_name]
        if self.predicate is not None:
            parts.append(f"where={self.predicate}")
        order = describe_sort(self.sort_descriptors)
        if order:
            parts.append(f"order_by=[{order}]")
        if self.is_bounded:
            parts.append(f"limit={self.limit}")
        return " ".join(parts)


def resolve_entity_name(model_class: Type[Any]) -> str:
    """
    Nombre de entidad de una clase mapeada.

    Por defecto es el nombre de la clase; una clase puede declarar
    __entity_name__ para sobrescribirlo.
    """
    return getattr(model_class, "__entity_name__", None) or model_class.__name__


def build_descriptor(
    entity_name: str,
    predicate: Any = None,
    sorted_by: SortSpec = None,
    ascending: bool = True,
    limit: int = 0,
) -> QueryDescriptor:
    """
    Construye el descriptor normalizado de una consulta.

    Args:
        entity_name: Nombre de la entidad
        predicate: Filtro opcional (None = todos los registros)
        sorted_by: Clave, secuencia de tuplas (clave, ascendente) o de SortDescriptor
        ascending: Dirección cuando sorted_by es una sola clave
        limit: Máximo de registros (0 = sin límite). No se valida aquí.

    Returns:
        QueryDescriptor
    """
    return QueryDescriptor(
        entity_name=entity_name,
        predicate=predicate,
        sort_descriptors=normalize_sort(sorted_by, ascending),
        limit=limit,
    )


def select_statement(model_class: Type[Any], descriptor: QueryDescriptor) -> Select:
    """
    Traduce un descriptor a un SELECT sobre la clase mapeada.

    Una clave de ordenamiento que no es un atributo de la clase produce
    AttributeError, sin validación previa.
    """
    stmt = select(model_class)
    if descriptor.predicate is not None:
        stmt = stmt.where(descriptor.predicate)
    for sort in descriptor.sort_descriptors:
        attribute = getattr(model_class, sort.key)
        stmt = stmt.order_by(attribute.asc() if sort.ascending else attribute.desc())
    if descriptor.is_bounded:
        stmt = stmt.limit(descriptor.limit)
    return stmt


def count_statement(model_class: Type[Any], descriptor: QueryDescriptor) -> Select:
    """SELECT count(*) con el predicado del descriptor; orden y límite se ignoran."""
    stmt = select(func.count()).select_from(model_class)
    if descriptor.predicate is not None:
        stmt = stmt.where(descriptor.predicate)
    return stmt


def find_mapper(model_class: Type[Any], entity_name: str) -> Mapper:
    """
    Busca el mapper registrado bajo entity_name en el registro de la clase.

    Raises:
        EntityNotFoundException: Si ningún mapper tiene ese nombre de entidad
    """
    registry = inspect(model_class).registry
    for mapper in registry.mappers:
        if resolve_entity_name(mapper.class_) == entity_name:
            return mapper
    logger.warning(f"Entidad '{entity_name}' no registrada")
    raise EntityNotFoundException(entity_name)
