"""
Estrategias de borrado de todos los registros de una entidad.

- batch: una sola sentencia DELETE ejecutada por el motor; no carga registros.
- fetch: carga todos los registros, marca cada uno con Session.delete y hace
  un único flush. Respeta las cascadas ORM de las relaciones.

Si el borrado falla a mitad de camino, el subconjunto ya eliminado no está
definido. Ninguna estrategia hace commit: el cambio vive en la transacción de
la sesión y un rollback del anfitrión lo descarta.
"""

from typing import Any, Type
import logging

from sqlalchemy import delete, inspect, select
from sqlalchemy.orm import MANYTOMANY, ONETOMANY, Session

logger = logging.getLogger(__name__)

BATCH = "batch"
FETCH = "fetch"
AUTO = "auto"


def supports_batch_delete(model_class: Type[Any]) -> bool:
    """
    Indica si la entidad admite un DELETE masivo sin perder semántica ORM.

    Un DELETE masivo ignora las cascadas "delete" declaradas en las
    relaciones y no cubre la herencia con tablas unidas. Tampoco pone en
    NULL las claves foráneas de los hijos de una relación uno-a-muchos ni
    borra las filas de la tabla secundaria de una muchos-a-muchos; eso solo
    se delega en la base de datos cuando la relación declara passive_deletes.
    """
    mapper = inspect(model_class)
    for relationship in mapper.relationships:
        if relationship.cascade.delete:
            return False
        if (
            relationship.direction in (ONETOMANY, MANYTOMANY)
            and not relationship.passive_deletes
        ):
            return False
    if mapper.inherits is not None and not mapper.single:
        return False
    return True


def resolve_strategy(model_class: Type[Any], strategy: str = AUTO) -> str:
    """Convierte 'auto' en la estrategia concreta según la capacidad de la entidad."""
    if strategy in (BATCH, FETCH):
        return strategy
    return BATCH if supports_batch_delete(model_class) else FETCH


def batch_delete(db: Session, model_class: Type[Any]) -> int:
    """
    Elimina todos los registros con un solo DELETE.

    Returns:
        Número de filas eliminadas según el driver
    """
    result = db.execute(delete(model_class))
    return result.rowcount or 0


def fetch_delete(db: Session, model_class: Type[Any]) -> int:
    """
    Carga y elimina los registros uno a uno dentro de la misma sesión.

    Returns:
        Número de registros eliminados
    """
    records = db.scalars(select(model_class)).unique().all()
    for record in records:
        db.delete(record)
    db.flush()
    return len(records)
