"""
Repositorio genérico de consultas:
Cualquier clase mapeada obtiene insert, fetch, count y delete_all sin
escribir consultas propias. El repositorio no guarda la sesión: la obtiene
con context_lookup en cada operación.
"""

from enum import Enum
from typing import Any, Callable, Generic, List, Optional, Type, TypeVar
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Mapper, Session

from config import settings
from core.exceptions import ContextUnavailableException
from core.sorting import SortSpec
from database.db import current_session
from repositories.deletion import BATCH, batch_delete, fetch_delete, resolve_strategy
from repositories.query import (
    QueryDescriptor,
    build_descriptor,
    count_statement,
    find_mapper,
    resolve_entity_name,
    select_statement,
)

logger = logging.getLogger(__name__)

T = TypeVar('T')
K = TypeVar('K', bound=Enum)

ContextLookup = Callable[[], Session]


class FetchableRepository(Generic[T, K]):
    """
    Repositorio genérico parametrizado por la clase mapeada y su Enum de atributos.

    Los errores de SQLAlchemy se registran y se propagan sin envolver.
    """

    def __init__(
        self,
        model_class: Type[T],
        attribute_names: Optional[Type[K]] = None,
        context_lookup: Optional[ContextLookup] = None,
        delete_strategy: Optional[str] = None,
    ):
        """
        Inicializa el repositorio.

        Args:
            model_class: Clase del modelo ORM
            attribute_names: Enum con los atributos por los que se puede ordenar
            context_lookup: Callable que devuelve la sesión activa
                (por defecto current_session)
            delete_strategy: auto, batch o fetch (por defecto settings.delete_strategy)
        """
        self.model_class = model_class
        self.attribute_names = attribute_names
        self.context_lookup = context_lookup or current_session
        self.delete_strategy = delete_strategy or settings.delete_strategy

    @property
    def entity_name(self) -> str:
        return resolve_entity_name(self.model_class)

    @property
    def entity_description(self) -> Mapper:
        """Mapper de la entidad, resuelto por nombre en el registro del modelo."""
        return find_mapper(self.model_class, self.entity_name)

    def _context(self) -> Session:
        try:
            session = self.context_lookup()
        except Exception as e:
            logger.error(f"Error getting session for {self.entity_name}: {e}")
            raise ContextUnavailableException(
                f"No se pudo obtener la sesión para {self.entity_name}"
            ) from e
        if session is None:
            logger.error(f"Context lookup returned no session for {self.entity_name}")
            raise ContextUnavailableException(
                f"No hay sesión activa para {self.entity_name}"
            )
        return session

    def build_descriptor(
        self,
        predicate: Any = None,
        sorted_by: SortSpec = None,
        ascending: bool = True,
        limit: int = 0,
    ) -> QueryDescriptor:
        """Descriptor de consulta para esta entidad."""
        return build_descriptor(
            self.entity_name,
            predicate=predicate,
            sorted_by=sorted_by,
            ascending=ascending,
            limit=limit,
        )

    def fetch_all(
        self,
        predicate: Any = None,
        sorted_by: SortSpec = None,
        ascending: bool = True,
        limit: int = 0,
    ) -> List[T]:
        """
        Obtiene los registros que cumplen el predicado.

        Args:
            predicate: Expresión booleana de SQLAlchemy (None = todos)
            sorted_by: Clave, secuencia de tuplas (clave, ascendente) o de SortDescriptor
            ascending: Dirección cuando sorted_by es una sola clave
            limit: Máximo de registros (0 = sin límite)

        Returns:
            Lista de registros en el orden pedido (orden de almacenamiento si no hay)
        """
        descriptor = self.build_descriptor(predicate, sorted_by, ascending, limit)
        return self.execute(descriptor)

    def fetch_one(
        self,
        predicate: Any = None,
        sorted_by: SortSpec = None,
        ascending: bool = True,
    ) -> Optional[T]:
        """
        Obtiene el primer registro que cumple el predicado.

        Returns:
            El registro o None si no hay coincidencias
        """
        records = self.fetch_all(predicate, sorted_by, ascending, limit=1)
        return records[0] if records else None

    def execute(self, descriptor: QueryDescriptor) -> List[T]:
        """Ejecuta un descriptor ya construido en la sesión activa."""
        db = self._context()
        logger.debug(f"Fetch {descriptor}")
        try:
            statement = select_statement(self.model_class, descriptor)
            # unique() es obligatorio con colecciones lazy="joined"
            return list(db.scalars(statement).unique().all())
        except (SQLAlchemyError, AttributeError) as e:
            logger.error(f"Error fetching {self.entity_name}: {e}")
            raise

    def count(self, predicate: Any = None) -> int:
        """
        Cuenta los registros que cumplen el predicado.

        Args:
            predicate: Expresión booleana de SQLAlchemy (None = todos)

        Returns:
            Número de registros
        """
        descriptor = self.build_descriptor(predicate)
        db = self._context()
        logger.debug(f"Count {descriptor}")
        try:
            return db.scalar(count_statement(self.model_class, descriptor)) or 0
        except SQLAlchemyError as e:
            logger.error(f"Error counting {self.entity_name}: {e}")
            raise

    def insert_new(self, **attributes: Any) -> T:
        """
        Crea un registro nuevo y lo agrega a la sesión activa.

        El registro no es durable hasta que el anfitrión haga commit.

        Args:
            **attributes: Valores iniciales opcionales

        Returns:
            El registro creado
        """
        record = self.model_class(**attributes)
        self._context().add(record)
        logger.debug(f"Insert new {self.entity_name}")
        return record

    def delete_all(self) -> None:
        """
        Elimina todos los registros de la entidad.

        Los cambios pendientes de la sesión se envían (flush) antes de borrar,
        así los registros insertados y aún no enviados también se eliminan.

        Si ocurre un error a mitad de camino, qué registros quedaron eliminados
        no está definido; el repositorio no hace commit, de modo que un rollback
        de la sesión descarta el borrado parcial.
        """
        strategy = resolve_strategy(self.model_class, self.delete_strategy)
        db = self._context()
        logger.debug(f"Delete all {self.entity_name} (strategy={strategy})")
        try:
            db.flush()
            if strategy == BATCH:
                removed = batch_delete(db, self.model_class)
            else:
                removed = fetch_delete(db, self.model_class)
        except SQLAlchemyError as e:
            logger.error(f"Error deleting all {self.entity_name}: {e}")
            raise
        logger.info(f"{removed} registro(s) de {self.entity_name} eliminados")
