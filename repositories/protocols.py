"""Contrato estructural de un repositorio consultable.

Cualquier objeto con estas operaciones cumple el contrato, herede o no de
FetchableRepository; los consumidores tipan contra Fetchable.
"""

from typing import Any, List, Optional, Protocol, TypeVar, runtime_checkable

from core.sorting import SortSpec

T = TypeVar('T')


@runtime_checkable
class Fetchable(Protocol[T]):
    """Operaciones de consulta sobre un tipo de registro."""
    @property
    def entity_name(self) -> str: ...
    @property
    def entity_description(self) -> Any: ...
    def fetch_all(
        self,
        predicate: Any = None,
        sorted_by: SortSpec = None,
        ascending: bool = True,
        limit: int = 0,
    ) -> List[T]: ...
    def fetch_one(
        self,
        predicate: Any = None,
        sorted_by: SortSpec = None,
        ascending: bool = True,
    ) -> Optional[T]: ...
    def count(self, predicate: Any = None) -> int: ...
    def insert_new(self, **attributes: Any) -> T: ...
    def delete_all(self) -> None: ...
