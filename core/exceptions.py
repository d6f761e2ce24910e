"""
Excepciones personalizadas de la librería.

Los errores del motor de persistencia (SQLAlchemy) NO se envuelven en estas
clases: se propagan tal cual al llamador. Estas excepciones cubren solo los
fallos que ocurren antes de llegar a la base de datos.
"""

from typing import Optional, Any


class AppException(Exception):
    """Excepción base para todos los errores de la librería."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[dict[str, Any]] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class NotFoundException(AppException):
    """Excepción cuando un recurso no se encuentra."""

    def __init__(
        self,
        resource: str,
        identifier: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        message = f"{resource} no encontrado"
        if identifier:
            message += f": {identifier}"
        super().__init__(message=message, status_code=404, details=details)


class ValidationException(AppException):
    """Excepción para errores de validación de argumentos."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        if field:
            details = details or {}
            details["field"] = field
        super().__init__(message=message, status_code=422, details=details)


class EntityNotFoundException(NotFoundException):
    """El nombre de entidad no corresponde a ningún mapper registrado."""

    def __init__(
        self,
        entity_name: str,
        details: Optional[dict[str, Any]] = None,
    ):
        self.entity_name = entity_name
        super().__init__(resource="Entidad", identifier=entity_name, details=details)


class InvalidSortSpecException(ValidationException):
    """El criterio de ordenamiento no tiene una forma soportada."""

    def __init__(
        self,
        value: Any,
        details: Optional[dict[str, Any]] = None,
    ):
        message = (
            "Criterio de ordenamiento no soportado: "
            f"{type(value).__name__}. Se espera una clave, una secuencia de "
            "tuplas (clave, ascendente) o una secuencia de SortDescriptor"
        )
        super().__init__(message=message, field="sorted_by", details=details)


class ContextUnavailableException(AppException):
    """No se pudo obtener la sesión (contexto de persistencia) activa."""

    def __init__(
        self,
        message: str = "Contexto de persistencia no disponible",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message=message, status_code=503, details=details)
