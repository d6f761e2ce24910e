"""
Configuración centralizada de la librería usando pydantic-settings.

Este módulo maneja las variables de entorno que afectan a la conexión
con la base de datos, a las sesiones y a la estrategia de borrado masivo.
"""
import logging
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


logger = logging.getLogger(__name__)

DELETE_STRATEGIES = ("auto", "batch", "fetch")


class Settings(BaseSettings):
    """Configuración cargada desde variables de entorno."""

    # Database
    database_url: str = Field(
        default="sqlite:///./fetchable.db",
        description="URL de conexión a la base de datos"
    )
    session_autoflush: bool = Field(
        default=True,
        description="Autoflush de las sesiones (hace visibles los inserts pendientes en las consultas)"
    )

    # Borrado masivo
    delete_strategy: str = Field(
        default="auto",
        description="Estrategia de delete_all: auto, batch o fetch"
    )

    # Application
    app_name: str = Field(
        default="Fetchable",
        description="Nombre de la aplicación"
    )
    app_version: str = Field(
        default="1.0.0",
        description="Versión de la aplicación"
    )
    debug_mode: bool = Field(
        default=False,
        description="Modo debug (activa el echo del engine)"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Nivel de logging (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Valida que el nivel de logging sea válido."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            logger.warning(
                f"Nivel de log '{v}' no válido. Usando 'INFO'. "
                f"Niveles válidos: {valid_levels}"
            )
            return "INFO"
        return v_upper

    @field_validator("delete_strategy")
    @classmethod
    def validate_delete_strategy(cls, v: str) -> str:
        """Valida la estrategia de borrado masivo."""
        v_lower = v.strip().lower()
        if v_lower not in DELETE_STRATEGIES:
            logger.warning(
                f"Estrategia de borrado '{v}' no válida. Usando 'auto'. "
                f"Estrategias válidas: {list(DELETE_STRATEGIES)}"
            )
            return "auto"
        return v_lower

    @property
    def is_sqlite(self) -> bool:
        """Determina si la URL apunta a SQLite."""
        return self.database_url.startswith("sqlite")


# Instancia global de configuración
settings = Settings()


def configure_logging():
    """Configura el sistema de logging."""
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format=log_format,
        handlers=[
            logging.StreamHandler(),
        ]
    )

    # Reducir verbosidad de librerías externas
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    logger.info(f"Logging configurado en nivel {settings.log_level}")
    logger.info(f"{settings.app_name} v{settings.app_version}")


def get_settings() -> Settings:
    """Retorna la instancia de configuración."""
    return settings
