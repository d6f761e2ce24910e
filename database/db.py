"""módulo de base de datos: engine, sesiones y búsqueda del contexto activo."""
from contextlib import contextmanager
from typing import Generator
import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, scoped_session, Session
from sqlalchemy.exc import SQLAlchemyError

from .models import Base

#import configuration
from config import settings

logger = logging.getLogger(__name__)


def _connect_args() -> dict:
    if settings.is_sqlite:
        #permite compartir la conexión entre hilos del pool
        return {"check_same_thread": False}
    return {}


#engine / session con configuración centralizada
engine = create_engine(
    settings.database_url,
    echo=settings.debug_mode,
    future=True,
    pool_pre_ping=True,  #verifica conexiones antes de usarlas
    connect_args=_connect_args(),
)
SessionLocal = sessionmaker(
    bind=engine,
    autoflush=settings.session_autoflush,
    autocommit=False,
)

#sesión "actual" por hilo: es la búsqueda de contexto por defecto de los repositorios
current_session = scoped_session(SessionLocal)


def get_db() -> Generator[Session, None, None]:
    """generador que provee una sesión y la cierra al terminar.

    Yields:
        Session: Sesión de SQLAlchemy

    Nota:
        - Hace rollback automático si hay excepciones SQLAlchemy
        - No hace commit: eso le corresponde al llamador
    """
    db = SessionLocal()
    try:
        yield db
    except SQLAlchemyError as e:
        logger.error(f"Error de base de datos en sesión: {e}")
        db.rollback()
        raise
    finally:
        db.close()


@contextmanager
def session_scope(session_factory=SessionLocal) -> Generator[Session, None, None]:
    """Unidad de trabajo: commit al salir, rollback si hay cualquier excepción.

    Args:
        session_factory: Fábrica de sesiones (por defecto SessionLocal)
    """
    db = session_factory()
    try:
        yield db
        db.commit()
    except Exception as e:
        logger.error(f"Rollback de la unidad de trabajo: {e}")
        db.rollback()
        raise
    finally:
        db.close()


def create_tables(bind=None) -> None:
    """Crear tablas ORM en la base de datos.

    Args:
        bind: Engine a usar (por defecto el engine global)

    Raises:
        SQLAlchemyError: Si hay error al crear las tablas
    """
    try:
        Base.metadata.create_all(bind=bind or engine)
        logger.info("Tablas de base de datos creadas/verificadas exitosamente")
    except SQLAlchemyError as e:
        logger.error(f"Error al crear tablas: {e}", exc_info=True)
        raise


def get_database_url() -> str:
    """Obtiene la URL de la base de datos (sin credenciales sensibles)."""
    return engine.url.render_as_string(hide_password=True)
