"""
Configuración de fixtures para pytest.

Este módulo contiene fixtures reutilizables para todos los tests.
"""

import pytest
import os
from typing import Generator, List
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

# Configurar para usar base de datos en memoria para tests
os.environ["DATABASE_URL"] = "sqlite:///:memory:"

from database.models import Base
from repositories.fetchable_repository import FetchableRepository
from tests.models import (
    Cita,
    Clinica,
    Empleado,
    Especialidad,
    Laboratorio,
    Mascota,
    MascotaAttribute,
    Muestra,
    Propietario,
    PropietarioAttribute,
    Recepcionista,
    Veterinario,
)


# ==================== Database Fixtures ====================

@pytest.fixture(scope="function")
def db_engine():
    """Create an in-memory SQLite database engine for testing."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Enable foreign keys for SQLite
    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def session_factory(db_engine):
    """Session factory bound to the test engine (autoflush on)."""
    return sessionmaker(
        autocommit=False,
        autoflush=True,
        bind=db_engine
    )


@pytest.fixture(scope="function")
def db_session(session_factory) -> Generator[Session, None, None]:
    """Create a new database session for a test."""
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


# ==================== Repository Fixtures ====================

@pytest.fixture
def mascota_repository(db_session: Session) -> FetchableRepository[Mascota, MascotaAttribute]:
    """Repository for Mascota bound to the test session."""
    return FetchableRepository(
        Mascota,
        MascotaAttribute,
        context_lookup=lambda: db_session,
    )


@pytest.fixture
def propietario_repository(db_session: Session) -> FetchableRepository[Propietario, PropietarioAttribute]:
    """Repository for Propietario bound to the test session."""
    return FetchableRepository(
        Propietario,
        PropietarioAttribute,
        context_lookup=lambda: db_session,
    )


# ==================== Data Fixtures ====================

@pytest.fixture
def mascotas(db_session: Session) -> List[Mascota]:
    """
    Five mascotas in insertion order.

    Duplicate edad values (3 and 5) with distinct nombres, for tie-break tests.
    """
    rows = [
        Mascota(nombre="Firulais", tipo="perro", edad=3, peso=25.5),
        Mascota(nombre="Michi", tipo="gato", edad=5, peso=4.5),
        Mascota(nombre="Bobby", tipo="perro", edad=3, peso=12.0),
        Mascota(nombre="Luna", tipo="gato", edad=1, peso=3.2),
        Mascota(nombre="Rocky", tipo="perro", edad=5, peso=30.0),
    ]
    for row in rows:
        db_session.add(row)
        # un flush por fila fija el orden de almacenamiento
        db_session.flush()
    db_session.commit()
    return rows


@pytest.fixture
def propietario_con_mascotas(db_session: Session) -> Propietario:
    """Create a propietario owning three mascotas."""
    propietario = Propietario(username="testcliente")
    propietario.mascotas = [
        Mascota(nombre="Toby", tipo="perro", edad=2),
        Mascota(nombre="Nala", tipo="gato", edad=4),
        Mascota(nombre="Kiwi", tipo="ave", edad=1),
    ]
    db_session.add(propietario)
    db_session.commit()
    db_session.refresh(propietario)
    return propietario


@pytest.fixture
def veterinarios(db_session: Session) -> List[Veterinario]:
    """Two veterinarios; the first one has two especialidades."""
    rows = [
        Veterinario(
            nombre="Dra. Ramírez",
            especialidades=[Especialidad(nombre="cirugía"), Especialidad(nombre="dermatología")],
        ),
        Veterinario(nombre="Dr. Gómez", especialidades=[Especialidad(nombre="felinos")]),
    ]
    db_session.add_all(rows)
    db_session.commit()
    return rows


@pytest.fixture
def clinica_con_citas(db_session: Session) -> Clinica:
    """A clinica with two citas; the relationship has no delete cascade."""
    clinica = Clinica(nombre="Clínica Central")
    clinica.citas = [Cita(motivo="control"), Cita(motivo="vacunación")]
    db_session.add(clinica)
    db_session.commit()
    return clinica


@pytest.fixture
def laboratorio_con_muestras(db_session: Session) -> Laboratorio:
    """A laboratorio whose muestras are removed by the database on delete."""
    laboratorio = Laboratorio(nombre="LabVet")
    laboratorio.muestras = [Muestra(tipo="sangre"), Muestra(tipo="orina")]
    db_session.add(laboratorio)
    db_session.commit()
    return laboratorio


@pytest.fixture
def empleados(db_session: Session) -> List[Empleado]:
    """One plain empleado and two recepcionistas in the same table."""
    rows = [
        Empleado(nombre="Ana"),
        Recepcionista(nombre="Luis"),
        Recepcionista(nombre="Marta"),
    ]
    db_session.add_all(rows)
    db_session.commit()
    return rows
