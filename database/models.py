"""
Base declarativa compartida.

Las clases mapeadas de la aplicación anfitriona heredan de Base; el registro
de Base es donde FetchableRepository.entity_description busca los mappers.
"""
from uuid import uuid4

from sqlalchemy.orm import declarative_base

Base = declarative_base()


def gen_uuid_str():
    return str(uuid4())
