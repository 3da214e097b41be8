"""
Traduccion de errores de SQLAlchemy a PersistenceError.
"""
from typing import Dict

from loguru import logger
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError

from app.shared.exceptions.persistence import PersistenceError, PersistenceErrorKind


def translate_db_error(exc: SQLAlchemyError, unique_columns: Dict[str, str]) -> PersistenceError:
    """
    Convierte un error del motor en un PersistenceError tipado.

    Args:
        exc: Error lanzado por SQLAlchemy
        unique_columns: columna de la tabla -> campo canonico
            (ej. {"name_key": "name"})

    Returns:
        PersistenceError: CONFLICT con el campo inferido del mensaje del
        motor, TRANSIENT para fallos de conexion, UNKNOWN en otro caso
    """
    text = str(getattr(exc, "orig", exc))

    if isinstance(exc, IntegrityError):
        # SQLite: "UNIQUE constraint failed: tabla.columna"
        # PostgreSQL: 'duplicate key value violates unique constraint "tabla_columna_key"'
        field = next(
            (canonical for column, canonical in unique_columns.items() if column in text),
            None
        )
        return PersistenceError(PersistenceErrorKind.CONFLICT, text, field=field)

    if isinstance(exc, OperationalError):
        logger.error(f"Fallo transitorio de base de datos: {text}")
        return PersistenceError(PersistenceErrorKind.TRANSIENT, text)

    logger.exception(f"Error de base de datos no clasificado: {text}")
    return PersistenceError(PersistenceErrorKind.UNKNOWN, text)
