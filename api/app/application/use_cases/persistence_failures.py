"""
Traduccion de PersistenceError a las excepciones de la aplicacion.
"""
from typing import Any, Dict, Optional

from loguru import logger

from app.application.services.uniqueness_checker import UniquenessChecker
from app.core.config import settings
from app.shared.exceptions.base import AppException
from app.shared.exceptions.domain import (
    ConflictException,
    EntityNotFoundException,
    InternalException,
)
from app.shared.exceptions.persistence import PersistenceError, PersistenceErrorKind


def to_app_exception(
    exc: PersistenceError,
    checker: UniquenessChecker,
    entity_id: Any = None,
    values: Optional[Dict[str, Any]] = None
) -> AppException:
    """
    Convierte un fallo del repositorio en la excepcion de aplicacion
    correspondiente.

    Args:
        exc: Error tipado del repositorio
        checker: Verificador de la entidad (nombre y mensajes de conflicto)
        entity_id: ID del registro afectado, si existe
        values: Valores enviados, para incluir el valor en conflicto

    Returns:
        AppException: ConflictException, EntityNotFoundException o
        InternalException
    """
    values = values or {}

    if exc.kind == PersistenceErrorKind.CONFLICT:
        field = exc.field or "id"
        value = values.get(field)
        logger.warning(f"Conflicto al escribir {checker.entity_name}: campo {field}")
        return ConflictException(
            checker.entity_name,
            [{"field": field, "message": checker.conflict_message(field, value), "value": value}]
        )

    if exc.kind == PersistenceErrorKind.NOT_FOUND:
        return EntityNotFoundException(checker.entity_name, entity_id)

    logger.error(f"Fallo de persistencia en {checker.entity_name} ({exc.kind.value}): {exc.message}")
    return InternalException(detail=exc.message if settings.is_development else None)
