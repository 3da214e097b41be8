"""
Traduccion de fallos del repositorio en los casos de uso, con el
repositorio simulado via AsyncMock.
"""
from unittest.mock import AsyncMock

import pytest

from app.application.use_cases.temporary_person_use_cases import TemporaryPersonUseCases
from app.shared.exceptions.domain import ConflictException, InternalException
from app.shared.exceptions.persistence import PersistenceError, PersistenceErrorKind


def _repository(error: PersistenceError) -> AsyncMock:
    repository = AsyncMock()
    repository.find_by_unique_field = AsyncMock(return_value=None)
    repository.create = AsyncMock(side_effect=error)
    return repository


BODY = {"firstName": "Ana", "lastName": "Gómez", "personType": "Athlete", "email": "ana@club.co"}


@pytest.mark.asyncio
async def test_write_race_on_unique_column_becomes_conflict():
    """La restriccion de la base gana aunque la verificacion previa haya pasado."""
    use_cases = TemporaryPersonUseCases(
        _repository(PersistenceError(PersistenceErrorKind.CONFLICT, "UNIQUE constraint failed", field="email"))
    )

    with pytest.raises(ConflictException) as exc_info:
        await use_cases.create_person(BODY)

    assert exc_info.value.errors == [{
        "field": "email",
        "message": "El email ya está en uso por otra persona temporal.",
        "value": "ana@club.co",
    }]


@pytest.mark.asyncio
async def test_transient_failure_hides_detail_outside_development(monkeypatch):
    from app.core.config import settings
    monkeypatch.setattr(settings, "ENVIRONMENT", "production")
    use_cases = TemporaryPersonUseCases(
        _repository(PersistenceError(PersistenceErrorKind.TRANSIENT, "connection refused"))
    )

    with pytest.raises(InternalException) as exc_info:
        await use_cases.create_person(BODY)

    assert exc_info.value.status_code == 500
    assert exc_info.value.to_response(include_internal_details=False) == {
        "success": False,
        "error": "INTERNAL_ERROR",
        "message": "Ha ocurrido un error interno del servidor",
    }
