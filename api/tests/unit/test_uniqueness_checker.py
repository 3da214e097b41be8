"""
Tests del UniquenessChecker con un repositorio simulado.
"""
from unittest.mock import AsyncMock

import pytest

from app.application.services.uniqueness_checker import UniquenessChecker
from app.domain.entities.temporary_person import TemporaryPerson
from app.shared.exceptions.domain import ConflictException


def _owner() -> TemporaryPerson:
    return TemporaryPerson(id=5, first_name="Ana", last_name="Gómez", email="ana@club.co")


@pytest.mark.asyncio
async def test_check_unique_reports_taken_value():
    lookup = AsyncMock()
    lookup.find_by_unique_field = AsyncMock(return_value=_owner())
    checker = UniquenessChecker.for_temporary_persons(lookup)

    availability = await checker.check_unique("email", "ana@club.co")

    assert availability.available is False
    assert availability.message == "El email ya está en uso por otra persona temporal."
    lookup.find_by_unique_field.assert_awaited_once_with("email", "ana@club.co", None)


@pytest.mark.asyncio
async def test_check_unique_passes_exclude_id():
    lookup = AsyncMock()
    lookup.find_by_unique_field = AsyncMock(return_value=None)
    checker = UniquenessChecker.for_temporary_persons(lookup)

    availability = await checker.check_unique("identification", "1029384756", exclude_id=5)

    assert availability.to_dict() == {"available": True, "message": "Identificación disponible."}
    lookup.find_by_unique_field.assert_awaited_once_with("identification", "1029384756", 5)


@pytest.mark.asyncio
async def test_ensure_unique_collects_every_conflicting_field():
    lookup = AsyncMock()
    lookup.find_by_unique_field = AsyncMock(return_value=_owner())
    checker = UniquenessChecker.for_temporary_persons(lookup)

    with pytest.raises(ConflictException) as exc_info:
        await checker.ensure_unique({"identification": "1029384756", "email": "ana@club.co", "phone": "300"})

    assert exc_info.value.status_code == 409
    assert [error["field"] for error in exc_info.value.errors] == ["identification", "email"]
    assert exc_info.value.details["fields"] == ["identification", "email"]


@pytest.mark.asyncio
async def test_ensure_unique_skips_absent_values():
    lookup = AsyncMock()
    lookup.find_by_unique_field = AsyncMock(return_value=None)
    checker = UniquenessChecker.for_temporary_persons(lookup)

    await checker.ensure_unique({"identification": None, "firstName": "Ana"})

    lookup.find_by_unique_field.assert_not_awaited()


@pytest.mark.asyncio
async def test_category_name_conflict_message_names_the_value():
    lookup = AsyncMock()
    lookup.find_by_unique_field = AsyncMock(return_value=object())
    checker = UniquenessChecker.for_sports_categories(lookup)

    availability = await checker.check_unique("name", "sub-15")

    assert availability.message == 'El nombre "sub-15" ya está en uso por otra categoría deportiva.'


@pytest.mark.asyncio
async def test_unknown_field_is_rejected():
    checker = UniquenessChecker.for_sports_categories(AsyncMock())

    with pytest.raises(ValueError):
        await checker.check_unique("description", "x")
