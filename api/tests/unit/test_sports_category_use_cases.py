"""
Tests de los casos de uso de categorias deportivas contra SQLite en memoria.
"""
import pytest

from app.application.use_cases.sports_category_use_cases import SportsCategoryUseCases
from app.infrastructure.database.models import InscriptionModel
from app.infrastructure.repositories.sports_category_repository_impl import SportsCategoryRepositoryImpl
from app.shared.exceptions.domain import (
    ConflictException,
    EntityNotFoundException,
    StateTransitionException,
    ValidationException,
)


@pytest.fixture
def use_cases(db_session) -> SportsCategoryUseCases:
    return SportsCategoryUseCases(SportsCategoryRepositoryImpl(db_session))


def _category(**overrides):
    body = {"name": "Sub-15", "minAge": 13, "maxAge": 15, "description": "Categoria juvenil de futbol"}
    body.update(overrides)
    return body


@pytest.mark.asyncio
async def test_create_defaults_to_active_unpublished(use_cases):
    response = await use_cases.create_category(_category())

    assert response.data.status.value == "Active"
    assert response.data.publish is False
    assert response.message == "Categoría deportiva 'Sub-15' creada exitosamente."


@pytest.mark.asyncio
async def test_create_rejects_inverted_age_range(use_cases):
    with pytest.raises(ValidationException) as exc_info:
        await use_cases.create_category(_category(minAge=10, maxAge=8))

    assert exc_info.value.errors[0] == {
        "field": "maxAge",
        "message": "La edad máxima debe ser mayor que la edad mínima",
        "value": 8,
    }


@pytest.mark.asyncio
async def test_update_checks_range_against_stored_bounds(use_cases):
    created = await use_cases.create_category(_category())

    with pytest.raises(ValidationException):
        await use_cases.update_category(created.data.id, {"minAge": 15})

    response = await use_cases.update_category(created.data.id, {"edadMinima": 12})
    assert response.data.min_age == 12


@pytest.mark.asyncio
async def test_name_is_unique_ignoring_case(use_cases):
    await use_cases.create_category(_category())

    with pytest.raises(ConflictException) as exc_info:
        await use_cases.create_category(_category(name="sub-15"))

    assert exc_info.value.errors[0]["field"] == "name"
    availability = await use_cases.check_name_availability("SUB-15")
    assert availability.data.available is False


@pytest.mark.asyncio
async def test_active_category_cannot_be_deleted(use_cases):
    created = await use_cases.create_category(_category())

    with pytest.raises(StateTransitionException) as exc_info:
        await use_cases.delete_category(created.data.id)

    assert "Active" in exc_info.value.message


@pytest.mark.asyncio
async def test_category_in_use_cannot_be_deleted(use_cases, db_session):
    created = await use_cases.create_category(_category(status="Inactive"))
    db_session.add(InscriptionModel(category_id=created.data.id))
    await db_session.flush()

    with pytest.raises(StateTransitionException) as exc_info:
        await use_cases.delete_category(created.data.id)

    assert "1 inscripción(es)" in exc_info.value.message
    assert exc_info.value.details["blockers"]["inscriptions"] == 1


@pytest.mark.asyncio
async def test_inactive_unused_category_is_deleted(use_cases):
    created = await use_cases.create_category(_category(estado="Inactivo"))

    response = await use_cases.delete_category(created.data.id)

    assert response.message == "Categoría deportiva 'Sub-15' eliminada exitosamente."
    with pytest.raises(EntityNotFoundException):
        await use_cases.get_category(created.data.id)


@pytest.mark.asyncio
async def test_stats_count_published(use_cases):
    await use_cases.create_category(_category(publish=True))
    await use_cases.create_category(_category(name="Sub-17", minAge=15, maxAge=17, status="Inactive"))

    stats = (await use_cases.get_stats()).data

    assert (stats.total, stats.active, stats.inactive, stats.published) == (2, 1, 1, 1)
