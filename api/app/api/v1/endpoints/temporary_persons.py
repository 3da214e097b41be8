"""
Endpoints de personas temporales.

Los cuerpos se reciben como diccionario libre: el normalizador acepta
las formas historicas del registro (alias en espanol, snake_case,
nombre completo) y el validador reporta todos los errores juntos.
"""
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Query, status

from app.application.dto.common_dto import ApiResponseDTO, AvailabilityDTO
from app.application.dto.temporary_person_dto import (
    ReferenceDataDTO,
    TemporaryPersonResponseDTO,
    TemporaryPersonStatsDTO,
)
from app.application.use_cases.temporary_person_use_cases import TemporaryPersonUseCases
from app.api.v1.dependencies.use_case_deps import get_temporary_person_use_cases

router = APIRouter(prefix="/temporary-persons", tags=["Temporary Persons"])


@router.get(
    "/",
    response_model=ApiResponseDTO[List[TemporaryPersonResponseDTO]],
    response_model_exclude_none=True
)
async def list_temporary_persons(
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
    status_filter: Optional[str] = Query(None, alias="status"),
    person_type: Optional[str] = Query(None, alias="personType"),
    use_cases: TemporaryPersonUseCases = Depends(get_temporary_person_use_cases)
):
    """
    Listar personas temporales con paginacion y filtros.
    """
    return await use_cases.list_persons({
        "page": page,
        "limit": limit,
        "search": search,
        "status": status_filter,
        "personType": person_type,
    })


@router.get("/stats", response_model=ApiResponseDTO[TemporaryPersonStatsDTO], response_model_exclude_none=True)
async def get_temporary_person_stats(
    use_cases: TemporaryPersonUseCases = Depends(get_temporary_person_use_cases)
):
    """
    Estadisticas: total, activas, inactivas, por tipo y por categoria.
    """
    return await use_cases.get_stats()


@router.get("/reference-data", response_model=ApiResponseDTO[ReferenceDataDTO], response_model_exclude_none=True)
async def get_reference_data(
    use_cases: TemporaryPersonUseCases = Depends(get_temporary_person_use_cases)
):
    """
    Catalogos para formularios: tipos de documento, tipos de persona y estados.
    """
    return await use_cases.get_reference_data()


@router.get("/check-identification", response_model=ApiResponseDTO[AvailabilityDTO], response_model_exclude_none=True)
async def check_identification(
    identification: Optional[str] = Query(None),
    exclude_id: Optional[int] = Query(None, alias="excludeId"),
    use_cases: TemporaryPersonUseCases = Depends(get_temporary_person_use_cases)
):
    """
    Verificar si una identificacion esta disponible.
    """
    return await use_cases.check_identification_availability(identification, exclude_id)


@router.get("/check-email", response_model=ApiResponseDTO[AvailabilityDTO], response_model_exclude_none=True)
async def check_email(
    email: Optional[str] = Query(None),
    exclude_id: Optional[int] = Query(None, alias="excludeId"),
    use_cases: TemporaryPersonUseCases = Depends(get_temporary_person_use_cases)
):
    """
    Verificar si un email esta disponible.
    """
    return await use_cases.check_email_availability(email, exclude_id)


@router.get(
    "/{person_id}",
    response_model=ApiResponseDTO[TemporaryPersonResponseDTO],
    response_model_exclude_none=True
)
async def get_temporary_person(
    person_id: int,
    use_cases: TemporaryPersonUseCases = Depends(get_temporary_person_use_cases)
):
    """
    Obtener una persona temporal por ID.
    """
    return await use_cases.get_person(person_id)


@router.post(
    "/",
    response_model=ApiResponseDTO[TemporaryPersonResponseDTO],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED
)
async def create_temporary_person(
    payload: Dict[str, Any] = Body(...),
    use_cases: TemporaryPersonUseCases = Depends(get_temporary_person_use_cases)
):
    """
    Crear una persona temporal.
    """
    return await use_cases.create_person(payload)


@router.put(
    "/{person_id}",
    response_model=ApiResponseDTO[TemporaryPersonResponseDTO],
    response_model_exclude_none=True
)
async def update_temporary_person(
    person_id: int,
    payload: Dict[str, Any] = Body(...),
    use_cases: TemporaryPersonUseCases = Depends(get_temporary_person_use_cases)
):
    """
    Actualizar parcialmente una persona temporal.
    """
    return await use_cases.update_person(person_id, payload)


@router.patch(
    "/{person_id}/status",
    response_model=ApiResponseDTO[TemporaryPersonResponseDTO],
    response_model_exclude_none=True
)
async def change_temporary_person_status(
    person_id: int,
    payload: Dict[str, Any] = Body(...),
    use_cases: TemporaryPersonUseCases = Depends(get_temporary_person_use_cases)
):
    """
    Cambiar el estado (Active / Inactive) de una persona temporal.
    """
    return await use_cases.change_status(person_id, payload)


@router.delete("/{person_id}", response_model=ApiResponseDTO[None], response_model_exclude_none=True)
async def delete_temporary_person(
    person_id: int,
    use_cases: TemporaryPersonUseCases = Depends(get_temporary_person_use_cases)
):
    """
    Eliminar una persona temporal (solo si esta inactiva).
    """
    return await use_cases.delete_person(person_id)
