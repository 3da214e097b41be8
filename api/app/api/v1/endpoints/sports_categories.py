"""
Endpoints de categorias deportivas.
"""
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Query, status

from app.application.dto.common_dto import ApiResponseDTO, AvailabilityDTO
from app.application.dto.sports_category_dto import SportsCategoryResponseDTO, SportsCategoryStatsDTO
from app.application.use_cases.sports_category_use_cases import SportsCategoryUseCases
from app.api.v1.dependencies.use_case_deps import get_sports_category_use_cases

router = APIRouter(prefix="/sports-categories", tags=["Sports Categories"])


@router.get(
    "/",
    response_model=ApiResponseDTO[List[SportsCategoryResponseDTO]],
    response_model_exclude_none=True
)
async def list_sports_categories(
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
    status_filter: Optional[str] = Query(None, alias="status"),
    use_cases: SportsCategoryUseCases = Depends(get_sports_category_use_cases)
):
    """
    Listar categorias con paginacion, busqueda y filtro de estado.
    """
    return await use_cases.list_categories({
        "page": page,
        "limit": limit,
        "search": search,
        "status": status_filter,
    })


@router.get("/stats", response_model=ApiResponseDTO[SportsCategoryStatsDTO], response_model_exclude_none=True)
async def get_sports_category_stats(
    use_cases: SportsCategoryUseCases = Depends(get_sports_category_use_cases)
):
    """
    Estadisticas de categorias.
    """
    return await use_cases.get_stats()


@router.get("/check-name", response_model=ApiResponseDTO[AvailabilityDTO], response_model_exclude_none=True)
async def check_name(
    name: Optional[str] = Query(None),
    exclude_id: Optional[int] = Query(None, alias="excludeId"),
    use_cases: SportsCategoryUseCases = Depends(get_sports_category_use_cases)
):
    """
    Verificar si un nombre de categoria esta disponible (sin distinguir mayusculas).
    """
    return await use_cases.check_name_availability(name, exclude_id)


@router.get(
    "/{category_id}",
    response_model=ApiResponseDTO[SportsCategoryResponseDTO],
    response_model_exclude_none=True
)
async def get_sports_category(
    category_id: int,
    use_cases: SportsCategoryUseCases = Depends(get_sports_category_use_cases)
):
    """
    Obtener una categoria por ID con sus contadores de uso.
    """
    return await use_cases.get_category(category_id)


@router.post(
    "/",
    response_model=ApiResponseDTO[SportsCategoryResponseDTO],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED
)
async def create_sports_category(
    payload: Dict[str, Any] = Body(...),
    use_cases: SportsCategoryUseCases = Depends(get_sports_category_use_cases)
):
    """
    Crear una categoria deportiva.
    """
    return await use_cases.create_category(payload)


@router.put(
    "/{category_id}",
    response_model=ApiResponseDTO[SportsCategoryResponseDTO],
    response_model_exclude_none=True
)
async def update_sports_category(
    category_id: int,
    payload: Dict[str, Any] = Body(...),
    use_cases: SportsCategoryUseCases = Depends(get_sports_category_use_cases)
):
    """
    Actualizar parcialmente una categoria deportiva.
    """
    return await use_cases.update_category(category_id, payload)


@router.delete("/{category_id}", response_model=ApiResponseDTO[None], response_model_exclude_none=True)
async def delete_sports_category(
    category_id: int,
    use_cases: SportsCategoryUseCases = Depends(get_sports_category_use_cases)
):
    """
    Eliminar una categoria (solo inactiva y sin inscripciones ni participantes).
    """
    return await use_cases.delete_category(category_id)
