"""
DTOs comunes: sobre de respuesta, paginacion y disponibilidad.
"""
from math import ceil
from typing import Any, Generic, List, Optional, TypeVar

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


T = TypeVar("T")


class CamelModel(BaseModel):
    """Base de los DTOs expuestos: atributos snake_case, JSON camelCase."""

    class Config:
        """Configuración de Pydantic."""
        from_attributes = True
        populate_by_name = True
        alias_generator = to_camel


class FieldErrorDTO(BaseModel):
    """Violacion de una regla sobre un campo."""

    field: str
    message: str
    value: Any = None


class PaginationDTO(CamelModel):
    """Metadatos de paginacion de un listado."""

    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "PaginationDTO":
        total_pages = ceil(total / limit) if limit else 0
        return cls(
            page=page,
            limit=limit,
            total=total,
            total_pages=total_pages,
            has_next=page < total_pages,
            has_prev=page > 1,
        )


class AvailabilityDTO(BaseModel):
    """Resultado de una consulta de disponibilidad de un valor unico."""

    available: bool
    message: str


class ApiResponseDTO(BaseModel, Generic[T]):
    """
    Sobre comun de todas las respuestas exitosas.

    Las rutas lo serializan con response_model_exclude_none para omitir
    las claves sin valor (warnings, pagination).
    """

    success: bool = True
    data: Optional[T] = None
    message: Optional[str] = None
    warnings: Optional[List[str]] = None
    pagination: Optional[PaginationDTO] = None
