"""
Data Transfer Objects (DTOs) para la capa de aplicacion.
"""
from .common_dto import (
    ApiResponseDTO,
    AvailabilityDTO,
    FieldErrorDTO,
    PaginationDTO,
)
from .temporary_person_dto import (
    DocumentTypeDTO,
    ReferenceDataDTO,
    TemporaryPersonResponseDTO,
    TemporaryPersonStatsDTO,
)
from .sports_category_dto import (
    SportsCategoryResponseDTO,
    SportsCategoryStatsDTO,
)

__all__ = [
    "ApiResponseDTO",
    "AvailabilityDTO",
    "FieldErrorDTO",
    "PaginationDTO",
    "DocumentTypeDTO",
    "ReferenceDataDTO",
    "TemporaryPersonResponseDTO",
    "TemporaryPersonStatsDTO",
    "SportsCategoryResponseDTO",
    "SportsCategoryStatsDTO",
]
