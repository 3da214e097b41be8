"""
DTOs relacionados con categorias deportivas.
"""
from datetime import datetime
from typing import Optional

from app.application.dto.common_dto import CamelModel
from app.shared.constants.person_constants import RecordStatus


class SportsCategoryResponseDTO(CamelModel):
    """DTO de respuesta para una categoria deportiva."""

    id: int
    name: str
    description: Optional[str] = None
    min_age: int
    max_age: int
    status: RecordStatus
    publish: bool
    image_url: Optional[str] = None
    inscriptions_count: int = 0
    participants_count: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class SportsCategoryStatsDTO(CamelModel):
    """Estadisticas de categorias deportivas."""

    total: int
    active: int
    inactive: int
    published: int
