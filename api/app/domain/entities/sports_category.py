"""
Entidad de dominio: SportsCategory (Categoria deportiva).
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from app.shared.constants.person_constants import RecordStatus


@dataclass
class SportsCategory:
    """
    Categoria deportiva con rango de edades.

    Los contadores de uso son agregados de solo lectura calculados por
    el repositorio (inscripciones y participantes vinculados).
    """

    id: Optional[int] = None
    name: str = ""
    min_age: int = 0
    max_age: int = 0
    description: Optional[str] = None
    status: RecordStatus = RecordStatus.ACTIVE
    publish: bool = False
    image_url: Optional[str] = None
    inscriptions_count: int = 0
    participants_count: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        if not self.name:
            raise ValueError("El nombre de la categoría no puede estar vacío")

    def has_usage(self) -> bool:
        return self.inscriptions_count > 0 or self.participants_count > 0
