"""
DTOs relacionados con personas temporales.

Los cuerpos de entrada no tienen DTO: llegan como diccionario libre
porque el FieldNormalizer acepta las formas historicas del registro.
"""
from datetime import date, datetime
from typing import Dict, List, Optional

from app.application.dto.common_dto import CamelModel
from app.shared.constants.person_constants import PersonType, RecordStatus


class TemporaryPersonResponseDTO(CamelModel):
    """DTO de respuesta para una persona temporal."""

    id: int
    first_name: str
    last_name: str
    full_name: str
    person_type: PersonType
    identification: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    birth_date: Optional[date] = None
    age: Optional[int] = None
    team: Optional[str] = None
    category: Optional[str] = None
    status: RecordStatus
    document_type_id: Optional[int] = None
    document_type_name: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class TemporaryPersonStatsDTO(CamelModel):
    """Estadisticas de personas temporales."""

    total: int
    active: int
    inactive: int
    by_type: Dict[str, int]
    by_category: Dict[str, int]


class DocumentTypeDTO(CamelModel):
    """Tipo de documento de identidad."""

    id: int
    name: str
    description: Optional[str] = None


class ReferenceDataDTO(CamelModel):
    """Catalogos para los formularios de personas temporales."""

    document_types: List[DocumentTypeDTO]
    person_types: List[str]
    statuses: List[str]
