"""
Entidad de dominio: DocumentType (tipo de documento de identidad).
"""
from dataclasses import dataclass
from typing import Optional


@dataclass
class DocumentType:
    """Entidad de referencia, solo lectura."""

    id: int
    name: str
    description: Optional[str] = None
