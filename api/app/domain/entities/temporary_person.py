"""
Entidad de dominio: TemporaryPerson (Persona temporal).

Deportista, entrenador o participante registrado sin cuenta de usuario.
"""
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from app.shared.constants.person_constants import PersonType, RecordStatus
from app.shared.utils.date_utils import calculate_age


@dataclass
class TemporaryPerson:
    """
    Entidad de dominio que representa una persona temporal.
    El estado vive en el registro; las reglas de transicion las evalua
    el LifecycleController.
    """

    id: Optional[int] = None
    first_name: str = ""
    last_name: str = ""
    person_type: PersonType = PersonType.PARTICIPANT
    identification: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    birth_date: Optional[date] = None
    age: Optional[int] = None
    team: Optional[str] = None
    category: Optional[str] = None
    status: RecordStatus = RecordStatus.ACTIVE
    document_type_id: Optional[int] = None
    document_type_name: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        """Validaciones después de la inicialización."""
        if not self.first_name or not self.last_name:
            raise ValueError("El nombre y el apellido de la persona no pueden estar vacíos")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def effective_age(self) -> Optional[int]:
        """Edad derivada de la fecha de nacimiento o, en su defecto, la almacenada."""
        if self.birth_date:
            return calculate_age(self.birth_date)
        return self.age
