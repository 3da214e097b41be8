"""
Verificador de unicidad.

Consulta previa (mensaje amigable) sobre los campos unicos. La
restriccion autoritativa vive en la base de datos: dos peticiones
concurrentes pueden pasar esta verificacion y la segunda escritura
sera rechazada por el repositorio como PersistenceError(CONFLICT).
"""
from typing import Any, Dict, List, Optional, Protocol, Tuple

from loguru import logger

from app.domain.entities.validation import Availability
from app.shared.exceptions.domain import ConflictException


class UniqueFieldLookup(Protocol):
    """Parte del puerto de repositorio que usa el verificador."""

    async def find_by_unique_field(self, field: str, value: Any, exclude_id: Optional[int] = None) -> Any:
        ...


# campo -> (mensaje en uso, mensaje disponible)
PERSON_UNIQUE_FIELDS: Dict[str, Tuple[str, str]] = {
    "identification": (
        "La identificación ya está en uso por otra persona temporal.",
        "Identificación disponible.",
    ),
    "email": (
        "El email ya está en uso por otra persona temporal.",
        "Email disponible.",
    ),
}

CATEGORY_UNIQUE_FIELDS: Dict[str, Tuple[str, str]] = {
    "name": (
        "El nombre \"{value}\" ya está en uso por otra categoría deportiva.",
        "Nombre disponible.",
    ),
}


class UniquenessChecker:
    """
    Verifica disponibilidad de valores unicos excluyendo el propio registro.

    Uso:
        checker = UniquenessChecker.for_temporary_persons(repository)
        availability = await checker.check_unique("email", "ana@club.co")
    """

    def __init__(self, lookup: UniqueFieldLookup, entity_name: str, fields: Dict[str, Tuple[str, str]]):
        self.lookup = lookup
        self.entity_name = entity_name
        self.fields = fields

    @classmethod
    def for_temporary_persons(cls, lookup: UniqueFieldLookup) -> "UniquenessChecker":
        return cls(lookup, "TemporaryPerson", PERSON_UNIQUE_FIELDS)

    @classmethod
    def for_sports_categories(cls, lookup: UniqueFieldLookup) -> "UniquenessChecker":
        return cls(lookup, "SportsCategory", CATEGORY_UNIQUE_FIELDS)

    def conflict_message(self, field: str, value: Any = None) -> str:
        taken, _ = self.fields.get(field, ("Ya existe un registro con estos datos.", ""))
        return taken.format(value=value)

    async def check_unique(self, field: str, value: Any, exclude_id: Optional[int] = None) -> Availability:
        """
        Consulta si un valor esta disponible.

        Args:
            field: Campo unico a verificar
            value: Valor ya normalizado
            exclude_id: ID del registro propio (actualizaciones)

        Returns:
            Availability: disponible o no, con mensaje
        """
        if field not in self.fields:
            raise ValueError(f"{field} no es un campo único de {self.entity_name}")

        existing = await self.lookup.find_by_unique_field(field, value, exclude_id)
        taken, available = self.fields[field]
        if existing is not None:
            return Availability(available=False, message=taken.format(value=value))
        return Availability(available=True, message=available)

    async def ensure_unique(self, values: Dict[str, Any], exclude_id: Optional[int] = None) -> None:
        """
        Verifica todos los campos unicos presentes en `values`.

        Raises:
            ConflictException: Con una entrada por cada campo en uso
        """
        errors: List[Dict[str, Any]] = []
        for field in self.fields:
            value = values.get(field)
            if value is None:
                continue
            availability = await self.check_unique(field, value, exclude_id)
            if not availability.available:
                errors.append({"field": field, "message": availability.message, "value": value})

        if errors:
            logger.warning(
                f"Conflicto de unicidad en {self.entity_name}: {[e['field'] for e in errors]}"
            )
            raise ConflictException(self.entity_name, errors)
