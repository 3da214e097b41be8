"""
Constantes relacionadas con personas temporales y categorias deportivas.
"""
from enum import Enum


class PersonType(str, Enum):
    """Tipos de persona temporal."""
    ATHLETE = "Athlete"
    TRAINER = "Trainer"
    PARTICIPANT = "Participant"


class RecordStatus(str, Enum):
    """Estados del ciclo de vida de un registro."""
    ACTIVE = "Active"
    INACTIVE = "Inactive"


# Etiquetas localizadas (formularios antiguos) -> valor canonico
PERSON_TYPE_LABELS = {
    "Deportista": PersonType.ATHLETE.value,
    "Entrenador": PersonType.TRAINER.value,
    "Participante": PersonType.PARTICIPANT.value,
}

STATUS_LABELS = {
    "Activo": RecordStatus.ACTIVE.value,
    "Inactivo": RecordStatus.INACTIVE.value,
}

# Edades permitidas para una persona
MIN_PERSON_AGE = 5
MAX_PERSON_AGE = 120

# Tolerancia (en anos) entre la edad enviada y la calculada por fecha de nacimiento
AGE_TOLERANCE_YEARS = 1

# Heuristica de documento para menores de edad
ADULT_AGE = 18
MINOR_IDENTIFICATION_MAX_LENGTH = 11

# Dominios de correo personal (advertencia para entrenadores)
PERSONAL_EMAIL_DOMAINS = ("gmail", "hotmail")

# Limites de categorias deportivas
CATEGORY_MIN_AGE_RANGE = (5, 50)
CATEGORY_MAX_AGE_RANGE = (5, 80)

# Paginacion
DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100
