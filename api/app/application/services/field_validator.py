"""
Validador sintactico de campos.

Cada campo se declara como un FieldSpec con su conversion de tipo y
una lista ordenada de FieldRule (predicado + mensaje). El validador
recorre todos los campos sin detenerse en el primer error para que el
cliente reciba todas las violaciones de una vez; dentro de un mismo
campo se reporta solo la primera regla que falla.

Es una funcion pura de la entrada: no consulta la base de datos.
"""
from __future__ import annotations

import re
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Type

from app.domain.entities.validation import (
    FieldRule,
    FieldSpec,
    FieldValidationResult,
    FieldViolation,
)
from app.shared.constants.person_constants import (
    CATEGORY_MAX_AGE_RANGE,
    CATEGORY_MIN_AGE_RANGE,
    MAX_PAGE_SIZE,
    MAX_PERSON_AGE,
    MIN_PERSON_AGE,
    PersonType,
    RecordStatus,
)
from app.shared.utils import date_utils


NAME_PATTERN = re.compile(r"^[A-Za-zÀ-ÖØ-öø-ÿ\s]+$")
IDENTIFICATION_PATTERN = re.compile(r"^[A-Za-z0-9.\-]+$")
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_PATTERN = re.compile(r"^[0-9\s\-+()]+$")


class EntityKind(str, Enum):
    """Tipos de registro que valida el sistema."""
    TEMPORARY_PERSON = "temporary_person"
    SPORTS_CATEGORY = "sports_category"


# Conversores de tipo

def to_text(value: Any) -> str:
    if not isinstance(value, str):
        raise ValueError("not a string")
    return value


def to_int(value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError("bool is not an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and re.fullmatch(r"[+-]?\d+", value.strip()):
        return int(value.strip())
    raise ValueError("not an integer")


def to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if value in (0, 1):
        return bool(value)
    if isinstance(value, str) and value.strip().lower() in ("true", "false", "1", "0"):
        return value.strip().lower() in ("true", "1")
    raise ValueError("not a boolean")


def to_date(value: Any):
    parsed = date_utils.parse_iso_date(value)
    if parsed is None:
        raise ValueError("not a date")
    return parsed


def to_enum(enum_cls: Type[Enum]) -> Callable[[Any], Enum]:
    """Conversor que exige coincidencia exacta con un valor del enum."""
    def convert(value: Any) -> Enum:
        if not isinstance(value, str):
            raise ValueError("not a string")
        return enum_cls(value)
    return convert


# Reglas reutilizables

def length_between(minimum: int, maximum: int, message: str) -> FieldRule:
    return FieldRule(lambda value: minimum <= len(value) <= maximum, message)


def max_length(maximum: int, message: str) -> FieldRule:
    return FieldRule(lambda value: len(value) <= maximum, message)


def matches(pattern: re.Pattern, message: str) -> FieldRule:
    return FieldRule(lambda value: bool(pattern.match(value)), message)


def int_between(minimum: int, maximum: int, message: str) -> FieldRule:
    return FieldRule(lambda value: minimum <= value <= maximum, message)


def _born_at_most_years_ago(years: int) -> Callable[[Any], bool]:
    return lambda value: value >= date_utils.years_before(date_utils.today(), years)


def _born_at_least_years_ago(years: int) -> Callable[[Any], bool]:
    return lambda value: value <= date_utils.years_before(date_utils.today(), years)


def _name_spec(name: str, label: str, required_message: str) -> FieldSpec:
    return FieldSpec(
        name=name,
        required=True,
        required_message=required_message,
        coerce=to_text,
        coerce_message=f"{label} debe ser texto",
        rules=[
            length_between(2, 100, f"{label} debe tener entre 2 y 100 caracteres"),
            matches(NAME_PATTERN, f"{label} solo puede contener letras y espacios"),
        ],
    )


PERSON_TYPE_MESSAGE = "El tipo de persona debe ser: Athlete, Trainer o Participant"
STATUS_MESSAGE = "El estado debe ser Active o Inactive"


PERSON_FIELD_SPECS: List[FieldSpec] = [
    _name_spec("firstName", "El nombre", "El nombre es requerido"),
    _name_spec("lastName", "El apellido", "El apellido es requerido"),
    FieldSpec(
        name="personType",
        required=True,
        required_message="El tipo de persona es requerido",
        coerce=to_enum(PersonType),
        coerce_message=PERSON_TYPE_MESSAGE,
    ),
    FieldSpec(
        name="identification",
        coerce=to_text,
        coerce_message="La identificación debe ser texto",
        rules=[
            length_between(6, 50, "La identificación debe tener entre 6 y 50 caracteres"),
            matches(
                IDENTIFICATION_PATTERN,
                "La identificación solo puede contener letras, números, guiones y puntos",
            ),
        ],
    ),
    FieldSpec(
        name="email",
        coerce=lambda value: to_text(value).lower(),
        coerce_message="El email debe ser texto",
        rules=[
            matches(EMAIL_PATTERN, "El formato del email no es válido"),
            max_length(150, "El email no puede exceder 150 caracteres"),
        ],
    ),
    FieldSpec(
        name="phone",
        coerce=to_text,
        coerce_message="El teléfono debe ser texto",
        rules=[
            matches(
                PHONE_PATTERN,
                "El teléfono solo puede contener números, espacios, guiones, paréntesis y el signo +",
            ),
            length_between(7, 20, "El teléfono debe tener entre 7 y 20 caracteres"),
        ],
    ),
    FieldSpec(
        name="address",
        coerce=to_text,
        coerce_message="La dirección debe ser texto",
        rules=[max_length(200, "La dirección no puede exceder 200 caracteres")],
    ),
    FieldSpec(
        name="birthDate",
        coerce=to_date,
        coerce_message="La fecha de nacimiento debe tener un formato válido (YYYY-MM-DD)",
        rules=[
            FieldRule(
                _born_at_most_years_ago(MAX_PERSON_AGE),
                f"La fecha de nacimiento no puede ser anterior a {MAX_PERSON_AGE} años",
            ),
            FieldRule(
                _born_at_least_years_ago(MIN_PERSON_AGE),
                f"La persona debe tener al menos {MIN_PERSON_AGE} años de edad",
            ),
        ],
    ),
    FieldSpec(
        name="age",
        coerce=to_int,
        coerce_message="La edad debe ser un número entero",
        rules=[
            int_between(
                MIN_PERSON_AGE,
                MAX_PERSON_AGE,
                f"La edad debe estar entre {MIN_PERSON_AGE} y {MAX_PERSON_AGE} años",
            )
        ],
    ),
    FieldSpec(
        name="team",
        keep_blank=True,
        coerce=to_text,
        coerce_message="El equipo debe ser texto",
        rules=[max_length(100, "El nombre del equipo no puede exceder 100 caracteres")],
    ),
    FieldSpec(
        name="category",
        keep_blank=True,
        coerce=to_text,
        coerce_message="La categoría debe ser texto",
        rules=[max_length(100, "La categoría no puede exceder 100 caracteres")],
    ),
    FieldSpec(
        name="documentTypeId",
        coerce=to_int,
        coerce_message="El tipo de documento debe ser un número válido",
        rules=[int_between(1, 2**31 - 1, "El tipo de documento debe ser un número válido")],
    ),
    FieldSpec(
        name="status",
        coerce=to_enum(RecordStatus),
        coerce_message=STATUS_MESSAGE,
    ),
]


CATEGORY_FIELD_SPECS: List[FieldSpec] = [
    FieldSpec(
        name="name",
        required=True,
        required_message="El nombre de la categoría es obligatorio",
        coerce=to_text,
        coerce_message="El nombre de la categoría debe ser texto",
        rules=[length_between(3, 50, "El nombre debe tener entre 3 y 50 caracteres")],
    ),
    FieldSpec(
        name="description",
        coerce=to_text,
        coerce_message="La descripción debe ser texto",
        rules=[length_between(10, 500, "La descripción debe tener entre 10 y 500 caracteres")],
    ),
    FieldSpec(
        name="minAge",
        required=True,
        required_message="La edad mínima es obligatoria",
        coerce=to_int,
        coerce_message="La edad mínima debe ser un número válido",
        rules=[
            int_between(
                *CATEGORY_MIN_AGE_RANGE,
                "La edad mínima debe estar entre {} y {} años".format(*CATEGORY_MIN_AGE_RANGE),
            )
        ],
    ),
    FieldSpec(
        name="maxAge",
        required=True,
        required_message="La edad máxima es obligatoria",
        coerce=to_int,
        coerce_message="La edad máxima debe ser un número válido",
        rules=[
            int_between(
                *CATEGORY_MAX_AGE_RANGE,
                "La edad máxima debe estar entre {} y {} años".format(*CATEGORY_MAX_AGE_RANGE),
            )
        ],
    ),
    FieldSpec(
        name="status",
        coerce=to_enum(RecordStatus),
        coerce_message=STATUS_MESSAGE,
    ),
    FieldSpec(
        name="publish",
        coerce=to_bool,
        coerce_message="El campo publicar debe ser verdadero o falso",
    ),
    FieldSpec(
        name="imageUrl",
        coerce=to_text,
        coerce_message="La imagen debe ser una referencia de texto",
        rules=[max_length(500, "La referencia de imagen no puede exceder 500 caracteres")],
    ),
]


def _query_specs(with_person_type: bool) -> List[FieldSpec]:
    specs = [
        FieldSpec(
            name="page",
            coerce=to_int,
            coerce_message="La página debe ser un número entero positivo",
            rules=[FieldRule(lambda value: value >= 1, "La página debe ser un número entero positivo")],
        ),
        FieldSpec(
            name="limit",
            coerce=to_int,
            coerce_message=f"El límite debe ser un número entre 1 y {MAX_PAGE_SIZE}",
            rules=[int_between(1, MAX_PAGE_SIZE, f"El límite debe ser un número entre 1 y {MAX_PAGE_SIZE}")],
        ),
        FieldSpec(
            name="search",
            coerce=to_text,
            coerce_message="El término de búsqueda debe ser texto",
            rules=[max_length(100, "El término de búsqueda no puede exceder 100 caracteres")],
        ),
        FieldSpec(name="status", coerce=to_enum(RecordStatus), coerce_message=STATUS_MESSAGE),
    ]
    if with_person_type:
        specs.append(
            FieldSpec(name="personType", coerce=to_enum(PersonType), coerce_message=PERSON_TYPE_MESSAGE)
        )
    return specs


class FieldValidator:
    """
    Validador de campos por tipo de entidad.

    Uso:
        validator = FieldValidator()
        result = validator.validate(data, EntityKind.TEMPORARY_PERSON, partial=False)
        if not result.is_valid:
            ...
    """

    SPECS: Dict[EntityKind, List[FieldSpec]] = {
        EntityKind.TEMPORARY_PERSON: PERSON_FIELD_SPECS,
        EntityKind.SPORTS_CATEGORY: CATEGORY_FIELD_SPECS,
    }

    QUERY_SPECS: Dict[EntityKind, List[FieldSpec]] = {
        EntityKind.TEMPORARY_PERSON: _query_specs(with_person_type=True),
        EntityKind.SPORTS_CATEGORY: _query_specs(with_person_type=False),
    }

    def validate(
        self,
        data: Mapping[str, Any],
        kind: EntityKind,
        partial: bool = False
    ) -> FieldValidationResult:
        """
        Valida un registro canonico.

        Args:
            data: Registro ya normalizado
            kind: Tipo de entidad
            partial: True en actualizaciones (los campos requeridos pueden omitirse)

        Returns:
            FieldValidationResult: valores tipados de los campos presentes
            o la lista completa de violaciones
        """
        return self.validate_specs(data, self.SPECS[kind], partial)

    def validate_query(self, params: Mapping[str, Any], kind: EntityKind) -> FieldValidationResult:
        """Valida parametros de paginacion y filtros de un listado."""
        return self.validate_specs(params, self.QUERY_SPECS[kind], partial=True)

    def validate_specs(
        self,
        data: Mapping[str, Any],
        specs: List[FieldSpec],
        partial: bool = False
    ) -> FieldValidationResult:
        result = FieldValidationResult()

        for spec in specs:
            if spec.name not in data:
                if spec.required and not partial:
                    result.errors.append(FieldViolation(spec.name, spec.required_message, None))
                continue

            raw_value = data[spec.name]
            if self._is_empty(raw_value, spec):
                if spec.required:
                    result.errors.append(FieldViolation(spec.name, spec.required_message, raw_value))
                else:
                    result.values[spec.name] = None
                continue

            violation = self._check(spec, raw_value, result)
            if violation:
                result.errors.append(violation)

        return result

    @staticmethod
    def _is_empty(value: Any, spec: FieldSpec) -> bool:
        if value is None:
            return True
        return isinstance(value, str) and value.strip() == "" and not spec.keep_blank

    @staticmethod
    def _check(spec: FieldSpec, raw_value: Any, result: FieldValidationResult):
        value = raw_value
        if spec.coerce:
            try:
                value = spec.coerce(raw_value)
            except (ValueError, TypeError):
                return FieldViolation(spec.name, spec.coerce_message, raw_value)

        for rule in spec.rules:
            if not rule.predicate(value):
                return FieldViolation(spec.name, rule.message, raw_value)

        result.values[spec.name] = value
        return None
