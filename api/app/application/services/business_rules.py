"""
Validador de reglas de negocio.

Opera sobre los valores ya tipados por el FieldValidator y, en
actualizaciones, sobre el registro almacenado. Separa los resultados en
errores bloqueantes y advertencias que acompanan a una respuesta exitosa.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from loguru import logger

from app.domain.entities.sports_category import SportsCategory
from app.domain.entities.temporary_person import TemporaryPerson
from app.domain.entities.validation import FieldViolation, RuleOutcome, RuleSeverity
from app.shared.constants.person_constants import (
    ADULT_AGE,
    AGE_TOLERANCE_YEARS,
    MIN_PERSON_AGE,
    MINOR_IDENTIFICATION_MAX_LENGTH,
    PERSONAL_EMAIL_DOMAINS,
    PersonType,
    RecordStatus,
)
from app.shared.utils.date_utils import calculate_age


ROLES_WITH_AFFILIATION = (PersonType.ATHLETE, PersonType.TRAINER)


class BusinessRuleValidator:
    """
    Reglas semanticas de personas temporales y categorias.

    La heuristica de identificacion para menores de edad tiene severidad
    configurable: el pipeline estricto la trata como error y el
    interactivo como advertencia.
    """

    def __init__(self, minor_identification_severity: RuleSeverity = RuleSeverity.WARNING):
        self.minor_identification_severity = minor_identification_severity

    @classmethod
    def strict(cls) -> "BusinessRuleValidator":
        return cls(minor_identification_severity=RuleSeverity.ERROR)

    @classmethod
    def lenient(cls) -> "BusinessRuleValidator":
        return cls(minor_identification_severity=RuleSeverity.WARNING)

    def evaluate_person(
        self,
        changes: Dict[str, Any],
        existing: Optional[TemporaryPerson] = None
    ) -> RuleOutcome:
        """
        Evalua las reglas de una persona temporal.

        Args:
            changes: Valores tipados enviados en la peticion (claves canonicas)
            existing: Registro almacenado, solo en actualizaciones

        Returns:
            RuleOutcome: errores bloqueantes y advertencias
        """
        outcome = RuleOutcome()
        person_type = self._merged(changes, existing, "personType", "person_type")
        birth_date = self._merged(changes, existing, "birthDate", "birth_date")

        self._check_age_coherence(changes, birth_date, outcome)
        self._check_affiliation(changes, person_type, outcome)
        self._check_minimum_age(changes, existing, person_type, birth_date, outcome)
        self._check_minor_identification(changes, existing, birth_date, outcome)
        self._check_trainer_email(changes, person_type, outcome)

        if existing is not None:
            self._check_critical_changes(changes, existing, outcome)

        return outcome

    def evaluate_category(
        self,
        changes: Dict[str, Any],
        existing: Optional[SportsCategory] = None
    ) -> RuleOutcome:
        """Valida el rango de edades contra los limites almacenados."""
        outcome = RuleOutcome()
        min_age = self._merged(changes, existing, "minAge", "min_age")
        max_age = self._merged(changes, existing, "maxAge", "max_age")

        if min_age is not None and max_age is not None and min_age >= max_age:
            outcome.add(
                RuleSeverity.ERROR,
                FieldViolation(
                    "maxAge",
                    "La edad máxima debe ser mayor que la edad mínima",
                    max_age,
                ),
            )
        return outcome

    @staticmethod
    def _merged(changes: Dict[str, Any], existing: Any, key: str, attribute: str) -> Any:
        if key in changes:
            return changes[key]
        return getattr(existing, attribute, None) if existing is not None else None

    @staticmethod
    def _check_age_coherence(changes: Dict[str, Any], birth_date: Any, outcome: RuleOutcome) -> None:
        # La edad enviada se contrasta con la fecha de nacimiento enviada o almacenada
        age = changes.get("age")
        if birth_date is None or age is None:
            return

        if abs(calculate_age(birth_date) - age) > AGE_TOLERANCE_YEARS:
            outcome.add(
                RuleSeverity.ERROR,
                FieldViolation("age", "La edad proporcionada no coincide con la fecha de nacimiento", age),
            )

    @staticmethod
    def _check_affiliation(changes: Dict[str, Any], person_type: Any, outcome: RuleOutcome) -> None:
        if person_type not in ROLES_WITH_AFFILIATION:
            return

        messages = {
            "team": "Si se especifica un equipo para deportistas/entrenadores, no puede estar vacío",
            "category": "Si se especifica una categoría para deportistas/entrenadores, no puede estar vacía",
        }
        for key, message in messages.items():
            value = changes.get(key)
            if isinstance(value, str) and not value.strip():
                outcome.add(RuleSeverity.ERROR, FieldViolation(key, message, value))

    @staticmethod
    def _check_minimum_age(
        changes: Dict[str, Any],
        existing: Optional[TemporaryPerson],
        person_type: Any,
        birth_date: Any,
        outcome: RuleOutcome
    ) -> None:
        if birth_date is not None:
            age = calculate_age(birth_date)
        else:
            age = BusinessRuleValidator._merged(changes, existing, "age", "age")

        if age is None or age >= MIN_PERSON_AGE:
            return

        if person_type in ROLES_WITH_AFFILIATION:
            message = f"Los deportistas y entrenadores deben tener al menos {MIN_PERSON_AGE} años de edad"
        else:
            message = f"Los participantes deben tener al menos {MIN_PERSON_AGE} años de edad"
        outcome.add(RuleSeverity.ERROR, FieldViolation("age", message, age))

    def _check_minor_identification(
        self,
        changes: Dict[str, Any],
        existing: Optional[TemporaryPerson],
        birth_date: Any,
        outcome: RuleOutcome
    ) -> None:
        # Solo se evalua cuando la peticion toca alguno de los dos campos
        if "identification" not in changes and "birthDate" not in changes:
            return

        identification = self._merged(changes, existing, "identification", "identification")
        if not identification or birth_date is None:
            return

        if calculate_age(birth_date) < ADULT_AGE and len(identification) > MINOR_IDENTIFICATION_MAX_LENGTH:
            outcome.add(
                self.minor_identification_severity,
                FieldViolation(
                    "identification",
                    "Las personas menores de 18 años generalmente tienen tarjeta de identidad, no cédula",
                    identification,
                ),
            )

    @staticmethod
    def _check_trainer_email(changes: Dict[str, Any], person_type: Any, outcome: RuleOutcome) -> None:
        email = changes.get("email")
        if person_type != PersonType.TRAINER or not email:
            return

        domain = email.rsplit("@", 1)[-1]
        if any(personal in domain for personal in PERSONAL_EMAIL_DOMAINS):
            logger.info(f"Entrenador con email personal: {email}")
            outcome.add(
                RuleSeverity.WARNING,
                FieldViolation(
                    "email",
                    "Los entrenadores deberían registrar un email institucional en lugar de uno personal",
                    email,
                ),
            )

    @staticmethod
    def _check_critical_changes(
        changes: Dict[str, Any],
        existing: TemporaryPerson,
        outcome: RuleOutcome
    ) -> None:
        if changes.get("status") == RecordStatus.INACTIVE and existing.status == RecordStatus.ACTIVE:
            outcome.add(
                RuleSeverity.WARNING,
                FieldViolation(
                    "status",
                    "Cambiar el estado a Inactivo puede afectar la participación en eventos",
                    RecordStatus.INACTIVE.value,
                ),
            )

        new_type = changes.get("personType")
        if new_type is not None and new_type != existing.person_type:
            outcome.add(
                RuleSeverity.WARNING,
                FieldViolation(
                    "personType",
                    "Cambiar el tipo de persona puede requerir actualizar información adicional",
                    new_type.value,
                ),
            )
