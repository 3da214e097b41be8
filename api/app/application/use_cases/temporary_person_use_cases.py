"""
Casos de uso relacionados con personas temporales.
"""
from dataclasses import replace
from typing import Any, Dict, List, Mapping, Optional

from loguru import logger

from app.application.dto.common_dto import ApiResponseDTO, AvailabilityDTO, PaginationDTO
from app.application.dto.temporary_person_dto import (
    DocumentTypeDTO,
    ReferenceDataDTO,
    TemporaryPersonResponseDTO,
    TemporaryPersonStatsDTO,
)
from app.application.services.business_rules import BusinessRuleValidator
from app.application.services.field_normalizer import FieldNormalizer
from app.application.services.field_validator import EntityKind, FieldValidator
from app.application.services.lifecycle import LifecycleController
from app.application.services.uniqueness_checker import UniquenessChecker
from app.application.use_cases.persistence_failures import to_app_exception
from app.core.config import settings
from app.domain.entities.temporary_person import TemporaryPerson
from app.domain.entities.validation import FieldViolation
from app.domain.repositories.temporary_person_repository import ITemporaryPersonRepository
from app.shared.constants.person_constants import DEFAULT_PAGE, PersonType, RecordStatus
from app.shared.exceptions.domain import EntityNotFoundException, ValidationException
from app.shared.exceptions.persistence import PersistenceError
from app.shared.utils.audit_logger import AuditLogger


ENTITY_NAME = "TemporaryPerson"

# Campo canonico -> atributo de la entidad
PERSON_ATTRIBUTES = {
    "firstName": "first_name",
    "lastName": "last_name",
    "personType": "person_type",
    "identification": "identification",
    "email": "email",
    "phone": "phone",
    "address": "address",
    "birthDate": "birth_date",
    "age": "age",
    "team": "team",
    "category": "category",
    "status": "status",
    "documentTypeId": "document_type_id",
}


def _violations(errors: List[FieldViolation]) -> List[Dict[str, Any]]:
    return [error.to_dict() for error in errors]


class TemporaryPersonUseCases:
    """
    Casos de uso para personas temporales.

    Pipeline de escritura: normalizar -> validar campos -> reglas de
    negocio -> unicidad -> repositorio. La eliminacion pasa ademas por
    las guardas del LifecycleController.
    """

    def __init__(
        self,
        repository: ITemporaryPersonRepository,
        normalizer: Optional[FieldNormalizer] = None,
        validator: Optional[FieldValidator] = None,
        rules: Optional[BusinessRuleValidator] = None,
        lifecycle: Optional[LifecycleController] = None
    ):
        """
        Inicializa los casos de uso con sus dependencias.

        Args:
            repository: Repositorio de personas temporales
            normalizer: Normalizador de campos
            validator: Validador de campos
            rules: Validador de reglas de negocio (define la severidad de
                la heuristica de identificacion de menores)
            lifecycle: Controlador de ciclo de vida
        """
        self.repository = repository
        self.normalizer = normalizer or FieldNormalizer()
        self.validator = validator or FieldValidator()
        self.rules = rules or BusinessRuleValidator()
        self.lifecycle = lifecycle or LifecycleController()
        self.uniqueness = UniquenessChecker.for_temporary_persons(repository)

    async def list_persons(self, raw_query: Mapping[str, Any]) -> ApiResponseDTO:
        """
        Lista personas con paginacion y filtros.

        Args:
            raw_query: Parametros page, limit, search, status, personType

        Raises:
            ValidationException: Si algun parametro es invalido
        """
        query = self.normalizer.normalize_query(raw_query, FieldNormalizer.PERSON_QUERY_FIELDS)
        result = self.validator.validate_query(query, EntityKind.TEMPORARY_PERSON)
        if not result.is_valid:
            raise ValidationException("Parámetros de consulta inválidos", errors=_violations(result.errors))

        params = result.values
        page = params.get("page") or DEFAULT_PAGE
        limit = min(params.get("limit") or settings.DEFAULT_PAGE_SIZE, settings.MAX_PAGE_SIZE)
        status = params.get("status")
        person_type = params.get("personType")

        persons, total = await self.repository.get_page(
            page=page,
            limit=limit,
            search=params.get("search"),
            status=status.value if status else None,
            person_type=person_type.value if person_type else None,
        )

        return ApiResponseDTO(
            data=[self._to_response_dto(person) for person in persons],
            pagination=PaginationDTO.build(page, limit, total),
        )

    async def get_person(self, person_id: int) -> ApiResponseDTO:
        """
        Obtiene una persona por su ID.

        Raises:
            EntityNotFoundException: Si no existe
        """
        person = await self._get_existing(person_id)
        return ApiResponseDTO(data=self._to_response_dto(person))

    async def create_person(self, raw: Any) -> ApiResponseDTO:
        """
        Crea una persona temporal.

        Args:
            raw: Cuerpo de la peticion en cualquiera de sus formas aceptadas

        Returns:
            ApiResponseDTO: Persona creada, mensaje y advertencias

        Raises:
            ValidationException: Errores de campo o de negocio (nada se escribe)
            ConflictException: Identificacion o email en uso
        """
        values = self._validated(raw, partial=False)

        outcome = self.rules.evaluate_person(values)
        if outcome.is_blocking:
            raise ValidationException("Errores de validación de negocio", errors=_violations(outcome.errors))

        await self.uniqueness.ensure_unique(values)

        person = TemporaryPerson(**{
            PERSON_ATTRIBUTES[key]: value for key, value in values.items()
        })
        person.status = values.get("status") or RecordStatus.ACTIVE
        person.team = person.team or None
        person.category = person.category or None
        if person.birth_date:
            person.age = person.effective_age()

        try:
            created = await self.repository.create(person)
        except PersistenceError as exc:
            raise to_app_exception(exc, self.uniqueness, values=values) from exc

        AuditLogger.log_mutation("CREATE", ENTITY_NAME, created.id, values.keys())
        logger.info(f"Persona temporal creada: {created.id} ({created.person_type.value})")

        return ApiResponseDTO(
            data=self._to_response_dto(created),
            message=f"Persona temporal '{created.full_name}' creada exitosamente.",
            warnings=outcome.warnings or None,
        )

    async def update_person(self, person_id: int, raw: Any) -> ApiResponseDTO:
        """
        Actualiza parcialmente una persona.

        Solo se validan los campos enviados; las reglas que cruzan campos
        usan el registro almacenado para los que faltan.

        Raises:
            EntityNotFoundException: Si no existe
            ValidationException: Errores de campo o de negocio
            ConflictException: Identificacion o email en uso por otra persona
        """
        existing = await self._get_existing(person_id)
        values = self._validated(raw, partial=True)
        if not values:
            raise ValidationException("No se enviaron campos para actualizar")

        return await self._apply_changes(existing, values, "UPDATE", "Persona temporal actualizada exitosamente.")

    async def change_status(self, person_id: int, raw: Any) -> ApiResponseDTO:
        """
        Cambia solo el estado de una persona (Active <-> Inactive).

        Raises:
            EntityNotFoundException: Si no existe
            ValidationException: Si el estado falta o es invalido
        """
        existing = await self._get_existing(person_id)
        data = self.normalizer.normalize_person(raw)
        result = self.validator.validate({"status": data.get("status")}, EntityKind.TEMPORARY_PERSON, partial=True)
        if not result.is_valid:
            raise ValidationException("Errores de validación", errors=_violations(result.errors))

        status = result.values.get("status")
        if status is None:
            raise ValidationException(
                "Errores de validación",
                errors=[FieldViolation("status", "El estado es requerido").to_dict()],
                field="status",
            )

        return await self._apply_changes(
            existing,
            {"status": status},
            "STATUS_CHANGE",
            f"Estado de la persona temporal cambiado a {status.value}.",
        )

    async def delete_person(self, person_id: int) -> ApiResponseDTO:
        """
        Elimina fisicamente una persona inactiva.

        Raises:
            EntityNotFoundException: Si no existe
            StateTransitionException: Si la persona sigue activa
        """
        existing = await self._get_existing(person_id)
        self.lifecycle.ensure_person_deletable(existing)

        try:
            deleted = await self.repository.delete(person_id)
        except PersistenceError as exc:
            raise to_app_exception(exc, self.uniqueness, entity_id=person_id) from exc

        if not deleted:
            raise EntityNotFoundException(ENTITY_NAME, person_id)

        AuditLogger.log_mutation("DELETE", ENTITY_NAME, person_id)
        logger.info(f"Persona temporal eliminada: {person_id}")

        return ApiResponseDTO(message="Persona temporal eliminada exitosamente.")

    async def check_identification_availability(
        self,
        identification: Any,
        exclude_id: Optional[int] = None
    ) -> ApiResponseDTO:
        """Consulta si una identificacion esta libre (excluyendo `exclude_id`)."""
        return await self._check_availability("identification", identification, exclude_id)

    async def check_email_availability(self, email: Any, exclude_id: Optional[int] = None) -> ApiResponseDTO:
        """Consulta si un email esta libre (excluyendo `exclude_id`)."""
        return await self._check_availability("email", email, exclude_id)

    async def get_stats(self) -> ApiResponseDTO:
        """Estadisticas por estado, tipo y categoria."""
        stats = await self.repository.get_stats()
        return ApiResponseDTO(data=TemporaryPersonStatsDTO(**stats))

    async def get_reference_data(self) -> ApiResponseDTO:
        """Catalogos para los formularios: tipos de documento, tipos de persona y estados."""
        document_types = await self.repository.get_document_types()
        return ApiResponseDTO(data=ReferenceDataDTO(
            document_types=[DocumentTypeDTO.model_validate(doc_type) for doc_type in document_types],
            person_types=[person_type.value for person_type in PersonType],
            statuses=[status.value for status in RecordStatus],
        ))

    async def _get_existing(self, person_id: int) -> TemporaryPerson:
        person = await self.repository.get_by_id(person_id)
        if person is None:
            raise EntityNotFoundException(ENTITY_NAME, person_id)
        return person

    def _validated(self, raw: Any, partial: bool) -> Dict[str, Any]:
        data = self.normalizer.normalize_person(raw)
        result = self.validator.validate(data, EntityKind.TEMPORARY_PERSON, partial=partial)
        if not result.is_valid:
            logger.debug(f"Validacion de persona rechazada: {[error.field for error in result.errors]}")
            raise ValidationException("Errores de validación", errors=_violations(result.errors))
        return result.values

    async def _apply_changes(
        self,
        existing: TemporaryPerson,
        values: Dict[str, Any],
        action: str,
        message: str
    ) -> ApiResponseDTO:
        outcome = self.rules.evaluate_person(values, existing)
        if outcome.is_blocking:
            raise ValidationException("Errores de validación de negocio", errors=_violations(outcome.errors))

        await self.uniqueness.ensure_unique(values, exclude_id=existing.id)

        if values.get("status") is not None:
            self.lifecycle.ensure_transition(ENTITY_NAME, existing.status, values["status"])

        changes = {PERSON_ATTRIBUTES[key]: value for key, value in values.items()}
        for key in ("team", "category"):
            if key in changes:
                changes[key] = changes[key] or None
        if "status" in changes and changes["status"] is None:
            changes.pop("status")
        person = replace(existing, **changes)
        # Con fecha de nacimiento (enviada o almacenada) la edad siempre se deriva
        if person.birth_date:
            person.age = person.effective_age()

        try:
            updated = await self.repository.update(person)
        except PersistenceError as exc:
            raise to_app_exception(exc, self.uniqueness, entity_id=existing.id, values=values) from exc

        AuditLogger.log_mutation(action, ENTITY_NAME, existing.id, values.keys())
        logger.info(f"Persona temporal {existing.id} modificada ({action}): {sorted(values)}")

        return ApiResponseDTO(
            data=self._to_response_dto(updated),
            message=message,
            warnings=outcome.warnings or None,
        )

    async def _check_availability(self, field: str, raw_value: Any, exclude_id: Optional[int]) -> ApiResponseDTO:
        data = self.normalizer.normalize_person({field: raw_value})
        value = data.get(field)
        if value is None:
            raise ValidationException(
                "Errores de validación",
                errors=[FieldViolation(field, f"El parámetro {field} es requerido", raw_value).to_dict()],
                field=field,
            )

        result = self.validator.validate({field: value}, EntityKind.TEMPORARY_PERSON, partial=True)
        if not result.is_valid:
            raise ValidationException("Errores de validación", errors=_violations(result.errors), field=field)

        availability = await self.uniqueness.check_unique(field, result.values[field], exclude_id)
        return ApiResponseDTO(data=AvailabilityDTO(**availability.to_dict()))

    @staticmethod
    def _to_response_dto(person: TemporaryPerson) -> TemporaryPersonResponseDTO:
        """
        Convierte una entidad a DTO de respuesta.

        Args:
            person: Entidad de dominio

        Returns:
            TemporaryPersonResponseDTO: DTO de respuesta
        """
        return TemporaryPersonResponseDTO.model_validate(person)
