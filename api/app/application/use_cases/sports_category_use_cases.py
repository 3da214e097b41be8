"""
Casos de uso relacionados con categorias deportivas.
"""
from dataclasses import replace
from typing import Any, Dict, Mapping, Optional

from loguru import logger

from app.application.dto.common_dto import ApiResponseDTO, AvailabilityDTO, PaginationDTO
from app.application.dto.sports_category_dto import SportsCategoryResponseDTO, SportsCategoryStatsDTO
from app.application.services.business_rules import BusinessRuleValidator
from app.application.services.field_normalizer import FieldNormalizer
from app.application.services.field_validator import EntityKind, FieldValidator
from app.application.services.lifecycle import LifecycleController
from app.application.services.uniqueness_checker import UniquenessChecker
from app.application.use_cases.persistence_failures import to_app_exception
from app.core.config import settings
from app.domain.entities.sports_category import SportsCategory
from app.domain.entities.validation import FieldViolation
from app.domain.repositories.sports_category_repository import ISportsCategoryRepository
from app.shared.constants.person_constants import DEFAULT_PAGE, RecordStatus
from app.shared.exceptions.domain import EntityNotFoundException, ValidationException
from app.shared.exceptions.persistence import PersistenceError
from app.shared.utils.audit_logger import AuditLogger


ENTITY_NAME = "SportsCategory"

CATEGORY_ATTRIBUTES = {
    "name": "name",
    "description": "description",
    "minAge": "min_age",
    "maxAge": "max_age",
    "status": "status",
    "publish": "publish",
    "imageUrl": "image_url",
}


class SportsCategoryUseCases:
    """
    Casos de uso para categorias deportivas.
    Orquesta validacion, unicidad de nombre y guardas de eliminacion.
    """

    def __init__(
        self,
        repository: ISportsCategoryRepository,
        normalizer: Optional[FieldNormalizer] = None,
        validator: Optional[FieldValidator] = None,
        rules: Optional[BusinessRuleValidator] = None,
        lifecycle: Optional[LifecycleController] = None
    ):
        self.repository = repository
        self.normalizer = normalizer or FieldNormalizer()
        self.validator = validator or FieldValidator()
        self.rules = rules or BusinessRuleValidator()
        self.lifecycle = lifecycle or LifecycleController()
        self.uniqueness = UniquenessChecker.for_sports_categories(repository)

    async def list_categories(self, raw_query: Mapping[str, Any]) -> ApiResponseDTO:
        """
        Lista categorias con paginacion, busqueda y filtro de estado.

        Raises:
            ValidationException: Si algun parametro es invalido
        """
        query = self.normalizer.normalize_query(raw_query, FieldNormalizer.CATEGORY_QUERY_FIELDS)
        result = self.validator.validate_query(query, EntityKind.SPORTS_CATEGORY)
        if not result.is_valid:
            raise ValidationException(
                "Parámetros de consulta inválidos",
                errors=[error.to_dict() for error in result.errors]
            )

        params = result.values
        page = params.get("page") or DEFAULT_PAGE
        limit = min(params.get("limit") or settings.DEFAULT_PAGE_SIZE, settings.MAX_PAGE_SIZE)
        status = params.get("status")

        categories, total = await self.repository.get_page(
            page=page,
            limit=limit,
            search=params.get("search"),
            status=status.value if status else None,
        )

        return ApiResponseDTO(
            data=[self._to_response_dto(category) for category in categories],
            pagination=PaginationDTO.build(page, limit, total),
        )

    async def get_category(self, category_id: int) -> ApiResponseDTO:
        """Obtiene una categoria con sus contadores de uso."""
        category = await self._get_existing(category_id)
        return ApiResponseDTO(data=self._to_response_dto(category))

    async def create_category(self, raw: Any) -> ApiResponseDTO:
        """
        Crea una categoria deportiva.

        Raises:
            ValidationException: Errores de campo o rango de edades invalido
            ConflictException: Nombre en uso (sin distinguir mayusculas)
        """
        values = self._validated(raw, partial=False)

        outcome = self.rules.evaluate_category(values)
        if outcome.is_blocking:
            raise ValidationException(
                "Errores de validación de negocio",
                errors=[error.to_dict() for error in outcome.errors]
            )

        await self.uniqueness.ensure_unique(values)

        category = SportsCategory(**{
            CATEGORY_ATTRIBUTES[key]: value for key, value in values.items()
        })
        category.status = values.get("status") or RecordStatus.ACTIVE
        category.publish = bool(values.get("publish"))

        try:
            created = await self.repository.create(category)
        except PersistenceError as exc:
            raise to_app_exception(exc, self.uniqueness, values=values) from exc

        AuditLogger.log_mutation("CREATE", ENTITY_NAME, created.id, values.keys())
        logger.info(f"Categoria deportiva creada: {created.id} ({created.name})")

        return ApiResponseDTO(
            data=self._to_response_dto(created),
            message=f"Categoría deportiva '{created.name}' creada exitosamente.",
        )

    async def update_category(self, category_id: int, raw: Any) -> ApiResponseDTO:
        """
        Actualiza parcialmente una categoria.
        El rango de edades se valida combinando los limites enviados con
        los almacenados.

        Raises:
            EntityNotFoundException: Si no existe
            ValidationException: Errores de campo o rango de edades invalido
            ConflictException: Nombre en uso por otra categoria
        """
        existing = await self._get_existing(category_id)
        values = self._validated(raw, partial=True)
        if not values:
            raise ValidationException("No se enviaron campos para actualizar")

        outcome = self.rules.evaluate_category(values, existing)
        if outcome.is_blocking:
            raise ValidationException(
                "Errores de validación de negocio",
                errors=[error.to_dict() for error in outcome.errors]
            )

        await self.uniqueness.ensure_unique(values, exclude_id=category_id)

        if values.get("status") is not None:
            self.lifecycle.ensure_transition(ENTITY_NAME, existing.status, values["status"])

        changes = {CATEGORY_ATTRIBUTES[key]: value for key, value in values.items()}
        for key in ("status", "publish"):
            if key in changes and changes[key] is None:
                changes.pop(key)

        try:
            updated = await self.repository.update(replace(existing, **changes))
        except PersistenceError as exc:
            raise to_app_exception(exc, self.uniqueness, entity_id=category_id, values=values) from exc

        AuditLogger.log_mutation("UPDATE", ENTITY_NAME, category_id, values.keys())
        logger.info(f"Categoria deportiva {category_id} actualizada: {sorted(values)}")

        return ApiResponseDTO(
            data=self._to_response_dto(updated),
            message="Categoría deportiva actualizada exitosamente.",
        )

    async def delete_category(self, category_id: int) -> ApiResponseDTO:
        """
        Elimina una categoria inactiva y sin uso.

        Raises:
            EntityNotFoundException: Si no existe
            StateTransitionException: Si esta activa o tiene inscripciones/participantes
        """
        existing = await self._get_existing(category_id)
        self.lifecycle.ensure_category_deletable(existing)

        try:
            deleted = await self.repository.delete(category_id)
        except PersistenceError as exc:
            raise to_app_exception(exc, self.uniqueness, entity_id=category_id) from exc

        if not deleted:
            raise EntityNotFoundException(ENTITY_NAME, category_id)

        AuditLogger.log_mutation("DELETE", ENTITY_NAME, category_id)
        logger.info(f"Categoria deportiva eliminada: {category_id}")

        return ApiResponseDTO(message=f"Categoría deportiva '{existing.name}' eliminada exitosamente.")

    async def check_name_availability(self, name: Any, exclude_id: Optional[int] = None) -> ApiResponseDTO:
        """Consulta si un nombre esta libre, sin distinguir mayusculas."""
        data = self.normalizer.normalize_category({"name": name})
        result = self.validator.validate(data, EntityKind.SPORTS_CATEGORY, partial=True)
        if not result.is_valid or result.values.get("name") is None:
            errors = result.errors or [FieldViolation("name", "El parámetro name es requerido", name)]
            raise ValidationException(
                "Errores de validación",
                errors=[error.to_dict() for error in errors],
                field="name"
            )

        availability = await self.uniqueness.check_unique("name", result.values["name"], exclude_id)
        return ApiResponseDTO(data=AvailabilityDTO(**availability.to_dict()))

    async def get_stats(self) -> ApiResponseDTO:
        """Conteos total, activas, inactivas y publicadas."""
        stats = await self.repository.get_stats()
        return ApiResponseDTO(data=SportsCategoryStatsDTO(**stats))

    async def _get_existing(self, category_id: int) -> SportsCategory:
        category = await self.repository.get_by_id(category_id)
        if category is None:
            raise EntityNotFoundException(ENTITY_NAME, category_id)
        return category

    def _validated(self, raw: Any, partial: bool) -> Dict[str, Any]:
        data = self.normalizer.normalize_category(raw)
        result = self.validator.validate(data, EntityKind.SPORTS_CATEGORY, partial=partial)
        if not result.is_valid:
            raise ValidationException(
                "Errores de validación",
                errors=[error.to_dict() for error in result.errors]
            )
        return result.values

    @staticmethod
    def _to_response_dto(category: SportsCategory) -> SportsCategoryResponseDTO:
        return SportsCategoryResponseDTO.model_validate(category)
