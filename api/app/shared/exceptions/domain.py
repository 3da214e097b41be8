"""
Excepciones relacionadas con la lógica de dominio.
"""
from typing import Any, Dict, List, Optional

from app.shared.exceptions.base import AppException


class DomainException(AppException):
    """Excepción base para errores de dominio."""

    def __init__(self, message: str, error_code: str = "DOMAIN_ERROR", details=None, errors=None):
        super().__init__(
            message=message,
            status_code=400,
            error_code=error_code,
            details=details,
            errors=errors
        )


class EntityNotFoundException(DomainException):
    """Excepción cuando no se encuentra una entidad."""

    def __init__(self, entity_name: str, entity_id: Any):
        super().__init__(
            message=f"{entity_name} con ID {entity_id} no encontrado",
            error_code="ENTITY_NOT_FOUND",
            details={"entity": entity_name, "id": str(entity_id)}
        )
        self.status_code = 404


class ValidationException(DomainException):
    """
    Excepción para errores de validación.

    Transporta la lista completa de violaciones para que el cliente
    pueda corregir todos los campos en un solo intento.
    """

    def __init__(
        self,
        message: str,
        errors: Optional[List[Dict[str, Any]]] = None,
        field: str = None
    ):
        details = {"field": field} if field else None
        super().__init__(
            message=message,
            error_code="VALIDATION_ERROR",
            details=details,
            errors=errors
        )


class ConflictException(DomainException):
    """Excepción cuando un valor unico ya esta en uso por otro registro."""

    def __init__(self, entity_name: str, errors: List[Dict[str, Any]]):
        fields = [error["field"] for error in errors]
        super().__init__(
            message=" ".join(error["message"] for error in errors),
            error_code="CONFLICT",
            details={"entity": entity_name, "fields": fields},
            errors=errors
        )
        self.status_code = 409


class StateTransitionException(DomainException):
    """
    Excepción cuando una operacion no esta permitida en el estado actual
    del registro (eliminar un registro activo o con uso asociado).
    """

    def __init__(self, message: str, current_status: str, blockers: Optional[Dict[str, Any]] = None):
        details = {"current_status": current_status}
        if blockers:
            details["blockers"] = blockers
        super().__init__(
            message=message,
            error_code="INVALID_STATE_TRANSITION",
            details=details
        )


class InternalException(AppException):
    """Fallo inesperado del repositorio; el detalle solo se expone en desarrollo."""

    def __init__(self, message: str = "Ha ocurrido un error interno del servidor", detail: str = None):
        super().__init__(
            message=message,
            status_code=500,
            error_code="INTERNAL_ERROR",
            details={"detail": detail} if detail else None
        )
