"""
Errores tipados del puerto de persistencia.

Los repositorios traducen los errores del motor de base de datos a
PersistenceError para que los casos de uso nunca inspeccionen codigos
especificos del motor.
"""
from enum import Enum
from typing import Optional


class PersistenceErrorKind(str, Enum):
    """Variantes de error que puede producir un repositorio."""
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
    TRANSIENT = "transient"
    UNKNOWN = "unknown"


class PersistenceError(Exception):
    """Error producido por la implementacion del repositorio."""

    def __init__(
        self,
        kind: PersistenceErrorKind,
        message: str,
        field: Optional[str] = None
    ):
        self.kind = kind
        self.message = message
        self.field = field
        super().__init__(message)

    def __repr__(self) -> str:
        return f"<PersistenceError(kind={self.kind.value}, field={self.field})>"
