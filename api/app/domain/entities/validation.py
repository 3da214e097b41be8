"""
Tipos compartidos por los validadores.

Las reglas son objetos explicitos (predicado + mensaje) agrupados por
campo; los validadores las evaluan en orden y acumulan todas las
violaciones antes de responder.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional


class RuleSeverity(str, Enum):
    """Severidad de una regla de negocio."""
    ERROR = "error"       # Bloquea la operacion
    WARNING = "warning"   # Se informa junto al resultado exitoso


@dataclass
class FieldViolation:
    """Violacion de una regla sobre un campo concreto."""

    field: str
    message: str
    value: Any = None

    def to_dict(self) -> Dict[str, Any]:
        """Convierte la violacion al formato de la respuesta."""
        value = self.value
        if value is not None and not isinstance(value, (str, int, float, bool)):
            value = str(value)
        return {"field": self.field, "message": self.message, "value": value}


@dataclass
class FieldRule:
    """
    Regla sintactica de un campo.

    `predicate` recibe el valor ya convertido por el `coerce` del campo
    y retorna True si es valido.
    """

    predicate: Callable[[Any], bool]
    message: str


@dataclass
class FieldSpec:
    """
    Declaracion de un campo: conversion de tipo, obligatoriedad y reglas.

    `coerce` retorna el valor tipado o lanza ValueError con el mensaje
    a reportar.
    """

    name: str
    rules: List[FieldRule] = field(default_factory=list)
    required: bool = False
    required_message: Optional[str] = None
    coerce: Optional[Callable[[Any], Any]] = None
    coerce_message: Optional[str] = None
    keep_blank: bool = False


@dataclass
class FieldValidationResult:
    """Resultado del validador de campos: valores tipados o violaciones."""

    values: Dict[str, Any] = field(default_factory=dict)
    errors: List[FieldViolation] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


@dataclass
class RuleOutcome:
    """Resultado del validador de reglas de negocio."""

    errors: List[FieldViolation] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add(self, severity: RuleSeverity, violation: FieldViolation) -> None:
        if severity == RuleSeverity.ERROR:
            self.errors.append(violation)
        else:
            self.warnings.append(violation.message)

    @property
    def is_blocking(self) -> bool:
        return bool(self.errors)


@dataclass
class Availability:
    """Disponibilidad de un valor unico."""

    available: bool
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {"available": self.available, "message": self.message}
