"""
Entidades del dominio.
"""
from app.domain.entities.document_type import DocumentType
from app.domain.entities.sports_category import SportsCategory
from app.domain.entities.temporary_person import TemporaryPerson
from app.domain.entities.validation import (
    Availability,
    FieldRule,
    FieldSpec,
    FieldValidationResult,
    FieldViolation,
    RuleOutcome,
    RuleSeverity
)

__all__ = [
    "DocumentType",
    "SportsCategory",
    "TemporaryPerson",
    "Availability",
    "FieldRule",
    "FieldSpec",
    "FieldValidationResult",
    "FieldViolation",
    "RuleOutcome",
    "RuleSeverity"
]
