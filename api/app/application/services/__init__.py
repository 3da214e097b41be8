"""
Servicios de aplicacion.

Contiene la logica de validacion reutilizable que no pertenece
a un caso de uso especifico.
"""
from app.application.services.field_normalizer import FieldNormalizer
from app.application.services.field_validator import EntityKind, FieldValidator
from app.application.services.business_rules import BusinessRuleValidator
from app.application.services.uniqueness_checker import UniquenessChecker
from app.application.services.lifecycle import LifecycleController

__all__ = [
    # Normalizacion y validacion de campos
    "FieldNormalizer",
    "EntityKind",
    "FieldValidator",
    # Reglas de negocio
    "BusinessRuleValidator",
    "UniquenessChecker",
    # Ciclo de vida
    "LifecycleController",
]
