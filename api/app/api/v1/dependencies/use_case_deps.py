"""
Dependencias para inyeccion de casos de uso.
"""
from fastapi import Depends

from app.application.services.business_rules import BusinessRuleValidator
from app.application.use_cases.sports_category_use_cases import SportsCategoryUseCases
from app.application.use_cases.temporary_person_use_cases import TemporaryPersonUseCases
from app.core.config import settings
from app.domain.entities.validation import RuleSeverity
from app.domain.repositories.sports_category_repository import ISportsCategoryRepository
from app.domain.repositories.temporary_person_repository import ITemporaryPersonRepository
from app.api.v1.dependencies.repository_deps import (
    get_sports_category_repository,
    get_temporary_person_repository,
)


def get_business_rules() -> BusinessRuleValidator:
    """
    Validador de reglas con la severidad configurada para la heuristica
    de identificacion de menores (MINOR_IDENTIFICATION_SEVERITY).
    """
    severity = RuleSeverity(settings.MINOR_IDENTIFICATION_SEVERITY.lower())
    if severity == RuleSeverity.ERROR:
        return BusinessRuleValidator.strict()
    return BusinessRuleValidator.lenient()


async def get_temporary_person_use_cases(
    repository: ITemporaryPersonRepository = Depends(get_temporary_person_repository),
    rules: BusinessRuleValidator = Depends(get_business_rules)
) -> TemporaryPersonUseCases:
    """
    Dependencia para obtener los casos de uso de personas temporales.
    
    Args:
        repository: Repositorio de personas temporales
        rules: Validador de reglas de negocio
        
    Returns:
        TemporaryPersonUseCases: Instancia de casos de uso
    """
    return TemporaryPersonUseCases(repository, rules=rules)


async def get_sports_category_use_cases(
    repository: ISportsCategoryRepository = Depends(get_sports_category_repository),
    rules: BusinessRuleValidator = Depends(get_business_rules)
) -> SportsCategoryUseCases:
    """
    Dependencia para obtener los casos de uso de categorias deportivas.
    
    Args:
        repository: Repositorio de categorias deportivas
        rules: Validador de reglas de negocio
        
    Returns:
        SportsCategoryUseCases: Instancia de casos de uso
    """
    return SportsCategoryUseCases(repository, rules=rules)
