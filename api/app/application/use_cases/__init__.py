"""
Casos de uso de la aplicacion.
"""
from .temporary_person_use_cases import TemporaryPersonUseCases
from .sports_category_use_cases import SportsCategoryUseCases

__all__ = ["TemporaryPersonUseCases", "SportsCategoryUseCases"]
