"""
Interfaz del repositorio de categorias deportivas.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple

from app.domain.entities.sports_category import SportsCategory


class ISportsCategoryRepository(ABC):
    """
    Interfaz del repositorio de categorias deportivas.
    Las categorias retornadas incluyen sus contadores de uso.
    """

    @abstractmethod
    async def create(self, category: SportsCategory) -> SportsCategory:
        pass

    @abstractmethod
    async def get_by_id(self, category_id: int) -> Optional[SportsCategory]:
        pass

    @abstractmethod
    async def get_page(
        self,
        page: int,
        limit: int,
        search: Optional[str] = None,
        status: Optional[str] = None
    ) -> Tuple[List[SportsCategory], int]:
        """
        Obtiene una pagina de categorias y el total que cumple los filtros.
        La busqueda aplica sobre nombre y descripcion.
        """
        pass

    @abstractmethod
    async def update(self, category: SportsCategory) -> SportsCategory:
        pass

    @abstractmethod
    async def delete(self, category_id: int) -> bool:
        pass

    @abstractmethod
    async def find_by_unique_field(
        self,
        field: str,
        value: Any,
        exclude_id: Optional[int] = None
    ) -> Optional[SportsCategory]:
        """
        Busca otra categoria con el mismo nombre (sin distinguir mayusculas).
        """
        pass

    @abstractmethod
    async def get_stats(self) -> Dict[str, Any]:
        """Conteos total, activas e inactivas."""
        pass
