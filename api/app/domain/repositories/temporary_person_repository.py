"""
Interfaz del repositorio de personas temporales.
Define el contrato que debe cumplir cualquier implementación.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple

from app.domain.entities.document_type import DocumentType
from app.domain.entities.temporary_person import TemporaryPerson


class ITemporaryPersonRepository(ABC):
    """
    Interfaz del repositorio de personas temporales.

    Las implementaciones reportan fallos del motor como PersistenceError
    (CONFLICT cuando una restriccion unica rechaza la escritura,
    NOT_FOUND cuando el registro desaparecio entre lectura y escritura).
    """

    @abstractmethod
    async def create(self, person: TemporaryPerson) -> TemporaryPerson:
        """
        Crea una nueva persona temporal.

        Args:
            person: Entidad a crear

        Returns:
            TemporaryPerson: Persona creada con ID y auditoria asignados
        """
        pass

    @abstractmethod
    async def get_by_id(self, person_id: int) -> Optional[TemporaryPerson]:
        """
        Obtiene una persona temporal por su ID.

        Args:
            person_id: ID de la persona

        Returns:
            Optional[TemporaryPerson]: Persona encontrada o None
        """
        pass

    @abstractmethod
    async def get_page(
        self,
        page: int,
        limit: int,
        search: Optional[str] = None,
        status: Optional[str] = None,
        person_type: Optional[str] = None
    ) -> Tuple[List[TemporaryPerson], int]:
        """
        Obtiene una pagina de personas y el total que cumple los filtros.

        Args:
            page: Pagina (desde 1)
            limit: Tamano de pagina
            search: Texto a buscar en nombre, apellido, identificacion, email o telefono
            status: Filtro por estado
            person_type: Filtro por tipo de persona

        Returns:
            Tuple[List[TemporaryPerson], int]: Registros de la pagina y total
        """
        pass

    @abstractmethod
    async def update(self, person: TemporaryPerson) -> TemporaryPerson:
        """
        Actualiza una persona existente.

        Args:
            person: Entidad con los datos actualizados

        Returns:
            TemporaryPerson: Persona actualizada
        """
        pass

    @abstractmethod
    async def delete(self, person_id: int) -> bool:
        """
        Elimina fisicamente una persona por su ID.

        Returns:
            bool: True si se eliminó correctamente
        """
        pass

    @abstractmethod
    async def find_by_unique_field(
        self,
        field: str,
        value: Any,
        exclude_id: Optional[int] = None
    ) -> Optional[TemporaryPerson]:
        """
        Busca otra persona con el mismo valor en un campo unico.

        Args:
            field: `identification` o `email`
            value: Valor a buscar
            exclude_id: ID a excluir (el propio registro en actualizaciones)
        """
        pass

    @abstractmethod
    async def get_stats(self) -> Dict[str, Any]:
        """Conteos por estado, por tipo de persona y por categoria."""
        pass

    @abstractmethod
    async def get_document_types(self) -> List[DocumentType]:
        """Tipos de documento disponibles, ordenados por nombre."""
        pass
