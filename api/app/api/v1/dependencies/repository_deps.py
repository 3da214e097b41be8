"""
Dependencias para inyección de repositorios.
"""
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.database.session import get_db
from app.infrastructure.repositories.sports_category_repository_impl import SportsCategoryRepositoryImpl
from app.infrastructure.repositories.temporary_person_repository_impl import TemporaryPersonRepositoryImpl


async def get_temporary_person_repository(
    session: AsyncSession = Depends(get_db)
) -> TemporaryPersonRepositoryImpl:
    """
    Dependencia para obtener el repositorio de personas temporales.
    
    Args:
        session: Sesión de base de datos
        
    Returns:
        TemporaryPersonRepositoryImpl: Instancia del repositorio
    """
    return TemporaryPersonRepositoryImpl(session)


async def get_sports_category_repository(
    session: AsyncSession = Depends(get_db)
) -> SportsCategoryRepositoryImpl:
    """Dependencia para obtener el repositorio de categorias deportivas."""
    return SportsCategoryRepositoryImpl(session)
