"""
Implementación del repositorio de categorias deportivas usando SQLAlchemy.
"""
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import func, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.entities.sports_category import SportsCategory
from app.domain.repositories.sports_category_repository import ISportsCategoryRepository
from app.infrastructure.database.models import (
    CategoryParticipantModel,
    InscriptionModel,
    SportsCategoryModel,
)
from app.infrastructure.repositories.db_errors import translate_db_error
from app.shared.constants.person_constants import RecordStatus
from app.shared.exceptions.persistence import PersistenceError, PersistenceErrorKind


UNIQUE_COLUMNS = {"name_key": "name"}


def _usage_count(model) -> Any:
    return (
        select(func.count(model.id))
        .where(model.category_id == SportsCategoryModel.id)
        .correlate(SportsCategoryModel)
        .scalar_subquery()
    )


class SportsCategoryRepositoryImpl(ISportsCategoryRepository):
    """Implementación del repositorio de categorias con SQLAlchemy."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, category: SportsCategory) -> SportsCategory:
        """Crea una nueva categoria."""
        db_category = SportsCategoryModel()
        self._apply(db_category, category)

        self.session.add(db_category)
        await self._flush()
        await self.session.refresh(db_category)

        return await self.get_by_id(db_category.id)

    async def get_by_id(self, category_id: int) -> Optional[SportsCategory]:
        """Obtiene una categoria con sus contadores de uso."""
        result = await self.session.execute(
            self._select().where(SportsCategoryModel.id == category_id)
        )
        row = result.one_or_none()
        return self._to_entity(*row) if row else None

    async def get_page(
        self,
        page: int,
        limit: int,
        search: Optional[str] = None,
        status: Optional[str] = None
    ) -> Tuple[List[SportsCategory], int]:
        """Obtiene una pagina de categorias ordenada por fecha de creacion descendente."""
        filters = []
        if search:
            pattern = f"%{search}%"
            filters.append(or_(
                SportsCategoryModel.name.ilike(pattern),
                SportsCategoryModel.description.ilike(pattern),
            ))
        if status:
            filters.append(SportsCategoryModel.status == RecordStatus(status))

        total = await self.session.scalar(
            select(func.count(SportsCategoryModel.id)).where(*filters)
        )

        result = await self.session.execute(
            self._select()
            .where(*filters)
            .order_by(SportsCategoryModel.created_at.desc(), SportsCategoryModel.id.desc())
            .offset((page - 1) * limit)
            .limit(limit)
        )

        return [self._to_entity(*row) for row in result.all()], total or 0

    async def update(self, category: SportsCategory) -> SportsCategory:
        """Actualiza una categoria existente."""
        db_category = await self.session.get(SportsCategoryModel, category.id)

        if db_category is None:
            raise PersistenceError(
                PersistenceErrorKind.NOT_FOUND,
                f"SportsCategory {category.id} no existe"
            )

        self._apply(db_category, category)

        await self._flush()
        await self.session.refresh(db_category)

        return await self.get_by_id(db_category.id)

    async def delete(self, category_id: int) -> bool:
        """Elimina fisicamente una categoria."""
        db_category = await self.session.get(SportsCategoryModel, category_id)

        if db_category is None:
            return False

        await self.session.delete(db_category)
        await self._flush()
        return True

    async def find_by_unique_field(
        self,
        field: str,
        value: Any,
        exclude_id: Optional[int] = None
    ) -> Optional[SportsCategory]:
        """Busca otra categoria con el mismo nombre sin distinguir mayusculas."""
        if field != "name":
            raise ValueError(f"{field} no es un campo único de SportsCategory")

        query = self._select().where(SportsCategoryModel.name_key == value.lower())
        if exclude_id is not None:
            query = query.where(SportsCategoryModel.id != exclude_id)

        result = await self.session.execute(query.limit(1))
        row = result.first()
        return self._to_entity(*row) if row else None

    async def get_stats(self) -> Dict[str, Any]:
        """Conteos total, activas, inactivas y publicadas."""
        by_status = dict((await self.session.execute(
            select(SportsCategoryModel.status, func.count(SportsCategoryModel.id))
            .group_by(SportsCategoryModel.status)
        )).all())

        published = await self.session.scalar(
            select(func.count(SportsCategoryModel.id)).where(SportsCategoryModel.publish.is_(True))
        )

        return {
            "total": sum(by_status.values()),
            "active": by_status.get(RecordStatus.ACTIVE, 0),
            "inactive": by_status.get(RecordStatus.INACTIVE, 0),
            "published": published or 0,
        }

    async def _flush(self) -> None:
        try:
            await self.session.flush()
        except SQLAlchemyError as exc:
            await self.session.rollback()
            raise translate_db_error(exc, UNIQUE_COLUMNS) from exc

    @staticmethod
    def _select():
        return select(
            SportsCategoryModel,
            _usage_count(InscriptionModel).label("inscriptions_count"),
            _usage_count(CategoryParticipantModel).label("participants_count"),
        )

    @staticmethod
    def _apply(db_category: SportsCategoryModel, category: SportsCategory) -> None:
        db_category.name = category.name
        db_category.name_key = category.name.lower()
        db_category.description = category.description
        db_category.min_age = category.min_age
        db_category.max_age = category.max_age
        db_category.status = category.status
        db_category.publish = category.publish
        db_category.image_url = category.image_url

    @staticmethod
    def _to_entity(
        db_category: SportsCategoryModel,
        inscriptions_count: int = 0,
        participants_count: int = 0
    ) -> SportsCategory:
        """Convierte un modelo de base de datos a entidad de dominio."""
        return SportsCategory(
            id=db_category.id,
            name=db_category.name,
            min_age=db_category.min_age,
            max_age=db_category.max_age,
            description=db_category.description,
            status=RecordStatus(db_category.status),
            publish=bool(db_category.publish),
            image_url=db_category.image_url,
            inscriptions_count=inscriptions_count or 0,
            participants_count=participants_count or 0,
            created_at=db_category.created_at,
            updated_at=db_category.updated_at
        )
