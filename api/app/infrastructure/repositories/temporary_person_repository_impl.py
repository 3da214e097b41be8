"""
Implementación del repositorio de personas temporales usando SQLAlchemy.
"""
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import func, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.entities.document_type import DocumentType
from app.domain.entities.temporary_person import TemporaryPerson
from app.domain.repositories.temporary_person_repository import ITemporaryPersonRepository
from app.infrastructure.database.models import DocumentTypeModel, TemporaryPersonModel
from app.infrastructure.repositories.db_errors import translate_db_error
from app.shared.constants.person_constants import PersonType, RecordStatus
from app.shared.exceptions.persistence import PersistenceError, PersistenceErrorKind


UNIQUE_COLUMNS = {"identification": "identification", "email": "email"}


class TemporaryPersonRepositoryImpl(ITemporaryPersonRepository):
    """Implementación del repositorio de personas temporales con SQLAlchemy."""

    def __init__(self, session: AsyncSession):
        """
        Inicializa el repositorio con una sesión de base de datos.

        Args:
            session: Sesión de SQLAlchemy
        """
        self.session = session

    async def create(self, person: TemporaryPerson) -> TemporaryPerson:
        """Crea una nueva persona temporal en la base de datos."""
        db_person = TemporaryPersonModel()
        self._apply(db_person, person)

        self.session.add(db_person)
        await self._flush()
        await self.session.refresh(db_person)

        return await self.get_by_id(db_person.id)

    async def get_by_id(self, person_id: int) -> Optional[TemporaryPerson]:
        """Obtiene una persona temporal por su ID."""
        result = await self.session.execute(
            self._select().where(TemporaryPersonModel.id == person_id)
        )
        row = result.one_or_none()

        if row is None:
            return None

        return self._to_entity(*row)

    async def get_page(
        self,
        page: int,
        limit: int,
        search: Optional[str] = None,
        status: Optional[str] = None,
        person_type: Optional[str] = None
    ) -> Tuple[List[TemporaryPerson], int]:
        """Obtiene una pagina de personas ordenada por fecha de creacion descendente."""
        filters = []
        if search:
            pattern = f"%{search}%"
            filters.append(or_(
                TemporaryPersonModel.first_name.ilike(pattern),
                TemporaryPersonModel.last_name.ilike(pattern),
                TemporaryPersonModel.identification.ilike(pattern),
                TemporaryPersonModel.email.ilike(pattern),
                TemporaryPersonModel.phone.ilike(pattern),
            ))
        if status:
            filters.append(TemporaryPersonModel.status == RecordStatus(status))
        if person_type:
            filters.append(TemporaryPersonModel.person_type == PersonType(person_type))

        total = await self.session.scalar(
            select(func.count(TemporaryPersonModel.id)).where(*filters)
        )

        result = await self.session.execute(
            self._select()
            .where(*filters)
            .order_by(TemporaryPersonModel.created_at.desc(), TemporaryPersonModel.id.desc())
            .offset((page - 1) * limit)
            .limit(limit)
        )

        return [self._to_entity(*row) for row in result.all()], total or 0

    async def update(self, person: TemporaryPerson) -> TemporaryPerson:
        """Actualiza una persona existente."""
        db_person = await self.session.get(TemporaryPersonModel, person.id)

        if db_person is None:
            raise PersistenceError(
                PersistenceErrorKind.NOT_FOUND,
                f"TemporaryPerson {person.id} no existe"
            )

        self._apply(db_person, person)

        await self._flush()
        await self.session.refresh(db_person)

        return await self.get_by_id(db_person.id)

    async def delete(self, person_id: int) -> bool:
        """Elimina fisicamente una persona por su ID."""
        db_person = await self.session.get(TemporaryPersonModel, person_id)

        if db_person is None:
            return False

        await self.session.delete(db_person)
        await self._flush()
        return True

    async def find_by_unique_field(
        self,
        field: str,
        value: Any,
        exclude_id: Optional[int] = None
    ) -> Optional[TemporaryPerson]:
        """Busca otra persona con el mismo valor en un campo unico."""
        if field not in UNIQUE_COLUMNS:
            raise ValueError(f"{field} no es un campo único de TemporaryPerson")

        column = getattr(TemporaryPersonModel, UNIQUE_COLUMNS[field])
        query = self._select().where(column == value)
        if exclude_id is not None:
            query = query.where(TemporaryPersonModel.id != exclude_id)

        result = await self.session.execute(query.limit(1))
        row = result.first()
        return self._to_entity(*row) if row else None

    async def get_stats(self) -> Dict[str, Any]:
        """Conteos total, por estado, por tipo y por categoria."""
        by_status = dict((await self.session.execute(
            select(TemporaryPersonModel.status, func.count(TemporaryPersonModel.id))
            .group_by(TemporaryPersonModel.status)
        )).all())

        by_type = dict((await self.session.execute(
            select(TemporaryPersonModel.person_type, func.count(TemporaryPersonModel.id))
            .group_by(TemporaryPersonModel.person_type)
        )).all())

        by_category = (await self.session.execute(
            select(TemporaryPersonModel.category, func.count(TemporaryPersonModel.id))
            .where(TemporaryPersonModel.category.is_not(None), TemporaryPersonModel.category != "")
            .group_by(TemporaryPersonModel.category)
            .order_by(func.count(TemporaryPersonModel.id).desc())
        )).all()

        return {
            "total": sum(by_status.values()),
            "active": by_status.get(RecordStatus.ACTIVE, 0),
            "inactive": by_status.get(RecordStatus.INACTIVE, 0),
            "byType": {person_type.value: by_type.get(person_type, 0) for person_type in PersonType},
            "byCategory": {category: count for category, count in by_category},
        }

    async def get_document_types(self) -> List[DocumentType]:
        """Catalogo de tipos de documento ordenado por nombre."""
        result = await self.session.execute(
            select(DocumentTypeModel).order_by(DocumentTypeModel.name)
        )
        return [
            DocumentType(id=db_type.id, name=db_type.name, description=db_type.description)
            for db_type in result.scalars().all()
        ]

    async def _flush(self) -> None:
        try:
            await self.session.flush()
        except SQLAlchemyError as exc:
            await self.session.rollback()
            raise translate_db_error(exc, UNIQUE_COLUMNS) from exc

    @staticmethod
    def _select():
        return (
            select(TemporaryPersonModel, DocumentTypeModel.name)
            .outerjoin(DocumentTypeModel, TemporaryPersonModel.document_type_id == DocumentTypeModel.id)
        )

    @staticmethod
    def _apply(db_person: TemporaryPersonModel, person: TemporaryPerson) -> None:
        db_person.first_name = person.first_name
        db_person.last_name = person.last_name
        db_person.person_type = person.person_type
        db_person.identification = person.identification
        db_person.email = person.email
        db_person.phone = person.phone
        db_person.address = person.address
        db_person.birth_date = person.birth_date
        db_person.age = person.age
        db_person.team = person.team
        db_person.category = person.category
        db_person.status = person.status
        db_person.document_type_id = person.document_type_id

    @staticmethod
    def _to_entity(db_person: TemporaryPersonModel, document_type_name: Optional[str] = None) -> TemporaryPerson:
        """
        Convierte un modelo de base de datos a entidad de dominio.

        Args:
            db_person: Modelo de SQLAlchemy
            document_type_name: Nombre del tipo de documento (join)

        Returns:
            TemporaryPerson: Entidad de dominio
        """
        return TemporaryPerson(
            id=db_person.id,
            first_name=db_person.first_name,
            last_name=db_person.last_name,
            person_type=PersonType(db_person.person_type),
            identification=db_person.identification,
            email=db_person.email,
            phone=db_person.phone,
            address=db_person.address,
            birth_date=db_person.birth_date,
            age=db_person.age,
            team=db_person.team,
            category=db_person.category,
            status=RecordStatus(db_person.status),
            document_type_id=db_person.document_type_id,
            document_type_name=document_type_name,
            created_at=db_person.created_at,
            updated_at=db_person.updated_at
        )
