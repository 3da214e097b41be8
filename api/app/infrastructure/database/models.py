"""
Modelos de base de datos (ORM).
"""
from sqlalchemy import (
    Boolean, Column, Date, DateTime, Enum as SQLEnum, ForeignKey, Integer, String, Text
)
from sqlalchemy.sql import func

from app.infrastructure.database.session import Base
from app.shared.constants.person_constants import PersonType, RecordStatus


def _enum_values(enum_cls):
    """Persistir el valor ("Active") y no el nombre del miembro ("ACTIVE")."""
    return [member.value for member in enum_cls]


RecordStatusType = SQLEnum(RecordStatus, name="record_status", values_callable=_enum_values)


class DocumentTypeModel(Base):
    """Catalogo de tipos de documento de identidad."""

    __tablename__ = "document_types"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False, unique=True)
    description = Column(String(255), nullable=True)

    def __repr__(self):
        return f"<DocumentType(id={self.id}, name={self.name})>"


class TemporaryPersonModel(Base):
    """
    Modelo de base de datos para personas temporales.
    identification y email son unicos cuando estan presentes (NULL se repite).
    """

    __tablename__ = "temporary_persons"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    person_type = Column(
        SQLEnum(PersonType, name="person_type", values_callable=_enum_values),
        nullable=False,
        index=True
    )
    identification = Column(String(50), nullable=True, unique=True)
    email = Column(String(150), nullable=True, unique=True)
    phone = Column(String(20), nullable=True)
    address = Column(String(200), nullable=True)
    birth_date = Column(Date, nullable=True)
    age = Column(Integer, nullable=True)
    team = Column(String(100), nullable=True)
    category = Column(String(100), nullable=True, index=True)
    status = Column(
        RecordStatusType,
        nullable=False,
        default=RecordStatus.ACTIVE,
        index=True
    )
    document_type_id = Column(Integer, ForeignKey("document_types.id"), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<TemporaryPerson(id={self.id}, name={self.first_name} {self.last_name}, status={self.status})>"


class SportsCategoryModel(Base):
    """
    Modelo de base de datos para categorias deportivas.
    name_key guarda el nombre en minusculas y es la restriccion unica
    que hace la comparacion de nombres insensible a mayusculas.
    """

    __tablename__ = "sports_categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(50), nullable=False)
    name_key = Column(String(50), nullable=False, unique=True)
    description = Column(Text, nullable=True)
    min_age = Column(Integer, nullable=False)
    max_age = Column(Integer, nullable=False)
    status = Column(
        RecordStatusType,
        nullable=False,
        default=RecordStatus.ACTIVE,
        index=True
    )
    publish = Column(Boolean, nullable=False, default=False)
    image_url = Column(String(500), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<SportsCategory(id={self.id}, name={self.name}, status={self.status})>"


class InscriptionModel(Base):
    """Inscripcion a una categoria. Solo se usa para contar el uso de la categoria."""

    __tablename__ = "inscriptions"

    id = Column(Integer, primary_key=True, index=True)
    category_id = Column(Integer, ForeignKey("sports_categories.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class CategoryParticipantModel(Base):
    """Participante vinculado a una categoria. Solo se usa para contar el uso."""

    __tablename__ = "category_participants"

    id = Column(Integer, primary_key=True, index=True)
    category_id = Column(Integer, ForeignKey("sports_categories.id"), nullable=False, index=True)
    person_id = Column(Integer, ForeignKey("temporary_persons.id"), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
