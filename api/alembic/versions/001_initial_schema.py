"""initial_schema

Revision ID: 001
Revises:
Create Date: 2026-10-17 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


PERSON_TYPE = sa.Enum('Athlete', 'Trainer', 'Participant', name='person_type')
RECORD_STATUS = sa.Enum('Active', 'Inactive', name='record_status')

DOCUMENT_TYPES = [
    {'id': 1, 'name': 'Cédula de ciudadanía', 'description': 'Documento de identidad para mayores de edad'},
    {'id': 2, 'name': 'Tarjeta de identidad', 'description': 'Documento de identidad para menores de edad'},
    {'id': 3, 'name': 'Cédula de extranjería', 'description': 'Documento de identidad para extranjeros residentes'},
    {'id': 4, 'name': 'Pasaporte', 'description': None},
]


def upgrade() -> None:
    """Upgrade schema."""
    document_types = op.create_table('document_types',
    sa.Column('id', sa.Integer(), nullable=False),
    sa.Column('name', sa.String(length=100), nullable=False),
    sa.Column('description', sa.String(length=255), nullable=True),
    sa.PrimaryKeyConstraint('id'),
    sa.UniqueConstraint('name')
    )
    op.create_index(op.f('ix_document_types_id'), 'document_types', ['id'], unique=False)

    op.create_table('temporary_persons',
    sa.Column('id', sa.Integer(), nullable=False),
    sa.Column('first_name', sa.String(length=100), nullable=False),
    sa.Column('last_name', sa.String(length=100), nullable=False),
    sa.Column('person_type', PERSON_TYPE, nullable=False),
    sa.Column('identification', sa.String(length=50), nullable=True),
    sa.Column('email', sa.String(length=150), nullable=True),
    sa.Column('phone', sa.String(length=20), nullable=True),
    sa.Column('address', sa.String(length=200), nullable=True),
    sa.Column('birth_date', sa.Date(), nullable=True),
    sa.Column('age', sa.Integer(), nullable=True),
    sa.Column('team', sa.String(length=100), nullable=True),
    sa.Column('category', sa.String(length=100), nullable=True),
    sa.Column('status', RECORD_STATUS, nullable=False),
    sa.Column('document_type_id', sa.Integer(), nullable=True),
    sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True),
    sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True),
    sa.ForeignKeyConstraint(['document_type_id'], ['document_types.id']),
    sa.PrimaryKeyConstraint('id'),
    sa.UniqueConstraint('identification'),
    sa.UniqueConstraint('email')
    )
    op.create_index(op.f('ix_temporary_persons_id'), 'temporary_persons', ['id'], unique=False)
    op.create_index(op.f('ix_temporary_persons_person_type'), 'temporary_persons', ['person_type'], unique=False)
    op.create_index(op.f('ix_temporary_persons_status'), 'temporary_persons', ['status'], unique=False)
    op.create_index(op.f('ix_temporary_persons_category'), 'temporary_persons', ['category'], unique=False)

    op.create_table('sports_categories',
    sa.Column('id', sa.Integer(), nullable=False),
    sa.Column('name', sa.String(length=50), nullable=False),
    sa.Column('name_key', sa.String(length=50), nullable=False),
    sa.Column('description', sa.Text(), nullable=True),
    sa.Column('min_age', sa.Integer(), nullable=False),
    sa.Column('max_age', sa.Integer(), nullable=False),
    sa.Column('status', RECORD_STATUS, nullable=False),
    sa.Column('publish', sa.Boolean(), nullable=False, server_default=sa.false()),
    sa.Column('image_url', sa.String(length=500), nullable=True),
    sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True),
    sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True),
    sa.PrimaryKeyConstraint('id'),
    sa.UniqueConstraint('name_key')
    )
    op.create_index(op.f('ix_sports_categories_id'), 'sports_categories', ['id'], unique=False)
    op.create_index(op.f('ix_sports_categories_status'), 'sports_categories', ['status'], unique=False)

    op.create_table('inscriptions',
    sa.Column('id', sa.Integer(), nullable=False),
    sa.Column('category_id', sa.Integer(), nullable=False),
    sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True),
    sa.ForeignKeyConstraint(['category_id'], ['sports_categories.id']),
    sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_inscriptions_id'), 'inscriptions', ['id'], unique=False)
    op.create_index(op.f('ix_inscriptions_category_id'), 'inscriptions', ['category_id'], unique=False)

    op.create_table('category_participants',
    sa.Column('id', sa.Integer(), nullable=False),
    sa.Column('category_id', sa.Integer(), nullable=False),
    sa.Column('person_id', sa.Integer(), nullable=True),
    sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True),
    sa.ForeignKeyConstraint(['category_id'], ['sports_categories.id']),
    sa.ForeignKeyConstraint(['person_id'], ['temporary_persons.id']),
    sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_category_participants_id'), 'category_participants', ['id'], unique=False)
    op.create_index(op.f('ix_category_participants_category_id'), 'category_participants', ['category_id'], unique=False)

    op.bulk_insert(document_types, DOCUMENT_TYPES)
    # Los IDs del catalogo se insertan explicitamente; avanzar la secuencia
    if op.get_bind().dialect.name == 'postgresql':
        op.execute("SELECT setval('document_types_id_seq', (SELECT MAX(id) FROM document_types))")


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table('category_participants')
    op.drop_table('inscriptions')
    op.drop_table('sports_categories')
    op.drop_table('temporary_persons')
    op.drop_table('document_types')
    RECORD_STATUS.drop(op.get_bind(), checkfirst=True)
    PERSON_TYPE.drop(op.get_bind(), checkfirst=True)
