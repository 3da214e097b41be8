"""
Script para inicializar la base de datos en desarrollo.

Crea las tablas sin pasar por Alembic y carga el catalogo de tipos de
documento si esta vacio. En produccion usar `alembic upgrade head`.

Uso:
    python scripts/init_db.py
"""
import asyncio
import sys
from pathlib import Path

from loguru import logger
from sqlalchemy import func, select

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from app.infrastructure.database.models import DocumentTypeModel  # noqa: E402
from app.infrastructure.database.session import create_database  # noqa: E402


DOCUMENT_TYPES = [
    ("Cédula de ciudadanía", "Documento de identidad para mayores de edad"),
    ("Tarjeta de identidad", "Documento de identidad para menores de edad"),
    ("Cédula de extranjería", "Documento de identidad para extranjeros residentes"),
    ("Pasaporte", None),
]


async def main():
    """Función principal para inicializar la base de datos."""
    logger.info("Inicializando base de datos...")
    database = create_database()

    try:
        await database.create_tables()

        async with database.session() as session:
            existing = await session.scalar(select(func.count(DocumentTypeModel.id)))
            if not existing:
                session.add_all([
                    DocumentTypeModel(name=name, description=description)
                    for name, description in DOCUMENT_TYPES
                ])
                await session.commit()
                logger.info(f"Tipos de documento cargados: {len(DOCUMENT_TYPES)}")

        logger.success("Base de datos inicializada correctamente")
    except Exception as e:
        logger.error(f"Error al inicializar base de datos: {e}")
        raise
    finally:
        await database.dispose()


if __name__ == "__main__":
    asyncio.run(main())
