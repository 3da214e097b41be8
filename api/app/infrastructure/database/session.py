"""
Gestión de conexiones y sesiones de base de datos.

El engine y la fabrica de sesiones viven en un objeto Database creado
en el arranque de la aplicacion (lifespan) y liberado al cerrar. Cada
peticion recibe su propia AsyncSession.
"""
from typing import AsyncGenerator, Optional
from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    create_async_engine,
    async_sessionmaker
)
from sqlalchemy.orm import declarative_base

from app.core.config import settings


# Base para modelos de SQLAlchemy
Base = declarative_base()


def _create_engine_args(database_url: str, echo: bool) -> dict:
    """
    Construye los argumentos del engine segun el tipo de base de datos.
    PostgreSQL usa pool de conexiones, SQLite no lo soporta.
    """
    args = {
        "echo": echo,
        "future": True,
    }

    # Configuracion de pool solo para PostgreSQL
    if "postgresql" in database_url:
        args.update({
            "pool_size": settings.DB_POOL_SIZE,
            "max_overflow": settings.DB_MAX_OVERFLOW,
            "pool_pre_ping": True,  # Verifica conexion antes de usar
        })

    return args


class Database:
    """
    Engine + fabrica de sesiones.

    Uso:
        database = Database(settings.effective_database_url)
        async with database.session() as session:
            ...
        await database.dispose()
    """

    def __init__(self, database_url: str, echo: bool = False):
        self.url = database_url
        self.engine: AsyncEngine = create_async_engine(
            database_url, **_create_engine_args(database_url, echo)
        )
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autocommit=False,
            autoflush=False
        )

    def session(self) -> AsyncSession:
        return self.session_factory()

    async def create_tables(self) -> None:
        """Crea todas las tablas registradas en Base."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        """Cierra las conexiones del pool."""
        await self.engine.dispose()


def create_database(database_url: Optional[str] = None) -> Database:
    return Database(database_url or settings.effective_database_url, echo=settings.DEBUG)


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Generador de sesiones de base de datos.
    Para usar como dependencia en FastAPI.

    Yields:
        AsyncSession: Sesión de base de datos
    """
    database: Database = request.app.state.database
    async with database.session() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
