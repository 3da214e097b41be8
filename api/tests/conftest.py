"""
Configuración de fixtures para pytest.
"""
from datetime import date
from typing import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

import app.infrastructure.database  # noqa: F401  registra los modelos en Base
from app.infrastructure.database.session import Base
from app.shared.utils import date_utils


# URL de base de datos de prueba
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

# Fecha fija para que las edades derivadas no dependan del dia de ejecucion
FIXED_TODAY = date(2026, 6, 15)


@pytest.fixture
def fixed_today(monkeypatch) -> date:
    """Fija date_utils.today() en FIXED_TODAY."""
    monkeypatch.setattr(date_utils, "today", lambda: FIXED_TODAY)
    return FIXED_TODAY


@pytest.fixture(scope="function")
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Fixture que proporciona una sesión de base de datos para tests.
    Crea una base de datos en memoria para cada test.
    """
    # StaticPool: todas las conexiones comparten la misma base en memoria
    engine = create_async_engine(TEST_DATABASE_URL, echo=False, poolclass=StaticPool)

    # Crear tablas
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    # Crear session factory
    async_session = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False
    )

    # Proporcionar sesión
    async with async_session() as session:
        yield session

    # Limpiar
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()
