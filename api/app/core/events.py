"""
Manejadores de eventos de inicio y cierre de la aplicacion.
"""
from contextlib import asynccontextmanager
from typing import AsyncIterator, Callable

from fastapi import FastAPI
from loguru import logger

from app.core.config import settings
from app.domain.entities.validation import RuleSeverity
from app.infrastructure.database.session import create_database
from app.shared.utils.audit_logger import AuditLogger

# Registra los modelos en Base.metadata antes de create_tables
import app.infrastructure.database  # noqa: F401


def startup_handler(app: FastAPI) -> Callable:
    """
    Manejador de eventos de inicio de la aplicacion.

    Args:
        app: Instancia de FastAPI

    Returns:
        Callable: Funcion asincrona de inicio
    """
    async def startup() -> None:
        """Inicializa recursos al inicio de la aplicacion."""
        try:
            logger.info(f"Iniciando {settings.APP_NAME} v{settings.APP_VERSION}")
            logger.info(f"Entorno: {settings.ENVIRONMENT}")

            # Validar configuracion critica
            _validate_config()

            # Engine y fabrica de sesiones para toda la vida de la app
            database = create_database()
            app.state.database = database
            if settings.CREATE_TABLES_ON_STARTUP:
                await database.create_tables()
                logger.info("Tablas creadas/verificadas")
            logger.info("Base de datos inicializada")

            # Inicializar sistema de auditoria
            AuditLogger.initialize()
            logger.info("Sistema de auditoria inicializado")

            # Configurar logging adicional
            logger.add(
                settings.LOG_FILE,
                rotation="500 MB",
                retention="10 days",
                level=settings.LOG_LEVEL
            )

            logger.success("Aplicacion iniciada correctamente")

            # Mostrar URLs disponibles
            _print_available_urls()

        except Exception as e:
            logger.error(f"Error durante startup: {e}")
            logger.exception("Detalle del error:")
            raise

    return startup


def _validate_config() -> None:
    """Valida que la configuracion critica sea coherente."""
    warnings = []

    severities = [severity.value for severity in RuleSeverity]
    if settings.MINOR_IDENTIFICATION_SEVERITY.lower() not in severities:
        raise ValueError(
            f"MINOR_IDENTIFICATION_SEVERITY debe ser uno de {severities}, "
            f"recibido: {settings.MINOR_IDENTIFICATION_SEVERITY}"
        )

    if settings.DEFAULT_PAGE_SIZE > settings.MAX_PAGE_SIZE:
        warnings.append("DEFAULT_PAGE_SIZE supera MAX_PAGE_SIZE - se usara MAX_PAGE_SIZE")

    if not settings.DATABASE_URL:
        warnings.append("DATABASE_URL no configurada - se usan los componentes DATABASE_*")

    # Mostrar advertencias
    for warning in warnings:
        logger.warning(f"CONFIG: {warning}")


def _print_available_urls() -> None:
    """Imprime las URLs disponibles de la aplicacion."""
    # Determinar la URL base de acceso
    if settings.HOST == "0.0.0.0":
        access_host = "localhost"
    else:
        access_host = settings.HOST

    base_url = f"http://{access_host}:{settings.PORT}"

    # Mostrar las URLs disponibles
    logger.opt(colors=True).info("<bold><green>" + "=" * 80 + "</green></bold>")
    logger.opt(colors=True).info("<bold><green>URLS DISPONIBLES:</green></bold>")
    logger.opt(colors=True).info("<bold><green>" + "=" * 80 + "</green></bold>")
    logger.opt(colors=True).info(f"<cyan>  Swagger UI:  {base_url}/docs</cyan>")
    logger.opt(colors=True).info(f"<cyan>  Personas:    {base_url}/api/v1/temporary-persons/</cyan>")
    logger.opt(colors=True).info(f"<cyan>  Categorias:  {base_url}/api/v1/sports-categories/</cyan>")
    logger.opt(colors=True).info(f"<cyan>  Health:      {base_url}/health</cyan>")
    logger.opt(colors=True).info("<bold><green>" + "=" * 80 + "</green></bold>")


def shutdown_handler(app: FastAPI) -> Callable:
    """
    Manejador de eventos de cierre de la aplicacion.

    Args:
        app: Instancia de FastAPI

    Returns:
        Callable: Funcion asincrona de cierre
    """
    async def shutdown() -> None:
        """Libera recursos al cerrar la aplicacion."""
        logger.info("Cerrando aplicacion...")

        # Cerrar conexiones de base de datos
        database = getattr(app.state, "database", None)
        if database is not None:
            await database.dispose()
            logger.info("Conexiones de base de datos cerradas")

        AuditLogger.shutdown()

        logger.success("Aplicacion cerrada correctamente")

    return shutdown


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Ciclo de vida de la aplicacion: startup antes de servir, shutdown al terminar."""
    await startup_handler(app)()
    try:
        yield
    finally:
        await shutdown_handler(app)()
