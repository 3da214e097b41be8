"""
AuditLogger - Registro de auditoria de cambios sobre los registros.

Cada creacion, actualizacion, cambio de estado o eliminacion queda en
un archivo diario separado del log general de la aplicacion.
"""
import json
from datetime import datetime
from pathlib import Path
from typing import Any, Iterable, Optional

from loguru import logger

from app.core.config import settings


class AuditLogger:
    """
    Gestor de logs de auditoria.

    Uso:
        # Al inicio de la app
        AuditLogger.initialize()

        # En un caso de uso
        AuditLogger.log_mutation("UPDATE", "TemporaryPerson", 12, ["email", "phone"])
    """

    LOG_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S.%f"

    _initialized: bool = False
    _sink_id: Optional[int] = None

    @classmethod
    def initialize(cls, log_dir: Optional[str] = None) -> None:
        """
        Crea la carpeta de auditoria y registra el sink de loguru.
        Debe llamarse al inicio de la aplicacion.
        """
        if cls._initialized:
            return

        audit_dir = Path(log_dir or settings.AUDIT_LOG_DIR)
        audit_dir.mkdir(parents=True, exist_ok=True)

        cls._sink_id = logger.add(
            str(audit_dir / "audit_{time:YYYY-MM-DD}.log"),
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {message}",
            filter=lambda record: record["extra"].get("context") == "audit",
            rotation="1 day",
            retention="90 days",
            level="INFO"
        )

        cls._initialized = True
        logger.info(f"AuditLogger inicializado en {audit_dir}")

    @classmethod
    def shutdown(cls) -> None:
        """Retira el sink de auditoria (cierre de la aplicacion)."""
        if cls._sink_id is not None:
            logger.remove(cls._sink_id)
        cls._sink_id = None
        cls._initialized = False

    @classmethod
    def log_mutation(
        cls,
        action: str,
        entity: str,
        entity_id: Any,
        fields: Iterable[str] = ()
    ) -> None:
        """
        Registra un cambio sobre un registro.

        Args:
            action: CREATE, UPDATE, STATUS_CHANGE o DELETE
            entity: Nombre de la entidad
            entity_id: ID del registro afectado
            fields: Nombres de los campos modificados (nunca sus valores)
        """
        entry = {
            "timestamp": datetime.now().strftime(cls.LOG_TIMESTAMP_FORMAT),
            "action": action,
            "entity": entity,
            "id": entity_id,
            "fields": sorted(fields),
        }
        logger.bind(context="audit").info(json.dumps(entry, default=str))
