"""
Middleware para manejo centralizado de errores.
"""
from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from loguru import logger

from app.core.config import settings


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    Captura las excepciones que no son AppException (esas las renderiza
    el exception handler de la app) y responde con el sobre de error.
    """

    async def dispatch(self, request: Request, call_next):
        """
        Procesa la petición y captura errores.

        Args:
            request: Petición HTTP
            call_next: Siguiente middleware/handler

        Returns:
            Response: Respuesta HTTP
        """
        try:
            response = await call_next(request)
            return response
        except Exception as exc:
            logger.opt(exception=exc).error(f"Error no manejado en {request.method} {request.url.path}: {exc}")

            content = {
                "success": False,
                "error": "INTERNAL_SERVER_ERROR",
                "message": "Ha ocurrido un error interno del servidor",
            }
            if settings.is_development:
                content["details"] = {"detail": str(exc), "type": type(exc).__name__}

            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=content
            )
