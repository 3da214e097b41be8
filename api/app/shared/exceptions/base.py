"""
Excepción base para todas las excepciones personalizadas de la aplicación.
"""
from typing import Optional, Dict, Any, List


class AppException(Exception):
    """
    Excepción base de la aplicación.

    Todas las excepciones personalizadas heredan de esta clase; el
    exception handler de main.py la convierte en el sobre de error
    {success: false, error, message, errors?, details?}.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: str = "INTERNAL_ERROR",
        details: Optional[Dict[str, Any]] = None,
        errors: Optional[List[Dict[str, Any]]] = None
    ):
        """
        Args:
            message: Mensaje legible para el usuario
            status_code: Código de estado HTTP
            error_code: Código estable para el cliente (VALIDATION_ERROR, CONFLICT...)
            details: Contexto adicional (entidad, estado actual, bloqueos)
            errors: Violaciones por campo ({field, message, value})
        """
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}
        self.errors = errors or []
        super().__init__(self.message)

    def to_response(self, include_internal_details: bool = False) -> Dict[str, Any]:
        """
        Sobre de error para la respuesta HTTP.

        Los detalles de errores 5xx solo se incluyen si
        `include_internal_details` es True (entorno de desarrollo).
        """
        content = {
            "success": False,
            "error": self.error_code,
            "message": self.message,
        }
        if self.errors:
            content["errors"] = self.errors
        if self.details and (self.status_code < 500 or include_internal_details):
            content["details"] = self.details
        return content
