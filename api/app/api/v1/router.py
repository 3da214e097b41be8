"""
Router principal de la API v1.
Agrupa todos los endpoints de la version 1.
"""
from fastapi import APIRouter

from app.api.v1.endpoints import document_types, sports_categories, temporary_persons


# Router principal de la API v1
api_router = APIRouter(prefix="/v1")

# Incluir routers de endpoints especificos
api_router.include_router(temporary_persons.router)
api_router.include_router(sports_categories.router)
api_router.include_router(document_types.router)
