"""
Controlador de salud - Endpoint de comprobación del servicio
"""

from fastapi import APIRouter
from pydantic import BaseModel

from pokernight.core.dependencies import AppSettings


router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Respuesta del chequeo de estado."""
    status: str
    environment: str


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: AppSettings):
    """
    Endpoint de verificación de estado.

    El servicio no tiene base de datos: si responde, está listo.
    """
    return HealthResponse(
        status="ok",
        environment=settings.app_env
    )
