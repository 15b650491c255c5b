"""
Entry point de la API
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import Response
from starlette.middleware.base import BaseHTTPMiddleware

from pokernight.core.config import get_settings

from pokernight.controllers.health_controller import router as health_router
from pokernight.controllers.standings_controller import router as standings_router
from pokernight.controllers.games_controller import router as games_router
from pokernight.controllers.players_controller import router as players_router

settings = get_settings()
logger = logging.getLogger(__name__)

# Parse CORS origins
CORS_ORIGINS = [origin.strip() for origin in settings.cors_origins.split(",")]


def is_allowed_origin(origin: str) -> bool:
    """Check if origin is in the explicit allow list."""
    if not origin:
        return False
    return origin in CORS_ORIGINS


class CORSMiddleware(BaseHTTPMiddleware):
    """
    Custom CORS middleware that handles OPTIONS preflight BEFORE routing.
    """

    async def dispatch(self, request: Request, call_next):
        origin = request.headers.get("origin", "")

        # Handle preflight OPTIONS request IMMEDIATELY
        if request.method == "OPTIONS":
            if is_allowed_origin(origin):
                return Response(
                    status_code=200,
                    headers={
                        "Access-Control-Allow-Origin": origin,
                        "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
                        "Access-Control-Allow-Headers": "Authorization, Content-Type, Accept, Origin, X-Requested-With",
                        "Access-Control-Allow-Credentials": "true",
                        "Access-Control-Max-Age": "86400",  # Cache preflight for 24 hours
                    }
                )
            else:
                return Response(status_code=403, content="Origin not allowed")

        response = await call_next(request)

        if is_allowed_origin(origin):
            response.headers["Access-Control-Allow-Origin"] = origin
            response.headers["Access-Control-Allow-Credentials"] = "true"

        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info(f"Poker Night Standings API started ({settings.app_env})")
    yield

# Creo la app
app = FastAPI(
    title="Poker Night Standings API",
    description="Puntos, rachas y tabla de posiciones de las noches de poker",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(CORSMiddleware)

# Agrego todos los routers de los controllers al app
app.include_router(health_router)
app.include_router(standings_router)
app.include_router(games_router)
app.include_router(players_router)


@app.get("/")
async def root():
    # Endpoint raíz, sirve para verificar que la API está levantada
    return {
        "name": "Poker Night Standings API",
        "version": "1.0.0",
        "docs": "/docs"
    }
