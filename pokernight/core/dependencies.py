"""
Dependencies de FastAPI para inyectar configuración y servicios
"""

from typing import Annotated

from fastapi import Depends

from pokernight.core.config import Settings, get_settings
from pokernight.services.standings_service import StandingsService
from pokernight.services.user_stats_service import UserStatsService


def get_standings_service(
    settings: Annotated[Settings, Depends(get_settings)]
) -> StandingsService:
    """Servicio de standings con las reglas del grupo (best hand, buy-in)"""
    return StandingsService(settings.standings_config())


def get_user_stats_service(
    settings: Annotated[Settings, Depends(get_settings)]
) -> UserStatsService:
    return UserStatsService(settings.standings_config())


# Alias de tipos para que se vea mas limpio en los endpoints
AppSettings = Annotated[Settings, Depends(get_settings)]
Standings = Annotated[StandingsService, Depends(get_standings_service)]
UserStats = Annotated[UserStatsService, Depends(get_user_stats_service)]
