"""
Controlador de jugadores - Estadísticas combinadas de un jugador
"""

from fastapi import APIRouter
from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from pokernight.core.dependencies import UserStats
from pokernight.models.game import Game, Group
from pokernight.models.stats import CombinedStats, UserGame


router = APIRouter(prefix="/players", tags=["players"])


class PlayerStatsRequest(BaseModel):
    """Juegos de todos los grupos del usuario y los grupos en sí."""
    games: list[Game] = []
    groups: list[Group] = []

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class PlayerStatsResponse(BaseModel):
    user_id: str
    stats: CombinedStats
    games: list[UserGame]

    class Config:
        alias_generator = to_camel
        populate_by_name = True


@router.post("/{user_id}/stats", response_model=PlayerStatsResponse, response_model_by_alias=True)
async def get_player_stats(user_id: str, body: PlayerStatsRequest, service: UserStats):
    """
    Obtener las estadísticas de un jugador sumando todos sus grupos.

    Los juegos vuelven del más nuevo al más viejo.
    """
    user_games = service.get_user_games_across_groups(body.games, user_id, body.groups)

    return PlayerStatsResponse(
        user_id=user_id,
        stats=service.calculate_user_combined_stats(user_games),
        games=user_games,
    )
