"""
Controlador de standings - Endpoints de clasificación

La tabla se calcula en cada request con los juegos y usuarios que manda el
cliente. No se guarda nada.
"""

from typing import Literal, Optional

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from pokernight.core.dependencies import Standings
from pokernight.models.game import Game
from pokernight.models.standings import PlayerStanding, SortDirection
from pokernight.models.user import User
from pokernight.services.ranking_service import rank_of
from pokernight.services.standings_service import StandingsServiceError, is_loading


router = APIRouter(prefix="/standings", tags=["standings"])


class StandingsRequest(BaseModel):
    """Juegos y usuarios del grupo, más el orden pedido."""
    games: list[Game] = []
    users: list[User] = []

    sort_field: Optional[str] = None
    sort_direction: Optional[SortDirection] = None
    game_type: Optional[Literal["tournament", "cash"]] = None

    users_loading: bool = False
    user_id: Optional[str] = None  # Para devolver la posición de ese usuario

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class StandingsResponse(BaseModel):
    """Tabla de posiciones ordenada y la posición del usuario (opcional)."""
    standings: list[PlayerStanding]
    sort_field: str
    sort_direction: SortDirection
    is_loading: bool = False
    user_rank: Optional[int] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True


@router.post("", response_model=StandingsResponse, response_model_by_alias=True)
async def get_standings(body: StandingsRequest, service: Standings):
    """
    Calcular la tabla de posiciones de la temporada.

    Mientras los usuarios no estén cargados devuelve la tabla vacía con
    isLoading=true, así no aparecen filas de usuarios "Unknown".
    """
    sort_field = body.sort_field or service.config.default_sort_field
    sort_direction = body.sort_direction or service.config.default_sort_direction

    if is_loading(body.users_loading, body.games, body.users):
        return StandingsResponse(
            standings=[],
            sort_field=sort_field,
            sort_direction=sort_direction,
            is_loading=True,
        )

    try:
        standings = service.get_standings(
            body.games,
            body.users,
            sort_field=sort_field,
            sort_direction=sort_direction,
            game_type_filter=body.game_type,
        )
    except StandingsServiceError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    return StandingsResponse(
        standings=standings,
        sort_field=sort_field,
        sort_direction=sort_direction,
        user_rank=rank_of(standings, body.user_id) if body.user_id else None,
    )
