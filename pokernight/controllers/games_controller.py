"""
Controlador de juegos - Validación y puntos de un juego
"""

from typing import Any, Optional

from fastapi import APIRouter, Body, HTTPException, status
from pydantic import BaseModel, ValidationError
from pydantic.alias_generators import to_camel

from pokernight.models.game import Game
from pokernight.services.game_service import sort_game_results_by_position, sort_rsvp_results
from pokernight.services.points_service import points_for_game
from pokernight.services.validation_service import GameValidationError, ensure_valid_game, validate_game_data


router = APIRouter(prefix="/games", tags=["games"])


class ValidationResponse(BaseModel):
    valid: bool
    errors: list[str]


class ResultPoints(BaseModel):
    """Resultado de un jugador con los puntos que le da el juego."""
    user_id: str
    position: Optional[int] = None
    winnings: float = 0
    rsvp_status: Optional[str] = None
    points: float = 0

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class GamePointsResponse(BaseModel):
    game_type: str
    status: str
    results: list[ResultPoints]

    class Config:
        alias_generator = to_camel
        populate_by_name = True


@router.post("/validate", response_model=ValidationResponse)
async def validate_game(game_data: dict[str, Any] = Body(...)):
    """
    Validar un juego antes de guardarlo.

    Siempre responde 200; los errores vienen en la lista.
    """
    errors = validate_game_data(game_data)
    return ValidationResponse(valid=not errors, errors=errors)


@router.post("/points", response_model=GamePointsResponse, response_model_by_alias=True)
async def get_game_points(game_data: dict[str, Any] = Body(...)):
    """
    Puntos de cada jugador en un juego.

    Los juegos programados vuelven ordenados por RSVP (sí, pendiente, no),
    los terminados por posición.
    """
    try:
        ensure_valid_game(game_data)
        game = Game.model_validate(game_data)
    except GameValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.errors
        )
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    if game.is_scheduled:
        ordered = sort_rsvp_results(game.results)
        points = {}
    else:
        ordered = sort_game_results_by_position(game.results)
        points = points_for_game(game)

    return GamePointsResponse(
        game_type=game.game_type,
        status=game.status,
        results=[
            ResultPoints(
                user_id=r.user_id,
                position=r.position,
                winnings=r.winnings,
                rsvp_status=r.rsvp_status,
                points=points.get(r.user_id, 0),
            )
            for r in ordered
        ]
    )
