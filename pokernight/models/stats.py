from datetime import date
from typing import Optional

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from pokernight.models.game import Game, GameResult


class UserGame(BaseModel):
    """Juego en el que participó un usuario, con datos de su grupo"""

    game: Game
    date: date
    group_name: str

    user_result: GameResult
    user_position: Optional[int] = None
    user_winnings: float = 0
    user_rebuys: int = 0
    user_points: float = 0
    user_best_hand_participant: bool = False
    user_best_hand_winner: bool = False
    buyin: float

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class CombinedStats(BaseModel):
    """Estadísticas combinadas de un usuario en todos sus grupos"""

    num_games: int = 0
    wins: int = 0
    win_rate: float = 0
    avg_position: float = 0

    total_winnings: float = 0  # Incluye ganancias de best hand
    total_costs: float = 0
    profit_loss: float = 0

    best_hand_participations: int = 0
    best_hand_wins: int = 0
    best_hand_winnings: float = 0
    best_hand_costs: float = 0

    class Config:
        alias_generator = to_camel
        populate_by_name = True
