from datetime import date
from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from pokernight.models.user import User


StreakType = Literal["win", "loss"]


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class GameHistoryEntry(BaseModel):
    """Un juego dentro del historial de un jugador"""

    date: date
    position: Optional[int] = None
    winnings: float = 0
    rebuys: int = 0
    points: float = 0
    buyin: float = 0
    game_type: str = "tournament"

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class PlayerStanding(BaseModel):
    """Fila de la tabla de posiciones de la temporada (resultado agregado)"""

    user_id: str
    user: User
    player: str

    games: int
    wins: int

    total_winnings: float
    total_buyins: float  # Incluye lo puesto en best hand
    points: float

    best_hand_winnings: float
    best_hand_costs: float
    best_hand_win_count: int
    best_hand_participation_count: int

    game_history: list[GameHistoryEntry] = []

    winnings: float  # total_winnings + best_hand_winnings
    net_winnings: float
    win_rate: float
    avg_position: float

    current_streak: int = 0
    streak_type: Optional[StreakType] = None

    rank: Optional[int] = None  # Lo asigna el ranking, no el agregador

    class Config:
        alias_generator = to_camel
        populate_by_name = True
