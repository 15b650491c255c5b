from .user import User
from .game import (
    CashResult,
    Game,
    GameResult,
    Group,
    GroupSideBet,
    SideBetEntry,
    TournamentResult,
)
from .standings import GameHistoryEntry, PlayerStanding, SortDirection
from .stats import CombinedStats, UserGame

__all__ = [
    "User",
    "Game",
    "GameResult",
    "TournamentResult",
    "CashResult",
    "SideBetEntry",
    "GroupSideBet",
    "Group",
    "GameHistoryEntry",
    "PlayerStanding",
    "SortDirection",
    "CombinedStats",
    "UserGame",
]
