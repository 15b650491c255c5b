"""
StandingsService - Calculates season standings from game results.

Standings are calculated on-the-fly from the games and users handed in.
Nothing is cached between calls: the same inputs always give the same rows.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

from pokernight.core.config import StandingsConfig
from pokernight.models.game import CashResult, Game
from pokernight.models.standings import GameHistoryEntry, PlayerStanding, SortDirection
from pokernight.models.user import User
from pokernight.services.points_service import calculate_points
from pokernight.services.ranking_service import is_sortable_field, sort_standings
from pokernight.services.side_bet_service import calculate_best_hand_pot, resolve_best_hand
from pokernight.services.streak_service import (
    WINNING_POSITIONS,
    calculate_cash_streak,
    calculate_streak,
)


logger = logging.getLogger(__name__)


class StandingsServiceError(Exception):
    """Base exception for standings service errors."""
    pass


class InvalidGameTypeError(StandingsServiceError):
    """Raised when standings are filtered by an unknown game type."""
    pass


class InvalidSortFieldError(StandingsServiceError):
    """Raised when standings are sorted by a field that is not a column."""
    pass


GAME_TYPES = ("tournament", "cash")


@dataclass
class _PlayerTotals:
    user_id: str
    user: User
    games: int = 0
    wins: int = 0
    total_winnings: float = 0
    total_buyins: float = 0
    points: float = 0
    best_hand_winnings: float = 0
    best_hand_costs: float = 0
    best_hand_win_count: int = 0
    best_hand_participation_count: int = 0
    game_history: list[GameHistoryEntry] = field(default_factory=list)


def is_loading(users_loading: bool, games: Sequence, users: Sequence) -> bool:
    """
    True while standings can't be trusted yet.

    Games and users are fetched separately; with games loaded but no users
    every row would turn into a placeholder.
    """
    return users_loading or (len(games) > 0 and len(users) == 0)


class StandingsService:
    def __init__(self, config: Optional[StandingsConfig] = None):
        self.config = config or StandingsConfig()

    def calculate_season_standings(
        self,
        games: Iterable[Game],
        users: Sequence[User] = (),
        game_type_filter: Optional[str] = None
    ) -> list[PlayerStanding]:
        """
        Fold every completed game into one row per player.

        Rows come back unsorted (first-seen order) and without rank.
        """
        if game_type_filter is not None and game_type_filter not in GAME_TYPES:
            raise InvalidGameTypeError(f"Unknown game type: {game_type_filter}")

        # Lookup local a esta llamada: los placeholders no sobreviven entre llamadas
        user_lookup = {user.user_id: user for user in users}
        totals: dict[str, _PlayerTotals] = {}

        completed_games = [game for game in games if not game.is_scheduled]
        if game_type_filter:
            completed_games = [g for g in completed_games if g.game_type == game_type_filter]

        for game in completed_games:
            self._add_game(game, user_lookup, totals, warn_unknown=len(users) > 0)

        return [self._to_standing(t, game_type_filter) for t in totals.values()]

    def get_standings(
        self,
        games: Iterable[Game],
        users: Sequence[User] = (),
        sort_field: Optional[str] = None,
        sort_direction: Optional[SortDirection] = None,
        game_type_filter: Optional[str] = None
    ) -> list[PlayerStanding]:
        """Season standings with rank, ordered for display."""
        sort_field = sort_field or self.config.default_sort_field
        if not is_sortable_field(sort_field):
            raise InvalidSortFieldError(f"Unknown sort field: {sort_field}")

        standings = self.calculate_season_standings(games, users, game_type_filter)

        return sort_standings(
            standings,
            sort_field,
            sort_direction or self.config.default_sort_direction,
        )

    def _add_game(
        self,
        game: Game,
        user_lookup: dict[str, User],
        totals: dict[str, _PlayerTotals],
        warn_unknown: bool
    ):
        buyin = game.buyin_amount(self.config.default_buyin)
        bet_amount = self.config.best_hand_bet_amount
        best_hand = calculate_best_hand_pot(game.results, bet_amount)

        for result in game.results:
            user_id = result.user_id
            if not user_id:
                logger.warning(f"Game result missing userId (game {game.date}): {result}")
                continue

            user = user_lookup.get(user_id)
            if user is None:
                # Only warn if this is likely a real missing user (not a loading state issue)
                if warn_unknown:
                    logger.warning(f"User not found for game result: userId={user_id}, gameDate={game.date}")
                user = User.placeholder(user_id)
                user_lookup[user_id] = user

            stats = totals.get(user_id)
            if stats is None:
                stats = totals[user_id] = _PlayerTotals(user_id=user_id, user=user)

            rebuys = result.rebuys or 0
            points = calculate_points(game.results, result, game.game_type)

            stats.games += 1
            stats.total_winnings += result.winnings
            stats.points += points

            if isinstance(result, CashResult) and result.buy_in_amount is not None:
                stats.total_buyins += result.buy_in_amount
            else:
                stats.total_buyins += buyin + rebuys * buyin

            stats.game_history.append(GameHistoryEntry(
                date=game.date,
                position=result.position,
                winnings=result.winnings,
                rebuys=rebuys,
                points=points,
                buyin=buyin,
                game_type=game.game_type,
            ))

            if game.is_cash:
                # For cash games, a "win" is a profitable session
                if result.winnings > 0:
                    stats.wins += 1
            elif result.position in WINNING_POSITIONS:
                stats.wins += 1

            participated, won = resolve_best_hand(result)
            if participated:
                stats.best_hand_participation_count += 1
                stats.best_hand_costs += bet_amount
            if won:
                stats.best_hand_win_count += 1
                stats.best_hand_winnings += best_hand.winnings_per_winner

    def _to_standing(self, stats: _PlayerTotals, game_type_filter: Optional[str]) -> PlayerStanding:
        winnings = stats.total_winnings + stats.best_hand_winnings
        total_buyins = stats.total_buyins + stats.best_hand_costs
        win_rate = stats.wins / stats.games * 100 if stats.games > 0 else 0

        positions = [
            entry.position
            for entry in stats.game_history
            if entry.game_type != "cash" and entry.position and entry.position > 0
        ]
        avg_position = sum(positions) / len(positions) if positions else 0

        if game_type_filter == "cash":
            streak = calculate_cash_streak(stats.game_history)
        else:
            streak = calculate_streak(stats.game_history)

        return PlayerStanding(
            user_id=stats.user_id,
            user=stats.user,
            player=stats.user.player_name,
            games=stats.games,
            wins=stats.wins,
            total_winnings=stats.total_winnings,
            total_buyins=total_buyins,
            points=stats.points,
            best_hand_winnings=stats.best_hand_winnings,
            best_hand_costs=stats.best_hand_costs,
            best_hand_win_count=stats.best_hand_win_count,
            best_hand_participation_count=stats.best_hand_participation_count,
            game_history=stats.game_history,
            winnings=winnings,
            net_winnings=winnings - total_buyins,
            win_rate=win_rate,
            avg_position=avg_position,
            current_streak=streak.current_streak,
            streak_type=streak.streak_type,
        )
