"""
UserStatsService - A user's stats across every group they play in.
"""

from typing import Iterable, Optional, Sequence

from pokernight.core.config import StandingsConfig
from pokernight.models.game import CashResult, Game, Group
from pokernight.models.stats import CombinedStats, UserGame
from pokernight.services.points_service import calculate_points
from pokernight.services.side_bet_service import calculate_best_hand_pot, resolve_best_hand
from pokernight.services.streak_service import WINNING_POSITIONS


class UserStatsService:
    def __init__(self, config: Optional[StandingsConfig] = None):
        self.config = config or StandingsConfig()

    def get_user_games_across_groups(
        self,
        all_games: Iterable[Game],
        user_id: str,
        groups: Sequence[Group] = ()
    ) -> list[UserGame]:
        """
        Completed games where the user has a result, newest first.

        Each game carries its group name and the user's own result.
        """
        if not user_id:
            return []

        group_map = {group.group_id: group for group in groups}
        user_games = []

        for game in all_games:
            if game.is_scheduled:
                continue

            user_result = next((r for r in game.results if r.user_id == user_id), None)
            if user_result is None:
                continue

            group = group_map.get(game.group_id)
            participated, won = resolve_best_hand(user_result)

            user_games.append(UserGame(
                game=game,
                date=game.date,
                group_name=group.name if group else "Unknown Group",
                user_result=user_result,
                user_position=user_result.position,
                user_winnings=user_result.winnings,
                user_rebuys=user_result.rebuys or 0,
                user_points=calculate_points(game.results, user_result, game.game_type),
                user_best_hand_participant=participated,
                user_best_hand_winner=won,
                buyin=game.buyin_amount(self.config.default_buyin),
            ))

        user_games.sort(key=lambda g: g.date, reverse=True)
        return user_games

    def calculate_user_combined_stats(self, user_games: Sequence[UserGame]) -> CombinedStats:
        """
        Totals over the games returned by get_user_games_across_groups.

        Win rate and average position are rounded to one decimal.
        """
        if not user_games:
            return CombinedStats()

        bet_amount = self.config.best_hand_bet_amount

        wins = 0
        total_winnings = 0
        total_buyins = 0
        positions = []
        best_hand_participations = 0
        best_hand_wins = 0
        best_hand_winnings = 0
        best_hand_costs = 0

        for user_game in user_games:
            result = user_game.user_result
            buyin = user_game.buyin

            total_winnings += user_game.user_winnings
            if isinstance(result, CashResult) and result.buy_in_amount is not None:
                total_buyins += result.buy_in_amount
            else:
                total_buyins += buyin + user_game.user_rebuys * buyin

            if user_game.user_position is not None:
                positions.append(user_game.user_position)

            # Count wins (1st or 2nd place)
            if user_game.user_position in WINNING_POSITIONS:
                wins += 1

            if user_game.user_best_hand_participant:
                best_hand_participations += 1
                best_hand_costs += bet_amount

            if user_game.user_best_hand_winner:
                best_hand_wins += 1
                pot = calculate_best_hand_pot(user_game.game.results, bet_amount)
                best_hand_winnings += pot.winnings_per_winner

        num_games = len(user_games)
        win_rate = wins / num_games * 100
        avg_position = sum(positions) / len(positions) if positions else 0
        total_costs = total_buyins + best_hand_costs
        total_earnings = total_winnings + best_hand_winnings

        return CombinedStats(
            num_games=num_games,
            wins=wins,
            win_rate=round(win_rate, 1),
            avg_position=round(avg_position, 1),
            total_winnings=total_earnings,
            total_costs=total_costs,
            profit_loss=total_earnings - total_costs,
            best_hand_participations=best_hand_participations,
            best_hand_wins=best_hand_wins,
            best_hand_winnings=best_hand_winnings,
            best_hand_costs=best_hand_costs,
        )
