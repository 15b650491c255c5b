"""
Points Service - Per-game point awards.

Sistema de puntos:
- Points = number of players who finished behind you
- Example: 6 players, 1st = 5 points, 2nd = 4 points, ... 6th = 0 points
- Tied players pool the points of every position they occupy and split them
- Cash games don't use points
"""

from typing import Sequence

from pokernight.models.game import Game, GameResult


def calculate_points(
    results: Sequence[GameResult],
    player_result: GameResult,
    game_type: str = "tournament"
) -> float:
    """
    Calculate the points a result earns within its game.

    Args:
        results: Every result of the game (the player's own included)
        player_result: The result to score
        game_type: "tournament" or "cash"

    Returns:
        Points earned, possibly fractional when the position is tied
    """
    if game_type == "cash":
        return 0

    position = player_result.position
    if position is None:
        return 0

    total_players = len(results)

    tied_count = sum(1 for r in results if r.position == position)

    if tied_count <= 1:
        return max(0, total_players - position)

    # Example: 10 players, 3-way tie for 1st
    # They occupy positions 1, 2, 3 -> (9 + 8 + 7) / 3 = 8 points each
    total_points_for_tied_positions = sum(
        max(0, total_players - (position + i))
        for i in range(tied_count)
    )

    return total_points_for_tied_positions / tied_count


def points_for_game(game: Game) -> dict[str, float]:
    """Points per userId for one game (results without a userId are left out)."""
    return {
        result.user_id: calculate_points(game.results, result, game.game_type)
        for result in game.results
        if result.user_id
    }
