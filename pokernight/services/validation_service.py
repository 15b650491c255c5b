"""
Game validation - checks a raw game payload before it is saved or scored.

The standings engine trusts its input; everything it assumes about a game
(positions, numeric winnings, best hand winners being participants) is
checked here.
"""

import logging
from numbers import Number
from typing import Any

from pokernight.services.side_bet_service import LEGACY_BEST_HAND_ID


logger = logging.getLogger(__name__)


class GameValidationError(Exception):
    """Raised when a game payload has validation errors."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__("; ".join(errors))


def _is_number(value: Any) -> bool:
    return isinstance(value, Number) and not isinstance(value, bool)


def _best_hand_flags(result: Any) -> tuple[bool, bool]:
    """(participant, winner) from a raw result, legacy fields first."""
    if not isinstance(result, dict):
        return False, False

    if "bestHandParticipant" in result or "bestHandWinner" in result:
        return bool(result.get("bestHandParticipant")), bool(result.get("bestHandWinner"))

    side_bets = result.get("sideBets")
    if isinstance(side_bets, list):
        for side_bet in side_bets:
            if not isinstance(side_bet, dict):
                continue
            name = side_bet.get("name")
            if (isinstance(name, str) and "best hand" in name.lower()) or side_bet.get("sideBetId") == LEGACY_BEST_HAND_ID:
                return bool(side_bet.get("participated")), bool(side_bet.get("won"))

    return False, False


def validate_game_data(game_data: dict) -> list[str]:
    """
    Validate a game payload (camelCase keys, as sent by the client).

    Returns the list of error messages; an empty list means the game is valid.
    Duplicate positions are allowed (ties).
    """
    errors = []

    if not game_data.get("date"):
        errors.append("Game date is required")

    results = game_data.get("results")
    if not results:
        errors.append("At least one player result is required")
        return errors
    if not isinstance(results, list):
        errors.append("Results must be a list of player results")
        return errors

    # Check for duplicate players
    player_ids = [r.get("userId") for r in results if isinstance(r, dict) and isinstance(r.get("userId"), str)]
    seen = set()
    duplicates = set()
    for player_id in player_ids:
        if player_id and player_id in seen:
            duplicates.add(player_id)
        seen.add(player_id)
    if duplicates:
        errors.append("Duplicate players are not allowed")

    is_completed = game_data.get("status") != "scheduled"
    is_cash = game_data.get("gameType") == "cash"

    for index, result in enumerate(results, start=1):
        if not isinstance(result, dict):
            errors.append(f"Invalid result for player {index}")
            continue

        user_id = result.get("userId")
        if not isinstance(user_id, str) or not user_id.strip():
            errors.append(f"Player selection is required for position {index}")

        # Positions and winnings only exist once the game is played
        if is_completed:
            if is_cash:
                winnings = result.get("cashOutAmount", result.get("winnings"))
            else:
                position = result.get("position")
                if not _is_number(position) or position < 1:
                    errors.append(f"Valid position is required for player {index}")
                winnings = result.get("winnings")

            if not _is_number(winnings):
                errors.append(f"Winnings must be a number for player {index}")

        side_bets = result.get("sideBets")
        if side_bets is not None and (
            not isinstance(side_bets, list) or not all(isinstance(s, dict) for s in side_bets)
        ):
            errors.append(f"Invalid side bets for player {index}")

        rebuys = result.get("rebuys")
        if not _is_number(rebuys) or rebuys < 0:
            errors.append(f"Rebuys must be a non-negative number for player {index}")

    flags = [_best_hand_flags(result) for result in results]
    participants = sum(1 for participated, _ in flags if participated)
    winners = sum(1 for _, won in flags if won)

    if winners > participants:
        errors.append("Best hand winners must also be participants")

    for index, (participated, won) in enumerate(flags, start=1):
        if won and not participated:
            errors.append(f"Player {index} won best hand but is not marked as participant")

    return errors


def ensure_valid_game(game_data: dict) -> None:
    """Raise GameValidationError if the payload has any validation error."""
    errors = validate_game_data(game_data)
    if errors:
        logger.info(f"Rejected game payload with {len(errors)} error(s)")
        raise GameValidationError(errors)
