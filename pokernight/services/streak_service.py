"""
Streak detection over a player's game history.
"""

from typing import Callable, NamedTuple, Optional, Sequence

from pokernight.models.standings import GameHistoryEntry, StreakType


WINNING_POSITIONS = (1, 2)


class Streak(NamedTuple):
    current_streak: int
    streak_type: Optional[StreakType]


NO_STREAK = Streak(0, None)


def is_tournament_win(entry: GameHistoryEntry) -> bool:
    """1st or 2nd place counts as a win."""
    return entry.position in WINNING_POSITIONS


def is_cash_win(entry: GameHistoryEntry) -> bool:
    """A profitable cash session counts as a win."""
    return entry.winnings > 0


def _chronological(history: Sequence[GameHistoryEntry]) -> list[GameHistoryEntry]:
    # Same-day games keep the order they were recorded in
    ordered = sorted(enumerate(history), key=lambda item: (item[1].date, item[0]))
    return [entry for _, entry in ordered]


def _current_streak(
    history: Sequence[GameHistoryEntry],
    is_win: Callable[[GameHistoryEntry], bool]
) -> Streak:
    if not history:
        return NO_STREAK

    current_streak = 0
    streak_type = None

    # Start from the most recent game and go backwards
    for entry in reversed(_chronological(history)):
        entry_type = "win" if is_win(entry) else "loss"

        if current_streak == 0:
            current_streak = 1
            streak_type = entry_type
        elif entry_type == streak_type:
            current_streak += 1
        else:
            break

    return Streak(current_streak, streak_type)


def calculate_streak(history: Sequence[GameHistoryEntry]) -> Streak:
    """Current win/loss streak, where a win is finishing 1st or 2nd."""
    return _current_streak(history, is_tournament_win)


def calculate_cash_streak(history: Sequence[GameHistoryEntry]) -> Streak:
    """Current profit/loss streak counting only cash games."""
    cash_games = [entry for entry in history if entry.game_type == "cash"]
    return _current_streak(cash_games, is_cash_win)
