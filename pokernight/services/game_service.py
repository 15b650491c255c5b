"""
Helpers for showing a single game's results.
"""

from typing import Sequence

from pokernight.models.game import GameResult


RSVP_ORDER = {"yes": 0, "pending": 1, "no": 2}


def sort_game_results_by_position(results: Sequence[GameResult]) -> list[GameResult]:
    """Results by finishing position; results without a position go last."""
    return sorted(results, key=lambda r: (r.position is None, r.position or 0))


def sort_rsvp_results(results: Sequence[GameResult]) -> list[GameResult]:
    """Attendees first, then pending, then declined. Unknown status counts as pending."""
    return sorted(results, key=lambda r: RSVP_ORDER.get(r.rsvp_status, RSVP_ORDER["pending"]))
