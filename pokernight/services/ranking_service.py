"""
Ranking and display sorting for standings.

Rank always comes from points (with gaps for ties: 1, 1, 3, 4, 4, 4, 7).
The display order is whatever field the user picked, so a row can show
rank 3 at the top of the table when sorting by win rate.
"""

from functools import cmp_to_key
from typing import Any, Optional, Sequence, Union

from pydantic.alias_generators import to_snake

from pokernight.models.standings import PlayerStanding, SortDirection


POINTS_TOLERANCE = 0.001
STREAK_FIELD = "current_streak"

# Scalar columns of a standings row
SORTABLE_FIELDS = frozenset({
    "user_id",
    "player",
    "games",
    "wins",
    "total_winnings",
    "total_buyins",
    "points",
    "best_hand_winnings",
    "best_hand_costs",
    "best_hand_win_count",
    "best_hand_participation_count",
    "winnings",
    "net_winnings",
    "win_rate",
    "avg_position",
    "current_streak",
    "streak_type",
    "rank",
})


def calculate_ranks(standings: Sequence[PlayerStanding]) -> list[PlayerStanding]:
    """Copies of the rows ordered by points (desc), each with its rank."""
    points_sorted = sorted(standings, key=lambda s: s.points, reverse=True)

    ranked = []
    current_rank = 1
    previous_points = None
    players_at_current_rank = 0

    for player in points_sorted:
        if previous_points is None:
            players_at_current_rank = 1
        elif abs(player.points - previous_points) >= POINTS_TOLERANCE:
            # Different points - advance rank by number of tied players
            current_rank += players_at_current_rank
            players_at_current_rank = 1
        else:
            players_at_current_rank += 1

        previous_points = player.points
        ranked.append(player.model_copy(update={"rank": current_rank}))

    return ranked


def streak_value(standing: PlayerStanding) -> int:
    """Win streaks count up, loss streaks count down."""
    if standing.streak_type == "win":
        return standing.current_streak
    return -standing.current_streak


def is_sortable_field(field: str) -> bool:
    """Accepts camelCase or snake_case column names."""
    return to_snake(field) in SORTABLE_FIELDS


def _field_value(standing: PlayerStanding, field: str) -> Any:
    return getattr(standing, to_snake(field), None)


def compare_by_field(a: PlayerStanding, b: PlayerStanding, field: str, direction: SortDirection) -> int:
    a_value = _field_value(a, field)
    b_value = _field_value(b, field)

    if isinstance(a_value, str):
        a_value = a_value.lower()
    if isinstance(b_value, str):
        b_value = b_value.lower()

    # Missing values sort as the smallest value
    if a_value is None and b_value is None:
        return 0
    if a_value is None:
        return -1 if direction == SortDirection.ASC else 1
    if b_value is None:
        return 1 if direction == SortDirection.ASC else -1

    if direction == SortDirection.ASC:
        return -1 if a_value < b_value else 1 if a_value > b_value else 0
    return -1 if a_value > b_value else 1 if a_value < b_value else 0


def sort_standings(
    standings: Sequence[PlayerStanding],
    sort_field: str,
    sort_direction: Union[SortDirection, str]
) -> list[PlayerStanding]:
    """
    Attach ranks (from points) and order the rows for display.

    Rows that compare equal on the display field keep their rank order.
    """
    if not is_sortable_field(sort_field):
        raise ValueError(f"Cannot sort standings by {sort_field!r}")

    direction = SortDirection(sort_direction)
    ranked = calculate_ranks(standings)

    if to_snake(sort_field) == STREAK_FIELD:
        return sorted(ranked, key=streak_value, reverse=direction == SortDirection.DESC)

    return sorted(ranked, key=cmp_to_key(lambda a, b: compare_by_field(a, b, sort_field, direction)))


class SortState:
    """
    Sort selection of a standings table.

    Picking the active field again flips the direction; a new field starts
    descending.
    """

    def __init__(self, field: str = "points", direction: SortDirection = SortDirection.DESC):
        self.field = field
        self.direction = SortDirection(direction)

    def handle_sort(self, field: str) -> None:
        if field == self.field:
            self.direction = SortDirection.ASC if self.direction == SortDirection.DESC else SortDirection.DESC
        else:
            self.field = field
            self.direction = SortDirection.DESC

    def get_sort_icon(self, field: str) -> str:
        if field != self.field:
            return "none"
        return self.direction.value

    def apply(self, standings: Sequence[PlayerStanding]) -> list[PlayerStanding]:
        return sort_standings(standings, self.field, self.direction)

    def __repr__(self) -> str:
        return f"SortState(field={self.field!r}, direction={self.direction.value!r})"


def rank_of(standings: Sequence[PlayerStanding], user_id: str) -> Optional[int]:
    """Rank of a user in already ranked standings, None if absent."""
    for standing in standings:
        if standing.user_id == user_id:
            return standing.rank
    return None
