"""
Side bets - best hand pot and per-player side bet results.

Results carry best hand data in one of two formats:
- Legacy: bestHandParticipant / bestHandWinner flags on the result
- New: a sideBets list, where best hand is the entry named "best hand"
  (or with id "legacy-best-hand")
"""

from typing import NamedTuple, Optional, Sequence

from pokernight.models.game import GameResult, GroupSideBet, SideBetEntry


LEGACY_BEST_HAND_ID = "legacy-best-hand"


class BestHandPot(NamedTuple):
    pot: float
    winnings_per_winner: float
    participants: int
    winners: int


class _SideBetPlay(NamedTuple):
    id: str
    amount: float
    participated: bool
    won: bool


def _is_best_hand_name(name: Optional[str]) -> bool:
    return bool(name) and "best hand" in name.lower()


def _find_best_hand_entry(side_bets: Sequence[SideBetEntry]) -> Optional[SideBetEntry]:
    for side_bet in side_bets:
        if _is_best_hand_name(side_bet.name) or side_bet.side_bet_id == LEGACY_BEST_HAND_ID:
            return side_bet
    return None


def resolve_best_hand(result: GameResult) -> tuple[bool, bool]:
    """Return (participated, won) for the best hand bet of a result."""
    if result.best_hand_participant is not None or result.best_hand_winner is not None:
        return bool(result.best_hand_participant), bool(result.best_hand_winner)

    entry = _find_best_hand_entry(result.side_bets)
    if entry is None:
        return False, False

    return entry.participated, entry.won


def calculate_best_hand_pot(results: Sequence[GameResult], bet_amount: float) -> BestHandPot:
    """
    Settle the best hand pot of one game.

    Every participant puts in bet_amount; the pot is split evenly between
    the winners. With no winners nobody collects.
    """
    flags = [resolve_best_hand(result) for result in results]
    participants = sum(1 for participated, _ in flags if participated)
    winners = sum(1 for _, won in flags if won)

    pot = participants * bet_amount
    winnings_per_winner = pot / winners if winners > 0 else 0

    return BestHandPot(pot, winnings_per_winner, participants, winners)


def _side_bet_plays(result: GameResult, group_side_bets: Sequence[GroupSideBet]) -> list[_SideBetPlay]:
    plays = []

    if result.best_hand_participant is not None or result.best_hand_winner is not None:
        legacy = next((sb for sb in group_side_bets if _is_best_hand_name(sb.name)), None)
        if legacy:
            plays.append(_SideBetPlay(
                id=LEGACY_BEST_HAND_ID,
                amount=legacy.amount,
                participated=bool(result.best_hand_participant),
                won=bool(result.best_hand_winner),
            ))

    for side_bet in result.side_bets:
        group_side_bet = next((sb for sb in group_side_bets if sb.id == side_bet.side_bet_id), None)
        if group_side_bet:
            plays.append(_SideBetPlay(
                id=side_bet.side_bet_id,
                amount=group_side_bet.amount,
                participated=side_bet.participated,
                won=side_bet.won,
            ))

    return plays


def calculate_side_bet_winnings(
    player_result: GameResult,
    all_results: Sequence[GameResult],
    group_side_bets: Sequence[GroupSideBet] = ()
) -> float:
    """
    Net side bet result for one player in one game.

    Winners take their share of the pot minus their own bet, other
    participants lose their bet. Side bets not configured for the group
    are ignored.
    """
    plays_by_result = [_side_bet_plays(r, group_side_bets) for r in all_results]

    total = 0
    for play in _side_bet_plays(player_result, group_side_bets):
        if play.won:
            participants = 0
            winners = 0
            for plays in plays_by_result:
                match = next((p for p in plays if p.id == play.id), None)
                if match and match.participated:
                    participants += 1
                if match and match.won:
                    winners += 1

            pot = participants * (play.amount or 0)
            winnings_per_winner = pot / winners if winners > 0 else 0
            total += winnings_per_winner - (play.amount or 0)
        elif play.participated:
            total -= play.amount or 0

    return total
