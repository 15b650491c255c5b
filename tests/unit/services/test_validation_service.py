"""
Unit tests for game payload validation
"""

import copy

import pytest

from pokernight.services.validation_service import (
    GameValidationError,
    ensure_valid_game,
    validate_game_data,
)


class TestValidateGameData:
    """Test suite for validate_game_data."""

    def test_valid_game(self, sample_game_data):
        assert validate_game_data(sample_game_data) == []

    def test_ties_are_allowed(self, sample_game_data):
        sample_game_data["results"][1]["position"] = 1

        assert validate_game_data(sample_game_data) == []

    def test_date_required(self, sample_game_data):
        del sample_game_data["date"]

        assert "Game date is required" in validate_game_data(sample_game_data)

    def test_results_required(self):
        errors = validate_game_data({"date": "2025-01-10", "results": []})

        assert errors == ["At least one player result is required"]

    def test_duplicate_players(self, sample_game_data):
        sample_game_data["results"][1]["userId"] = sample_game_data["results"][0]["userId"]

        assert "Duplicate players are not allowed" in validate_game_data(sample_game_data)

    def test_player_selection_required(self, sample_game_data):
        sample_game_data["results"][2]["userId"] = "   "

        assert "Player selection is required for position 3" in validate_game_data(sample_game_data)

    def test_position_required_for_completed_games(self, sample_game_data):
        sample_game_data["results"][0]["position"] = 0
        del sample_game_data["results"][1]["position"]

        errors = validate_game_data(sample_game_data)

        assert "Valid position is required for player 1" in errors
        assert "Valid position is required for player 2" in errors

    def test_winnings_must_be_numeric(self, sample_game_data):
        sample_game_data["results"][0]["winnings"] = "50"

        assert "Winnings must be a number for player 1" in validate_game_data(sample_game_data)

    def test_scheduled_game_skips_position_and_winnings(self):
        game_data = {
            "date": "2025-02-01",
            "status": "scheduled",
            "results": [{"userId": "a", "rebuys": 0}, {"userId": "b", "rebuys": 0}],
        }

        assert validate_game_data(game_data) == []

    def test_cash_game_needs_no_position(self):
        game_data = {
            "date": "2025-02-01",
            "gameType": "cash",
            "results": [
                {"userId": "a", "cashOutAmount": 120, "rebuys": 0},
                {"userId": "b", "winnings": 0, "rebuys": 1},
            ],
        }

        assert validate_game_data(game_data) == []

    @pytest.mark.parametrize("rebuys", [-1, None, "2", True])
    def test_rebuys_must_be_non_negative_number(self, sample_game_data, rebuys):
        sample_game_data["results"][3]["rebuys"] = rebuys

        assert "Rebuys must be a non-negative number for player 4" in validate_game_data(sample_game_data)

    def test_best_hand_winner_must_participate(self, sample_game_data):
        sample_game_data["results"][3]["bestHandParticipant"] = False
        sample_game_data["results"][3]["bestHandWinner"] = True

        errors = validate_game_data(sample_game_data)

        assert "Player 4 won best hand but is not marked as participant" in errors

    def test_more_winners_than_participants(self):
        game_data = {
            "date": "2025-02-01",
            "results": [
                {"userId": "a", "position": 1, "winnings": 0, "rebuys": 0, "bestHandWinner": True},
                {"userId": "b", "position": 2, "winnings": 0, "rebuys": 0, "bestHandWinner": True},
                {"userId": "c", "position": 3, "winnings": 0, "rebuys": 0, "bestHandParticipant": True},
            ],
        }

        errors = validate_game_data(game_data)

        assert "Best hand winners must also be participants" in errors

    def test_best_hand_in_side_bets_format(self, sample_game_data):
        game_data = copy.deepcopy(sample_game_data)
        for result in game_data["results"]:
            result.pop("bestHandParticipant")
            result.pop("bestHandWinner")
        game_data["results"][0]["sideBets"] = [{"name": "Best Hand", "participated": False, "won": True}]

        errors = validate_game_data(game_data)

        assert "Player 1 won best hand but is not marked as participant" in errors


    def test_result_that_is_not_an_object(self, sample_game_data):
        sample_game_data["results"].append("oops")

        errors = validate_game_data(sample_game_data)

        assert errors == ["Invalid result for player 5"]

    @pytest.mark.parametrize("results", [{"userId": "a"}, "abc", 42])
    def test_results_must_be_a_list(self, results):
        errors = validate_game_data({"date": "2025-01-10", "results": results})

        assert errors == ["Results must be a list of player results"]

    @pytest.mark.parametrize("side_bets", ["best hand", ["oops"], {"name": "Best Hand"}])
    def test_malformed_side_bets(self, sample_game_data, side_bets):
        sample_game_data["results"][1]["sideBets"] = side_bets

        errors = validate_game_data(sample_game_data)

        assert errors == ["Invalid side bets for player 2"]

    def test_user_id_that_is_not_a_string(self, sample_game_data):
        sample_game_data["results"][0]["userId"] = ["user-alice-0001"]
        sample_game_data["results"][1]["userId"] = ["user-alice-0001"]

        errors = validate_game_data(sample_game_data)

        assert "Player selection is required for position 1" in errors
        assert "Player selection is required for position 2" in errors
        assert "Duplicate players are not allowed" not in errors

class TestEnsureValidGame:

    def test_raises_with_all_errors(self):
        with pytest.raises(GameValidationError) as exc_info:
            ensure_valid_game({"results": []})

        assert exc_info.value.errors == [
            "Game date is required",
            "At least one player result is required",
        ]

    def test_valid_game_passes(self, sample_game_data):
        ensure_valid_game(sample_game_data)
