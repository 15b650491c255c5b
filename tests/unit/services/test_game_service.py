"""
Unit tests for single-game display helpers
"""

from pokernight.services.game_service import sort_game_results_by_position, sort_rsvp_results


class TestGameHelpers:

    def test_sort_by_position(self, make_game):
        game = make_game([
            {"userId": "c", "position": 3},
            {"userId": "x"},
            {"userId": "a", "position": 1},
            {"userId": "b", "position": 1},
        ])

        ordered = sort_game_results_by_position(game.results)

        assert [r.user_id for r in ordered] == ["a", "b", "c", "x"]

    def test_sort_rsvp(self, make_game):
        game = make_game(
            [
                {"userId": "no", "rsvpStatus": "no"},
                {"userId": "unknown"},
                {"userId": "pending", "rsvpStatus": "pending"},
                {"userId": "yes", "rsvpStatus": "yes"},
            ],
            status="scheduled",
        )

        ordered = sort_rsvp_results(game.results)

        assert [r.user_id for r in ordered] == ["yes", "unknown", "pending", "no"]
