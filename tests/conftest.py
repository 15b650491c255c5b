"""
Pytest fixtures and configuration for all tests.
"""

import pytest

from pokernight.core.config import StandingsConfig
from pokernight.models.game import Game
from pokernight.models.user import User


@pytest.fixture
def standings_config():
    """Default game rules: $5 best hand, $20 buy-in."""
    return StandingsConfig()


@pytest.fixture
def sample_users_data():
    """Sample group members (camelCase, as the client sends them)."""
    return [
        {"userId": "user-alice-0001", "firstName": "Alice", "lastName": "Adams", "email": "alice@example.com"},
        {"userId": "user-bob-00002", "firstName": "Bob", "lastName": "Brown", "email": "bob@example.com"},
        {"userId": "user-carol-003", "firstName": "Carol", "lastName": "Clark", "email": "carol@example.com"},
        {"userId": "user-dave-0004", "firstName": "Dave", "lastName": "Davis", "email": "dave@example.com"},
    ]


@pytest.fixture
def sample_users(sample_users_data):
    return [User.model_validate(u) for u in sample_users_data]


@pytest.fixture
def make_game():
    """
    Build a Game from result dicts.

    Usage:
        game = make_game([{"userId": "a", "position": 1, "winnings": 60}], date="2025-01-10")
    """
    def _make_game(results, date="2025-01-10", **fields):
        data = {"date": date, "status": "completed", "results": results}
        data.update(fields)
        return Game.model_validate(data)

    return _make_game


@pytest.fixture
def sample_game_data():
    """A completed 4-player tournament with a best hand pot."""
    return {
        "gameId": "game-001",
        "groupId": "group-001",
        "date": "2025-01-10",
        "status": "completed",
        "buyin": 20,
        "gameType": "tournament",
        "results": [
            {"userId": "user-alice-0001", "position": 1, "winnings": 50, "rebuys": 0,
             "bestHandParticipant": True, "bestHandWinner": True},
            {"userId": "user-bob-00002", "position": 2, "winnings": 30, "rebuys": 1,
             "bestHandParticipant": True, "bestHandWinner": False},
            {"userId": "user-carol-003", "position": 3, "winnings": 20, "rebuys": 0,
             "bestHandParticipant": True, "bestHandWinner": False},
            {"userId": "user-dave-0004", "position": 4, "winnings": 0, "rebuys": 0,
             "bestHandParticipant": True, "bestHandWinner": False},
        ],
    }


@pytest.fixture
def sample_games_data(sample_game_data):
    """A short season: two completed tournaments and one scheduled game."""
    second_game = {
        "gameId": "game-002",
        "groupId": "group-001",
        "date": "2025-01-17",
        "status": "completed",
        "buyin": 20,
        "results": [
            {"userId": "user-bob-00002", "position": 1, "winnings": 60, "rebuys": 0},
            {"userId": "user-alice-0001", "position": 2, "winnings": 20, "rebuys": 0},
            {"userId": "user-carol-003", "position": 3, "winnings": 0, "rebuys": 0},
        ],
    }
    scheduled_game = {
        "gameId": "game-003",
        "groupId": "group-001",
        "date": "2025-01-24",
        "status": "scheduled",
        "results": [
            {"userId": "user-alice-0001", "rsvpStatus": "yes", "rebuys": 0},
            {"userId": "user-dave-0004", "rsvpStatus": "pending", "rebuys": 0},
        ],
    }
    return [sample_game_data, second_game, scheduled_game]


@pytest.fixture
def sample_games(sample_games_data):
    return [Game.model_validate(g) for g in sample_games_data]
