"""
Integration tests for Standings API endpoints
"""

from pokernight.core.config import Settings, get_settings
from pokernight.main import app


class TestStandingsEndpoints:
    """Test suite for /standings endpoints."""

    async def test_health(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    async def test_get_standings(self, client, sample_games_data, sample_users_data):
        """Test POST /standings with the default sort"""
        response = await client.post("/standings", json={
            "games": sample_games_data,
            "users": sample_users_data,
        })

        assert response.status_code == 200
        data = response.json()
        assert data["sortField"] == "points"
        assert data["sortDirection"] == "desc"
        assert data["isLoading"] is False

        rows = data["standings"]
        assert [r["rank"] for r in rows] == [1, 1, 3, 4]
        assert rows[0]["player"] == "Alice Adams"
        assert rows[0]["netWinnings"] == 45
        assert rows[0]["streakType"] == "win"
        assert rows[0]["gameHistory"][0]["date"] == "2025-01-10"

    async def test_sort_by_net_winnings_ascending(self, client, sample_games_data, sample_users_data):
        response = await client.post("/standings", json={
            "games": sample_games_data,
            "users": sample_users_data,
            "sortField": "netWinnings",
            "sortDirection": "asc",
        })

        assert response.status_code == 200
        rows = response.json()["standings"]
        assert [r["netWinnings"] for r in rows] == sorted(r["netWinnings"] for r in rows)
        # Rank still comes from points
        assert rows[-1]["player"] == "Alice Adams"
        assert rows[-1]["rank"] == 1

    async def test_user_rank(self, client, sample_games_data, sample_users_data):
        response = await client.post("/standings", json={
            "games": sample_games_data,
            "users": sample_users_data,
            "userId": "user-carol-003",
        })

        assert response.json()["userRank"] == 3

    async def test_loading_returns_empty(self, client, sample_games_data):
        """Games loaded but users not yet: no placeholder rows."""
        response = await client.post("/standings", json={"games": sample_games_data, "users": []})

        assert response.status_code == 200
        data = response.json()
        assert data["isLoading"] is True
        assert data["standings"] == []

    async def test_cash_filter(self, client, sample_games_data, sample_users_data):
        cash_game = {
            "date": "2025-02-01",
            "gameType": "cash",
            "buyin": 40,
            "results": [
                {"userId": "user-dave-0004", "cashOutAmount": 100, "rebuys": 0},
            ],
        }

        response = await client.post("/standings", json={
            "games": sample_games_data + [cash_game],
            "users": sample_users_data,
            "gameType": "cash",
        })

        rows = response.json()["standings"]
        assert len(rows) == 1
        assert rows[0]["netWinnings"] == 60
        assert rows[0]["wins"] == 1

    async def test_invalid_sort_direction(self, client, sample_games_data, sample_users_data):
        response = await client.post("/standings", json={
            "games": sample_games_data,
            "users": sample_users_data,
            "sortDirection": "sideways",
        })

        assert response.status_code == 422

    async def test_sort_by_non_column_field(self, client, sample_games_data, sample_users_data):
        response = await client.post("/standings", json={
            "games": sample_games_data,
            "users": sample_users_data,
            "sortField": "user",
        })

        assert response.status_code == 400
        assert "user" in response.json()["detail"]

    async def test_misspelled_sort_field(self, client, sample_games_data, sample_users_data):
        response = await client.post("/standings", json={
            "games": sample_games_data,
            "users": sample_users_data,
            "sortField": "pointz",
        })

        assert response.status_code == 400

    async def test_configured_stake(self, client, sample_games_data, sample_users_data):
        app.dependency_overrides[get_settings] = lambda: Settings(_env_file=None, best_hand_bet_amount=10)

        response = await client.post("/standings", json={
            "games": sample_games_data,
            "users": sample_users_data,
        })

        alice = next(r for r in response.json()["standings"] if r["userId"] == "user-alice-0001")
        assert alice["bestHandWinnings"] == 40
