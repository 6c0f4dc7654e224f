"""End-to-end tests for vote endpoints."""

import pytest
from fastapi.testclient import TestClient

from midweek.interface.api.app import create_app
from midweek.util.di.container import setup_di
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client with test container."""
    app_instance = create_app()
    test_container = build_test_container()
    setup_di(app_instance, test_container)
    return TestClient(app_instance)


class TestVoteEndpoints:
    """End-to-end tests for vote API endpoints.

    Note: These tests focus on the HTTP API interface layer.
    More detailed business logic tests are in unit tests.
    """

    def test_empty_date_has_empty_summary(self, client):
        response = client.get("/votes", params={"date": "2026-10-21"})

        assert response.status_code == 200
        data = response.json()
        assert data["votes"] == []
        assert data["my_vote"] is None
        assert data["summary"]["yes"]["count"] == 0
        assert data["summary"]["no"]["users"] == []

    def test_cast_then_read(self, client):
        # Act
        cast = client.post(
            "/votes",
            json={
                "user_name": "Alice",
                "vote_date": "2026-10-21",
                "attendance": "yes",
                "min_players": "6",
                "guests": 2,
            },
        )
        client.post(
            "/votes",
            json={"user_name": "Bob", "vote_date": "2026-10-21", "attendance": "no"},
        )
        read = client.get(
            "/votes", params={"date": "2026-10-21", "user_name": " Alice "}
        )

        # Assert
        assert cast.status_code == 200
        assert cast.json()["created"] is True
        data = read.json()
        assert [v["user_name"] for v in data["votes"]] == ["Alice", "Bob"]
        assert data["summary"]["yes"]["total_players"] == 3
        assert data["summary"]["yes"]["users_with_min_players"] == [
            {"name": "Alice", "min_players": "6", "guests": 2}
        ]
        assert data["my_vote"]["attendance"] == "yes"

    def test_revote_replaces_vote(self, client):
        payload = {"user_name": "Alice", "vote_date": "2026-10-21", "attendance": "yes"}
        first = client.post("/votes", json=payload)
        second = client.post("/votes", json={**payload, "attendance": "no"})

        assert second.status_code == 200
        assert second.json()["vote"]["vote_id"] == first.json()["vote"]["vote_id"]

        data = client.get("/votes", params={"date": "2026-10-21"}).json()
        assert len(data["votes"]) == 1
        assert data["summary"]["no"]["users"] == ["Alice"]
        assert data["summary"]["yes"]["count"] == 0

    def test_non_wednesday_returns_400(self, client):
        response = client.post(
            "/votes",
            json={"user_name": "Alice", "vote_date": "2026-10-22", "attendance": "yes"},
        )

        assert response.status_code == 400
        assert "not a Wednesday" in response.json()["detail"]

    @pytest.mark.parametrize(
        "payload",
        [
            {"user_name": "Alice", "vote_date": "2026-10-21", "attendance": "maybe"},
            {"user_name": "", "vote_date": "2026-10-21", "attendance": "yes"},
            {"user_name": "Alice", "vote_date": "21/10/2026", "attendance": "yes"},
            {
                "user_name": "Alice",
                "vote_date": "2026-10-21",
                "attendance": "yes",
                "guests": 11,
            },
        ],
    )
    def test_malformed_vote_returns_422(self, client, payload):
        response = client.post("/votes", json=payload)

        assert response.status_code == 422

    def test_missing_date_returns_422(self, client):
        assert client.get("/votes").status_code == 422
