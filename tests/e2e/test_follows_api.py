"""End-to-end tests for the follow endpoints."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from roster.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client with test container."""
    app_instance = create_app(container=build_test_container())
    return TestClient(app_instance)


@pytest.fixture
def alice_and_bob(client, user_payload):
    """Two freshly created users."""
    alice = client.post("/api/users", json=user_payload(name="Alice")).json()
    bob = client.post("/api/users", json=user_payload(name="Bob")).json()
    return alice["id"], bob["id"]


class TestFollow:
    """Tests for POST /api/users/{user_id}/follow/{target_id}."""

    def test_follow_scenario(self, client, alice_and_bob):
        """Alice follows Bob, then Bob appears in her following list."""
        # Arrange
        alice, bob = alice_and_bob

        # Act
        response = client.post(f"/api/users/{alice}/follow/{bob}")

        # Assert
        assert response.status_code == 200
        assert response.json() == {"message": "Successfully followed user"}

        alice_view = client.get(f"/api/users/{alice}").json()
        bob_view = client.get(f"/api/users/{bob}").json()
        assert alice_view["following"] == [bob]
        assert alice_view["following_count"] == 1
        assert alice_view["followers_count"] == 0
        assert bob_view["followers"] == [alice]
        assert bob_view["followers_count"] == 1
        assert bob_view["following_count"] == 0

    def test_follow_twice_returns_400(self, client, alice_and_bob):
        alice, bob = alice_and_bob
        client.post(f"/api/users/{alice}/follow/{bob}")

        response = client.post(f"/api/users/{alice}/follow/{bob}")

        assert response.status_code == 400
        assert response.json() == {"detail": "Already following this user"}
        assert client.get(f"/api/users/{bob}").json()["followers_count"] == 1

    def test_self_follow_returns_400(self, client, alice_and_bob):
        alice, _ = alice_and_bob

        response = client.post(f"/api/users/{alice}/follow/{alice}")

        assert response.status_code == 400
        assert response.json() == {"detail": "Cannot follow yourself"}

    def test_unknown_follower_returns_404(self, client, alice_and_bob):
        _, bob = alice_and_bob

        response = client.post(f"/api/users/{uuid4()}/follow/{bob}")

        assert response.status_code == 404
        assert response.json() == {"detail": "User not found"}

    def test_unknown_target_returns_404(self, client, alice_and_bob):
        alice, _ = alice_and_bob

        response = client.post(f"/api/users/{alice}/follow/{uuid4()}")

        assert response.status_code == 404
        assert response.json() == {"detail": "Target user not found"}


class TestUnfollow:
    """Tests for POST /api/users/{user_id}/unfollow/{target_id}."""

    def test_unfollow_after_follow(self, client, alice_and_bob):
        alice, bob = alice_and_bob
        client.post(f"/api/users/{alice}/follow/{bob}")

        response = client.post(f"/api/users/{alice}/unfollow/{bob}")

        assert response.status_code == 200
        assert response.json() == {"message": "Successfully unfollowed user"}
        assert client.get(f"/api/users/{alice}").json()["following"] == []
        assert client.get(f"/api/users/{bob}").json()["followers"] == []

    def test_unfollow_without_follow_succeeds(self, client, alice_and_bob):
        alice, bob = alice_and_bob

        response = client.post(f"/api/users/{alice}/unfollow/{bob}")

        assert response.status_code == 200

    def test_unfollow_unknown_users_succeeds(self, client):
        response = client.post(f"/api/users/{uuid4()}/unfollow/{uuid4()}")

        assert response.status_code == 200


class TestDeleteCascade:
    """Deleting a user removes their follow edges."""

    def test_deleted_user_disappears_from_other_profiles(
        self, client, alice_and_bob, user_payload
    ):
        # Arrange
        alice, bob = alice_and_bob
        carol = client.post("/api/users", json=user_payload(name="Carol")).json()["id"]
        client.post(f"/api/users/{alice}/follow/{bob}")
        client.post(f"/api/users/{bob}/follow/{alice}")
        client.post(f"/api/users/{carol}/follow/{bob}")

        # Act
        response = client.delete(f"/api/users/{alice}")

        # Assert
        assert response.status_code == 200
        bob_view = client.get(f"/api/users/{bob}").json()
        assert bob_view["followers"] == [carol]
        assert bob_view["following"] == []
        assert [p["id"] for p in client.get("/api/users").json()] == [bob, carol]
