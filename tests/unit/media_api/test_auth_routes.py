"""Tests for the sign-in routes."""

from fastapi.testclient import TestClient

from media_api.services import Services

CREDENTIALS = {"email": "ana@ucsd.edu", "password": "secret1"}


class TestAuthRoutes:
    def test_sign_up_and_me(self, client: TestClient) -> None:
        created = client.post("/api/auth/sign-up", json=CREDENTIALS)
        assert created.status_code == 201
        body = created.json()
        assert body["role"]["role"] == "viewer"
        assert body["is_admin"] is False

        me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {body['id_token']}"})
        assert me.json()["user"]["email"] == "ana@ucsd.edu"

    def test_wrong_password_message(self, client: TestClient) -> None:
        client.post("/api/auth/sign-up", json=CREDENTIALS)
        response = client.post("/api/auth/sign-in", json={**CREDENTIALS, "password": "nope!!"})
        assert response.status_code == 401
        assert response.json()["detail"] == {
            "error": "Incorrect password. Please try again.",
            "code": "auth/wrong-password",
        }

    def test_unknown_user_message(self, client: TestClient) -> None:
        response = client.post("/api/auth/sign-in", json=CREDENTIALS)
        assert response.json()["detail"]["error"] == (
            "No account found with this email. Please create an account first."
        )

    def test_duplicate_sign_up(self, client: TestClient) -> None:
        client.post("/api/auth/sign-up", json=CREDENTIALS)
        response = client.post("/api/auth/sign-up", json=CREDENTIALS)
        assert response.status_code == 409
        assert response.json()["detail"]["error"] == (
            "An account with this email already exists. Please sign in instead."
        )

    def test_weak_password(self, client: TestClient) -> None:
        response = client.post("/api/auth/sign-up", json={**CREDENTIALS, "password": "123"})
        assert response.status_code == 400
        assert response.json()["detail"]["error"] == "Password is too weak. Please use at least 6 characters."

    def test_google_cancelled(self, client: TestClient) -> None:
        response = client.post("/api/auth/google", json={"id_token": ""})
        assert response.json()["detail"]["error"] == "Sign in was cancelled. Please try again."

    def test_google_sign_in(self, client: TestClient, services: Services) -> None:
        services.auth.provider.register_google_token("g-tok", "g@ucsd.edu", "Gabe")
        response = client.post("/api/auth/google", json={"id_token": "g-tok"})
        assert response.status_code == 200
        assert response.json()["user"]["display_name"] == "Gabe"

    def test_sign_out(self, client: TestClient) -> None:
        token = client.post("/api/auth/sign-up", json=CREDENTIALS).json()["id_token"]
        headers = {"Authorization": f"Bearer {token}"}
        assert client.post("/api/auth/sign-out", headers=headers).json()["success"] is True
        assert client.get("/api/auth/me", headers=headers).status_code == 401

    def test_me_requires_token(self, client: TestClient) -> None:
        assert client.get("/api/auth/me").status_code == 401
        assert client.get("/api/auth/me", headers={"Authorization": "Basic abc"}).status_code == 401
