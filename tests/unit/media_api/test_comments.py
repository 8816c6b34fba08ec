"""Tests for the comment routes and their moderation flow."""

from fastapi.testclient import TestClient

COMMENT = {
    "content": "Great reporting!",
    "content_type": "article",
    "content_id": "a1",
    "author_id": "u1",
    "author_name": "Ana",
}


class TestCommentRoutes:
    def test_new_comment_is_hidden_until_approved(self, client: TestClient, admin_headers: dict) -> None:
        created = client.post("/api/comments", json=COMMENT)
        assert created.status_code == 201
        comment_id = created.json()["id"]

        params = {"content_id": "a1", "content_type": "article"}
        assert client.get("/api/comments", params=params).json()["count"] == 0

        pending = client.get("/api/admin/comments", params={"status": "pending"}, headers=admin_headers).json()
        assert [c["id"] for c in pending["items"]] == [comment_id]

        approved = client.patch(
            f"/api/admin/comments/{comment_id}", json={"status": "approved"}, headers=admin_headers
        )
        assert approved.json()["status"] == "approved"

        pending = client.get("/api/admin/comments", params={"status": "pending"}, headers=admin_headers).json()
        approved_list = client.get(
            "/api/admin/comments", params={"status": "approved"}, headers=admin_headers
        ).json()
        assert pending["count"] == 0
        assert [c["id"] for c in approved_list["items"]] == [comment_id]
        assert client.get("/api/comments", params=params).json()["count"] == 1

    def test_invalid_transition_is_conflict(self, client: TestClient, admin_headers: dict) -> None:
        comment_id = client.post("/api/comments", json=COMMENT).json()["id"]
        client.patch(f"/api/admin/comments/{comment_id}", json={"status": "rejected"}, headers=admin_headers)
        response = client.patch(
            f"/api/admin/comments/{comment_id}", json={"status": "approved"}, headers=admin_headers
        )
        assert response.status_code == 409

    def test_moderating_missing_comment(self, client: TestClient, admin_headers: dict) -> None:
        response = client.patch("/api/admin/comments/nope", json={"status": "approved"}, headers=admin_headers)
        assert response.status_code == 404

    def test_validation(self, client: TestClient) -> None:
        assert client.post("/api/comments", json={**COMMENT, "content": ""}).status_code == 422
        assert client.post("/api/comments", json={**COMMENT, "content": "x" * 1001}).status_code == 422
        assert client.post("/api/comments", json={**COMMENT, "content_type": "podcast"}).status_code == 422

    def test_reply_to_missing_parent(self, client: TestClient) -> None:
        response = client.post("/api/comments", json={**COMMENT, "parent_id": "ghost"})
        assert response.status_code == 404

    def test_author_can_edit(self, client: TestClient, services, viewer_headers: dict) -> None:
        uid = services.auth.current_session(viewer_headers["Authorization"][7:]).user.uid
        comment_id = client.post("/api/comments", json={**COMMENT, "author_id": uid}).json()["id"]

        response = client.patch(f"/api/comments/{comment_id}", json={"content": "Edited"}, headers=viewer_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["content"] == "Edited"
        assert body["is_edited"] is True
        assert body["edit_history"][0]["content"] == "Great reporting!"

    def test_others_cannot_edit(self, client: TestClient, viewer_headers: dict) -> None:
        comment_id = client.post("/api/comments", json=COMMENT).json()["id"]
        response = client.patch(f"/api/comments/{comment_id}", json={"content": "Edited"}, headers=viewer_headers)
        assert response.status_code == 403
