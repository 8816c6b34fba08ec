"""Tests for the public content and page routes."""

from datetime import datetime, timedelta, timezone

from fastapi.testclient import TestClient

from content.models import ContentType
from media_api.services import Services

BASE_TIME = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


def _article(services: Services, title: str, minutes: int, **extra) -> str:
    data = {
        "title": title,
        "author_name": "Staff",
        "content": "<p>Body text</p>",
        "excerpt": "Excerpt",
        "category": "campus",
        "section": "campus",
        "status": "published",
    }
    data.update(extra)
    service = services.content[ContentType.ARTICLE]
    service.clock = lambda: BASE_TIME + timedelta(minutes=minutes)
    return service.create(data)


class TestContentRoutes:
    def test_missing_article_is_404(self, client: TestClient) -> None:
        response = client.get("/api/articles/missing-id")
        assert response.status_code == 404
        assert response.json() == {"detail": "Article not found"}

    def test_missing_legal_article_is_404(self, client: TestClient) -> None:
        assert client.get("/api/legal/nope").json() == {"detail": "Legal article not found"}

    def test_list_published_newest_first(self, client: TestClient, services: Services) -> None:
        _article(services, "Old", 1)
        _article(services, "New", 2)
        _article(services, "Draft", 3, status="draft")

        body = client.get("/api/articles", params={"limit": 5}).json()

        assert body["count"] == 2
        assert [a["title"] for a in body["items"]] == ["New", "Old"]

    def test_limit_bounds(self, client: TestClient, services: Services) -> None:
        for i in range(3):
            _article(services, f"A{i}", i)
        assert client.get("/api/articles", params={"limit": 2}).json()["count"] == 2
        assert client.get("/api/articles", params={"limit": 0}).status_code == 422

    def test_get_article(self, client: TestClient, services: Services) -> None:
        article_id = _article(services, "Hello", 1)
        body = client.get(f"/api/articles/{article_id}").json()
        assert body["id"] == article_id
        assert body["status"] == "published"
        assert "liked_by" not in body

    def test_like_requires_sign_in(self, client: TestClient, services: Services) -> None:
        article_id = _article(services, "Hello", 1)
        response = client.post(f"/api/articles/{article_id}/like")
        assert response.status_code == 401
        assert response.json()["detail"]["redirect"] == "/admin/login"

    def test_like_toggles(self, client: TestClient, services: Services, viewer_headers: dict) -> None:
        article_id = _article(services, "Hello", 1)
        first = client.post(f"/api/articles/{article_id}/like", headers=viewer_headers).json()
        second = client.post(f"/api/articles/{article_id}/like", headers=viewer_headers).json()
        assert first == {"liked": True, "likes": 1}
        assert second == {"liked": False, "likes": 0}

    def test_like_missing_item(self, client: TestClient, viewer_headers: dict) -> None:
        response = client.post("/api/videos/missing/like", headers=viewer_headers)
        assert response.status_code == 404
        assert response.json() == {"detail": "Video not found"}


class TestPageRoutes:
    def test_section_page(self, client: TestClient, services: Services) -> None:
        _article(services, "Featured", 1, featured=True)
        _article(services, "Latest", 2)
        _article(services, "Sports story", 3, section="sports", category="sports")

        body = client.get("/api/pages/campus").json()

        assert body["section"] == "campus"
        assert [a["title"] for a in body["featured"]] == ["Featured"]
        assert [a["title"] for a in body["latest"]] == ["Latest", "Featured"]

    def test_home_spans_sections(self, client: TestClient, services: Services) -> None:
        _article(services, "Campus", 1)
        _article(services, "Sports", 2, section="sports")
        assert len(client.get("/api/pages/home").json()["latest"]) == 2

    def test_unknown_section(self, client: TestClient) -> None:
        assert client.get("/api/pages/weather").status_code == 422
