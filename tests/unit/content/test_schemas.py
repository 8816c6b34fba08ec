"""Tests for content.schemas module."""

import pytest
from pydantic import ValidationError

from content.schemas import ArticleInput, CommentInput


def _article(**overrides) -> dict:
    data = {
        "title": "Regents approve budget",
        "author_name": "Staff",
        "content": "<p>The regents met on Tuesday.</p>",
        "excerpt": "Budget approved",
        "category": "campus",
        "section": "campus",
    }
    data.update(overrides)
    return data


class TestArticleInput:
    def test_valid(self) -> None:
        assert ArticleInput(**_article()).status.value == "draft"

    @pytest.mark.parametrize(
        "overrides",
        [
            {"title": ""},
            {"title": "x" * 201},
            {"content": "short"},
            {"excerpt": "x" * 501},
            {"section": "weather"},
        ],
    )
    def test_invalid(self, overrides: dict) -> None:
        with pytest.raises(ValidationError):
            ArticleInput(**_article(**overrides))


class TestCommentInput:
    def test_length_bounds(self) -> None:
        base = {"content_type": "article", "content_id": "a1", "author_id": "u", "author_name": "U"}
        CommentInput(content="ok", **base)
        with pytest.raises(ValidationError):
            CommentInput(content="", **base)
        with pytest.raises(ValidationError):
            CommentInput(content="x" * 1001, **base)

