"""
Tests for the tag endpoints.
"""
import json

import pytest

from blogify.models import Tag


@pytest.fixture
def news_tag(db):
    return Tag.objects.create(name="news", description="Current events", color="#dc2626")


class TestTagCrud:
    """Tests for creating, reading and editing tags."""

    def test_list_ordered_by_name(self, client, db):
        Tag.objects.create(name="zebra")
        Tag.objects.create(name="apple")

        response = client.get("/api/tags")

        assert [tag["name"] for tag in response.json()["data"]] == ["apple", "zebra"]

    def test_create(self, client, auth):
        response = client.post(
            "/api/tags",
            json.dumps({"name": "  science ", "description": "Lab notes"}),
            content_type="application/json",
            **auth,
        )

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["name"] == "science"
        assert data["color"] == "#6366F1"
        assert response.json()["message"] == "Tag created successfully"

    def test_create_duplicate_name(self, client, auth, news_tag):
        response = client.post(
            "/api/tags",
            json.dumps({"name": "news"}),
            content_type="application/json",
            **auth,
        )

        assert response.status_code == 400
        assert Tag.objects.count() == 1

    def test_create_bad_color(self, client, auth):
        response = client.post(
            "/api/tags",
            json.dumps({"name": "art", "color": "purple"}),
            content_type="application/json",
            **auth,
        )

        assert response.status_code == 400
        assert "color" in response.json()["message"]

    def test_create_requires_token(self, client, db):
        response = client.post(
            "/api/tags", json.dumps({"name": "art"}), content_type="application/json"
        )
        assert response.status_code == 401

    def test_get(self, client, news_tag):
        response = client.get(f"/api/tags/{news_tag.pk}")
        assert response.json()["data"]["color"] == "#dc2626"

    def test_get_missing(self, client, db):
        response = client.get("/api/tags/404")

        assert response.status_code == 404
        assert response.json()["message"] == "Tag not found"

    def test_rename_leaves_content_tags(self, client, auth, news_tag, make_item):
        item = make_item(tags=["news"])

        response = client.put(
            f"/api/tags/{news_tag.pk}",
            json.dumps({"name": "headlines", "color": "#000"}),
            content_type="application/json",
            **auth,
        )

        assert response.status_code == 200
        news_tag.refresh_from_db()
        assert news_tag.name == "headlines"
        item.refresh_from_db()
        assert item.tags == ["news"]


class TestTagDeletion:
    """Tests for usage-gated tag deletion."""

    def test_delete_unused(self, client, auth, news_tag):
        response = client.delete(f"/api/tags/{news_tag.pk}", **auth)

        assert response.status_code == 200
        assert response.json()["message"] == "Tag deleted successfully"
        assert not Tag.objects.exists()

    def test_delete_blocked_while_in_use(self, client, auth, news_tag, make_item):
        make_item(category="story", tags=["news"])

        response = client.delete(f"/api/tags/{news_tag.pk}", **auth)

        assert response.status_code == 409
        assert response.json() == {
            "success": False,
            "message": 'Cannot delete tag "news" because it is used in 1 posts.',
        }
        assert Tag.objects.filter(pk=news_tag.pk).exists()

    def test_delete_allowed_once_content_is_gone(self, client, auth, news_tag, make_item):
        story = make_item(category="story", tags=["News"])
        client.delete(f"/api/posts/story/{story.pk}", **auth)

        response = client.delete(f"/api/tags/{news_tag.pk}", **auth)

        assert response.status_code == 200

    def test_substring_does_not_block(self, client, auth, make_item):
        tag = Tag.objects.create(name="AI")
        make_item(tags=["Maintenance", "AI-news"])

        response = client.delete(f"/api/tags/{tag.pk}", **auth)

        assert response.status_code == 200


class TestTagUsage:
    """Tests for the usage report."""

    def test_usage_counts(self, client, news_tag, make_item):
        Tag.objects.create(name="sports")
        make_item(category="blog", tags=["news"])
        make_item(category="news", tags=["NEWS", "sports"])
        make_item(category="story", tags=["other"])

        response = client.get("/api/tags/usage")

        assert response.status_code == 200
        assert response.json()["data"] == [
            {"tag": "news", "count": 2},
            {"tag": "sports", "count": 1},
        ]
