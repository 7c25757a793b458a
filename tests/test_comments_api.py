"""
Tests for comment and contact endpoints.
"""
import json

from blogify.models import Comment, ContactMessage


def comment_payload(item, **overrides):
    data = {
        "postId": item.pk,
        "postType": item.category,
        "name": "Reader",
        "email": "reader@example.com",
        "content": "Great post!",
    }
    data.update(overrides)
    return data


class TestComments:
    """Tests for posting and listing comments."""

    def test_create(self, client, make_item):
        item = make_item(category="news")

        response = client.post(
            "/api/comments",
            json.dumps(comment_payload(item)),
            content_type="application/json",
        )

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Comment added successfully"
        assert body["data"]["postId"] == item.pk
        assert "email" not in body["data"]
        assert Comment.objects.count() == 1

    def test_invalid_email(self, client, make_item):
        item = make_item()

        response = client.post(
            "/api/comments",
            json.dumps(comment_payload(item, email="not-an-email")),
            content_type="application/json",
        )

        assert response.status_code == 400
        assert "email" in response.json()["message"]

    def test_unknown_post_type(self, client, make_item):
        item = make_item()

        response = client.post(
            "/api/comments",
            json.dumps(comment_payload(item, postType="video")),
            content_type="application/json",
        )

        assert response.status_code == 400

    def test_missing_target(self, client, make_item):
        item = make_item(category="blog")

        response = client.post(
            "/api/comments",
            json.dumps(comment_payload(item, postType="story")),
            content_type="application/json",
        )

        assert response.status_code == 404
        assert response.json()["message"] == "Post not found"
        assert not Comment.objects.exists()

    def test_list_newest_first(self, client, make_item):
        item = make_item(category="story")
        other = make_item(category="story")
        first = Comment.objects.create(
            post_id=item.pk, post_type="story", name="A", email="a@example.com", content="1"
        )
        second = Comment.objects.create(
            post_id=item.pk, post_type="story", name="B", email="b@example.com", content="2"
        )
        Comment.objects.create(
            post_id=other.pk, post_type="story", name="C", email="c@example.com", content="3"
        )

        response = client.get(f"/api/comments/{item.pk}/story")

        assert [entry["id"] for entry in response.json()["data"]] == [second.pk, first.pk]

    def test_list_empty(self, client, db):
        response = client.get("/api/comments/1/blog")
        assert response.json() == {"success": True, "data": []}


class TestContact:
    """Tests for the contact form endpoint."""

    def test_create(self, client, db):
        response = client.post(
            "/api/contact",
            json.dumps({
                "fullname": "Sam Sender",
                "email": "sam@example.com",
                "message": "Hello there",
            }),
            content_type="application/json",
        )

        assert response.status_code == 201
        assert response.json()["message"] == "Message added successfully"
        assert ContactMessage.objects.get().fullname == "Sam Sender"

    def test_missing_message(self, client, db):
        response = client.post(
            "/api/contact",
            json.dumps({"fullname": "Sam", "email": "sam@example.com"}),
            content_type="application/json",
        )

        assert response.status_code == 400
        assert not ContactMessage.objects.exists()
