"""
Tests for the blogify admin.
"""
from blogify.models import ContentItem, Tag


class TestContentItemAdmin:
    """Tests for adding content through the admin."""

    def test_add_without_creation_date(self, admin_client):
        response = admin_client.post(
            "/admin/blogify/contentitem/add/",
            {
                "category": "news",
                "title": "From the admin",
                "author": "Editor",
                "excerpt": "Short",
                "content": "Body",
                "tags": '["A", "B"]',
                "image_url": "",
            },
        )

        assert response.status_code == 302
        item = ContentItem.objects.get(title="From the admin")
        assert item.created_at is not None
        assert item.tags == ["A", "B"]

    def test_add_form_has_no_date_input(self, admin_client):
        response = admin_client.get("/admin/blogify/contentitem/add/")

        assert response.status_code == 200
        assert 'name="created_at' not in response.content.decode()


class TestTagAdmin:
    """Tests for usage-gated tag deletion in the admin."""

    def test_delete_blocked_while_in_use(self, admin_client, make_item):
        tag = Tag.objects.create(name="news")
        make_item(tags=["News"])

        response = admin_client.get(f"/admin/blogify/tag/{tag.pk}/delete/")

        assert response.status_code == 403

    def test_delete_unused(self, admin_client, db):
        tag = Tag.objects.create(name="news")

        response = admin_client.post(f"/admin/blogify/tag/{tag.pk}/delete/", {"post": "yes"})

        assert response.status_code == 302
        assert not Tag.objects.exists()
