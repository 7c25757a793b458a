"""
Shared fixtures for blogify tests.
"""
from datetime import timedelta

import pytest
from django.contrib.auth import get_user_model
from django.utils import timezone

from blogify.models import ContentItem, Profile
from blogify.tokens import issue_token

User = get_user_model()


@pytest.fixture(autouse=True)
def media_root(settings, tmp_path):
    """Write uploads into a per-test directory."""
    settings.MEDIA_ROOT = str(tmp_path / "media")
    return tmp_path / "media"


@pytest.fixture
def user(db):
    """Create a test user with a profile."""
    user = User.objects.create_user(
        username="testuser",
        email="test@example.com",
        password="testpass123",
        first_name="Test",
        last_name="User",
    )
    Profile.objects.create(user=user)
    return user


@pytest.fixture
def token(user):
    return issue_token(user)


@pytest.fixture
def auth(token):
    """Request kwargs carrying the test user's bearer token."""
    return {"HTTP_AUTHORIZATION": f"Bearer {token}"}


@pytest.fixture
def make_item(db):
    """Factory creating content items with increasing creation times."""
    base = timezone.now() - timedelta(days=30)
    counter = {"n": 0}

    def _make(category="blog", tags=None, created_at=None, **fields):
        counter["n"] += 1
        defaults = {
            "title": f"Item {counter['n']}",
            "author": "Jane Writer",
            "excerpt": "Short excerpt",
            "content": "Full content",
        }
        defaults.update(fields)
        return ContentItem.objects.create(
            category=category,
            tags=tags if tags is not None else [],
            created_at=created_at or base + timedelta(hours=counter["n"]),
            **defaults,
        )

    return _make
