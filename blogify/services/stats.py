"""
Dashboard statistics.
"""
from django.contrib.auth import get_user_model

from ..conf import blog_settings
from ..models import BLOG, NEWS, STORY, Comment, ContentItem, Tag


def dashboard_stats():
    """Return content counts and the most recent items across categories."""
    items = ContentItem.objects.all()
    recent = items.order_by("-created_at")[:blog_settings.RECENT_POSTS_COUNT]
    return {
        "blogs": items.filter(category=BLOG).count(),
        "news": items.filter(category=NEWS).count(),
        "stories": items.filter(category=STORY).count(),
        "users": get_user_model().objects.count(),
        "comments": Comment.objects.count(),
        "tags": Tag.objects.count(),
        "recentPosts": [
            {
                "id": item.pk,
                "title": item.title,
                "type": item.category,
                "createdAt": item.created_at.isoformat(),
            }
            for item in recent
        ],
    }
