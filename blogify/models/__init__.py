"""
Models for blogify.

All models are importable from blogify.models:

    from blogify.models import ContentItem, Tag, Comment, Profile
"""
from .content import BLOG, NEWS, STORY, CATEGORY_CHOICES, ContentItem
from .tags import Tag
from .comments import Comment, ContactMessage
from .accounts import Profile

__all__ = [
    # Content
    "BLOG",
    "NEWS",
    "STORY",
    "CATEGORY_CHOICES",
    "ContentItem",
    # Tags
    "Tag",
    # Comments
    "Comment",
    "ContactMessage",
    # Accounts
    "Profile",
]
