"""
Configuration settings for blogify.

Override these in your Django settings.py:

    BLOGIFY = {
        'RELATED_DEFAULT_LIMIT': 3,
        'UPLOAD_DIR': 'uploads',
        'REQUIRE_TOKEN_FOR_WRITES': True,
        ...
    }

Uploaded files are written below MEDIA_ROOT and served from MEDIA_URL, so
the host project is responsible for serving MEDIA_URL statically.
"""
from django.conf import settings

DEFAULTS = {
    # Related content
    "RELATED_DEFAULT_LIMIT": 3,

    # Tags
    "DEFAULT_TAG_COLOR": "#6366F1",
    "DEFAULT_TAGS": [
        {
            "name": "technology",
            "description": "Posts about technology and digital innovation",
            "color": "#2563eb",
        },
        {
            "name": "programming",
            "description": "Code, software development, and programming languages",
            "color": "#7c3aed",
        },
        {
            "name": "health",
            "description": "Health, wellness, and medical topics",
            "color": "#16a34a",
        },
        {
            "name": "business",
            "description": "Business, entrepreneurship, and finance",
            "color": "#ca8a04",
        },
        {
            "name": "lifestyle",
            "description": "Lifestyle, personal development, and self-improvement",
            "color": "#db2777",
        },
        {
            "name": "news",
            "description": "Current events and breaking news",
            "color": "#dc2626",
        },
        {
            "name": "education",
            "description": "Learning, teaching, and educational resources",
            "color": "#0891b2",
        },
        {
            "name": "entertainment",
            "description": "Movies, music, games, and other entertainment",
            "color": "#9333ea",
        },
    ],

    # Comments
    "COMMENT_MAX_LENGTH": 5000,

    # Uploads, relative to MEDIA_ROOT / MEDIA_URL
    "UPLOAD_DIR": "uploads",
    "PROFILE_UPLOAD_DIR": "uploads/profiles",
    "PROFILE_PICTURE_MAX_SIZE_MB": 5,
    "PROFILE_PICTURE_EXTENSIONS": [".jpeg", ".jpg", ".png", ".gif"],

    # Accounts
    "PASSWORD_MIN_LENGTH": 6,
    "JWT_SECRET": None,
    "JWT_ALGORITHM": "HS256",
    "JWT_EXPIRATION_HOURS": 24,
    "REQUIRE_TOKEN_FOR_WRITES": True,

    # Dashboard
    "RECENT_POSTS_COUNT": 5,
}


class BlogifySettings:
    """
    Lazy settings object that reads from Django settings.

    Access via: from blogify.conf import blog_settings
    """

    def __getattr__(self, name):
        if name not in DEFAULTS:
            raise AttributeError(f"Invalid blogify setting: {name}")

        user_settings = getattr(settings, "BLOGIFY", {})
        return user_settings.get(name, DEFAULTS[name])

    @property
    def JWT_SECRET(self):
        """Return the token signing key, defaulting to SECRET_KEY."""
        user_settings = getattr(settings, "BLOGIFY", {})
        return user_settings.get("JWT_SECRET") or settings.SECRET_KEY


blog_settings = BlogifySettings()
