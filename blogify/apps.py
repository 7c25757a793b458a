"""Django app configuration for blogify."""
from django.apps import AppConfig


class BlogifyConfig(AppConfig):
    """Configuration for the blogify app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "blogify"
    verbose_name = "Blogify"
