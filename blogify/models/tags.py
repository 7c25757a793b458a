"""
Tag model for blogify.
"""
from django.core.validators import RegexValidator
from django.db import models

from ..conf import blog_settings
from ..usage import count_usage

color_validator = RegexValidator(
    regex=r"^#(?:[0-9a-fA-F]{3}){1,2}$",
    message="Color must be a hex value such as #6366F1",
)


class Tag(models.Model):
    """
    Managed tag.

    Content items reference tags by name, so a tag's usage is computed by
    scanning content tag lists rather than through a relation.
    """

    name = models.CharField(max_length=100, unique=True)
    description = models.TextField(blank=True)
    color = models.CharField(
        max_length=20,
        blank=True,
        default=blog_settings.DEFAULT_TAG_COLOR,
        validators=[color_validator],
        help_text="Display colour hint",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        if not self.color:
            self.color = blog_settings.DEFAULT_TAG_COLOR
        super().save(*args, **kwargs)

    @property
    def usage_count(self):
        """Return how many content items carry this tag."""
        from .content import ContentItem

        items = ContentItem.objects.only("tags")
        return count_usage([self.name], items)[self.name]

    def as_json(self):
        return {
            "id": self.pk,
            "name": self.name,
            "description": self.description,
            "color": self.color,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }
