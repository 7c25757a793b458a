"""
Comment and contact message models for blogify.
"""
from django.db import models

from ..conf import blog_settings
from .content import CATEGORY_CHOICES


class Comment(models.Model):
    """
    Reader comment on a content item.

    The item is referenced by (post_id, post_type) rather than a foreign
    key; the service layer checks the item exists when the comment is made.
    """

    post_id = models.PositiveBigIntegerField()
    post_type = models.CharField(max_length=10, choices=CATEGORY_CHOICES)
    name = models.CharField(max_length=255)
    email = models.EmailField()
    content = models.TextField(max_length=blog_settings.COMMENT_MAX_LENGTH)
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["post_type", "post_id", "-created_at"], name="blogify_comment_post_ref"),
        ]

    def __str__(self):
        return f"Comment by {self.name} on {self.post_type} #{self.post_id}"

    @property
    def preview(self):
        """Return truncated content for admin display."""
        if len(self.content) > 100:
            return self.content[:100] + "..."
        return self.content

    def as_json(self):
        return {
            "id": self.pk,
            "postId": self.post_id,
            "postType": self.post_type,
            "name": self.name,
            "content": self.content,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }


class ContactMessage(models.Model):
    """Message sent through the public contact form."""

    fullname = models.CharField(max_length=255)
    email = models.EmailField()
    message = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]
        verbose_name = "Contact Message"
        verbose_name_plural = "Contact Messages"

    def __str__(self):
        return f"Message from {self.fullname}"
