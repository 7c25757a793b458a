"""
Content model for blogify.

Blogs, news articles and stories share one table; the category field says
which collection an item belongs to.
"""
from django.db import models
from django.utils import timezone

BLOG = "blog"
NEWS = "news"
STORY = "story"

CATEGORY_CHOICES = [
    (BLOG, "Blog"),
    (NEWS, "News"),
    (STORY, "Story"),
]


class ContentItem(models.Model):
    """
    A published blog post, news article or story.

    Tags are stored as a plain list of names, a snapshot taken at the last
    edit. They do not reference Tag rows, so renaming a Tag leaves existing
    items untouched.
    """

    category = models.CharField(max_length=10, choices=CATEGORY_CHOICES, db_index=True)

    # Content
    title = models.CharField(max_length=255)
    author = models.CharField(max_length=255)
    image_url = models.TextField(
        null=True,
        blank=True,
        help_text="Absolute URL or a path under the uploads URL",
    )
    excerpt = models.TextField()
    content = models.TextField()
    tags = models.JSONField(default=list, blank=True)

    # Timestamps
    created_at = models.DateTimeField(default=timezone.now, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["category", "-created_at"], name="blogify_content_cat_created"),
        ]

    def __str__(self):
        return f"{self.get_category_display()}: {self.title}"

    def as_json(self):
        return {
            "id": self.pk,
            "category": self.category,
            "title": self.title,
            "author": self.author,
            "imageUrl": self.image_url,
            "excerpt": self.excerpt,
            "content": self.content,
            "tags": list(self.tags or []),
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }
